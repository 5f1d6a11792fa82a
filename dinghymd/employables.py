"""
# Dinghy-Markdown: employables.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Classes for the replacement rules that make up the conversion.
"""

import copy
import re
from typing import Callable, Optional

from dinghymd.bases import Replacement, ReplacementWithBlockGamut
from dinghymd.constants import BACKTICK_ENTITY, EXTENDED_BLOCK_TAG_NAMES, STRICT_BLOCK_TAG_NAMES, TAB_WIDTH
from dinghymd.contexts import ConversionContext
from dinghymd.exceptions import CommittedMutateException, UnrecognisedLabelException
from dinghymd.idioms import (
    build_blank_line_bounded_regex,
    build_block_tag_regex,
    build_html_block_regex,
    build_link_html,
    build_list_marker_regex,
    build_title_regex,
    build_uri_regex,
    extract_title,
    extract_uri,
)
from dinghymd.obfuscation import encode_email_address, is_mailto_uri
from dinghymd.utilities import (
    detab,
    encode_amps_and_angles,
    encode_code,
    outdent,
    percent_encode_emphasis_characters,
)


class ReplacementSequence(Replacement):
    """
    A replacement rule that applies a sequence of replacement rules.
    """
    _replacements: list['Replacement']

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._replacements = []

    @property
    def replacements(self) -> list['Replacement']:
        return self._replacements

    @replacements.setter
    def replacements(self, value: list['Replacement']):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `replacements` after `commit()`')

        self._replacements = copy.copy(value)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        for replacement in self._replacements:
            string = replacement.apply(string, context)

        return string


class NormalisationReplacement(Replacement):
    """
    A replacement rule for normalising whitespace.

    - CRLF and CR line endings become LF.
    - Tabs are expanded to the next tab stop.
    - Whitespace-only lines are emptied, so that runs of blank lines can be matched with `\\n+`.
    - The text ends with exactly two newlines.
    """
    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        string = re.sub(pattern=r'\r\n?', repl='\n', string=string)
        string = detab(string)
        string = re.sub(
            pattern=r'^ [^\S\n]+ $',
            repl='',
            string=string,
            flags=re.MULTILINE | re.VERBOSE,
        )

        return string.rstrip('\n') + '\n\n'


class HtmlBlockProtectionReplacement(Replacement):
    """
    A replacement rule for protecting block-level HTML with placeholders.

    Applied once to the source (protecting raw HTML written by the author)
    and once more within the block gamut (protecting the HTML just generated,
    so that paragraph formation does not wrap it in `<p>` tags).

    Protected, in order:
    1. Strict blocks: an opening tag for a tag in STRICT_BLOCK_TAG_NAMES at the start of a line,
       through to the first closing tag of the same name at the start of a line.
    2. Extended blocks: as above for EXTENDED_BLOCK_TAG_NAMES,
       but the closing tag may appear anywhere on its line.
    3. `<hr>` tags standing alone between blank lines.
    4. Runs of HTML comments standing alone between blank lines.
    """
    _strict_tag_regex_pattern_compiled: Optional[re.Pattern]
    _extended_tag_regex_pattern_compiled: Optional[re.Pattern]
    _horizontal_rule_regex_pattern_compiled: Optional[re.Pattern]
    _comment_regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._strict_tag_regex_pattern_compiled = None
        self._extended_tag_regex_pattern_compiled = None
        self._horizontal_rule_regex_pattern_compiled = None
        self._comment_regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._strict_tag_regex_pattern_compiled = re.compile(
            pattern=build_block_tag_regex(STRICT_BLOCK_TAG_NAMES),
            flags=re.ASCII | re.MULTILINE | re.VERBOSE,
        )
        self._extended_tag_regex_pattern_compiled = re.compile(
            pattern=build_block_tag_regex(EXTENDED_BLOCK_TAG_NAMES),
            flags=re.ASCII | re.MULTILINE | re.VERBOSE,
        )
        self._horizontal_rule_regex_pattern_compiled = re.compile(
            pattern=build_blank_line_bounded_regex(r'[<] hr \b [^<>]*? [/]? [>]', TAB_WIDTH),
            flags=re.ASCII | re.VERBOSE,
        )
        self._comment_regex_pattern_compiled = re.compile(
            pattern=build_blank_line_bounded_regex(r'(?: [<][!]-- .*? -- [\s]* )+ [>]', TAB_WIDTH),
            flags=re.DOTALL | re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        def protect_whole_match(match: re.Match) -> str:
            return context.placeholder_master.protect(match.group())

        def protect_html(match: re.Match) -> str:
            return context.placeholder_master.protect(match.group('html'))

        for tag_name in HtmlBlockProtectionReplacement.compute_opened_tag_names(
            string, self._strict_tag_regex_pattern_compiled
        ):
            string = re.sub(
                pattern=build_html_block_regex(tag_name, require_closing_anchoring=True),
                repl=protect_whole_match,
                string=string,
                flags=re.MULTILINE | re.VERBOSE,
            )

        for tag_name in HtmlBlockProtectionReplacement.compute_opened_tag_names(
            string, self._extended_tag_regex_pattern_compiled
        ):
            string = re.sub(
                pattern=build_html_block_regex(tag_name, require_closing_anchoring=False),
                repl=protect_whole_match,
                string=string,
                flags=re.MULTILINE | re.VERBOSE,
            )

        string = self._horizontal_rule_regex_pattern_compiled.sub(protect_html, string)
        string = self._comment_regex_pattern_compiled.sub(protect_html, string)

        return string

    @staticmethod
    def compute_opened_tag_names(string: str, tag_regex_pattern_compiled: re.Pattern) -> list[str]:
        """
        Compute the distinct tag names opening a line, in order of first appearance.
        """
        tag_names = [
            tag_match.group('tag_name')
            for tag_match in tag_regex_pattern_compiled.finditer(string)
        ]

        return list(dict.fromkeys(tag_names))


class ReferenceDefinitionReplacement(Replacement):
    """
    A replacement rule for consuming reference definitions.

    A definition occupies its own line(s):
    ````
    [«label»]: «uri» "«title»"
    ````
    with up to three spaces of indentation, the URI optionally in angle brackets,
    the title optional and delimited by double quotes, single quotes, or parentheses,
    and at most one line break before each of the URI and the title.
    Definitions are removed from the text and stored in the context's ReferenceMaster.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=ReferenceDefinitionReplacement.build_regex_pattern(),
            flags=re.MULTILINE | re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return self._regex_pattern_compiled.sub(self.build_substitute_function(context), string)

    @staticmethod
    def build_regex_pattern() -> str:
        block_anchoring_regex = f'^ [ ]{{0,{TAB_WIDTH - 1}}}'
        label_regex = r'\[ (?P<label> .+ ) \] [:]'
        maybe_hanging_whitespace_regex = r'[ ]* \n? [ ]*'
        uri_regex = r'[<]? (?P<uri> \S+? ) [>]?'
        title_regex = r'''(?: [ ]* \n? [ ]* ["'(] (?P<title> .+? ) ["')] )?'''
        trailing_horizontal_whitespace_regex = '[ ]* $'

        return ''.join([
            block_anchoring_regex,
            label_regex,
            maybe_hanging_whitespace_regex,
            uri_regex,
            title_regex,
            trailing_horizontal_whitespace_regex,
        ])

    @staticmethod
    def build_substitute_function(context: 'ConversionContext') -> Callable[[re.Match], str]:
        def substitute_function(match: re.Match) -> str:
            label = match.group('label')
            uri = encode_amps_and_angles(match.group('uri'))

            title = match.group('title')
            if title is not None:
                title = encode_code(title)

            context.reference_master.store_definition(label, uri, title)

            return ''

        return substitute_function


class SetextHeadingReplacement(Replacement):
    """
    A replacement rule for underlined headings.

    ````
    Heading 1
    =========

    Heading 2
    ---------
    ````
    """
    _regex_pattern_compiled_from_tag_name: dict[str, re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled_from_tag_name = {}

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        for tag_name, underline_character in [('h1', '='), ('h2', '-')]:
            self._regex_pattern_compiled_from_tag_name[tag_name] = re.compile(
                pattern=SetextHeadingReplacement.build_regex_pattern(underline_character),
                flags=re.MULTILINE | re.VERBOSE,
            )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        for tag_name, regex_pattern_compiled in self._regex_pattern_compiled_from_tag_name.items():
            string = regex_pattern_compiled.sub(fr'<{tag_name}>\g<content></{tag_name}>\n\n', string)

        return string

    @staticmethod
    def build_regex_pattern(underline_character: str) -> str:
        underline_character_regex = re.escape(underline_character)

        return fr'^ (?P<content> .+? ) [ ]* \n {underline_character_regex}+ [ ]* \n+'


class AtxHeadingReplacement(Replacement):
    """
    A replacement rule for hash-prefixed headings.

    ````
    # Heading 1
    ## Heading 2 ##
    ###### Heading 6
    ````
    The number of opening hashes gives the level; closing hashes are optional and discarded.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=r'^ (?P<opening_hashes> [#]{1,6} ) [ ]* (?P<content> .+? ) [ ]* [#]* \n+',
            flags=re.MULTILINE | re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return self._regex_pattern_compiled.sub(AtxHeadingReplacement.substitute_function, string)

    @staticmethod
    def substitute_function(match: re.Match) -> str:
        heading_level = len(match.group('opening_hashes'))
        tag_name = f'h{heading_level}'
        content = match.group('content')

        return f'<{tag_name}>{content}</{tag_name}>\n\n'


class HorizontalRuleReplacement(Replacement):
    """
    A replacement rule for horizontal rules.

    Three or more asterisks, hyphens, or underscores on a line of their own,
    optionally separated by single spaces.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=fr'''
                ^ [ ]{{0,{TAB_WIDTH - 1}}}
                (?: (?: [*][ ]? ){{3,}} | (?: [-][ ]? ){{3,}} | (?: [_][ ]? ){{3,}} )
                [ ]* $
            ''',
            flags=re.MULTILINE | re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return self._regex_pattern_compiled.sub('\n<hr />\n', string)


class CodeBlockReplacement(Replacement):
    """
    A replacement rule for indented code blocks.

    A code block is a run of lines indented by at least TAB_WIDTH spaces,
    beginning after a blank line (or at the start of the text).
    One level of indentation is removed, the content is escaped,
    and the resulting `<pre><code>` block is protected with a placeholder.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=fr'(?: \A | (?<= \n\n ) ) (?P<code> (?: [ ]{{{TAB_WIDTH}}} .* \n+ )+ )',
            flags=re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        def substitute_function(match: re.Match) -> str:
            code = encode_code(outdent(match.group('code'))).strip('\n')
            return context.placeholder_master.protect(f'<pre><code>{code}\n</code></pre>')

        return self._regex_pattern_compiled.sub(substitute_function, string)


class CodeSpanReplacement(Replacement):
    """
    A replacement rule for code spans.

    A run of backticks opens a span, which is closed by the next run of the same length
    within the same paragraph. Runs of any other length in between are literal backticks.
    A run with no closing run is itself rendered as literal backticks.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(pattern='`+')

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        if '`' not in string:
            return string

        pieces = re.split(pattern=r'(\n{2,})', string=string)

        return ''.join(
            self.replace_code_spans(piece) if index % 2 == 0 else piece
            for index, piece in enumerate(pieces)
        )

    def replace_code_spans(self, block: str) -> str:
        runs = list(self._regex_pattern_compiled.finditer(block))
        output_pieces = []
        index = 0
        run_index = 0

        while run_index < len(runs):
            opening_run = runs[run_index]
            opening_length = len(opening_run.group())
            output_pieces.append(block[index:opening_run.start()])

            closing_run_index = next(
                (
                    candidate_index
                    for candidate_index in range(run_index + 1, len(runs))
                    if len(runs[candidate_index].group()) == opening_length
                ),
                None,
            )

            if closing_run_index is None:
                output_pieces.append(BACKTICK_ENTITY * opening_length)
                index = opening_run.end()
                run_index += 1
                continue

            closing_run = runs[closing_run_index]
            content = block[opening_run.end():closing_run.start()].strip()
            content = encode_code(content).replace('`', BACKTICK_ENTITY)
            output_pieces.append(f'<code>{content}</code>')

            index = closing_run.end()
            run_index = closing_run_index + 1

        output_pieces.append(block[index:])

        return ''.join(output_pieces)


class ReferencedLinkReplacement(Replacement):
    """
    A replacement rule for referenced links and images.

    ````
    [«content»][«label»]
    [«content»][]
    ![«alt»][«label»]
    ````
    An empty label means «content» itself is the label.
    An unrecognised label leaves the text as is.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=r'''
                (?P<image_marker> [!] )?
                \[ (?P<content> [^\[\]\n]* ) \]
                [ ]? (?: \n [ ]* )?
                \[ (?P<label> [^\[\]\n]* ) \]
            ''',
            flags=re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return self._regex_pattern_compiled.sub(self.build_substitute_function(context), string)

    @staticmethod
    def build_substitute_function(context: 'ConversionContext') -> Callable[[re.Match], str]:
        def substitute_function(match: re.Match) -> str:
            is_image = match.group('image_marker') is not None
            content = match.group('content')

            label = match.group('label')
            if label == '':
                label = content

            try:
                uri, title = context.reference_master.load_definition(label)
            except UnrecognisedLabelException:
                return match.group()

            return build_link_html(is_image, uri, content, title)

        return substitute_function


class InlineLinkReplacement(Replacement):
    """
    A replacement rule for inline links and images.

    ````
    [«content»](«uri» "«title»")
    ![«alt»](«uri»)
    ````
    The URI may be enclosed in angle brackets; the title is optional.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=InlineLinkReplacement.build_regex_pattern(),
            flags=re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return self._regex_pattern_compiled.sub(InlineLinkReplacement.substitute_function, string)

    @staticmethod
    def build_regex_pattern() -> str:
        image_marker_regex = '(?P<image_marker> [!] )?'
        bracketed_content_regex = r'\[ (?P<content> [^\[\]\n]* ) \]'
        opening_parenthesis_regex = r'\( [ ]*'
        uri_regex = build_uri_regex(be_greedy=False)
        title_regex = build_title_regex()
        whitespace_then_title_regex = f'(?: [ ]+ {title_regex} )?'
        closing_parenthesis_regex = r'[ ]* \)'

        return ''.join([
            image_marker_regex,
            bracketed_content_regex,
            opening_parenthesis_regex,
            uri_regex,
            whitespace_then_title_regex,
            closing_parenthesis_regex,
        ])

    @staticmethod
    def substitute_function(match: re.Match) -> str:
        is_image = match.group('image_marker') is not None
        content = match.group('content')
        uri = extract_uri(match)

        title = extract_title(match)
        if title is not None:
            title = encode_code(title)

        return build_link_html(is_image, uri, content, title)


class AutoLinkReplacement(Replacement):
    """
    A replacement rule for automatic links.

    ````
    <https://example.com/>
    <mailto:someone@example.com>
    ````
    Email addresses are obfuscated, and shown without their `mailto:` prefix.
    Characters the obfuscation leaves literal are escaped,
    so that underscores in an address never read as emphasis.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=r'''[<] (?P<uri> [a-z]+ [:] [^'">\s]+ ) [>]''',
            flags=re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return self._regex_pattern_compiled.sub(AutoLinkReplacement.substitute_function, string)

    @staticmethod
    def substitute_function(match: re.Match) -> str:
        uri = match.group('uri')

        if is_mailto_uri(uri):
            href = encode_code(encode_email_address(uri))
            content = encode_code(encode_email_address(uri[len('mailto:'):]))
        else:
            href = percent_encode_emphasis_characters(uri)
            content = encode_code(uri)

        return f'<a href="{href}">{content}</a>'


class AmpersandAngleEncodingReplacement(Replacement):
    """
    A replacement rule for encoding bare ampersands and less-than signs.
    """
    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return encode_amps_and_angles(string)


class EmphasisReplacement(Replacement):
    """
    A replacement rule for strong emphasis and emphasis.

    `**strong**` and `__strong__` become `<strong>`; `*em*` and `_em_` become `<em>`.
    Underscore delimiters must lie on word boundaries, so that `snake_case_names` survive.
    Strong emphasis is replaced first, so that `***both***` nests properly.
    """
    _strong_regex_pattern_compiled: Optional[re.Pattern]
    _emphasis_regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._strong_regex_pattern_compiled = None
        self._emphasis_regex_pattern_compiled = None

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._strong_regex_pattern_compiled = re.compile(
            pattern=r'''
                [*]{2} (?= \S ) (?P<starred> .+? [*]* ) (?<= \S ) [*]{2}
                    |
                \b [_]{2} (?= \S ) (?P<underscored> .+? [_]* ) (?<= \S ) [_]{2} \b
            ''',
            flags=re.ASCII | re.VERBOSE,
        )
        self._emphasis_regex_pattern_compiled = re.compile(
            pattern=r'''
                [*] (?= \S ) (?P<starred> .+? ) (?<= \S ) [*]
                    |
                \b [_] (?= \S ) (?P<underscored> .+? ) (?<= \S ) [_] \b
            ''',
            flags=re.ASCII | re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        string = self._strong_regex_pattern_compiled.sub(
            EmphasisReplacement.build_substitute_function('strong'),
            string,
        )
        string = self._emphasis_regex_pattern_compiled.sub(
            EmphasisReplacement.build_substitute_function('em'),
            string,
        )

        return string

    @staticmethod
    def build_substitute_function(tag_name: str) -> Callable[[re.Match], str]:
        def substitute_function(match: re.Match) -> str:
            content = match.group('starred')
            if content is None:
                content = match.group('underscored')

            return f'<{tag_name}>{content}</{tag_name}>'

        return substitute_function


class HardBreakReplacement(Replacement):
    """
    A replacement rule for hard line breaks (two or more spaces at the end of a line).
    """
    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return re.sub(pattern=r'[ ]{2,} \n', repl='<br />\n', string=string, flags=re.VERBOSE)


class ListReplacement(ReplacementWithBlockGamut):
    """
    A replacement rule for ordered and unordered lists.

    A list begins with a line starting with a marker (`*`, `+`, `-`, or digits and a dot) and a space.
    It continues over non-blank lines, and over blank lines followed by a marker line or an indented line.
    The list is ordered if its first marker is numeric.

    An item spanning more than one line is outdented one level
    and run back through the block gamut.
    """
    _regex_pattern_compiled: Optional[re.Pattern]
    _marker_regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None
        self._marker_regex_pattern_compiled = None

    def _set_apply_method_variables(self):
        list_marker_regex = build_list_marker_regex()
        self._regex_pattern_compiled = re.compile(
            pattern=fr'''
                ^ {list_marker_regex} [ ] .+ \n
                (?: \S .* \n | \n* {list_marker_regex}? [ ] .+ \n )*
            ''',
            flags=re.MULTILINE | re.VERBOSE,
        )
        self._marker_regex_pattern_compiled = re.compile(
            pattern=f'^ {list_marker_regex} (?= [ ] )',
            flags=re.MULTILINE | re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        def substitute_function(match: re.Match) -> str:
            return self.build_list_html(match.group(), context)

        return self._regex_pattern_compiled.sub(substitute_function, string)

    def build_list_html(self, list_text: str, context: 'ConversionContext') -> str:
        if re.match(pattern='[0-9]', string=list_text):
            tag_name = 'ol'
        else:
            tag_name = 'ul'

        marker_matches = list(self._marker_regex_pattern_compiled.finditer(list_text))
        items_html = ''

        for marker_index, marker_match in enumerate(marker_matches):
            try:
                item_end = marker_matches[marker_index + 1].start()
            except IndexError:
                item_end = len(list_text)

            item = list_text[marker_match.end():item_end].strip()
            if '\n' in item:
                item = self.run_block_gamut(outdent(item), context)

            items_html += f'<li>{item}</li>\n'

        return f'<{tag_name}>\n{items_html}</{tag_name}>\n'


class BlockQuoteReplacement(ReplacementWithBlockGamut):
    """
    A replacement rule for blockquotes.

    Consecutive lines prefixed with `> ` (along with any lazy continuation lines)
    have their prefixes removed, are run back through the block gamut, and are wrapped in `<blockquote>`.
    """
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._regex_pattern_compiled = None

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(
            pattern=r'^ (?: [>][ ] .+ \n (?: .+ \n )* \n* )+',
            flags=re.MULTILINE | re.VERBOSE,
        )

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        def substitute_function(match: re.Match) -> str:
            quote = re.sub(
                pattern='^ [>] [ ]?',
                repl='',
                string=match.group().strip(),
                flags=re.MULTILINE | re.VERBOSE,
            )
            quote_html = self.run_block_gamut(quote, context)

            return f'\n\n<blockquote>\n{quote_html}\n</blockquote>\n\n'

        return self._regex_pattern_compiled.sub(substitute_function, string)


class ParagraphReplacement(Replacement):
    """
    A replacement rule for forming paragraphs.

    The text is split on runs of blank lines.
    A unit that is a placeholder key is kept as is (to be restored later);
    any other unit is trimmed and wrapped in `<p>` tags.
    """
    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        paragraphs = []

        for unit in re.split(pattern=r'\n{2,}', string=string.strip()):
            unit = unit.strip()

            if unit == '':
                continue

            if context.placeholder_master.is_key(unit):
                paragraphs.append(unit)
            else:
                paragraphs.append(f'<p>{unit}</p>')

        return ''.join(f'{paragraph}\n\n' for paragraph in paragraphs)


class PlaceholderUnprotectionReplacement(Replacement):
    """
    A replacement rule for restoring placeholders to their fragments.
    """
    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str, context: 'ConversionContext') -> str:
        return context.placeholder_master.unprotect(string)
