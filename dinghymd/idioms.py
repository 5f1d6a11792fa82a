"""
# Dinghy-Markdown: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms.
"""

import re
from typing import Optional

from dinghymd.obfuscation import encode_email_address, is_mailto_uri
from dinghymd.utilities import encode_code, percent_encode_emphasis_characters


def build_block_tag_regex(tag_names: list[str]) -> str:
    """
    Build a regex matching an opening block tag at the start of a line.

    Tag names are regex fragments (e.g. `h[1-6]`), not literals.
    """
    tag_name_regex = '|'.join(tag_names)

    return fr'^ [<] (?P<tag_name> {tag_name_regex} ) \b'


def build_html_block_regex(tag_name: str, require_closing_anchoring: bool) -> str:
    """
    Build a regex matching from an opening tag to the first closing tag of the same name.

    No attempt is made to account for nesting.
    If `require_closing_anchoring` is set, the closing tag must begin a line;
    otherwise it may be preceded by other content on its line.
    """
    tag_name_regex = re.escape(tag_name)

    if require_closing_anchoring:
        closing_prefix_regex = ''
    else:
        closing_prefix_regex = '.*'

    return fr'^ [<] {tag_name_regex} \b (?: .* \n )*? {closing_prefix_regex} [<][/] {tag_name_regex} [>] [ ]* $'


def build_blank_line_bounded_regex(content_regex: str, tab_width: int) -> str:
    """
    Build a regex for HTML preceded by a blank line (or start of text) and followed by a blank line.

    The content is captured as `html`, less than a tab's width of leading spaces being allowed.
    """
    preceding_regex = r'(?: \A \n? | (?<= \n\n ) )'
    indentation_regex = f'[ ]{{0,{tab_width - 1}}}'
    following_regex = r'[ ]* (?= \n{2,} )'

    return f'{preceding_regex} {indentation_regex} (?P<html> {content_regex} ) {following_regex}'


def build_list_marker_regex() -> str:
    return r'(?: [*+-] | [0-9]+ [.] )'


def build_uri_regex(be_greedy: bool) -> str:
    if be_greedy:
        greed = ''
    else:
        greed = '?'

    return fr'(?: [<] (?P<angle_bracketed_uri> [^>]*? ) [>] | (?P<bare_uri> [\S]+{greed} ) )'


def build_title_regex() -> str:
    return r'''(?: "(?P<double_quoted_title> [^"]*? )" | '(?P<single_quoted_title> [^']*? )' )'''


def extract_uri(match: re.Match) -> str:
    angle_bracketed_uri = match.group('angle_bracketed_uri')
    if angle_bracketed_uri is not None:
        return angle_bracketed_uri

    return match.group('bare_uri')


def extract_title(match: re.Match) -> Optional[str]:
    double_quoted_title = match.group('double_quoted_title')
    if double_quoted_title is not None:
        return double_quoted_title

    return match.group('single_quoted_title')


def build_link_html(is_image: bool, uri: str, content: str, title: Optional[str]) -> str:
    """
    Build an anchor or an image.

    `mailto:` URIs are obfuscated, with any characters left literal escaped as entities.
    In other URIs, underscores and asterisks are percent-encoded.
    Either way, the emphasis replacement to follow leaves them alone.
    `title` is expected to have been escaped already.
    """
    if is_mailto_uri(uri):
        uri = encode_code(encode_email_address(uri))
    else:
        uri = percent_encode_emphasis_characters(uri)

    if title:
        title_attribute = f' title="{title}"'
    else:
        title_attribute = ''

    if is_image:
        alt = encode_code(content)
        return f'<img src="{uri}" alt="{alt}"{title_attribute} />'

    return f'<a href="{uri}"{title_attribute}>{content}</a>'
