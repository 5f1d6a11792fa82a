"""
# Dinghy-Markdown: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Optional

from dinghymd.constants import ENTITY_FROM_CODE_CHARACTER, TAB_WIDTH


_CODE_CHARACTER_PATTERN_COMPILED = re.compile(
    pattern=r'''
        [&]
        (?!
            (?:
                [a-zA-Z] [a-zA-Z0-9]{0,31}
                    |
                [#] (?: [0-9]{1,7} | [xX] [0-9a-fA-F]{1,6} )
            )
            [;]
        )
            |
        [<>'"*_{}\[\]\\]
    ''',
    flags=re.VERBOSE,
)


def detab(string: str) -> str:
    """
    Expand tabs to the next multiple of TAB_WIDTH columns.

    Columns are counted from the start of each line,
    so that `'ab\\tc'` becomes `'ab  c'` rather than `'ab    c'`.
    """
    return string.expandtabs(TAB_WIDTH)


def outdent(string: str) -> str:
    """
    Remove one level (up to TAB_WIDTH spaces) of indentation from every line.
    """
    return re.sub(
        pattern=f'^ [ ]{{1,{TAB_WIDTH}}}',
        repl='',
        string=string,
        flags=re.MULTILINE | re.VERBOSE,
    )


def encode_code(string: str) -> str:
    """
    Escape characters that are significant to Markdown or HTML.

    Used for code, titles, and alt text, so that later span replacements leave them alone.
    Ampersands already starting an entity are kept as is,
    making the escaping idempotent.
    """
    if _CODE_CHARACTER_PATTERN_COMPILED.search(string) is None:
        return string

    return _CODE_CHARACTER_PATTERN_COMPILED.sub(
        lambda match: ENTITY_FROM_CODE_CHARACTER[match.group()],
        string,
    )


def encode_amps_and_angles(string: str) -> str:
    """
    Encode ampersands and less-than signs that would otherwise be read as markup.

    An ampersand that begins an entity reference is left alone,
    as is a less-than sign that begins something tag-like.
    """
    string = re.sub(
        pattern=r'''
            [&]
            (?! [#]? [xX]? (?: [0-9a-fA-F]+ | [\w]+ ) [;] )
        ''',
        repl='&amp;',
        string=string,
        flags=re.ASCII | re.VERBOSE,
    )
    string = re.sub(
        pattern=r'[<] (?! [a-zA-Z/?$!] )',
        repl='&lt;',
        string=string,
        flags=re.VERBOSE,
    )

    return string


def percent_encode_emphasis_characters(uri: str) -> str:
    """
    Percent-encode characters in a URI that later replacements would mistake for markup.
    """
    uri = uri.replace('_', '%5F')
    uri = uri.replace('*', '%2A')
    uri = uri.replace('"', '%22')

    return uri


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string
