"""
# Dinghy-Markdown: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

TAB_WIDTH = 4

# List items and blockquotes nested deeper than this are not run back through the block gamut.
MAX_NESTING_DEPTH = 32

# Closing tag must begin a line.
STRICT_BLOCK_TAG_NAMES = [
    'p',
    'div',
    'h[1-6]',
    'blockquote',
    'pre',
    'table',
    'dl',
    'ol',
    'ul',
    'script',
    'noscript',
    'form',
    'fieldset',
    'iframe',
    'math',
]

# Closing tag may appear mid-line.
EXTENDED_BLOCK_TAG_NAMES = [
    *STRICT_BLOCK_TAG_NAMES,
    'ins',
    'del',
]

ENTITY_FROM_CODE_CHARACTER = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    "'": '&#39;',
    '"': '&#34;',
    '*': '&#42;',
    '_': '&#95;',
    '{': '&#123;',
    '}': '&#125;',
    '[': '&#91;',
    ']': '&#93;',
    '\\': '&#92;',
}
BACKTICK_ENTITY = '&#96;'
