"""
# Dinghy-Markdown: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

A post is stored as a lead (excerpt) and a body, both in Markdown;
they are converted together, the lead first.
The result is an HTML fragment, to be embedded in a page by the caller.

Conversion never fails on input: malformed or ambiguous constructs
degrade to literal text. Conversion time grows with input size,
so callers accepting untrusted input should limit its length.
"""

from typing import Optional

from dinghymd.authorities import ConversionAuthority
from dinghymd.utilities import none_to_empty_string


DEFAULT_CONVERSION_AUTHORITY = ConversionAuthority()


def markdown_to_html(markup: str, verbose_mode_enabled: bool = False) -> str:
    """
    Convert Markdown to HTML.

    The default authority is shared by all non-verbose calls;
    verbose mode legislates an authority of its own.
    """
    if verbose_mode_enabled:
        conversion_authority = ConversionAuthority(verbose_mode_enabled=True)
    else:
        conversion_authority = DEFAULT_CONVERSION_AUTHORITY

    html = conversion_authority.execute(markup)

    return html


def markdown(lead: Optional[str], content: Optional[str]) -> str:
    """
    Convert the lead and body of a post to HTML.
    """
    return markdown_to_html(none_to_empty_string(lead) + none_to_empty_string(content))
