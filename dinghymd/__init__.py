"""
# Dinghy-Markdown: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.
"""

from dinghymd._version import __version__
from dinghymd.core import markdown, markdown_to_html
