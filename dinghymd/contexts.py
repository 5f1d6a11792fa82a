"""
# Dinghy-Markdown: contexts.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Per-conversion state.
"""

from typing import NamedTuple

from dinghymd.placeholders import PlaceholderMaster
from dinghymd.references import ReferenceMaster


class ConversionContext(NamedTuple):
    """
    The lookup tables belonging to a single conversion.

    A fresh context is created for every top-level conversion
    and passed by parameter to every replacement,
    including nested runs of the block gamut for list items and blockquotes.
    Contexts are never shared between conversions.

    A nested run receives a copy with `nesting_depth` incremented;
    the copy shares the lookup tables of the context it was made from.
    """
    placeholder_master: 'PlaceholderMaster'
    reference_master: 'ReferenceMaster'
    nesting_depth: int = 0

    @staticmethod
    def create() -> 'ConversionContext':
        return ConversionContext(
            placeholder_master=PlaceholderMaster(),
            reference_master=ReferenceMaster(),
        )

    def nest(self) -> 'ConversionContext':
        return self._replace(nesting_depth=self.nesting_depth + 1)
