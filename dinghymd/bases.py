"""
# Dinghy-Markdown: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for replacement rules.
"""

import abc
from typing import Optional

from dinghymd.constants import MAX_NESTING_DEPTH, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from dinghymd.contexts import ConversionContext
from dinghymd.exceptions import CommittedMutateException, MissingAttributeException, UncommittedApplyException


class Replacement(abc.ABC):
    """
    Base class for a replacement rule.

    A replacement is configured, then committed (which compiles its patterns),
    then applied any number of times.
    A committed replacement holds no state that changes between applications;
    everything belonging to a single conversion lives in the ConversionContext passed to `apply`.
    """
    _is_committed: bool
    _id: str
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        self._is_committed = False
        self._id = id_
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    @property
    def is_committed(self) -> bool:
        return self._is_committed

    def commit(self):
        self._validate_mandatory_attributes()
        self._set_apply_method_variables()
        self._is_committed = True

    def apply(self, string: str, context: 'ConversionContext') -> str:
        if not self._is_committed:
            raise UncommittedApplyException(f'error: cannot call `apply(...)` on #{self._id} before `commit()`')

        string_before = string
        string = self._apply(string, context)
        string_after = string

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
            print(string_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
            print(string_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
            print('\n\n\n\n')

        return string_after

    @abc.abstractmethod
    def _validate_mandatory_attributes(self):
        """
        Ensure all mandatory attributes have been set.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _set_apply_method_variables(self):
        """
        Set variables used in `self._apply(string, context)`.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _apply(self, string: str, context: 'ConversionContext') -> str:
        """
        Apply the defined replacement to a string.
        """
        raise NotImplementedError


class ReplacementWithBlockGamut(Replacement, abc.ABC):
    """
    Base class for a replacement rule whose content is run back through the block gamut.

    Used for list items and blockquotes, which may contain any block-level construct,
    including further lists and blockquotes.
    """
    _block_gamut: Optional['Replacement']

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._block_gamut = None

    @property
    def block_gamut(self) -> Optional['Replacement']:
        return self._block_gamut

    @block_gamut.setter
    def block_gamut(self, value: 'Replacement'):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `block_gamut` after `commit()`')

        self._block_gamut = value

    def _validate_mandatory_attributes(self):
        if self._block_gamut is None:
            raise MissingAttributeException('block_gamut')

    def run_block_gamut(self, string: str, context: 'ConversionContext') -> str:
        """
        Run nested content through the block gamut, in the same context as the enclosing text.

        The content is given the two trailing newlines that normalisation guarantees at the top level.
        Beyond MAX_NESTING_DEPTH levels, the content is wrapped as a plain paragraph instead.
        """
        if context.nesting_depth >= MAX_NESTING_DEPTH:
            return f'<p>{string.strip()}</p>'

        string = string.strip('\n') + '\n\n'

        return self._block_gamut.apply(string, context.nest()).rstrip('\n')
