"""
# Dinghy-Markdown: placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Placeholder protection.
"""

import hashlib
import re


class PlaceholderMaster:
    """
    Object storing HTML fragments that have been protected with a placeholder.

    There are many instances in which an HTML fragment should not be altered further
    by the replacements to follow (raw HTML blocks, code blocks, generated block tags).
    To protect a fragment, it is replaced in the text by a placeholder of the form
    `\\n\\n«key»\\n\\n`, where «key» is the hexadecimal MD5 digest of the fragment.
    The surrounding blank lines make the placeholder a paragraph unit of its own.

    Keys are content-addressed: identical fragments share a key,
    and an entry once stored is never replaced.

    The very last call to PlaceholderMaster should be to unprotect the text
    (restoring placeholder keys to their fragments).
    """
    _fragment_from_key: dict[str, str]

    _KEY_PATTERN_COMPILED = re.compile(
        pattern=r'\b [0-9a-f]{32} \b',
        flags=re.ASCII | re.VERBOSE,
    )

    def __init__(self):
        self._fragment_from_key = {}

    def __len__(self) -> int:
        return len(self._fragment_from_key)

    @staticmethod
    def compute_key(fragment: str) -> str:
        return hashlib.md5(fragment.encode(), usedforsecurity=False).hexdigest()

    def protect(self, fragment: str) -> str:
        """
        Protect an HTML fragment by converting it to a placeholder.
        """
        key = PlaceholderMaster.compute_key(fragment)
        self._fragment_from_key.setdefault(key, fragment)

        return f'\n\n{key}\n\n'

    def is_key(self, string: str) -> bool:
        return string in self._fragment_from_key

    def load_fragment(self, key: str) -> str:
        return self._fragment_from_key[key]

    def _unprotect_substitute_function(self, key_match: re.Match) -> str:
        key = key_match.group()

        try:
            fragment = self._fragment_from_key[key]
        except KeyError:  # a digest-like string that was never a placeholder
            return key

        return self.unprotect(fragment)

    def unprotect(self, string: str) -> str:
        """
        Unprotect a string by restoring placeholder keys to their fragments.

        Fragments generated inside list items and blockquotes may themselves contain keys,
        so restoration is applied recursively.
        """
        if len(self._fragment_from_key) == 0:
            return string

        return PlaceholderMaster._KEY_PATTERN_COMPILED.sub(self._unprotect_substitute_function, string)
