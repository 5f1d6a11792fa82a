"""
# Dinghy-Markdown: references.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

References for links and images.
"""

from typing import NamedTuple, Optional

from dinghymd.exceptions import UnrecognisedLabelException


class Reference:
    """
    A reference to be used by links and images.

    For a given «label» (normalised to lower case), a reference consists of
    - «uri»
    - «title» (optional)
    where «uri» is `href` for links and `src` for images.
    """
    _uri: str
    _title: Optional[str]

    def __init__(self, uri: str, title: Optional[str]):
        self._uri = uri
        self._title = title

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def title(self) -> Optional[str]:
        return self._title


class ReferenceMaster:
    """
    Object storing references to be used by links and images.

    Labels are case-insensitive. If a label is defined more than once,
    the latest definition prevails.
    """
    _reference_from_label: dict[str, 'Reference']

    def __init__(self):
        self._reference_from_label = {}

    def __len__(self) -> int:
        return len(self._reference_from_label)

    def store_definition(self, label: str, uri: str, title: Optional[str]):
        label = ReferenceMaster.normalise_label(label)
        self._reference_from_label[label] = Reference(uri, title)

    def load_definition(self, label: str) -> 'ReferenceDefinition':
        label = ReferenceMaster.normalise_label(label)

        try:
            reference = self._reference_from_label[label]
        except KeyError:
            raise UnrecognisedLabelException(label)

        return ReferenceDefinition(reference.uri, reference.title)

    @staticmethod
    def normalise_label(label: str) -> str:
        return label.lower()


class ReferenceDefinition(NamedTuple):
    uri: str
    title: Optional[str]
