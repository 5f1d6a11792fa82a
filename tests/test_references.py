"""
# Dinghy-Markdown: test_references.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `references.py`.
"""

import unittest

from dinghymd.exceptions import UnrecognisedLabelException
from dinghymd.references import ReferenceDefinition, ReferenceMaster


class TestReferences(unittest.TestCase):
    def test_reference_master_load_definition(self):
        reference_master = ReferenceMaster()
        reference_master.store_definition('Home', 'http://example.com/', 'Home page')
        reference_master.store_definition('bare', 'http://example.com/bare', None)

        self.assertEqual(
            reference_master.load_definition('home'),
            ReferenceDefinition('http://example.com/', 'Home page'),
        )
        self.assertEqual(
            reference_master.load_definition('HOME'),
            ReferenceDefinition('http://example.com/', 'Home page'),
        )
        self.assertEqual(
            reference_master.load_definition('bare'),
            ReferenceDefinition('http://example.com/bare', None),
        )

    def test_reference_master_latest_definition_prevails(self):
        reference_master = ReferenceMaster()
        reference_master.store_definition('x', 'http://one.example.com/', None)
        reference_master.store_definition('X', 'http://two.example.com/', 'Two')

        self.assertEqual(len(reference_master), 1)
        self.assertEqual(reference_master.load_definition('x').uri, 'http://two.example.com/')

    def test_reference_master_unrecognised_label(self):
        reference_master = ReferenceMaster()

        with self.assertRaises(UnrecognisedLabelException):
            reference_master.load_definition('missing')


if __name__ == '__main__':
    unittest.main()
