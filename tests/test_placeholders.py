"""
# Dinghy-Markdown: test_placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `placeholders.py`.
"""

import unittest

from dinghymd.placeholders import PlaceholderMaster


class TestPlaceholders(unittest.TestCase):
    def test_placeholder_master_compute_key(self):
        self.assertEqual(PlaceholderMaster.compute_key(''), 'd41d8cd98f00b204e9800998ecf8427e')
        self.assertEqual(PlaceholderMaster.compute_key('abc'), '900150983cd24fb0d6963f7d28e17f72')

    def test_placeholder_master_protect(self):
        placeholder_master = PlaceholderMaster()
        key = PlaceholderMaster.compute_key('<div>x</div>')

        self.assertEqual(placeholder_master.protect('<div>x</div>'), f'\n\n{key}\n\n')
        self.assertTrue(placeholder_master.is_key(key))
        self.assertFalse(placeholder_master.is_key('<div>x</div>'))
        self.assertEqual(placeholder_master.load_fragment(key), '<div>x</div>')

    def test_placeholder_master_protect_is_content_addressed(self):
        placeholder_master = PlaceholderMaster()

        first = placeholder_master.protect('<hr />')
        second = placeholder_master.protect('<hr />')
        self.assertEqual(first, second)
        self.assertEqual(len(placeholder_master), 1)

        placeholder_master.protect('<hr/>')
        self.assertEqual(len(placeholder_master), 2)

    def test_placeholder_master_unprotect(self):
        placeholder_master = PlaceholderMaster()
        inner_placeholder = placeholder_master.protect('<pre><code>x\n</code></pre>')
        outer_placeholder = placeholder_master.protect(f'<ul>\n<li>{inner_placeholder.strip()}</li>\n</ul>')

        self.assertEqual(
            placeholder_master.unprotect(f'<p>a</p>{outer_placeholder}<p>b</p>'),
            '<p>a</p>\n\n<ul>\n<li><pre><code>x\n</code></pre></li>\n</ul>\n\n<p>b</p>',
        )

    def test_placeholder_master_unprotect_leaves_unknown_digests(self):
        placeholder_master = PlaceholderMaster()
        placeholder_master.protect('<hr />')

        self.assertEqual(
            placeholder_master.unprotect('commit 900150983cd24fb0d6963f7d28e17f72'),
            'commit 900150983cd24fb0d6963f7d28e17f72',
        )


if __name__ == '__main__':
    unittest.main()
