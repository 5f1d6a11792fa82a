"""
# Dinghy-Markdown: test_authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `authorities.py`.
"""

import concurrent.futures
import unittest

from dinghymd.authorities import ConversionAuthority


class TestConversionAuthority(unittest.TestCase):
    def test_legislate(self):
        conversion_authority = ConversionAuthority()

        self.assertEqual(
            [replacement.id_ for replacement in conversion_authority.replacement_queue],
            [
                'normalise',
                'protect-html-blocks',
                'reference-definitions',
                'block-gamut',
                'placeholder-unprotect',
            ],
        )
        self.assertEqual(
            [replacement.id_ for replacement in conversion_authority.get_replacement('span-gamut').replacements],
            [
                'code-spans',
                'referenced-links',
                'inline-links',
                'auto-links',
                'amps-and-angles',
                'emphasis',
                'hard-breaks',
            ],
        )
        self.assertIs(
            conversion_authority.get_replacement('lists').block_gamut,
            conversion_authority.get_replacement('block-gamut'),
        )
        self.assertIs(
            conversion_authority.get_replacement('blockquotes').block_gamut,
            conversion_authority.get_replacement('block-gamut'),
        )
        self.assertTrue(all(replacement.is_committed for replacement in conversion_authority.replacement_queue))
        self.assertIsNone(conversion_authority.get_replacement('no-such-replacement'))

    def test_execute_uses_fresh_context(self):
        conversion_authority = ConversionAuthority()

        self.assertEqual(
            conversion_authority.execute('[a]: http://a.example.com/\n\n[link][a]'),
            '<p><a href="http://a.example.com/">link</a></p>\n\n',
        )
        self.assertEqual(
            conversion_authority.execute('[link][a]'),
            '<p>[link][a]</p>\n\n',
        )

    def test_execute_concurrently(self):
        conversion_authority = ConversionAuthority()

        def convert(index: int) -> str:
            return conversion_authority.execute(
                f'[site]: http://example.com/{index}\n\n'
                f'<div>\nblock {index}\n</div>\n\n'
                f'* [here][site]\n* item {index}\n'
            )

        indices = range(64)
        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            outputs = list(executor.map(convert, indices))

        for index, output in zip(indices, outputs):
            self.assertEqual(
                output,
                f'<div>\nblock {index}\n</div>\n\n'
                '<ul>\n'
                f'<li><a href="http://example.com/{index}">here</a></li>\n'
                f'<li>item {index}</li>\n'
                '</ul>\n\n',
            )


if __name__ == '__main__':
    unittest.main()
