"""
# Dinghy-Markdown: test_utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `utilities.py`.
"""

import unittest

from dinghymd.utilities import (
    detab,
    encode_amps_and_angles,
    encode_code,
    none_to_empty_string,
    outdent,
    percent_encode_emphasis_characters,
)


class TestUtilities(unittest.TestCase):
    def test_detab(self):
        self.assertEqual(detab(''), '')
        self.assertEqual(detab('\tx'), '    x')
        self.assertEqual(detab('ab\tc'), 'ab  c')
        self.assertEqual(detab('abcd\te'), 'abcd    e')
        self.assertEqual(detab('a\tb\tc'), 'a   b   c')
        self.assertEqual(detab('xy\n\tz'), 'xy\n    z')

    def test_outdent(self):
        self.assertEqual(outdent('    a\n      b\n  c\nd'), 'a\n  b\nc\nd')
        self.assertEqual(outdent('        deep'), '    deep')

    def test_encode_code(self):
        self.assertEqual(encode_code('plain text'), 'plain text')
        self.assertEqual(encode_code('<b>'), '&lt;b&gt;')
        self.assertEqual(encode_code('a * b _ c'), 'a &#42; b &#95; c')
        self.assertEqual(encode_code('{[\'"\\]}'), '&#123;&#91;&#39;&#34;&#92;&#93;&#125;')
        self.assertEqual(encode_code('AT&T'), 'AT&amp;T')
        self.assertEqual(encode_code('&copy; &#169; &#xA9;'), '&copy; &#169; &#xA9;')

    def test_encode_code_idempotence(self):
        for string in ['<a href="x">*y*</a>', 'AT&T [1]', '`_{}_`', 'if (a && b) { c(); }', '']:
            once = encode_code(string)
            self.assertEqual(encode_code(once), once)

    def test_encode_amps_and_angles(self):
        self.assertEqual(encode_amps_and_angles('AT&T'), 'AT&amp;T')
        self.assertEqual(encode_amps_and_angles('&amp; &#169; &#xA9;'), '&amp; &#169; &#xA9;')
        self.assertEqual(encode_amps_and_angles('1 < 2'), '1 &lt; 2')
        self.assertEqual(encode_amps_and_angles('<b> </b> <!-- --> <?php'), '<b> </b> <!-- --> <?php')
        self.assertEqual(encode_amps_and_angles('<3'), '&lt;3')

    def test_percent_encode_emphasis_characters(self):
        self.assertEqual(percent_encode_emphasis_characters('http://e.com/a_b*c'), 'http://e.com/a%5Fb%2Ac')
        self.assertEqual(percent_encode_emphasis_characters('http://e.com/"'), 'http://e.com/%22')

    def test_none_to_empty_string(self):
        self.assertEqual(none_to_empty_string(''), '')
        self.assertEqual(none_to_empty_string(None), '')
        self.assertEqual(none_to_empty_string('xyz'), 'xyz')


if __name__ == '__main__':
    unittest.main()
