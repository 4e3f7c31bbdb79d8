"""
Unit tests for normalization and trigram extraction.
"""

import unittest

from trigram_similarity.core.normalize import PADDING, normalize
from trigram_similarity.core.trigrams import trigrams


class TestNormalize(unittest.TestCase):
    """Test normalize()"""

    def test_pads_boundaries(self):
        """Test start and end of string become padding"""
        self.assertEqual(normalize("a"), "  a  ")

    def test_lowercases(self):
        """Test result is lowercase"""
        self.assertEqual(normalize("FiGaRo"), "  figaro  ")

    def test_collapses_non_word_runs(self):
        """Test punctuation and whitespace runs collapse to one padding"""
        self.assertEqual(normalize("same, but  different?"), "  same  but  different  ")

    def test_first_character_is_kept(self):
        """Test the start-of-string match never consumes a leading non-word character"""
        self.assertEqual(normalize("!a"), "  !a  ")
        self.assertEqual(normalize("!!a"), "  !  a  ")
        self.assertEqual(normalize('"Quoted"'), '  "quoted  ')

    def test_trailing_run_supplies_end_padding(self):
        """Test a non-word run at the end yields a single padding"""
        self.assertEqual(normalize("a!"), "  a  ")
        self.assertEqual(normalize("a?! "), "  a  ")

    def test_leading_space_adds_no_trigrams(self):
        """Test a kept leading space only contributes windows ending in padding"""
        self.assertEqual(normalize(" a"), "   a  ")
        self.assertEqual(trigrams(normalize(" a")), trigrams(normalize("a")))

    def test_empty_and_punctuation_only(self):
        """Test inputs without words keep only their first character"""
        self.assertEqual(normalize(""), PADDING)
        self.assertEqual(normalize("!"), "  !  ")
        self.assertEqual(normalize("?!, ..."), "  ?  ")

    def test_underscore_and_digits_are_word_characters(self):
        """Test underscore and digits survive normalization"""
        self.assertEqual(normalize("snake_case 42"), "  snake_case  42  ")


class TestTrigrams(unittest.TestCase):
    """Test trigrams()"""

    def test_single_character(self):
        """Test windows ending in padding are dropped"""
        self.assertEqual(trigrams("  a  "), {"  a", " a "})

    def test_word(self):
        """Test a normal word"""
        self.assertEqual(trigrams("  foo  "), {"  f", " fo", "foo", "oo "})

    def test_duplicates_collapse(self):
        """Test repeated windows appear once"""
        result = trigrams("  aaaa  ")
        self.assertEqual(result, {"  a", " aa", "aaa", "aa "})

    def test_short_strings(self):
        """Test strings shorter than a trigram give an empty set"""
        for s in ["", " ", "ab", PADDING]:
            self.assertEqual(trigrams(s), set(), f"trigrams of {s!r}")

    def test_padding_only(self):
        """Test bare padding has no trigrams"""
        self.assertEqual(trigrams("    "), set())

    def test_no_trigram_ends_with_padding(self):
        """Test invariant over a longer string"""
        for t in trigrams(normalize("sir sly, the dancing bear!")):
            self.assertEqual(len(t), 3)
            self.assertFalse(t.endswith(PADDING), t)

    def test_windows_by_codepoint(self):
        """Test multi-byte characters are never split"""
        result = trigrams(normalize("ñü"))
        self.assertEqual(result, {"  ñ", " ñü", "ñü "})


if __name__ == '__main__':
    unittest.main()
