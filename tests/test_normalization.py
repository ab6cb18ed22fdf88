import unittest

from starcon.data.normalization import clean_word, parse_words_file, prepare_words


class NormalizationTests(unittest.TestCase):
    def test_clean_word_trims_and_uppercases(self) -> None:
        self.assertEqual(clean_word("  grün "), "GRÜN")
        self.assertEqual(clean_word(""), "")

    def test_prepare_words_sorts_stably_by_length(self) -> None:
        accepted, rejected = prepare_words(["cat", "planet", "dog", "x", "", "moon"])
        self.assertEqual(accepted, ["PLANET", "MOON", "CAT", "DOG"])
        self.assertEqual(rejected, ["X", ""])

    def test_prepare_words_respects_max_length(self) -> None:
        accepted, rejected = prepare_words(["ROCKET", "ORB"], max_length=5)
        self.assertEqual(accepted, ["ORB"])
        self.assertEqual(rejected, ["ROCKET"])

    def test_parse_words_file(self) -> None:
        lines = ["# vocabulary", "", "sun:sol", "  moon : luna", "star"]
        self.assertEqual(parse_words_file(lines), ["sun", "moon", "star"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
