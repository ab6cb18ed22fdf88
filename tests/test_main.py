import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from main import main


class MainCliTests(unittest.TestCase):
    def test_writes_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            with redirect_stderr(io.StringIO()):
                code = main(["--words", "DOG", "GO", "--initial-help", "1", "--output", str(output)])
            self.assertEqual(code, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))
        crossword = payload["crossword"]
        self.assertEqual((crossword["width"], crossword["height"]), (3, 2))
        self.assertEqual([clue["number"] for clue in crossword["clues"]], [1, 2])
        self.assertEqual(payload["player_grid"], [["", "G", ""], ["", "O", ""]])
        self.assertEqual(payload["validation"], [])
        self.assertIn("English", payload["clue_texts"]["DOG"])

    def test_reads_words_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("# space\ncat:gato\ncow:vaca\n", encoding="utf-8")
            stdout = io.StringIO()
            with redirect_stdout(stdout), redirect_stderr(io.StringIO()):
                code = main(["--words-file", str(words), "--languages", "Spanish"])
        self.assertEqual(code, 0)
        payload = json.loads(stdout.getvalue())
        self.assertEqual([clue["word"] for clue in payload["crossword"]["clues"]], ["CAT", "COW"])
        self.assertIn("Spanish", payload["crossword"]["clues"][0]["clue"])

    def test_unplaceable_words_exit_with_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            code = main(["--words", "A"])
        self.assertEqual(code, 1)
        self.assertIn("none of the words", stderr.getvalue())

    def test_requires_words(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main([])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
