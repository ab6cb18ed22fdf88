import unittest

from starcon.core.constants import Direction
from starcon.engine.builder import BuilderConfig, CrosswordBuilder, build_crossword
from starcon.engine.canvas import WorkingCanvas
from starcon.engine.validator import GridValidator


SPACE_WORDS = [
    "PLANET",
    "ROCKET",
    "COMET",
    "STAR",
    "ORBIT",
    "ALIEN",
    "MOON",
    "GALAXY",
    "NEBULA",
    "ASTEROID",
]


class CanvasPlacementTests(unittest.TestCase):
    def setUp(self) -> None:
        self.canvas = WorkingCanvas(7)
        self.canvas.write("CAT", 1, 3, Direction.ACROSS)

    def test_rejects_word_running_past_edge(self) -> None:
        self.assertFalse(self.canvas.can_place("CAT", 5, 0, Direction.ACROSS, must_intersect=False))
        self.assertFalse(self.canvas.can_place("CAT", 0, 5, Direction.DOWN, must_intersect=False))

    def test_free_ends_rule(self) -> None:
        # "TO" would extend CAT collinearly into "CATO".
        self.assertFalse(self.canvas.can_place("TO", 4, 3, Direction.ACROSS, must_intersect=False))

    def test_lateral_isolation_rule(self) -> None:
        self.assertFalse(self.canvas.can_place("DOG", 1, 2, Direction.ACROSS, must_intersect=False))

    def test_intersection_accepted(self) -> None:
        self.assertTrue(self.canvas.can_place("ACE", 2, 3, Direction.DOWN, must_intersect=True))

    def test_letter_mismatch_rejected(self) -> None:
        self.assertFalse(self.canvas.can_place("BOX", 2, 3, Direction.DOWN, must_intersect=False))

    def test_must_intersect(self) -> None:
        self.assertFalse(self.canvas.can_place("BOX", 6, 0, Direction.DOWN, must_intersect=True))
        self.assertTrue(self.canvas.can_place("BOX", 6, 0, Direction.DOWN, must_intersect=False))

    def test_bounding_box(self) -> None:
        self.assertEqual(self.canvas.bounding_box(), (1, 3, 3, 3))
        self.assertIsNone(WorkingCanvas(3).bounding_box())


class BuildCrosswordTests(unittest.TestCase):
    def test_single_letter_gives_empty_result(self) -> None:
        result = build_crossword(["A"])
        self.assertTrue(result.is_empty)
        self.assertEqual(result.grid, [])
        self.assertEqual(result.clues, [])
        self.assertEqual((result.width, result.height), (0, 0))
        self.assertEqual(result.rejected, ["A"])

    def test_no_words(self) -> None:
        result = build_crossword([])
        self.assertTrue(result.is_empty)
        self.assertEqual(result.unplaced, [])

    def test_word_longer_than_canvas_is_filtered(self) -> None:
        result = build_crossword(["ABCDEFGHIJKLMNOPQRSTUVWXYZ"])
        self.assertTrue(result.is_empty)
        self.assertEqual(len(result.rejected), 1)

    def test_single_long_word_is_cropped_to_one_row(self) -> None:
        result = build_crossword(["supercalifragilistic"])
        self.assertEqual((result.width, result.height), (20, 1))
        self.assertEqual(len(result.clues), 1)
        clue = result.clues[0]
        self.assertEqual((clue.x, clue.y, clue.number), (0, 0, 1))
        self.assertEqual(clue.direction, Direction.ACROSS)
        first = result.grid[0][0]
        assert first is not None
        self.assertTrue(first.is_word_start)
        self.assertEqual(first.clue_number, 1)
        self.assertEqual("".join(cell.solution for cell in result.grid[0]), "SUPERCALIFRAGILISTIC")

    def test_words_without_shared_letters_are_dropped(self) -> None:
        result = build_crossword(["CAT", "DOG", "GO"])
        self.assertEqual([clue.word for clue in result.clues], ["CAT"])
        self.assertEqual(result.unplaced, ["DOG", "GO"])
        self.assertEqual((result.width, result.height), (3, 1))

    def test_crossing_layout_and_numbering(self) -> None:
        result = build_crossword(["dog", " go "])
        self.assertEqual((result.width, result.height), (3, 2))
        go, dog = result.clues
        self.assertEqual((go.word, go.direction, go.x, go.y, go.number), ("GO", Direction.DOWN, 1, 0, 1))
        self.assertEqual((dog.word, dog.direction, dog.x, dog.y, dog.number), ("DOG", Direction.ACROSS, 0, 1, 2))

        self.assertIsNone(result.grid[0][0])
        self.assertIsNone(result.grid[0][2])
        top = result.grid[0][1]
        assert top is not None
        self.assertEqual((top.solution, top.is_word_start, top.clue_number), ("G", True, 1))
        row = [result.grid[1][x] for x in range(3)]
        self.assertEqual([cell.solution for cell in row if cell], ["D", "O", "G"])
        self.assertEqual([cell.clue_number for cell in row if cell], [2, None, None])
        self.assertEqual([cell.is_word_start for cell in row if cell], [True, False, False])

    def test_shared_origin_shares_number(self) -> None:
        result = build_crossword(["CAT", "COW"])
        self.assertEqual((result.width, result.height), (3, 3))
        self.assertEqual([c.word for c in result.clues], ["CAT", "COW"])
        self.assertEqual([c.number for c in result.clues], [1, 1])
        self.assertEqual([c.direction for c in result.clues], [Direction.ACROSS, Direction.DOWN])
        origin = result.grid[0][0]
        assert origin is not None
        self.assertEqual(origin.clue_number, 1)
        self.assertEqual(result.grid[2][0].solution, "W")
        self.assertIsNone(result.grid[1][1])

    def test_equal_lengths_keep_input_order(self) -> None:
        result = build_crossword(["COW", "CAT"])
        by_word = {clue.word: clue for clue in result.clues}
        self.assertEqual(by_word["COW"].direction, Direction.ACROSS)
        self.assertEqual(by_word["CAT"].direction, Direction.DOWN)

    def test_longest_word_is_placed_first(self) -> None:
        self.assertEqual(
            build_crossword(["GO", "DOG"]).to_jsonable(),
            build_crossword(["DOG", "GO"]).to_jsonable(),
        )

    def test_build_is_deterministic(self) -> None:
        first = build_crossword(SPACE_WORDS)
        second = build_crossword(SPACE_WORDS)
        self.assertEqual(first.to_jsonable(), second.to_jsonable())

    def test_larger_build_passes_validation(self) -> None:
        result = build_crossword(SPACE_WORDS)
        self.assertGreater(len(result.clues), 3)
        self.assertEqual(len(result.clues) + len(result.unplaced), len(SPACE_WORDS))
        validation = GridValidator().validate(result)
        self.assertTrue(validation.ok, validation.messages)

    def test_numbers_are_gapless_in_reading_order(self) -> None:
        result = build_crossword(SPACE_WORDS)
        numbers = [clue.number for clue in result.clues]
        self.assertEqual(numbers, sorted(numbers))
        self.assertEqual(sorted(set(numbers)), list(range(1, max(numbers) + 1)))

    def test_custom_canvas_size(self) -> None:
        builder = CrosswordBuilder(BuilderConfig(canvas_size=5))
        result = builder.build(["ROCKET", "ORB"])
        self.assertEqual([clue.word for clue in result.clues], ["ORB"])
        self.assertEqual(result.rejected, ["ROCKET"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
