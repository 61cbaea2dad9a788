import unittest

from lenormand_board.core import (
    Board, SpreadType, CARD_NAMES, card_name, house_for, draw_board, ascii_board,
    board_size, selectable_size,
)


class TestBoard(unittest.TestCase):
    def test_sizes(self):
        self.assertEqual(board_size(SpreadType.GRAND_TABLEAU), 36)
        self.assertEqual(board_size(SpreadType.CLOCK), 13)
        self.assertEqual(selectable_size(SpreadType.GRAND_TABLEAU), 36)
        self.assertEqual(selectable_size(SpreadType.CLOCK), 12)
        self.assertEqual(Board(SpreadType.CLOCK).cells, (None,) * 13)

    def test_place_moves_existing_card(self):
        b = Board(SpreadType.GRAND_TABLEAU)
        b.place(0, 24)
        b.place(5, 24)
        self.assertIsNone(b.card_at(0))
        self.assertEqual(b.card_at(5), 24)
        self.assertEqual(b.index_of(24), 5)
        self.assertEqual(list(b.occupied()), [(5, 24)])

    def test_place_rejects_bad_input(self):
        b = Board(SpreadType.CLOCK)
        with self.assertRaisesRegex(ValueError, "not on the board"):
            b.place(13, 1)
        with self.assertRaisesRegex(ValueError, "Bad card id"):
            b.place(0, 37)
        with self.assertRaisesRegex(ValueError, "Bad card id"):
            b.place(0, 0)
        self.assertTrue(b.is_empty())

    def test_card_at_off_board_is_none(self):
        b = draw_board(SpreadType.GRAND_TABLEAU, rng_seed=3)
        self.assertIsNone(b.card_at(36))
        self.assertIsNone(b.card_at(-1))

    def test_constructor_validation(self):
        with self.assertRaises(ValueError):
            Board(SpreadType.CLOCK, [1, 2, 3])
        with self.assertRaises(ValueError):
            Board(SpreadType.CLOCK, [1, 1] + [None] * 11)
        with self.assertRaises(ValueError):
            Board(SpreadType.CLOCK, [99] + [None] * 12)

    def test_remove_and_clear(self):
        b = Board(SpreadType.CLOCK, list(range(1, 14)))
        b.remove(0)
        self.assertIsNone(b.card_at(0))
        b.clear()
        self.assertTrue(b.is_empty())


class TestDraw(unittest.TestCase):
    def test_draw_is_reproducible_and_unique(self):
        a = draw_board(SpreadType.GRAND_TABLEAU, rng_seed=1337)
        b = draw_board(SpreadType.GRAND_TABLEAU, rng_seed=1337)
        self.assertEqual(a, b)
        self.assertEqual(sorted(a.cells), list(range(1, 37)))

    def test_clock_draw_fills_center(self):
        b = draw_board(SpreadType.CLOCK, rng_seed=5)
        self.assertEqual(b.size, 13)
        self.assertIsNotNone(b.card_at(12))
        self.assertEqual(len(set(b.cells)), 13)

    def test_ascii_board(self):
        b = Board(SpreadType.GRAND_TABLEAU)
        b.place(0, 12)
        text = ascii_board(b, selected=0)
        lines = text.splitlines()
        self.assertEqual(len(lines), 6)
        self.assertTrue(lines[0].startswith("[12]"))

        clock = ascii_board(Board(SpreadType.CLOCK), selected=12)
        self.assertEqual(len(clock.splitlines()), 13)
        self.assertIn("ctr [ .]", clock)


class TestCards(unittest.TestCase):
    def test_names(self):
        self.assertEqual(len(CARD_NAMES), 36)
        self.assertEqual(card_name(1), "Rider")
        self.assertEqual(card_name(36), "Cross")
        self.assertEqual(card_name(None), "Empty")
        with self.assertLogs("lenormand.core.cards", level="WARNING"):
            self.assertEqual(card_name(40), "Unknown")

    def test_houses(self):
        self.assertEqual(house_for(SpreadType.GRAND_TABLEAU, 0), {"id": 1, "name": "Rider"})
        self.assertEqual(house_for(SpreadType.GRAND_TABLEAU, 35), {"id": 36, "name": "Cross"})
        self.assertEqual(house_for(SpreadType.CLOCK, 0), {"id": 101, "name": "January"})
        self.assertEqual(house_for(SpreadType.CLOCK, 12), {"id": 113, "name": "Center"})
        self.assertIsNone(house_for(SpreadType.CLOCK, 13))
        self.assertIsNone(house_for(SpreadType.GRAND_TABLEAU, -1))


if __name__ == "__main__":
    unittest.main()
