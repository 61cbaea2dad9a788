import unittest

from lenormand_board.api import ReadingEngine, narrative_context, relations_to_dict
from lenormand_board.core import Board, SpreadType
from lenormand_board.notation import parse_board


def _grid_board() -> Board:
    # card id = index + 1 for the 36 houses
    return Board(SpreadType.GRAND_TABLEAU, list(range(1, 37)))


def _clock_board() -> Board:
    return Board(SpreadType.CLOCK, list(range(1, 14)))


class TestReadingEngine(unittest.TestCase):
    def test_default_engine_draws_grand_tableau(self):
        eng = ReadingEngine(rng_seed=1337)
        state = eng.state()
        self.assertEqual(state["spread"], "mesa-real")
        self.assertEqual(state["size"], 36)
        self.assertEqual(state["mode"], "random")
        self.assertIsNone(state["selected"])
        self.assertEqual(len(state["cells"]), 36)
        self.assertTrue(all(c["highlight"] is None for c in state["cells"]))

    def test_select_sets_highlights(self):
        eng = ReadingEngine(board=_grid_board())
        state = eng.select(0)
        cells = state["cells"]
        self.assertTrue(cells[0]["selected"])
        self.assertEqual(cells[0]["highlight"], "frame")
        self.assertEqual(cells[17]["highlight"], "knight")
        self.assertEqual(cells[9]["highlight"], "diag-down")
        self.assertEqual(eng.highlights()[10], "knight")

    def test_select_rejects_off_board(self):
        eng = ReadingEngine(SpreadType.CLOCK, rng_seed=1)
        with self.assertRaisesRegex(ValueError, "not on the board"):
            eng.select(13)
        with self.assertRaisesRegex(ValueError, "not on the board"):
            eng.select(-1)
        self.assertIsNone(eng.select(None)["selected"])

    def test_place_advances_selection(self):
        eng = ReadingEngine("relogio", rng_seed=2)
        eng.clear_board()
        eng.select(11)
        state = eng.place(5)
        self.assertEqual(state["mode"], "manual")
        self.assertEqual(eng.board.card_at(11), 5)
        # clock entry wraps around the ring, skipping the center
        self.assertEqual(state["selected"], 0)

        eng.place(5, index=3)
        self.assertIsNone(eng.board.card_at(11))
        self.assertEqual(eng.board.card_at(3), 5)
        self.assertEqual(eng.selected, 4)

    def test_place_without_selection(self):
        eng = ReadingEngine(rng_seed=2)
        eng.clear_board()
        with self.assertRaisesRegex(ValueError, "No house selected"):
            eng.place(1)

    def test_switch_spread_and_load(self):
        eng = ReadingEngine(rng_seed=4)
        eng.select(3)
        state = eng.switch_spread("relogio", rng_seed=4)
        self.assertEqual(state["size"], 13)
        self.assertIsNone(state["selected"])

        state = eng.load("mesa-real:" + ",".join(str(i) for i in range(1, 37)))
        self.assertEqual(state["spread"], "mesa-real")
        self.assertEqual(eng.board, _grid_board())

    def test_draw_reproducible(self):
        a = ReadingEngine(rng_seed=9).state()["notation"]
        eng = ReadingEngine(rng_seed=1)
        self.assertEqual(eng.draw(9)["notation"], a)

    def test_board_spread_mismatch(self):
        with self.assertRaises(ValueError):
            ReadingEngine("mesa-real", board=_clock_board())


class TestRelations(unittest.TestCase):
    def test_grid_relations_resolve_cards(self):
        rel = relations_to_dict(_grid_board(), 13)
        self.assertEqual([c["index"] for c in rel["mirrors"]], [10, 21, 18])
        self.assertEqual([c["card_id"] for c in rel["mirrors"]], [11, 22, 19])
        self.assertEqual(rel["horizontal_mirror"]["index"], 10)
        self.assertEqual(rel["mirrors"][0]["house"], {"id": 11, "name": "Whip"})
        self.assertEqual([c["index"] for c in rel["diagonal_upper"]], [4, 6])

    def test_clock_relations(self):
        rel = relations_to_dict(_clock_board(), 1)
        self.assertEqual(rel["opposite"]["index"], 7)
        self.assertEqual(rel["axis"], "Social axis")
        self.assertEqual(rel["center"]["card_id"], 13)

        center = relations_to_dict(_clock_board(), 12)
        self.assertIsNone(center["opposite"])
        self.assertIsNone(center["axis"])

    def test_engine_relations_requires_selection(self):
        eng = ReadingEngine(rng_seed=1)
        with self.assertRaises(ValueError):
            eng.relations()


class TestNarrativeContext(unittest.TestCase):
    def test_grand_tableau_context(self):
        ctx = narrative_context(_grid_board(), 0, theme="Love", level="Advanced")
        self.assertEqual(ctx["spread_type"], "mesa-real")
        self.assertEqual(ctx["theme"], "Love")
        self.assertEqual(ctx["level"], "Advanced")
        self.assertEqual(ctx["selected"]["card"], "Rider")
        self.assertEqual(ctx["selected"]["house"], "Rider")
        geo = ctx["geometries"]
        self.assertEqual(geo["frame"], ["Rider", "Coffin", "Ring", "Moon"])
        self.assertEqual(geo["mirror_horizontal"], "Coffin")
        self.assertEqual(geo["knight"], ["Dog", "Whip"])
        self.assertEqual(geo["verdict"], ["Key", "Fish", "Anchor", "Cross"])
        self.assertEqual(geo["diagonal_upper_ascending"], [])
        self.assertEqual(geo["diagonal_lower_descending"], ["Scythe"])

    def test_verdict_selection_reflects_onto_itself(self):
        ctx = narrative_context(_grid_board(), 33)
        geo = ctx["geometries"]
        self.assertEqual(geo["mirror_horizontal"], "Fish")
        self.assertEqual(geo["mirrors"], [])
        self.assertEqual(geo["knight"], [])

    def test_clock_context(self):
        ctx = narrative_context(_clock_board(), 2)
        self.assertEqual(ctx["selected"]["house"], "March")
        self.assertEqual(ctx["selected"]["house_id"], 103)
        self.assertEqual(ctx["geometries"], {
            "opposite": "Bouquet",
            "axis": "Expansion/Vision axis",
            "center_regulator": "Child",
        })

    def test_clock_center_context_has_no_opposite(self):
        ctx = narrative_context(_clock_board(), 12)
        self.assertIsNone(ctx["geometries"]["opposite"])
        self.assertIsNone(ctx["geometries"]["axis"])

    def test_empty_or_missing_selection(self):
        b = parse_board("relogio:" + ",".join(["-"] * 13))
        with self.assertRaisesRegex(ValueError, "occupied"):
            narrative_context(b, 0)
        with self.assertRaisesRegex(ValueError, "No house selected"):
            narrative_context(b, None)
        with self.assertRaisesRegex(ValueError, "not on the board"):
            narrative_context(b, 20)


if __name__ == "__main__":
    unittest.main()
