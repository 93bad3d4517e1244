import os
import sys
import unittest

from game import STAGES, Stage, get_stages, stage_by_number

TOOLS = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "tools")
if TOOLS not in sys.path:
    sys.path.insert(0, TOOLS)

import check_stages  # noqa: E402


class TestStageCatalog(unittest.TestCase):
    def test_given_catalog_when_built_then_one_fresh_game_per_stage_in_order(self):
        games = get_stages()
        self.assertEqual([g.stage_name for g in games], [s.name for s in STAGES])
        for g in games:
            self.assertEqual(g.turn, 1)
            self.assertEqual(g.ledger, [])
            self.assertFalse(g.stage_complete())
        self.assertIsNot(get_stages()[0].stacks[0], games[0].stacks[0])

    def test_given_catalog_when_checked_then_every_kind_fills_exactly_one_stack(self):
        for stage in STAGES:
            g = stage.build()
            self.assertTrue(all(n == stage.capacity for n in g.units_per_kind.values()), stage.name)
            self.assertGreaterEqual(len(g.stacks), g.num_kinds, stage.name)

    def test_given_stage_numbers_when_looking_up_then_one_based_and_bounded(self):
        self.assertIs(stage_by_number(1), STAGES[0])
        self.assertIs(stage_by_number(len(STAGES)), STAGES[-1])
        for bad in (0, len(STAGES) + 1, -1):
            with self.assertRaises(ValueError):
                stage_by_number(bad)

    def test_given_bad_layouts_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            Stage('Empty', 3, ()).build()
        with self.assertRaises(ValueError):
            Stage('Overfull', 2, ('AAA', '')).build()


class TestStageSolvability(unittest.TestCase):
    def test_given_warm_up_when_searched_then_three_move_solution_at_turn_three(self):
        moves, final, _ = check_stages.shortest_solution(stage_by_number(1).build())
        self.assertIsNotNone(moves)
        self.assertEqual(len(moves), 3)
        self.assertTrue(final.stage_complete())
        self.assertEqual(final.turn, 3)

    def test_given_small_stages_when_searched_then_solvable(self):
        report = check_stages.check([1, 2, 3], max_states=200_000)
        for row in report:
            self.assertTrue(row["solvable"], row["name"])

    def test_given_solution_when_replayed_then_stage_completes(self):
        moves, _, _ = check_stages.shortest_solution(stage_by_number(3).build())
        g = stage_by_number(3).build()
        for source, dest in moves:
            self.assertTrue(g.move_legally(source, dest))
        self.assertTrue(g.stage_complete())
        self.assertEqual(g.turn, len(moves))


if __name__ == '__main__':
    unittest.main(verbosity=2)
