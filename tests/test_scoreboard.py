import unittest

from match_scorer.match import MatchScorer
from match_scorer.scoreboard import SCORE_LABELS, Scoreboard


class TestScoreboard(unittest.TestCase):
    """Tests for the formatting of games and of the current game."""

    def setUp(self):
        self.scoreboard = Scoreboard()

    def _format(self, games, points):
        return self.scoreboard.format_score(MatchScorer("Player A", "Player B", games, points))

    def test_labels_are_fixed(self):
        self.assertEqual(SCORE_LABELS, ("0", "15", "30", "40", "Advantage"))
        with self.assertRaises(TypeError):
            SCORE_LABELS[0] = "love"

    def test_regular_scores(self):
        self.assertEqual(self._format((0, 0), (0, 0)), "0-0 0-0")
        self.assertEqual(self._format((2, 3), (2, 1)), "2-3 30-15")
        self.assertEqual(self._format((4, 1), (0, 3)), "4-1 0-40")

    def test_deuce_and_advantage(self):
        self.assertEqual(self._format((1, 1), (3, 3)), "1-1 Deuce")
        self.assertEqual(self._format((1, 1), (4, 3)), "1-1 Advantage player one")
        self.assertEqual(self._format((1, 1), (3, 4)), "1-1 Advantage player two")

    def test_tiebreak_points_are_raw(self):
        self.assertEqual(self._format((6, 6), (3, 3)), "6-6 3-3")
        self.assertEqual(self._format((6, 6), (10, 9)), "6-6 10-9")

    def test_components(self):
        match = MatchScorer("Player A", "Player B", (5, 3), (1, 0))
        self.assertEqual(self.scoreboard.format_games(match), "5-3")
        self.assertEqual(self.scoreboard.format_game_score(match), "15-0")
        self.assertEqual(match.score(), self.scoreboard.format_score(match))


if __name__ == "__main__":
    unittest.main()
