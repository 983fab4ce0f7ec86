# Index is the regular-game score held for a player, 4 being advantage
SCORE_LABELS = ("0", "15", "30", "40", "Advantage")

SPECIAL_SCORES = {
    "40-40": "Deuce",
    "Advantage-40": "Advantage player one",
    "40-Advantage": "Advantage player two",
}


class Scoreboard:
    """
    Formats the state of a MatchScorer as a score string.
    It is a presenter and holds no state of its own.
    """

    def format_games(self, match):
        games_one, games_two = match.games_won
        return f"{games_one}-{games_two}"

    def format_game_score(self, match):
        """
        Renders the current game. Tie-break points are shown raw, regular
        points go through SCORE_LABELS with the deuce/advantage rewrites.
        """
        points_one, points_two = match.current_game_score

        if match.is_tiebreak:
            return f"{points_one}-{points_two}"

        game_score = f"{SCORE_LABELS[points_one]}-{SCORE_LABELS[points_two]}"
        return SPECIAL_SCORES.get(game_score, game_score)

    def format_score(self, match):
        return f"{self.format_games(match)} {self.format_game_score(match)}"
