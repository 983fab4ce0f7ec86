from match_scorer.exceptions import InvalidMatchError, UnknownPlayerError
from match_scorer.match import MatchScorer, Player, ScoringMode
from match_scorer.scoreboard import Scoreboard

__all__ = [
    "InvalidMatchError",
    "MatchScorer",
    "Player",
    "Scoreboard",
    "ScoringMode",
    "UnknownPlayerError",
]
