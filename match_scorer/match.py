from collections.abc import Mapping
from enum import Enum

from match_scorer.config import CONFIG
from match_scorer.exceptions import InvalidMatchError, UnknownPlayerError
from match_scorer.scoreboard import Scoreboard


class Player(str, Enum):
    ONE = "player one"
    TWO = "player two"

    @property
    def index(self):
        return 0 if self is Player.ONE else 1

    @property
    def opponent(self):
        return Player.TWO if self is Player.ONE else Player.ONE


class ScoringMode(str, Enum):
    REGULAR = "REGULAR"
    TIEBREAK = "TIEBREAK"


def _seed_scores(values, field_name):
    """
    Builds the two-slot score list for a snapshot given either as a mapping
    keyed by Player (or its label) or as a two-item sequence.
    """
    if values is None:
        return [0, 0]

    if isinstance(values, Mapping):
        scores = [0, 0]
        for key, score in values.items():
            try:
                scores[Player(key).index] = score
            except ValueError:
                raise InvalidMatchError(f"{field_name} has an unknown player: {key!r}") from None
    else:
        scores = list(values)
        if len(scores) != 2:
            raise InvalidMatchError(f"{field_name} needs exactly two entries, got {len(scores)}")

    for score in scores:
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise InvalidMatchError(f"{field_name} must hold non-negative integers, got {score!r}")
    return scores


class MatchScorer:
    """
    Keeps the score of a single set of tennis: points in the current game,
    games won, and the switch into tie-break scoring at 6-6.

    A set interrupted halfway can be resumed by passing the games_won and
    current_game_score read from a previous instance (see snapshot()).
    """

    def __init__(self, player_one=None, player_two=None, games_won=None, current_game_score=None):
        if not player_one or not player_two:
            raise InvalidMatchError("A tennis match needs two players")
        if player_one == player_two:
            raise InvalidMatchError(f"Both players are named {player_one!r}")
        # a name may not be the label of the other slot
        if player_one == Player.TWO.value or player_two == Player.ONE.value:
            raise InvalidMatchError(f"Player names {player_one!r} and {player_two!r} clash with the player labels")

        self.players = (player_one, player_two)
        self.games_won = _seed_scores(games_won, "games_won")
        self.current_game_score = _seed_scores(current_game_score, "current_game_score")
        self.scoring_mode = self._current_scoring_mode()
        if not self.is_tiebreak:
            self._check_regular_game_score()
        self.match_won = False
        self.winner = None
        self.scoreboard = Scoreboard()

        # a snapshot of a finished set is already won
        seeded_winner = self._seeded_set_winner()
        if seeded_winner is not None:
            self._win_set(seeded_winner)

    def _check_regular_game_score(self):
        """Rejects game scores the regular calculator cannot move on from."""
        points_one, points_two = self.current_game_score
        if max(points_one, points_two) > 4:
            raise InvalidMatchError(f"current_game_score out of range for a regular game: {self.current_game_score}")
        # advantage is only held against 40
        if (points_one == 4 and points_two != 3) or (points_two == 4 and points_one != 3):
            raise InvalidMatchError(f"current_game_score has an impossible advantage: {self.current_game_score}")

    def _seeded_set_winner(self):
        games_one, games_two = self.games_won
        if games_one == games_two:
            return None
        leader = Player.ONE if games_one > games_two else Player.TWO
        max_games = max(self.games_won)

        if max_games == CONFIG["SET_DECIDED_AT_GAMES"]:
            return leader
        if max_games == CONFIG["GAMES_TO_WIN_SET"] and abs(games_one - games_two) >= CONFIG["MIN_WINNING_MARGIN"]:
            return leader
        return None

    @property
    def is_tiebreak(self):
        return self.scoring_mode is ScoringMode.TIEBREAK

    def _current_scoring_mode(self):
        tiebreak_at = CONFIG["TIEBREAK_AT_GAMES"]
        if self.games_won[0] == tiebreak_at and self.games_won[1] == tiebreak_at:
            return ScoringMode.TIEBREAK
        return ScoringMode.REGULAR

    def _resolve_player(self, player):
        if isinstance(player, Player):
            return player
        try:
            return Player(player)
        except ValueError:
            pass
        if player == self.players[0]:
            return Player.ONE
        if player == self.players[1]:
            return Player.TWO
        raise UnknownPlayerError(player)

    def point_won_by(self, player):
        """Awards a point and moves the game, set and scoring mode along."""
        scorer = self._resolve_player(player)
        opponent = scorer.opponent

        self.scoring_mode = self._current_scoring_mode()
        if self.is_tiebreak:
            game_won = self._handle_tiebreak_point(scorer)
        else:
            game_won = self._handle_regular_point(scorer, opponent)

        if game_won:
            self._win_game(scorer)

    def _handle_regular_point(self, scorer, opponent):
        """Returns True when the point wins the game."""
        score = self.current_game_score
        s, o = score[scorer.index], score[opponent.index]

        if s >= 3 and o >= 3:
            if s == 4 and o == 3:
                score[scorer.index] += 1
                return True
            if s == 3 and o == 3:
                score[scorer.index] += 1
            elif s == 3 and o == 4:
                # back to deuce
                score[opponent.index] -= 1
            return False

        if s == 3:
            return True

        score[scorer.index] += 1
        return False

    def _handle_tiebreak_point(self, scorer):
        """Returns True when the point wins the tie-break."""
        score = self.current_game_score
        score[scorer.index] += 1

        if max(score) < CONFIG["TIEBREAK_POINTS_TO_WIN"]:
            return False
        return abs(score[0] - score[1]) >= CONFIG["MIN_WINNING_MARGIN"]

    def _win_game(self, scorer):
        self.games_won[scorer.index] += 1
        max_games = max(self.games_won)

        if max_games == CONFIG["GAMES_TO_WIN_SET"] and not self.is_tiebreak:
            if abs(self.games_won[0] - self.games_won[1]) >= CONFIG["MIN_WINNING_MARGIN"]:
                self._win_set(scorer)
        elif max_games == CONFIG["SET_DECIDED_AT_GAMES"]:
            self._win_set(scorer)

        self.current_game_score[0] = 0
        self.current_game_score[1] = 0

    def _win_set(self, scorer):
        if self.match_won:
            return
        self.match_won = True
        self.winner = self.players[scorer.index]

    def score(self):
        return self.scoreboard.format_score(self)

    def snapshot(self):
        """Returns games and current game score keyed by player label."""
        return {
            "games_won": {player.value: self.games_won[player.index] for player in Player},
            "current_game_score": {
                player.value: self.current_game_score[player.index] for player in Player
            },
        }
