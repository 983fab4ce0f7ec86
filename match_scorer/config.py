CONFIG = {
    # --- RULES ---
    "GAMES_TO_WIN_SET": 6,
    "TIEBREAK_AT_GAMES": 6,  # both players on this many games
    "TIEBREAK_POINTS_TO_WIN": 7,
    "MIN_WINNING_MARGIN": 2,
    "SET_DECIDED_AT_GAMES": 7,

    # --- PLAYERS ---
    "DEFAULT_PLAYER_ONE": "Player A",
    "DEFAULT_PLAYER_TWO": "Player B",

    # --- POINT LOG ---
    "CSV_SEPARATOR": ";",
    "CSV_WINNER_COLUMN": "point_winner",
    "CSV_ORDER_COLUMN": "point_id",
    "PLAYER_CODES": {
        "A": "player one",
        "B": "player two",
    },
}
