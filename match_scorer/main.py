import argparse

from match_scorer.config import CONFIG
from match_scorer.csv_handler import CSVHandler
from match_scorer.match import MatchScorer


def build_parser():
    parser = argparse.ArgumentParser(description="Replays the points of a tennis set and prints the score.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--csv", dest="csv_path", help="Point log (';' separated) with a 'point_winner' column of A/B codes.")
    source.add_argument("--sequence", help="Point winners as a string of A/B codes, e.g. AABBA.")
    parser.add_argument("--player_one", default=CONFIG["DEFAULT_PLAYER_ONE"], help="Name of player one (code A).")
    parser.add_argument("--player_two", default=CONFIG["DEFAULT_PLAYER_TWO"], help="Name of player two (code B).")
    parser.add_argument("--games", type=int, nargs=2, metavar=("ONE", "TWO"), help="Games already won, to resume a set. A finished set (e.g. 6 4) starts as won.")
    parser.add_argument("--points", type=int, nargs=2, metavar=("ONE", "TWO"), help="Score of the game in progress, to resume a set.")
    return parser


def replay(match, codes):
    """Awards every point to the match, printing the score after each one."""
    for i, code in enumerate(codes):
        match.point_won_by(CSVHandler.code_to_player(code))
        print(f"{i + 1} {code} {match.score()}")
    return match


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.csv_path:
            codes = CSVHandler(args.csv_path).load_points()
        else:
            codes = [code for code in args.sequence.upper() if not code.isspace()]
            for code in codes:
                CSVHandler.code_to_player(code)

        match = MatchScorer(args.player_one, args.player_two, games_won=args.games, current_game_score=args.points)
        print(f"Start: {match.score()}")
        replay(match, codes)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Final score: {match.score()}")
    if match.match_won:
        print(f"Set won by {match.winner}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
