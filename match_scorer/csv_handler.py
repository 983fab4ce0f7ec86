import os
from typing import List

import pandas as pd

from match_scorer.config import CONFIG


class CSVHandler:
    """Reads the point-by-point log of a set from a CSV file."""

    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    def load_points(self) -> List[str]:
        """
        Loads the log and returns the winner code of each point, in order.
        Codes are validated against PLAYER_CODES.
        """
        if not os.path.exists(self.csv_path):
            raise FileNotFoundError(f"Point log not found: {self.csv_path}")

        winner_column = CONFIG["CSV_WINNER_COLUMN"]
        order_column = CONFIG["CSV_ORDER_COLUMN"]
        try:
            df = pd.read_csv(self.csv_path, sep=CONFIG["CSV_SEPARATOR"], dtype={winner_column: str})
        except pd.errors.EmptyDataError:
            print(f"Point log is empty: {self.csv_path}")
            return []

        if winner_column not in df.columns:
            raise ValueError(f"Column '{winner_column}' missing from {self.csv_path}")

        df = df.dropna(subset=[winner_column])
        if order_column in df.columns:
            df[order_column] = pd.to_numeric(df[order_column], errors="coerce")
            df = df.sort_values(by=order_column, kind="stable")

        codes = df[winner_column].str.strip().str.upper().tolist()
        print(f"Loaded {len(codes)} points from: {self.csv_path}")
        for code in codes:
            self.code_to_player(code)
        return codes

    @staticmethod
    def code_to_player(code: str) -> str:
        try:
            return CONFIG["PLAYER_CODES"][code.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown point winner code: {code!r}") from None
