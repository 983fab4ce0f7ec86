class InvalidMatchError(ValueError):
    """Raised when a match cannot be built from the given players or snapshot."""


class UnknownPlayerError(ValueError):
    """Raised when a point is awarded to someone who is not playing the match."""

    def __init__(self, player):
        super().__init__(f"Unknown player: {player!r}")
        self.player = player
