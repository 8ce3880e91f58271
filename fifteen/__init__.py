"""Game of Fifteen, generalized to a d x d board."""

from fifteen.fifteenGame import Board, DimensionError, FifteenError, Snapshot

__all__ = ["Board", "DimensionError", "FifteenError", "Snapshot"]
