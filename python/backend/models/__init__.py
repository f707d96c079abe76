from backend.models.board import GOAL, Board, Direction
from backend.models.errors import (
    InvalidConfiguration,
    NoPathFound,
    NoSolutionPossible,
    PuzzleError,
    SearchLimitExceeded,
)

__all__ = [
    "GOAL",
    "Board",
    "Direction",
    "InvalidConfiguration",
    "NoPathFound",
    "NoSolutionPossible",
    "PuzzleError",
    "SearchLimitExceeded",
]
