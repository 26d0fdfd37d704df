"""Maximum utility path planning over decision trees."""

from maxutility.core import (
    InvalidTreeError,
    MaxUtilityError,
    MaxUtilityPathFinder,
    NoLeafError,
    PathResult,
    State,
    find_max_utility_path,
)

__version__ = "0.1.0"

__all__ = [
    "State",
    "MaxUtilityPathFinder",
    "PathResult",
    "find_max_utility_path",
    "MaxUtilityError",
    "InvalidTreeError",
    "NoLeafError",
]
