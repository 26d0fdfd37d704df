"""
Core decision tree model and search.

Components:
- State: Node of a decision tree with a fixed utility contribution
- IndexedPriorityQueue: Max-heap with removal by identity
- MaxUtilityPathFinder: Finds the root-to-leaf path of highest utility
- PathResult: The path found and its total utility

Example:
    from maxutility.core import State, find_max_utility_path

    root = State("root", outcomes=[0])
    a = State("a", root, [5])
    State("leaf", a, [3])
    State("b", root, [2])

    path = find_max_utility_path(root)  # [root, a, leaf]
"""

from maxutility.core.enumeration import best_path_by_enumeration, iter_root_to_leaf_paths, path_utility
from maxutility.core.errors import InvalidTreeError, MaxUtilityError, NoLeafError
from maxutility.core.path_finder import MaxUtilityPathFinder, PathResult, find_max_utility_path, flatten_tree
from maxutility.core.priority_queue import IndexedPriorityQueue
from maxutility.core.state import State

__all__ = [
    "State",
    "IndexedPriorityQueue",
    "MaxUtilityPathFinder",
    "PathResult",
    "find_max_utility_path",
    "flatten_tree",
    "iter_root_to_leaf_paths",
    "path_utility",
    "best_path_by_enumeration",
    "MaxUtilityError",
    "InvalidTreeError",
    "NoLeafError",
]
