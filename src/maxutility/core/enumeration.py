"""Exhaustive root-to-leaf enumeration, used to cross-check the search."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from maxutility.core.path_finder import flatten_tree
from maxutility.core.state import State


def iter_root_to_leaf_paths(root: State) -> Iterator[List[State]]:
    """Yield every root-to-leaf path in pre-order of the leaves."""
    flatten_tree(root)
    stack: List[List[State]] = [[root]]
    while stack:
        path = stack.pop()
        tail = path[-1]
        if tail.is_leaf:
            yield path
            continue
        for child in reversed(tail.children):
            stack.append(path + [child])


def path_utility(path: List[State]) -> int:
    """Cumulative utility of a path; the root only marks the starting point."""
    return sum(state.contribution for state in path[1:])


def best_path_by_enumeration(root: State) -> Tuple[List[State], int]:
    best: Optional[List[State]] = None
    best_utility = 0
    for path in iter_root_to_leaf_paths(root):
        utility = path_utility(path)
        if best is None or utility > best_utility:
            best, best_utility = path, utility
    assert best is not None  # a finite tree always has a leaf
    return best, best_utility


__all__ = ["iter_root_to_leaf_paths", "path_utility", "best_path_by_enumeration"]
