"""
Maximum utility path search over a decision tree.

The search is a priority-driven relaxation in the style of Dijkstra's
algorithm, run as a longest-path computation:

    initialize  every state scores -inf, the root scores 0
    loop        pop the best-scoring state m; for each child c of m,
                remove c from the queue, relax it against m, push it back
    relax       if score[m] + c.contribution beats score[c], take it and
                record m as the parent of c
    extract     pick the best-scoring leaf, then follow parents to the root

Scores and parent links live in a side table owned by a single run. Once the
run completes they are copied onto the states (State.expected_utility and
State.parent) unless annotation is disabled.

Every state in a tree has exactly one parent, so each state is relaxed once,
after its parent was popped. Negative contributions therefore do not disturb
the result on trees.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict

from maxutility.core.errors import InvalidTreeError, NoLeafError
from maxutility.core.priority_queue import IndexedPriorityQueue
from maxutility.core.state import NEGATIVE_INFINITY, State

logger = logging.getLogger(__name__)


@dataclass
class _Score:
    """Per-run record for one state."""

    expected_utility: float = NEGATIVE_INFINITY
    parent: Optional[State] = None


class PathResult(BaseModel):
    """Outcome of a search: the optimal path and its utility."""

    path: List[State]
    total_utility: int
    explored: int = 0

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def root(self) -> State:
        return self.path[0]

    @property
    def leaf(self) -> State:
        return self.path[-1]

    def labels(self) -> List[str]:
        return [state.label for state in self.path]

    def steps(self) -> List[Dict[str, Any]]:
        """Per-state breakdown with running totals, root first."""
        rows: List[Dict[str, Any]] = []
        cumulative = 0
        for index, state in enumerate(self.path):
            # the root starts the path at zero
            if index > 0:
                cumulative += state.contribution
            rows.append(
                {
                    "label": state.label,
                    "contribution": state.contribution,
                    "cumulative": cumulative,
                }
            )
        return rows

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for YAML serialization."""
        return {
            "path": self.labels(),
            "total_utility": self.total_utility,
            "explored": self.explored,
            "steps": self.steps(),
        }


class MaxUtilityPathFinder:
    """
    Finds the root-to-leaf path with the highest cumulative utility.

    Args:
        annotate: Copy the final scores and parent links onto the states
    """

    def __init__(self, annotate: bool = True):
        self.annotate = annotate

    def find_max_utility_path(self, root: State) -> List[State]:
        """
        Return the decisions an agent should take to maximize utility.

        Args:
            root: Root of the decision tree

        Returns:
            States from root to the best leaf, root first

        Raises:
            InvalidTreeError: If root is missing or the structure is not a tree
            NoLeafError: If no leaf could be reached
        """
        return self.solve(root).path

    def solve(self, root: State) -> PathResult:
        """Run the search and return the path with its utility."""
        all_nodes = flatten_tree(root)
        scores = self._initialize(root, all_nodes)

        queue: IndexedPriorityQueue[State] = IndexedPriorityQueue()
        for state in all_nodes:
            queue.push(state, scores[state].expected_utility)

        visited: Set[State] = set()
        while queue:
            m = queue.pop()
            visited.add(m)
            logger.debug("Popped %s (score %s)", m.label, scores[m].expected_utility)

            for child in m.children:
                queue.remove(child)
                self._relax(scores, m, child)
                queue.push(child, scores[child].expected_utility)

        leaf = self._best_leaf(all_nodes, visited, scores)
        path = self._backtrack(leaf, scores)

        if self.annotate:
            for state, score in scores.items():
                state.expected_utility = score.expected_utility
                state.parent = score.parent

        total = int(scores[leaf].expected_utility)
        logger.info(
            "Best path over %d state(s) ends at %s with utility %d",
            len(all_nodes),
            leaf.label,
            total,
        )
        return PathResult(path=path, total_utility=total, explored=len(visited))

    # =========================================================================
    # Steps
    # =========================================================================

    @staticmethod
    def _initialize(root: State, all_nodes: List[State]) -> Dict[State, _Score]:
        scores = {state: _Score() for state in all_nodes}
        scores[root].expected_utility = 0
        return scores

    @staticmethod
    def _relax(scores: Dict[State, _Score], m: State, child: State) -> None:
        candidate = scores[m].expected_utility + child.contribution
        if scores[child].expected_utility < candidate:
            scores[child].expected_utility = candidate
            scores[child].parent = m

    @staticmethod
    def _best_leaf(
        all_nodes: List[State],
        visited: Set[State],
        scores: Dict[State, _Score],
    ) -> State:
        # pre-order scan: on ties the first leaf seen is kept
        best: Optional[State] = None
        for state in all_nodes:
            if state not in visited or not state.is_leaf:
                continue
            if best is None or scores[state].expected_utility > scores[best].expected_utility:
                best = state
        if best is None:
            raise NoLeafError("No leaf state was reached from the root")
        return best

    @staticmethod
    def _backtrack(leaf: State, scores: Dict[State, _Score]) -> List[State]:
        path: List[State] = []
        current: Optional[State] = leaf
        while current is not None:
            path.append(current)
            current = scores[current].parent
        path.reverse()
        return path


def flatten_tree(root: State) -> List[State]:
    """
    List every state reachable from root in pre-order.

    Raises:
        InvalidTreeError: If root is not a State, or a state is reachable
            more than once (a cycle or a child shared by two parents)
    """
    if root is None:
        raise InvalidTreeError("Root state is required")
    if not isinstance(root, State):
        raise InvalidTreeError(f"Root must be a State, got {type(root).__name__}")

    ordered: List[State] = []
    seen: Set[int] = set()
    stack: List[State] = [root]
    while stack:
        state = stack.pop()
        if id(state) in seen:
            raise InvalidTreeError(f"State '{state.label}' is reachable more than once; input is not a tree")
        seen.add(id(state))
        ordered.append(state)
        for child in reversed(state.children):
            if not isinstance(child, State):
                raise InvalidTreeError(f"Child of '{state.label}' is not a State: {child!r}")
            stack.append(child)
    return ordered


def find_max_utility_path(root: State) -> List[State]:
    """Shortcut for MaxUtilityPathFinder().find_max_utility_path(root)."""
    return MaxUtilityPathFinder().find_max_utility_path(root)


__all__ = ["MaxUtilityPathFinder", "PathResult", "find_max_utility_path", "flatten_tree"]
