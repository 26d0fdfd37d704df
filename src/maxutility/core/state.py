"""
Decision tree state.

A State is one decision point in a tree:
- label: identifying text, used for display only
- contribution: fixed sum of the state's outcome values
- children: the states reachable by one further decision

Two fields belong to the path finder rather than to the tree itself:
- expected_utility: best cumulative utility found for reaching this state
- parent: the predecessor that yields that utility (a back-reference only)

Equality and hashing are by identity. Two states with the same label and
outcomes are still distinct decision points.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Set, Tuple

NEGATIVE_INFINITY = float("-inf")


class State:
    """A node in a decision tree."""

    __slots__ = ("label", "_outcomes", "_contribution", "children", "expected_utility", "parent")

    def __init__(
        self,
        label: str,
        parent: Optional[State] = None,
        outcomes: Iterable[int] = (),
    ):
        self.label = label
        self._outcomes: Tuple[int, ...] = tuple(outcomes)
        self._contribution = sum(self._outcomes)
        self.children: List[State] = []
        self.expected_utility: float = NEGATIVE_INFINITY
        self.parent: Optional[State] = None

        if parent is not None:
            parent.add_child(self)

    @property
    def outcomes(self) -> Tuple[int, ...]:
        return self._outcomes

    @property
    def contribution(self) -> int:
        """Sum of the outcome values, fixed at construction."""
        return self._contribution

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def add_child(self, child: State) -> State:
        """Append a child and point its back-reference at this state."""
        self.children.append(child)
        child.parent = self
        return child

    def reset(self) -> None:
        """Clear the fields written by the path finder."""
        self.expected_utility = NEGATIVE_INFINITY
        self.parent = None

    def iter_subtree(self) -> Iterator[State]:
        """
        Yield every state reachable from this one in pre-order.

        A state reachable along more than one route is yielded once.
        """
        seen: Set[int] = set()
        stack: List[State] = [self]
        while stack:
            state = stack.pop()
            if id(state) in seen:
                continue
            seen.add(id(state))
            yield state
            stack.extend(reversed(state.children))

    def all_reachable_nodes(self) -> Set[State]:
        return set(self.iter_subtree())

    def __repr__(self) -> str:
        return f"State({self.label!r}, contribution={self._contribution}, children={len(self.children)})"


__all__ = ["State", "NEGATIVE_INFINITY"]
