from __future__ import annotations

"""Schema definitions for decision tree YAML files."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from maxutility.core.state import State


class StateSpec(BaseModel):
    label: str
    outcomes: List[int] = Field(default_factory=list)
    children: List["StateSpec"] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("label")
    @classmethod
    def _strip_label(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("label must not be empty")
        return value

    @field_validator("outcomes", mode="before")
    @classmethod
    def _parse_outcomes(cls, value: Any) -> Any:
        if value is None:
            return []
        # a bare number is shorthand for a single outcome
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return [value]
        return value

    @field_validator("children", mode="before")
    @classmethod
    def _parse_children(cls, value: Any) -> Any:
        return [] if value is None else value

    def build(self, parent: Optional[State] = None) -> State:
        """Build this state and its subtree, returning the new state."""
        root = State(self.label, parent, self.outcomes)
        pending = [(root, child) for child in self.children]
        while pending:
            owner, spec = pending.pop(0)
            state = State(spec.label, owner, spec.outcomes)
            pending.extend((state, child) for child in spec.children)
        return root


class DecisionTreeFileSpec(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    root: StateSpec

    model_config = ConfigDict(extra="allow")

    def build(self, default_name: str) -> "DecisionTree":
        return DecisionTree(
            name=(self.name or default_name).strip(),
            description=self.description,
            root=self.root.build(),
        )


class DecisionTree(BaseModel):
    """A named decision tree loaded from a file."""

    name: str
    description: Optional[str] = None
    root: State

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def states(self) -> List[State]:
        return list(self.root.iter_subtree())

    def leaves(self) -> List[State]:
        return [state for state in self.root.iter_subtree() if state.is_leaf]

    def depth(self) -> int:
        """Number of states on the longest root-to-leaf path."""
        deepest = 0
        stack = [(self.root, 1)]
        while stack:
            state, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in state.children)
        return deepest

    def statistics(self) -> Dict[str, int]:
        return {
            "states": len(self.states()),
            "leaves": len(self.leaves()),
            "depth": self.depth(),
        }


__all__ = ["StateSpec", "DecisionTreeFileSpec", "DecisionTree"]
