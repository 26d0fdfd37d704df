"""
Shared fixtures for decision tree tests.
"""

import random
from pathlib import Path

import pytest

from maxutility.core.state import State

REPO_ROOT = Path(__file__).resolve().parent.parent


def build_random_tree(seed: int, size: int = 15, low: int = -10, high: int = 10) -> State:
    """Build a random tree by attaching each new state to an existing one."""
    rng = random.Random(seed)
    root = State("s0", outcomes=[0])
    states = [root]
    for index in range(1, size):
        parent = rng.choice(states)
        outcomes = [rng.randint(low, high) for _ in range(rng.randint(1, 3))]
        states.append(State(f"s{index}", parent, outcomes))
    return root


@pytest.fixture
def errand_tree() -> State:
    """root(0) -> A(5) -> leaf(3), root(0) -> B(2)."""
    root = State("root", outcomes=[0])
    a = State("A", root, [5])
    State("leaf", a, [3])
    State("B", root, [2])
    return root


@pytest.fixture
def kb_trees_dir() -> Path:
    return REPO_ROOT / "kb" / "trees"


@pytest.fixture
def random_tree():
    """Factory for reproducible random trees."""
    return build_random_tree
