"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from maxutility.core.path_finder import PathResult
from maxutility.core.state import State


def format_contribution(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def format_state(state: State, *, highlight: bool = False) -> str:
    text = f"{escape(state.label)} [dim]({format_contribution(state.contribution)})[/dim]"
    return f"[bold green]{text}[/bold green]" if highlight else text


def build_tree_view(root: State, title: str, path: Optional[Iterable[State]] = None) -> Tree:
    """Render a decision tree; states on ``path`` are highlighted."""
    on_path = {id(state) for state in path or ()}
    view = Tree(f"[bold]{escape(title)}[/bold]")
    stack = [(root, view)]
    while stack:
        state, branch = stack.pop()
        node = branch.add(format_state(state, highlight=id(state) in on_path))
        # reversed so children are added in order when popped
        for child in reversed(state.children):
            stack.append((child, node))
    return view


def build_path_table(result: PathResult) -> Table:
    table = Table(title="Max Utility Path")
    table.add_column("Step", justify="right")
    table.add_column("State")
    table.add_column("Contribution", justify="right")
    table.add_column("Cumulative", justify="right")
    for index, row in enumerate(result.steps()):
        table.add_row(
            str(index),
            escape(row["label"]),
            format_contribution(row["contribution"]),
            str(row["cumulative"]),
        )
    return table


__all__ = [
    "format_contribution",
    "format_state",
    "build_tree_view",
    "build_path_table",
]
