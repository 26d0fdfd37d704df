from __future__ import annotations

"""Shared helpers for loading decision trees with CLI-friendly errors."""

import typer
from rich.console import Console

from maxutility.cli.paths import find_tree_file
from maxutility.io import DecisionTree, LoaderError, load_tree


def load_or_exit(
    name_or_path: str,
    *,
    console: Console,
    verbose_errors: bool = False,
) -> DecisionTree:
    try:
        resolved = find_tree_file(name_or_path)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)
    try:
        return load_tree(resolved)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load tree:[/red] {err.message}\n{err.cause}")
        else:
            console.print(f"[red]Failed to load tree:[/red] {err}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
