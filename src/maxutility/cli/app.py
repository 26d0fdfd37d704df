"""
Max utility CLI: validate decision trees, inspect them, and solve for the best path.

Trees are YAML files. Bare names resolve to kb/trees/<name>.yaml and plans are
written to outputs/plans/.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from maxutility.cli.formatters import build_path_table, build_tree_view
from maxutility.cli.load_helpers import load_or_exit
from maxutility.cli.paths import kb_trees_path, resolve_plan_path
from maxutility.core import MaxUtilityError, MaxUtilityPathFinder, best_path_by_enumeration
from maxutility.io import LoaderError, load_tree, save_result_to_yaml
from maxutility.utils.logging import configure_logging

app = typer.Typer(help="Max utility CLI: validate decision trees, inspect them, and solve for the best path.")
console = Console()


@app.command()
def validate(
    path: str | None = typer.Argument(None, help="Tree file or folder (defaults to kb/trees)"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Validate one decision tree file or every file in a folder."""
    target = Path(kb_trees_path(path))
    if not target.exists():
        console.print(f"[red]Path not found:[/red] {target}")
        raise typer.Exit(code=1)

    files = [target] if target.is_file() else sorted(target.glob("**/*.yaml"))
    if not files:
        console.print(f"[yellow]No decision trees found in[/yellow] {target}")
        return

    failures = 0
    for fp in files:
        try:
            tree = load_tree(str(fp))
        except LoaderError as err:
            failures += 1
            detail = f"{err.message}\n{err.cause}" if verbose and err.cause else str(err)
            console.print(f"[red]FAIL[/red] {escape(detail)}")
            continue
        stats = tree.statistics()
        console.print(
            f"[green]OK[/green] {escape(tree.name)}: "
            f"{stats['states']} state(s), {stats['leaves']} leaf/leaves, depth {stats['depth']}"
        )

    if failures:
        console.print(f"[red]{failures} tree(s) failed validation[/red]")
        raise typer.Exit(code=1)

    console.print("[green]All validations passed[/green]")


@app.command()
def show(
    name: str = typer.Argument(..., help="Tree name or path"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Show a decision tree with the contribution of every state."""
    tree = load_or_exit(name, console=console, verbose_errors=verbose)
    if tree.description:
        console.print(f"[dim]{escape(tree.description)}[/dim]")
    console.print(build_tree_view(tree.root, tree.name))


@app.command()
def solve(
    name: str = typer.Argument(..., help="Tree name or path"),
    output: str | None = typer.Option(None, "--output", "-o", help="Save the plan under outputs/plans/<name>.yaml"),
    check: bool = typer.Option(False, "--check", help="Cross-check against exhaustive enumeration"),
    show_tree: bool = typer.Option(False, "--tree", help="Render the tree with the chosen path highlighted"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log search steps"),
    verbose_load: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Find the root-to-leaf path with the highest cumulative utility."""
    configure_logging(verbose)
    tree = load_or_exit(name, console=console, verbose_errors=verbose_load)

    try:
        result = MaxUtilityPathFinder().solve(tree.root)
    except MaxUtilityError as exc:
        console.print(f"[red]Search failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.print(f"[bold]Tree:[/bold] {escape(tree.name)}")
    console.print(build_path_table(result))
    console.print(f"[bold]Total utility:[/bold] {result.total_utility}")
    console.print(f"\n[dim]Path: {escape(' -> '.join(result.labels()))}[/dim]")

    if show_tree:
        console.print(build_tree_view(tree.root, tree.name, result.path))

    if output:
        plan_path = resolve_plan_path(output)
        save_result_to_yaml(tree.name, result, plan_path)
        console.print(f"Saved: {plan_path}")

    if check:
        _, expected = best_path_by_enumeration(tree.root)
        if expected != result.total_utility:
            console.print(f"[red]Check failed:[/red] enumeration found utility {expected}")
            raise typer.Exit(code=1)
        console.print("[green]Check passed[/green]")


__all__ = ["app"]
