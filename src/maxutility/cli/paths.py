from __future__ import annotations

"""Utilities for resolving decision tree inputs and plan output paths."""

from pathlib import Path


def kb_trees_path(path: str | None) -> str:
    return path or str(Path.cwd() / "kb" / "trees")


def outputs_dir() -> Path:
    return Path.cwd() / "outputs"


def plans_dir() -> Path:
    return outputs_dir() / "plans"


def ensure_output_dirs() -> None:
    plans_dir().mkdir(parents=True, exist_ok=True)


def default_plan_path(tree_name: str) -> str:
    ensure_output_dirs()
    return str(plans_dir() / f"{tree_name}.yaml")


def resolve_plan_path(name: str) -> str:
    """Resolve a plan filename under outputs/plans.

    Only the base name is kept; ``.yaml`` is added when missing.
    """
    ensure_output_dirs()
    base = Path(name).name
    if not base.endswith(".yaml"):
        base = f"{base}.yaml"
    return str(plans_dir() / base)


def find_tree_file(name_or_path: str) -> str:
    """
    Find a decision tree file.

    1. If path exists as-is, use it
    2. If path exists with .yaml extension, use it
    3. Otherwise, look in kb/trees/
    4. Add .yaml extension if missing

    Raises:
        FileNotFoundError: If file cannot be found
    """
    p = Path(name_or_path)
    if p.is_file():
        return str(p)

    if not str(name_or_path).endswith(".yaml"):
        p_with_yaml = Path(f"{name_or_path}.yaml")
        if p_with_yaml.is_file():
            return str(p_with_yaml)

    base_name = p.name
    if not base_name.endswith(".yaml"):
        base_name = f"{base_name}.yaml"

    tree_file = Path(kb_trees_path(None)) / base_name
    if tree_file.is_file():
        return str(tree_file)

    raise FileNotFoundError(
        f"Decision tree file not found: '{name_or_path}'\nLooked in:\n  - {name_or_path}\n  - {tree_file}"
    )


__all__ = [
    "kb_trees_path",
    "outputs_dir",
    "plans_dir",
    "ensure_output_dirs",
    "default_plan_path",
    "resolve_plan_path",
    "find_tree_file",
]
