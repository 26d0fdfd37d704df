from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from maxutility.core.path_finder import PathResult
from maxutility.core.state import State
from maxutility.io.errors import LoaderError
from maxutility.io.file_spec import DecisionTree, DecisionTreeFileSpec
from maxutility.utils.logging import log_calls


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise LoaderError(path, "Cannot read decision tree file", cause=exc) from exc
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if not isinstance(data, dict):
        raise LoaderError(path, "Decision tree file must contain a mapping")
    return data


@log_calls()
def load_tree(path: str) -> DecisionTree:
    """Load a decision tree from a YAML file.

    Expected format:
    name: commute
    root:
      label: start
      outcomes: [0]
      children:
        - label: bus
          outcomes: [5, -1]

    The file stem is used as the tree name when ``name`` is absent.
    """
    if not os.path.isfile(path):
        raise LoaderError(path, "Decision tree file not found")
    data = _read_yaml(path)
    try:
        spec = DecisionTreeFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid decision tree definition", cause=exc) from exc
    return spec.build(default_name=Path(path).stem)


@log_calls()
def load_trees(path: str) -> List[DecisionTree]:
    """Load every ``*.yaml`` decision tree below a directory, sorted by path."""
    if not os.path.exists(path):
        return []
    files = sorted(glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True))
    return [load_tree(fp) for fp in files]


def dump_tree(root: State) -> Dict[str, Any]:
    """Convert a state tree back to the file format."""
    document: Dict[str, Any] = {}
    stack = [(root, document)]
    while stack:
        state, node = stack.pop()
        node["label"] = state.label
        node["outcomes"] = list(state.outcomes)
        node["children"] = []
        for child in state.children:
            child_node: Dict[str, Any] = {}
            node["children"].append(child_node)
            stack.append((child, child_node))
    return document


def save_tree_to_yaml(tree: DecisionTree, file_path: str) -> None:
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    data: Dict[str, Any] = {"name": tree.name}
    if tree.description:
        data["description"] = tree.description
    data["root"] = dump_tree(tree.root)

    with open(file_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, indent=2, sort_keys=False)


def save_result_to_yaml(tree_name: str, result: PathResult, file_path: str) -> None:
    """
    Save a solved plan to a YAML file.

    Args:
        tree_name: Name of the tree that was solved
        result: Search result
        file_path: Output file path
    """
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    data = {"tree": tree_name, **result.to_dict()}

    with open(file_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, indent=2, sort_keys=False)


__all__ = ["load_tree", "load_trees", "dump_tree", "save_tree_to_yaml", "save_result_to_yaml"]
