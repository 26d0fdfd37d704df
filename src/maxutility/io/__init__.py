from .errors import LoaderError
from .file_spec import DecisionTree, DecisionTreeFileSpec, StateSpec
from .tree_loader import dump_tree, load_tree, load_trees, save_result_to_yaml, save_tree_to_yaml

__all__ = [
    "LoaderError",
    "DecisionTree",
    "DecisionTreeFileSpec",
    "StateSpec",
    "load_tree",
    "load_trees",
    "dump_tree",
    "save_tree_to_yaml",
    "save_result_to_yaml",
]
