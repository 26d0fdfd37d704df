import textwrap

import pytest
import yaml

from maxutility.core import find_max_utility_path
from maxutility.io import LoaderError, dump_tree, load_tree, load_trees, save_result_to_yaml, save_tree_to_yaml
from maxutility.core.path_finder import MaxUtilityPathFinder


def _write(path, text):
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return str(path)


def test_load_tree_builds_states(tmp_path):
    fp = _write(
        tmp_path / "errand.yaml",
        """
        name: errand
        description: small example
        root:
          label: root
          outcomes: [0]
          children:
            - label: A
              outcomes: [5]
              children:
                - label: leaf
                  outcomes: [1, 2]
            - label: B
              outcomes: 2
        """,
    )

    tree = load_tree(fp)

    assert tree.name == "errand"
    assert tree.description == "small example"
    assert [s.label for s in tree.states()] == ["root", "A", "leaf", "B"]
    assert tree.root.children[0].children[0].contribution == 3
    assert tree.root.children[1].contribution == 2
    assert tree.statistics() == {"states": 4, "leaves": 2, "depth": 3}


def test_name_defaults_to_file_stem(tmp_path):
    fp = _write(
        tmp_path / "unnamed.yaml",
        """
        root:
          label: only
        """,
    )

    tree = load_tree(fp)

    assert tree.name == "unnamed"
    assert tree.root.is_leaf
    assert tree.root.contribution == 0


def test_missing_file(tmp_path):
    with pytest.raises(LoaderError, match="not found"):
        load_tree(str(tmp_path / "missing.yaml"))


def test_schema_validation(tmp_path):
    fp = _write(
        tmp_path / "bad.yaml",
        """
        root:
          label: root
          children:
            - label: child
              outcomes: [one]
        """,
    )

    with pytest.raises(LoaderError) as excinfo:
        load_tree(fp)

    assert "Invalid decision tree definition" in str(excinfo.value)
    assert "root.children.0.outcomes.0" in str(excinfo.value)


def test_empty_label_rejected(tmp_path):
    fp = _write(
        tmp_path / "blank.yaml",
        """
        root:
          label: "  "
        """,
    )

    with pytest.raises(LoaderError):
        load_tree(fp)


def test_unknown_state_key_rejected(tmp_path):
    fp = _write(
        tmp_path / "typo.yaml",
        """
        root:
          label: root
          childs: []
        """,
    )

    with pytest.raises(LoaderError):
        load_tree(fp)


def test_validation_errors_are_summarised(tmp_path):
    fp = _write(
        tmp_path / "many.yaml",
        """
        root:
          label: root
          outcomes: [a, b, c, d, e]
        """,
    )

    with pytest.raises(LoaderError, match=r"\.\.\. \(2 more\)"):
        load_tree(fp)


def test_malformed_yaml(tmp_path):
    fp = _write(tmp_path / "broken.yaml", "root: [unclosed\n")

    with pytest.raises(LoaderError, match="Malformed YAML"):
        load_tree(fp)


def test_non_mapping_document(tmp_path):
    fp = _write(tmp_path / "list.yaml", "- a\n- b\n")

    with pytest.raises(LoaderError, match="mapping"):
        load_tree(fp)


def test_load_trees_directory(tmp_path):
    nested = tmp_path / "nested"
    nested.mkdir()
    _write(tmp_path / "b.yaml", "root:\n  label: b\n")
    _write(nested / "a.yaml", "root:\n  label: a\n")

    trees = load_trees(str(tmp_path))

    assert sorted(t.name for t in trees) == ["a", "b"]


def test_load_trees_missing_directory(tmp_path):
    assert load_trees(str(tmp_path / "nope")) == []


def test_dump_and_reload(tmp_path):
    fp = _write(
        tmp_path / "source.yaml",
        """
        name: source
        root:
          label: root
          children:
            - label: x
              outcomes: [1, -4]
            - label: y
              outcomes: [2]
        """,
    )
    tree = load_tree(fp)

    out = tmp_path / "copy.yaml"
    save_tree_to_yaml(tree, str(out))
    reloaded = load_tree(str(out))

    assert dump_tree(reloaded.root) == dump_tree(tree.root)
    assert reloaded.root.children[0].outcomes == (1, -4)


def test_save_result(tmp_path, errand_tree):
    result = MaxUtilityPathFinder().solve(errand_tree)
    out = tmp_path / "plans" / "errand.yaml"

    save_result_to_yaml("errand", result, str(out))

    data = yaml.safe_load(out.read_text(encoding="utf-8"))
    assert data["tree"] == "errand"
    assert data["path"] == ["root", "A", "leaf"]
    assert data["total_utility"] == 8
    assert data["steps"][-1] == {"label": "leaf", "contribution": 3, "cumulative": 8}


def test_bundled_trees_solve(kb_trees_dir):
    trees = {tree.name: tree for tree in load_trees(str(kb_trees_dir))}

    errand = find_max_utility_path(trees["errand"].root)
    weekend = find_max_utility_path(trees["weekend"].root)

    assert [s.label for s in errand] == ["root", "A", "leaf"]
    assert [s.label for s in weekend] == ["saturday", "museum", "cafe", "bookshop"]
    assert weekend[-1].expected_utility == 8
