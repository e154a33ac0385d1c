import io
from pathlib import Path

import pytest
import yaml

from src.ingest import serialization
from src.ingest.hierarchy import build_hierarchy
from src.ingest.serialization import dump_tree, load_tree, write_tree
from src.models.standards import StandardsFile, StandardsHeader, StandardsTree


def _tree() -> StandardsTree:
    files = [
        StandardsFile(
            path="lib/GENERAL.md",
            header=StandardsHeader(
                title="General",
                description="General standards.",
                scope="*",
                topics=["general"],
            ),
        ),
        StandardsFile(
            path="lib/python/PYTHON.md",
            header=StandardsHeader(
                title="Python",
                description="Python standards.",
                scope="*.py",
                topics=["python", "pytest"],
                parent="lib/GENERAL.md",
            ),
        ),
    ]
    return build_hierarchy(files)


def test_dump_tree_mirrors_node_shape_without_parent():
    data = yaml.safe_load(dump_tree(_tree()))

    assert data == {
        "nodes": [
            {
                "path": "lib/GENERAL.md",
                "title": "General",
                "description": "General standards.",
                "scope": "*",
                "topics": ["general"],
                "children": [
                    {
                        "path": "lib/python/PYTHON.md",
                        "title": "Python",
                        "description": "Python standards.",
                        "scope": "*.py",
                        "topics": ["python", "pytest"],
                        "children": [],
                    }
                ],
            }
        ]
    }


def test_dump_tree_keeps_field_order():
    text = dump_tree(_tree())
    first_node = text.split("children:")[0]

    positions = [first_node.index(f"{key}:") for key in ("path", "title", "description", "scope", "topics")]
    assert positions == sorted(positions)
    assert "parent" not in text


def test_dump_tree_empty_forest():
    assert yaml.safe_load(dump_tree(StandardsTree())) == {"nodes": []}


def test_dump_tree_is_byte_identical_across_runs():
    assert dump_tree(_tree()) == dump_tree(_tree())


def test_write_tree_to_path_and_load_back(tmp_path: Path):
    output = tmp_path / "out" / "standards-tree.yaml"

    write_tree(_tree(), output)

    assert output.read_text(encoding="utf-8") == dump_tree(_tree())
    loaded = load_tree(output)
    assert loaded.to_dict() == _tree().to_dict()
    assert list(output.parent.iterdir()) == [output]


def test_write_tree_to_stream():
    buffer = io.StringIO()

    write_tree(_tree(), buffer)

    assert buffer.getvalue() == dump_tree(_tree())


def test_write_tree_failure_leaves_existing_artifact(tmp_path: Path, monkeypatch):
    output = tmp_path / "standards-tree.yaml"
    output.write_text("previous\n", encoding="utf-8")

    def _explode(*args, **kwargs):
        raise yaml.YAMLError("cannot represent")

    monkeypatch.setattr(serialization.yaml, "safe_dump", _explode)

    with pytest.raises(yaml.YAMLError):
        write_tree(_tree(), output)

    assert output.read_text(encoding="utf-8") == "previous\n"
    assert list(tmp_path.iterdir()) == [output]


def test_load_tree_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "tree.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_tree(path)


def test_load_tree_rejects_node_without_required_keys(tmp_path: Path):
    path = tmp_path / "tree.yaml"
    path.write_text("nodes:\n  - title: Orphan\n", encoding="utf-8")

    with pytest.raises(ValueError, match="malformed node"):
        load_tree(path)
