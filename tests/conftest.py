"""Shared test fixtures for dot-render."""

import json
from pathlib import Path

import networkx as nx
import pytest


@pytest.fixture
def simple_digraph() -> nx.DiGraph:
    """A two-node directed graph with one labelled edge."""
    g = nx.DiGraph()
    g.add_edge("a", "b", label="go")
    return g


@pytest.fixture
def node_link_data() -> dict:
    """A node-link document for a small directed graph."""
    return {
        "directed": True,
        "multigraph": False,
        "graph": {"rankdir": "LR"},
        "nodes": [
            {"id": "start", "shape": "box"},
            {"id": "end state"},
        ],
        "links": [
            {"source": "start", "target": "end state", "label": "finish"},
        ],
    }


@pytest.fixture
def node_link_file(tmp_path: Path, node_link_data: dict) -> Path:
    """Write the node-link document to a file and return the path."""
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(node_link_data, indent=2))
    return path


@pytest.fixture
def initialized_project(tmp_path: Path) -> Path:
    """Create a temporary project with a dot-render config."""
    config_dir = tmp_path / ".dot-render"
    config_dir.mkdir()
    config = {
        "width": 80,
        "ribbon": 0.4,
        "indent": 4,
        "strict": True,
    }
    (config_dir / "config.json").write_text(json.dumps(config, indent=2))
    return tmp_path
