"""Node-link JSON (de)serialization for graphs handed to the DOT exporter."""

from __future__ import annotations

import json
from pathlib import Path

import networkx as nx
from networkx.readwrite import json_graph


class ExportError(Exception):
    """Raised when a graph cannot be read for export."""


def graph_from_json(content: str) -> nx.Graph:
    """Build a graph from a node-link JSON document.

    ``directed`` and ``multigraph`` in the document pick the graph class.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ExportError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict) or "nodes" not in data:
        raise ExportError("Not a node-link document: missing 'nodes'")
    data.setdefault("links", data.pop("edges", []))
    try:
        return json_graph.node_link_graph(data, edges="links")
    except (KeyError, TypeError, nx.NetworkXError) as e:
        raise ExportError(f"Malformed node-link document: {e}") from e


def load_graph(path: Path) -> nx.Graph:
    """Read a node-link JSON file."""
    try:
        content = path.read_text()
    except OSError as e:
        raise ExportError(f"Cannot read {path}: {e}") from e
    return graph_from_json(content)


def graph_to_json(graph: nx.Graph, indent: int = 2) -> str:
    """Export a graph as a node-link JSON string."""
    return json.dumps(json_graph.node_link_data(graph, edges="links"), indent=indent)
