"""Graphviz DOT export for networkx graphs."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import networkx as nx

from dot_render.attributes import Attribute, print_attributes
from dot_render.code import (
    DotCode,
    empty,
    hcat,
    linebreak,
    nest,
    render_dot,
    semi,
    space,
    text,
)
from dot_render.models import RenderConfig
from dot_render.printing import to_dot, unqt_dot

logger = logging.getLogger(__name__)

# Keys of graph.graph holding default attributes rather than graph attributes.
DEFAULT_KEYS = ("node", "edge")


def export_dot(
    graph: nx.Graph, name: str | None = None, config: RenderConfig | None = None
) -> str:
    """Export a networkx graph as a Graphviz DOT string."""
    return render_dot(graph_to_dot(graph, name=name, config=config), config)


def graph_to_dot(
    graph: nx.Graph, name: str | None = None, config: RenderConfig | None = None
) -> DotCode:
    """Build the DOT code for a whole graph.

    Graph attributes come first so that a ``colorscheme`` among them
    applies to the node and edge colors that follow. ``graph.graph["node"]``
    and ``graph.graph["edge"]`` hold default node and edge attributes.
    """
    config = config or RenderConfig()
    name = name if name is not None else graph.graph.get("name") or None
    directed = graph.is_directed()

    statements: list[DotCode] = []
    for key, value in graph.graph.items():
        if key == "name" or key in DEFAULT_KEYS:
            continue
        statements.append(unqt_dot(Attribute(key, value)) + semi())
    for key in DEFAULT_KEYS:
        defaults = graph.graph.get(key)
        if defaults:
            statements.append(text(key) + space() + _attribute_list(defaults) + semi())

    for node, data in graph.nodes(data=True):
        statements.append(_statement(to_dot(node), data))

    op = text(" -> " if directed else " -- ")
    for u, v, data in graph.edges(data=True):
        statements.append(_statement(to_dot(u) + op + to_dot(v), data))

    logger.debug(
        "Exporting %s with %d nodes and %d edges",
        "digraph" if directed else "graph",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )

    header = text("strict ") if config.strict else empty()
    header += text("digraph" if directed else "graph")
    if name:
        header += space() + to_dot(name)

    body = nest(config.indent, hcat(linebreak() + s for s in statements))
    return header + text(" {") + body + linebreak() + text("}")


def _attribute_list(data: Mapping[str, Any] | Sequence[Attribute]) -> DotCode:
    if isinstance(data, Mapping):
        attributes = [Attribute(k, v) for k, v in data.items()]
    else:
        attributes = list(data)
    return print_attributes(attributes)


def _statement(subject: DotCode, data: Mapping[str, Any]) -> DotCode:
    if not data:
        return subject + semi()
    return subject + space() + _attribute_list(data) + semi()
