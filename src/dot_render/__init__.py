"""Render values and graphs as correctly quoted Graphviz DOT text."""

__version__ = "0.1.0"
