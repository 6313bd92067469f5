"""Exporters that render graph models through the DOT printer."""
