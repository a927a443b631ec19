"""Persistence utilities for dotbuilder."""

from .export import GraphExporter

__all__ = ["GraphExporter"]
