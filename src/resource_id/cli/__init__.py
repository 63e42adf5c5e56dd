"""Command line interface for generating and inspecting resource ids."""

from .main import cli

__all__ = ["cli"]
