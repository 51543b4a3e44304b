"""
CLI module for the DefinitelyTyped generator.

This module provides the command-line interface, including the main entry
point that is installed as the ``deftyped`` console script.
"""

from .commands import main

__all__ = ["main"]
