"""
DefinitelyTyped Generator

Interactive scaffolding of typing definition boilerplate for
DefinitelyTyped submissions.
"""

__version__ = "0.1.0"

from deftyped_generator.cli.commands import cli
from deftyped_generator.core.environment import detect_environment

__all__ = [
    "cli",
    "detect_environment",
]
