"""Core utilities for CLI - pure functions and shared types."""

from .types import Result, Success, Failure, StoryOutput
from .files import read_mapping, write_json, write_text
from .console import console, err_console

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    "StoryOutput",
    # Files
    "read_mapping",
    "write_json",
    "write_text",
    # Console
    "console",
    "err_console",
]
