"""Rich console singletons for CLI output."""

import sys

from rich.console import Console

# Windows cp1252 encoding doesn't support Unicode box drawing characters
_safe_box = sys.platform == "win32"

# Global console instance - used across all CLI modules
console = Console(safe_box=_safe_box)

# Errors go to stderr so stdout stays clean for piped JSON
err_console = Console(stderr=True, safe_box=_safe_box)
