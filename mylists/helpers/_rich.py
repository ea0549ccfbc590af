# mylists/helpers/_rich.py

# SECTION: MODULE DOCSTRING
"""Rich console shared by everything that prints outside the TUI.

The command-line entry point uses it for startup errors and the summary it
prints after seeding. Rich tracebacks are installed against the same console.
"""

# SECTION: IMPORTS
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.theme import Theme
from rich.traceback import install as install_traceback

# SECTION: THEME
DEFAULT_THEME_DICT = {
    "error": "bold #f38ba8",
    "warning": "bold #f6c177",
    "success": "bold #a6e3a1",
    "info": "bold #cba6f7",
    "subtle": "dim #908caa",
    "table.header": "bold #cba6f7",
}

console: Console = Console(
    theme=Theme(DEFAULT_THEME_DICT),
    highlight=False,
    emoji=False,
)

install_traceback(console=console, show_locals=False, word_wrap=True)


# FUNC: print
def print(*args: Any, **kwargs: Any) -> None:
    """Prints to the themed Rich console."""
    console.print(*args, **kwargs)


__all__ = ["console", "print", "Table"]
