# mylists/__init__.py
"""MyLists: a terminal task manager built around a "My Lists" overview.

Lists with summary counters (today, scheduled, all, completed), search over
incomplete tasks, and a modal editor for lists, on top of a JSON-backed store.
"""

__version__ = "0.1.0"
