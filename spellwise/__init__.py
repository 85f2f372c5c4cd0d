"""Interactive spell checker with a hash-table dictionary, a sorted misspelling list and spelling suggestions."""

__version__ = "0.1.0"