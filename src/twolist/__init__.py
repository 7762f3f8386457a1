"""twolist: a two-list (Work / Travel) to-do app with write-through local storage."""

__version__ = "0.1.0"
