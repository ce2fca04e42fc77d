"""State, storage, paging and view helpers for a personal and team task board."""

__version__ = "0.1.0"