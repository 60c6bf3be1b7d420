"""Daily Markdown TODO lists that carry unfinished tasks forward, with a dr-todo command."""

__version__ = "0.1.0"