"""Classic data structures: trees, stacks, queues, linked lists and graphs, with menu sessions."""

__version__ = "0.1.0"