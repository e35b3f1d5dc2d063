"""Linked lists, bounded stacks and queues, and a small student record."""

__version__ = "0.1.0"