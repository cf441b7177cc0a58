"""Textbook data structures: lists, stacks, queues and stack-based expression algorithms."""

__version__ = "0.1.0"