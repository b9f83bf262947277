"""Classic data-structure exercises with a minimal singly linked list."""

__version__ = "0.1.0"
__all__ = ["linked_list", "solution", "cli"]