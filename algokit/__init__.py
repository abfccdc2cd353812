"""Pure-Python implementations of classic number, string, array, stack and linked-list algorithms."""

__version__ = "0.1.0"
__all__ = ["numbers", "strings", "arrays", "stacks", "linked_list"]