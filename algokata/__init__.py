"""Classic algorithm exercises on arrays, strings, integers and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "integers", "linked_list", "strings"]