"""Linked list, stack and bounded queue data structures with binary/decimal conversion tools."""

__version__ = "0.1.0"
__all__ = ["linked_list", "stack", "queue", "bin_to_dec", "dec_to_bin"]