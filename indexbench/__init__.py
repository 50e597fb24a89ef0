"""In-memory B+ tree and chained hash table indexes with probe counting, and demo commands."""

__version__ = "0.1.0"
__all__ = ["bplustree", "hashtable", "cli"]