"""Binary trees, search trees, a max heap, queue exercises and a trie, with their classic algorithms."""

__version__ = "0.1.0"
__all__ = ["bst", "heap", "queues", "tree", "tree_paths", "tree_properties", "trie"]