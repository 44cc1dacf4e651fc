"""Tree and graph structures: BST and AVL dictionaries, prefix expression trees, optimal BSTs and near-shortest routes."""

__version__ = "0.1.0"