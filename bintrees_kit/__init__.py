"""Binary tree nodes, traversals and measurements (tree) and ASCII drawing (render)."""

__version__ = "0.1.0"
__all__ = ["render", "tree"]