"""An ordered map on a binary search tree with a cursor, plus a demo and a scored self-check."""

__version__ = "0.1.0"
__all__ = ["treemap", "demo", "grader"]