"""Linked lists, a bounded array queue, sorts, polynomials and sparse matrices, with text menus."""

__version__ = "0.1.0"