"""Core data structures for module tree rendering

This package provides:
- A generic ordered tree container, independent of the Terraform domain
"""

from .tree import Tree

__all__ = [
    "Tree",
]
