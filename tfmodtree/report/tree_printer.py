"""Draw a generic tree as text with branch connectors."""

import sys
from collections.abc import Callable, Iterator
from typing import Literal, TextIO, TypeVar

from tfmodtree.const import TREE_GLYPHS
from tfmodtree.types import Tree

T = TypeVar("T")

GlyphStyle = Literal["unicode", "ascii"]


def iter_tree_lines(
    tree: Tree[T],
    render: Callable[[T], str] = str,
    glyphs: GlyphStyle = "unicode",
) -> Iterator[str]:
    """Yield one newline-terminated line per node, depth-first.

    Each label is rendered only when its line is produced, so an error raised
    by `render` surfaces after all preceding lines have been yielded.
    """
    branch, last_branch, pipe, blank = TREE_GLYPHS[glyphs]

    yield f"{render(tree.value)}\n"

    def walk(children: list[Tree[T]], prefix: str) -> Iterator[str]:
        for idx, child in enumerate(children):
            is_last = idx == len(children) - 1
            connector = last_branch if is_last else branch
            yield f"{prefix}{connector}{render(child.value)}\n"
            yield from walk(child.children, prefix + (blank if is_last else pipe))

    yield from walk(tree.children, "")


def format_tree(
    tree: Tree[T],
    render: Callable[[T], str] = str,
    glyphs: GlyphStyle = "unicode",
) -> str:
    """Format the whole tree as a single string."""
    return "".join(iter_tree_lines(tree, render, glyphs))


def print_tree(
    tree: Tree[T],
    render: Callable[[T], str] = str,
    stream: TextIO | None = None,
    glyphs: GlyphStyle = "unicode",
) -> None:
    """Write the tree to `stream` (stdout by default) line by line.

    Lines already written stay written if rendering a later node fails.
    """
    out = stream if stream is not None else sys.stdout
    try:
        for line in iter_tree_lines(tree, render, glyphs):
            out.write(line)
    finally:
        out.flush()
