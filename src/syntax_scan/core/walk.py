from collections.abc import Iterator
from pathlib import Path

from tree_sitter import Node

from syntax_scan.core.errors import ParseFailure, SourceReadError
from syntax_scan.core.languages import Grammar
from syntax_scan.models import SourceDocument


def read_document(path: Path) -> SourceDocument:
    try:
        source_bytes = path.read_bytes()
        source_bytes.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path, str(exc)) from exc
    return SourceDocument(path=path, text=source_bytes)


def parse_document(document: SourceDocument, grammar: Grammar) -> Node:
    parser = grammar.parser()
    try:
        tree = parser.parse(document.text)
    except ValueError as exc:
        raise ParseFailure(document.path) from exc
    if tree is None:
        raise ParseFailure(document.path)
    return tree.root_node


def walk_tree(root: Node) -> Iterator[tuple[Node, int]]:
    """Yield every node under ``root`` with its depth, pre-order, left to right.

    Unnamed nodes are yielded too. An explicit stack keeps deeply nested
    sources clear of the interpreter recursion limit.
    """
    stack: list[tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))
