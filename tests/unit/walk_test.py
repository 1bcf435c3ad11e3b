"""Unit tests for reading, parsing and walking syntax trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from syntax_scan.core.errors import ParseFailure, SourceReadError
from syntax_scan.core.languages import Grammar, Language
from syntax_scan.core.walk import parse_document, read_document, walk_tree
from syntax_scan.models import SourceDocument


@dataclass
class _FakeNode:
    type: str
    children: list[_FakeNode] = field(default_factory=list)


def _doc(source: str, name: str = "sample.rs") -> SourceDocument:
    return SourceDocument(path=Path(name), text=source.encode("utf-8"))


class TestWalkTree:
    def test_pre_order_left_to_right(self) -> None:
        tree = _FakeNode(
            "a",
            [
                _FakeNode("b", [_FakeNode("c"), _FakeNode("d")]),
                _FakeNode("e", [_FakeNode("f")]),
            ],
        )
        visited = [(node.type, depth) for node, depth in walk_tree(tree)]  # type: ignore[arg-type]
        assert visited == [("a", 0), ("b", 1), ("c", 2), ("d", 2), ("e", 1), ("f", 2)]

    def test_handles_nesting_deeper_than_recursion_limit(self) -> None:
        root = _FakeNode("n0")
        current = root
        for i in range(1, 5000):
            child = _FakeNode(f"n{i}")
            current.children.append(child)
            current = child
        depths = [depth for _, depth in walk_tree(root)]  # type: ignore[arg-type]
        assert depths == list(range(5000))

    def test_depth_counts_ancestors(self, rust_grammar: Grammar) -> None:
        root = parse_document(_doc("fn foo(a: i32) { let b = a + 1; }"), rust_grammar)
        for node, depth in walk_tree(root):
            ancestors = 0
            parent = node.parent
            while parent is not None:
                ancestors += 1
                parent = parent.parent
            assert depth == ancestors

    def test_visits_unnamed_nodes(self, rust_grammar: Grammar) -> None:
        root = parse_document(_doc("fn foo() {}"), rust_grammar)
        kinds = [node.type for node, _ in walk_tree(root)]
        assert "fn" in kinds
        assert "(" in kinds
        assert "identifier" in kinds


class TestParseDocument:
    def test_returns_root_node(self, rust_grammar: Grammar) -> None:
        root = parse_document(_doc("fn foo() {}"), rust_grammar)
        assert root.type == "source_file"

    def test_invalid_source_still_produces_tree(self, rust_grammar: Grammar) -> None:
        root = parse_document(_doc("fn foo( {"), rust_grammar)
        assert root.has_error

    def test_parser_error_becomes_parse_failure(self) -> None:
        parser = MagicMock()
        parser.parse.side_effect = ValueError("boom")
        grammar: Any = MagicMock(spec=Grammar)
        grammar.language = Language.RUST
        grammar.parser.return_value = parser

        with pytest.raises(ParseFailure):
            parse_document(_doc("fn main() {}"), grammar)


class TestReadDocument:
    def test_reads_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "main.rs"
        path.write_text("fn main() {}\n", encoding="utf-8")
        document = read_document(path)
        assert document.path == path
        assert document.text == b"fn main() {}\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError):
            read_document(tmp_path / "gone.rs")

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.rs"
        path.write_bytes(b"\xff\xfe\x00fn")
        with pytest.raises(SourceReadError):
            read_document(path)
