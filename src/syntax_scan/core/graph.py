"""Name-binding graph built from declarative per-language rule files.

Each ``queries/<language>_bindings.scm`` file is a tree-sitter query whose
captures classify nodes:

* ``@scope`` marks a node that opens a lexical scope.
* ``@definition.<role>`` marks a name being declared.
* ``@reference`` marks a name being used.

A declared name belongs to the scope around its declaration, so a function
name lives in the scope that contains the function and not in the function's
own scope. References belong to the innermost enclosing scope. Nothing is
resolved across scopes or files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from tree_sitter import Node, Query, QueryCursor, QueryError

from syntax_scan.core.errors import GrammarLoadError
from syntax_scan.core.languages import Grammar, Language
from syntax_scan.core.walk import parse_document
from syntax_scan.models import GraphNode, SourceDocument

logger = logging.getLogger(__name__)

ROOT_ID = 0

_KIND_ORDER = {"scope": 0, "definition": 1, "reference": 2}

_RULES_DIR = Path(__file__).parent.parent / "queries"


def _load_rules(grammar: Grammar) -> Query:
    rule_path = _RULES_DIR / f"{grammar.language.value}_bindings.scm"
    try:
        return Query(grammar.ts_language, rule_path.read_text(encoding="utf-8"))
    except (OSError, QueryError) as exc:
        raise GrammarLoadError(f"Failed to load binding rules for {grammar.language.value!r}: {exc}") from exc


@dataclass
class _Capture:
    node: Node
    kind: str
    role: str | None = None


def _collect_captures(query: Query, root: Node) -> list[_Capture]:
    captures = QueryCursor(query).captures(root)
    collected: list[_Capture] = []
    seen: set[int] = {root.id}

    for node in captures.get("scope", []):
        if node.id not in seen:
            seen.add(node.id)
            collected.append(_Capture(node, "scope", node.type))

    for name, nodes in captures.items():
        if not name.startswith("definition."):
            continue
        role = name.split(".", 1)[1]
        for node in nodes:
            if node.id not in seen:
                seen.add(node.id)
                collected.append(_Capture(node, "definition", role))

    for node in captures.get("reference", []):
        if node.id not in seen:
            seen.add(node.id)
            collected.append(_Capture(node, "reference"))

    collected.sort(key=lambda c: (c.node.start_byte, -c.node.end_byte, _KIND_ORDER[c.kind]))
    return collected


def _owning_scope(start: Node | None, scope_ids: dict[int, int]) -> int:
    node = start
    while node is not None:
        if node.id in scope_ids:
            return scope_ids[node.id]
        node = node.parent
    return ROOT_ID


class QueryGraphBuilder:
    """Build a flat list of scope, definition and reference nodes for one file.

    Rule files are compiled once per language, either up front for the
    grammars passed in or on first use. A missing or invalid rule file raises
    ``GrammarLoadError``.
    """

    def __init__(self, grammars: Iterable[Grammar] = ()) -> None:
        self._rules: dict[Language, Query] = {}
        for grammar in grammars:
            self._rules_for(grammar)

    def _rules_for(self, grammar: Grammar) -> Query:
        query = self._rules.get(grammar.language)
        if query is None:
            query = _load_rules(grammar)
            self._rules[grammar.language] = query
            logger.debug("Compiled binding rules for %s", grammar.language.value)
        return query

    def build(self, document: SourceDocument, grammar: Grammar) -> list[GraphNode]:
        root = parse_document(document, grammar)
        captures = _collect_captures(self._rules_for(grammar), root)

        scope_ids: dict[int, int] = {root.id: ROOT_ID}
        for index, capture in enumerate(captures, start=1):
            if capture.kind == "scope":
                scope_ids[capture.node.id] = index

        nodes = [GraphNode(id=ROOT_ID, kind="root", start_byte=root.start_byte, end_byte=root.end_byte)]
        for index, capture in enumerate(captures, start=1):
            node = capture.node
            if capture.kind == "scope":
                owner = _owning_scope(node.parent, scope_ids)
                symbol = None
            elif capture.kind == "definition":
                declaration = node.parent
                owner = _owning_scope(declaration.parent if declaration else None, scope_ids)
                symbol = document.slice(node.start_byte, node.end_byte)
            else:
                owner = _owning_scope(node.parent, scope_ids)
                symbol = document.slice(node.start_byte, node.end_byte)
            nodes.append(
                GraphNode(
                    id=index,
                    kind=capture.kind,
                    start_byte=node.start_byte,
                    end_byte=node.end_byte,
                    symbol=symbol,
                    role=capture.role,
                    scope=owner,
                )
            )
        return nodes
