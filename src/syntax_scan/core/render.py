from collections.abc import Iterable, Iterator
from pathlib import Path

from rich.console import Console
from rich.text import Text
from tree_sitter import Node

from syntax_scan.core.walk import walk_tree
from syntax_scan.models import GraphNode, OutlineLine, SourceDocument

IDENTIFIER_KINDS: frozenset[str] = frozenset({"identifier", "type_identifier"})

_INDENT = "  "


def outline_lines(document: SourceDocument, root: Node) -> Iterator[OutlineLine]:
    """Yield one line per named node; identifier kinds carry their source text."""
    for node, depth in walk_tree(root):
        if not node.is_named:
            continue
        text = document.slice(node.start_byte, node.end_byte) if node.type in IDENTIFIER_KINDS else None
        yield OutlineLine(
            depth=depth,
            kind=node.type,
            start_byte=node.start_byte,
            end_byte=node.end_byte,
            text=text,
        )


def format_outline_line(line: OutlineLine) -> str:
    rendered = f"{_INDENT * line.depth}{line.kind}"
    if line.text is not None:
        rendered += f" -> {line.text}"
    return rendered


def format_graph_node(node: GraphNode) -> str:
    kind = f"{node.kind}.{node.role}" if node.role else node.kind
    parts = [f"Node: #{node.id}", kind]
    if node.symbol is not None:
        parts.append(node.symbol)
    if node.scope is not None:
        parts.append(f"scope=#{node.scope}")
    parts.append(f"span={node.start_byte}..{node.end_byte}")
    return " ".join(parts)


def _styled_outline_line(line: OutlineLine) -> Text:
    text = Text(_INDENT * line.depth)
    text.append(line.kind, style="yellow")
    if line.text is not None:
        text.append(" -> ")
        text.append(line.text, style="bright_cyan")
    return text


class OutlineRenderer:
    """Write rendered listings to a rich console, one line per item."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def _emit(self, text: Text) -> None:
        self._console.print(text, soft_wrap=True, highlight=False)

    def render_header(self, path: Path) -> None:
        header = Text("File: ")
        header.append(str(path), style="bold bright_yellow")
        self._emit(header)

    def render_file(self, document: SourceDocument, root: Node) -> int:
        self.render_header(document.path)
        count = 0
        for line in outline_lines(document, root):
            self._emit(_styled_outline_line(line))
            count += 1
        return count

    def render_graph(self, document: SourceDocument, nodes: Iterable[GraphNode]) -> int:
        self.render_header(document.path)
        count = 0
        for node in nodes:
            self._emit(Text(format_graph_node(node)))
            count += 1
        return count
