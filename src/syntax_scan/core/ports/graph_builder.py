from typing import Protocol

from syntax_scan.core.languages import Grammar
from syntax_scan.models import GraphNode, SourceDocument


class GraphBuilder(Protocol):
    def build(self, document: SourceDocument, grammar: Grammar) -> list[GraphNode]: ...
