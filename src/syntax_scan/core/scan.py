import logging
import os
import stat
import time
from collections.abc import Iterator
from enum import Enum
from pathlib import Path

from syntax_scan.core.classify import classify
from syntax_scan.core.errors import ParseFailure, RootNotFoundError, SourceReadError
from syntax_scan.core.languages import GrammarRegistry
from syntax_scan.core.ports.graph_builder import GraphBuilder
from syntax_scan.core.render import OutlineRenderer
from syntax_scan.core.walk import parse_document, read_document
from syntax_scan.models import ScanSummary

logger = logging.getLogger(__name__)


class OutputMode(str, Enum):
    TREE = "tree"
    GRAPH = "graph"


def _iter_directory(directory: Path) -> Iterator[Path]:
    with os.scandir(directory) as entries:
        children = list(entries)
    for entry in children:
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from _iter_directory(path)
        elif entry.is_file(follow_symlinks=False):
            yield path


def iter_files(root: Path) -> Iterator[Path]:
    """Yield regular files under ``root`` depth-first.

    ``root`` itself is followed if it is a symlink. Below it, symlinks and
    special files are ignored. A directory that cannot be listed raises
    ``OSError``.
    """
    mode = root.stat().st_mode
    if stat.S_ISREG(mode):
        yield root
    elif stat.S_ISDIR(mode):
        yield from _iter_directory(root)


def scan(
    root: Path,
    registry: GrammarRegistry,
    renderer: OutlineRenderer,
    mode: OutputMode = OutputMode.TREE,
    graph_builder: GraphBuilder | None = None,
) -> ScanSummary:
    if not root.exists():
        raise RootNotFoundError(root)
    if mode is OutputMode.GRAPH and graph_builder is None:
        raise ValueError("Graph mode requires a graph builder.")
    builder = graph_builder if mode is OutputMode.GRAPH else None

    summary = ScanSummary()
    start = time.monotonic()

    for path in iter_files(root):
        summary.files_seen += 1
        grammar = classify(path, registry)
        if grammar is None:
            summary.files_skipped += 1
            continue

        try:
            document = read_document(path)
            if builder is not None:
                renderer.render_graph(document, builder.build(document, grammar))
            else:
                renderer.render_file(document, parse_document(document, grammar))
        except (SourceReadError, ParseFailure) as exc:
            logger.warning("%s", exc)
            summary.files_failed += 1
            continue

        summary.files_rendered += 1

    summary.elapsed_ms = int((time.monotonic() - start) * 1000)
    return summary
