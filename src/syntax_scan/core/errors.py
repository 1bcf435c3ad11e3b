from pathlib import Path


class ScanError(Exception):
    """Base class for errors raised while scanning a source tree."""


class RootNotFoundError(ScanError):
    def __init__(self, root: Path) -> None:
        super().__init__(f"The provided folder {str(root)!r} does not exist.")
        self.root = root


class GrammarLoadError(ScanError):
    """A bundled grammar could not be loaded at startup."""


class SourceReadError(ScanError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path


class ParseFailure(ScanError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Parser produced no syntax tree for {path}")
        self.path = path
