import logging
from pathlib import Path

from syntax_scan.core.languages import Grammar, GrammarRegistry

logger = logging.getLogger(__name__)


def extension_of(path: Path) -> str | None:
    """Return the text after the last ``.`` of the file name.

    Dotfiles such as ``.bashrc`` and names without a dot have no extension.
    No case folding is applied and compound extensions are not special-cased.
    """
    name = path.name
    index = name.rfind(".")
    if index <= 0:
        return None
    return name[index + 1 :]


def classify(path: Path, registry: GrammarRegistry) -> Grammar | None:
    extension = extension_of(path)
    if extension is None:
        logger.debug("Skipping %s: no extension", path)
        return None
    grammar = registry.lookup(extension)
    if grammar is None:
        logger.debug("Skipping %s: no grammar for extension %r", path, extension)
    return grammar
