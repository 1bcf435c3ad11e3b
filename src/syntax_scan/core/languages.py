from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import cast

from tree_sitter import Language as TreeSitterLanguage
from tree_sitter import Parser
from tree_sitter_language_pack import SupportedLanguage, get_language

from syntax_scan.core.errors import GrammarLoadError

logger = logging.getLogger(__name__)


class Language(str, Enum):
    TYPESCRIPT = "typescript"
    TSX = "tsx"
    RUST = "rust"
    CSHARP = "csharp"


_EXTENSION_LANGUAGE_MAP: Mapping[str, Language] = MappingProxyType(
    {
        "ts": Language.TYPESCRIPT,
        "tsx": Language.TSX,
        "rs": Language.RUST,
        "cs": Language.CSHARP,
    }
)


@dataclass(frozen=True)
class Grammar:
    language: Language
    ts_language: TreeSitterLanguage

    def parser(self) -> Parser:
        return Parser(self.ts_language)


class GrammarRegistry:
    """Read-only mapping from file extension to a loaded grammar.

    Build it once with :meth:`load` and pass it to whatever needs lookups.
    """

    def __init__(self, grammars: Mapping[Language, Grammar]) -> None:
        self._by_extension: Mapping[str, Grammar] = MappingProxyType(
            {ext: grammars[lang] for ext, lang in _EXTENSION_LANGUAGE_MAP.items() if lang in grammars}
        )

    @classmethod
    def load(cls) -> GrammarRegistry:
        grammars: dict[Language, Grammar] = {}
        for language in Language:
            try:
                ts_language = get_language(cast(SupportedLanguage, language.value))
            except Exception as exc:
                raise GrammarLoadError(f"Failed to load grammar for {language.value!r}: {exc}") from exc
            grammars[language] = Grammar(language=language, ts_language=ts_language)
            logger.debug("Loaded grammar %s", language.value)
        return cls(grammars)

    def lookup(self, extension: str) -> Grammar | None:
        return self._by_extension.get(extension)

    def extensions(self) -> dict[str, Language]:
        return {ext: grammar.language for ext, grammar in self._by_extension.items()}

    def grammars(self) -> tuple[Grammar, ...]:
        return tuple({grammar.language: grammar for grammar in self._by_extension.values()}.values())


def supported_extensions() -> frozenset[str]:
    return frozenset(_EXTENSION_LANGUAGE_MAP)
