"""Guess the source toolchain of a module from its import and export names."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from . import constants
from .stats_types import Language

logger = logging.getLogger(__name__)

ImportId = tuple[str, str]
Rule = Callable[[Sequence[ImportId], Sequence[str]], bool]


def _import_name_contains(marker: str) -> Rule:
    def rule(imports: Sequence[ImportId], exports: Sequence[str]) -> bool:
        return any(marker in name for _, name in imports)

    return rule


def _is_go(imports: Sequence[ImportId], exports: Sequence[str]) -> bool:
    return any(module == constants.GO_IMPORT_MODULE for module, _ in imports)


def _is_wasm_bindgen(imports: Sequence[ImportId], exports: Sequence[str]) -> bool:
    for module, name in imports:
        if module in constants.WASM_BINDGEN_MODULES:
            return True
        if any(marker in name for marker in constants.WASM_BINDGEN_MARKERS):
            return True
    return any(constants.WASM_BINDGEN_EXPORT_MARKER in name for name in exports)


def _is_minified_emscripten(
    imports: Sequence[ImportId], exports: Sequence[str]
) -> bool:
    present = set(imports)
    return any(
        all((module, name) in present for name in constants.MINIFIED_EMSCRIPTEN_NAMES)
        for module in constants.MINIFIED_EMSCRIPTEN_MODULES
    )


# Evaluated in order, first match wins. Blazor ships Emscripten glue, so
# it must be tested first.
LANGUAGE_RULES: tuple[tuple[Rule, Language], ...] = (
    (_import_name_contains(constants.BLAZOR_MARKER), Language.BLAZOR),
    (_import_name_contains(constants.EMSCRIPTEN_MARKER), Language.EMSCRIPTEN),
    (_is_go, Language.GO),
    (_is_wasm_bindgen, Language.RUST),
    (_is_minified_emscripten, Language.LIKELY_EMSCRIPTEN),
)


def infer_language(imports: Sequence[ImportId], exports: Sequence[str]) -> Language:
    """Return the first matching verdict, or ``Language.UNKNOWN``."""
    for rule, language in LANGUAGE_RULES:
        if rule(imports, exports):
            logger.debug("Language rule %s matched", language.value)
            return language
    return Language.UNKNOWN
