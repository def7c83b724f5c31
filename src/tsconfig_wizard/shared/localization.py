"""Teksty pytań w obsługiwanych językach."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping


_TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "question.strictness": "How strict should TS be?",
        "question.transpilation": "Will TS code be transpiled to JS?",
        "question.dom": "Will the code run in the DOM (Frontend)?",
        "question.library": "Are you building for a library?",
        "question.monorepo": "Is the library in a monorepo?",
        "language.english": "English",
        "language.polish": "Polish",
    },
    "pl": {
        "question.strictness": "Jak rygorystyczny ma być TS?",
        "question.transpilation": "Czy kod TS będzie transpilowany do JS?",
        "question.dom": "Czy kod będzie działał w DOM (frontend)?",
        "question.library": "Czy budujesz bibliotekę?",
        "question.monorepo": "Czy biblioteka jest częścią monorepo?",
        "language.english": "Angielski",
        "language.polish": "Polski",
    },
}


@dataclass(slots=True)
class LocalizationManager:
    """Eksponuje teksty w zależności od wybranego języka."""

    locale: str = "en"

    def set_locale(self, locale: str) -> None:
        if locale not in _TRANSLATIONS:
            raise ValueError(f"Unsupported locale: {locale}")
        self.locale = locale

    def text(self, key: str) -> str:
        table = _TRANSLATIONS.get(self.locale, _TRANSLATIONS["en"])
        try:
            return table[key]
        except KeyError as exc:
            raise KeyError(f"Missing translation for key '{key}' in locale '{self.locale}'") from exc

    def available_locales(self) -> Mapping[str, str]:
        return {
            "en": _TRANSLATIONS["en"]["language.english"],
            "pl": _TRANSLATIONS["pl"]["language.polish"],
        }


__all__ = ["LocalizationManager"]
