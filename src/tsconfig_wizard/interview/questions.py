"""Definicje pytań zadawanych podczas wywiadu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from tsconfig_wizard.core.catalog import Axis, labels
from tsconfig_wizard.core.models import YesNo


@dataclass(frozen=True, slots=True)
class Question:
    """Pytanie jednokrotnego wyboru."""

    name: str
    message_key: str
    choices: Tuple[str, ...]


_YES_NO = tuple(choice.value for choice in YesNo)

STRICTNESS = Question("Strictness", "question.strictness", labels(Axis.STRICTNESS))
TRANSPILATION = Question("Transpilation", "question.transpilation", labels(Axis.TRANSPILATION))
DOM = Question("DOM", "question.dom", _YES_NO)
LIBRARY = Question("Library", "question.library", _YES_NO)
MONOREPO = Question("Monorepo", "question.monorepo", labels(Axis.MONOREPO))

ALL_QUESTIONS = (STRICTNESS, TRANSPILATION, DOM, LIBRARY, MONOREPO)

__all__ = ["Question", "STRICTNESS", "TRANSPILATION", "DOM", "LIBRARY", "MONOREPO", "ALL_QUESTIONS"]
