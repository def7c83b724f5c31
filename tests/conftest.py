"""Wspólne fixture'y testów."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import pytest


class ScriptedBackend:
    """Odpowiada z góry ustalonymi etykietami i zapamiętuje zadane pytania."""

    def __init__(self, answers: Sequence[str]) -> None:
        self._answers = list(answers)
        self.asked: List[Tuple[str, Tuple[str, ...]]] = []

    def choose(self, message: str, choices: Sequence[str]) -> str:
        self.asked.append((message, tuple(choices)))
        if not self._answers:
            raise AssertionError(f"Unexpected question: {message}")
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def scripted_backend():
    def _factory(*answers: str) -> ScriptedBackend:
        return ScriptedBackend(answers)

    return _factory


@pytest.fixture
def scenario_answers() -> Dict[str, Tuple[str, ...]]:
    return {
        "A": ("strictest", "no", "no"),
        "B": ("loose", "yes", "yes", "no"),
        "C": ("strict", "yes", "no", "yes", "yes"),
    }
