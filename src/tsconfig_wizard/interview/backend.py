"""Warstwa interakcji z użytkownikiem."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from rich.console import Console
from rich.prompt import Prompt


class PromptBackend(Protocol):
    """Interfejs mechanizmu zadawania pytań jednokrotnego wyboru."""

    def choose(self, message: str, choices: Sequence[str]) -> str:
        """Zwraca dokładnie jedną z przekazanych etykiet."""


class RichPromptBackend(PromptBackend):
    """Pyta w terminalu i powtarza pytanie, dopóki odpowiedź nie należy do listy."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console()

    def choose(self, message: str, choices: Sequence[str]) -> str:
        return Prompt.ask(message, choices=list(choices), console=self._console)


__all__ = ["PromptBackend", "RichPromptBackend"]
