"""Wyjątki wspólne dla całego pakietu."""

from __future__ import annotations


class TsconfigWizardError(Exception):
    """Bazowa klasa błędów tsconfig-wizard."""


class UnknownChoiceError(TsconfigWizardError, KeyError):
    """Wybór spoza listy dostępnej dla danej osi lub pytania."""

    def __init__(self, axis: str, label: str) -> None:
        super().__init__(f"Unknown choice '{label}' for '{axis}'")
        self.axis = axis
        self.label = label

    def __str__(self) -> str:
        return str(self.args[0])
