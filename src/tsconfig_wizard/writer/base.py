"""Interfejsy zapisu dokumentu konfiguracyjnego."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Protocol


class ConfigWriter(Protocol):
    """Interfejs dla mechanizmów zapisu konfiguracji."""

    def write(self, document: Mapping[str, Any], destination: Path) -> Path:
        """Zapisuje dokument, nadpisując istniejący plik, i zwraca ścieżkę docelową."""
