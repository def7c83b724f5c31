"""Konfiguracja aplikacji."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT_NAME = "tsconfig.json"


@dataclass(slots=True)
class AppConfig:
    """Konfiguracja ogólna aplikacji."""

    output_path: Path
    locale: str = "en"
    verbose: bool = False

    @classmethod
    def default(cls) -> "AppConfig":
        """Tworzy domyślną konfigurację."""

        return cls(output_path=Path.cwd() / DEFAULT_OUTPUT_NAME)
