"""Inicjalizacja pakietu tsconfig-wizard."""

__all__ = [
    "core",
    "interview",
    "writer",
    "shared",
]
