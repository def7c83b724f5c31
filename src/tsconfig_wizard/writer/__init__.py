"""Zapis wygenerowanej konfiguracji na dysk."""

from .base import ConfigWriter
from .json_writer import JsonConfigWriter

__all__ = ["ConfigWriter", "JsonConfigWriter"]
