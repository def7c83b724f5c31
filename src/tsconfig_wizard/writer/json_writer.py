"""Zapis konfiguracji jako JSON z wcięciem dwóch spacji."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import structlog

from .base import ConfigWriter


class JsonConfigWriter(ConfigWriter):
    """Serializuje dokument do JSON i nadpisuje plik docelowy w całości."""

    indent = 2

    def render(self, document: Mapping[str, Any]) -> str:
        return json.dumps(document, indent=self.indent, ensure_ascii=False)

    def write(self, document: Mapping[str, Any], destination: Path) -> Path:
        logger = structlog.get_logger(__name__)
        content = self.render(document)
        try:
            destination.write_text(content, encoding="utf-8")
        except OSError as exc:
            logger.error("config-write-failed", path=str(destination), error=str(exc))
            raise

        logger.info("config-written", path=str(destination), bytes=len(content.encode("utf-8")))
        return destination


__all__ = ["JsonConfigWriter"]
