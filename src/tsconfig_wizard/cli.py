"""Interfejs wiersza poleceń generatora ``tsconfig.json``."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import List, Optional

import structlog

from tsconfig_wizard.core import build_config
from tsconfig_wizard.interview import Interviewer, PromptBackend, RichPromptBackend
from tsconfig_wizard.shared import AppConfig, LocalizationManager, configure_logging
from tsconfig_wizard.writer import ConfigWriter, JsonConfigWriter


def _build_parser() -> ArgumentParser:
    defaults = AppConfig.default()
    parser = ArgumentParser(
        prog="tsconfig-wizard",
        description="Interactively generates a tsconfig.json for a TypeScript project.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=defaults.output_path,
        help="Path of the generated file (default: ./tsconfig.json)",
    )
    parser.add_argument(
        "--lang",
        choices=sorted(LocalizationManager().available_locales()),
        default=defaults.locale,
        help="Language of the questions (default: en)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed logs to stderr",
    )
    return parser


def _config_from_args(args: Namespace) -> AppConfig:
    return AppConfig(output_path=args.output, locale=args.lang, verbose=args.verbose)


def run_wizard(
    config: AppConfig,
    backend: Optional[PromptBackend] = None,
    writer: Optional[ConfigWriter] = None,
) -> Path:
    """Przeprowadza wywiad, scala opcje i zapisuje plik. Błędy nie są tłumione."""

    logger = structlog.get_logger(__name__)
    localization = LocalizationManager()
    localization.set_locale(config.locale)

    interviewer = Interviewer(backend or RichPromptBackend(), localization)
    answers = interviewer.run()
    document = build_config(answers)

    writer = writer or JsonConfigWriter()
    output_path = writer.write(document, config.output_path)
    logger.info("wizard-complete", output=str(output_path))
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _config_from_args(args)
    configure_logging(level=logging.DEBUG if config.verbose else logging.WARNING)
    run_wizard(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
