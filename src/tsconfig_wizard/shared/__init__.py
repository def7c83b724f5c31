"""Moduły współdzielone: konfiguracja, logowanie, i18n, wyjątki."""

from .config import AppConfig
from .errors import TsconfigWizardError, UnknownChoiceError
from .localization import LocalizationManager
from .logging import configure_logging

__all__ = [
	"AppConfig",
	"configure_logging",
	"LocalizationManager",
	"TsconfigWizardError",
	"UnknownChoiceError",
]
