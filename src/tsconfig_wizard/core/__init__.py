"""Warstwa domenowa: odpowiedzi, katalog opcji i scalanie."""

from . import catalog, models
from .merge import build_compiler_options, build_config
from .models import Answers, EffectiveChoices, Strictness, YesNo

__all__ = [
	"catalog",
	"models",
	"Answers",
	"EffectiveChoices",
	"Strictness",
	"YesNo",
	"build_compiler_options",
	"build_config",
]
