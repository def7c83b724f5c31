"""Scalanie fragmentów katalogu w jeden dokument konfiguracyjny."""

from __future__ import annotations

from typing import Dict, List, Union

import structlog

from .catalog import Axis, base_fragment, fragment
from .models import Answers, YesNo

CompilerOptions = Dict[str, Union[str, bool, List[str]]]

_LIB_DEFAULT = ["es2022"]
_LIB_DOM = ["es2022", "dom", "dom.iterable"]


def build_compiler_options(answers: Answers) -> CompilerOptions:
    """Nakłada fragmenty w ustalonej kolejności; późniejsze wygrywają przy kolizji kluczy."""

    choices = answers.effective()

    options: CompilerOptions = {}
    options.update(base_fragment())
    options.update(fragment(Axis.STRICTNESS, choices.strictness.value))
    options.update(fragment(Axis.TRANSPILATION, YesNo.from_bool(choices.transpiled).value))
    options.update(fragment(Axis.MONOREPO, YesNo.from_bool(choices.monorepo).value))
    options["declaration"] = choices.library
    options["lib"] = list(_LIB_DOM if choices.dom else _LIB_DEFAULT)
    return options


def build_config(answers: Answers) -> Dict[str, CompilerOptions]:
    """Buduje kompletny dokument ``tsconfig.json``."""

    options = build_compiler_options(answers)
    structlog.get_logger(__name__).debug("config-built", keys=sorted(options))
    return {"compilerOptions": options}


__all__ = ["CompilerOptions", "build_compiler_options", "build_config"]
