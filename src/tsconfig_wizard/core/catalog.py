"""Katalog fragmentów ``compilerOptions`` pogrupowanych w osie."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from tsconfig_wizard.shared.errors import UnknownChoiceError

Setting = Union[str, bool]
Fragment = Mapping[str, Setting]


class Axis(str, Enum):
    """Niezależne wymiary konfiguracji."""

    BASE = "base"
    STRICTNESS = "strictness"
    TRANSPILATION = "transpilation"
    MONOREPO = "monorepo"


def _frozen(**settings: Setting) -> Fragment:
    return MappingProxyType(dict(settings))


_BASE: Fragment = _frozen(
    esModuleInterop=True,
    skipLibCheck=True,
    target="es2022",
    allowJs=True,
    resolveJsonModule=True,
    moduleDetection="force",
    isolatedModules=True,
    noImplicitReturns=True,
    noFallthroughCasesInSwitch=True,
    allowUnreachableCode=False,
)

_VARIANTS: Mapping[Axis, Mapping[str, Fragment]] = MappingProxyType(
    {
        Axis.STRICTNESS: MappingProxyType(
            {
                "strictest": _frozen(strict=True, noUncheckedIndexedAccess=True),
                "strict": _frozen(strict=True),
                "loose": _frozen(strict=False),
            }
        ),
        Axis.TRANSPILATION: MappingProxyType(
            {
                "yes": _frozen(
                    moduleResolution="NodeNext",
                    module="NodeNext",
                    outDir="dist",
                    sourceMap=True,
                ),
                "no": _frozen(
                    moduleResolution="Bundler",
                    module="ESNext",
                    noEmit=True,
                ),
            }
        ),
        Axis.MONOREPO: MappingProxyType(
            {
                "yes": _frozen(composite=True, declarationMap=True),
                "no": _frozen(),
            }
        ),
    }
)


def base_fragment() -> Fragment:
    """Zwraca fragment stosowany zawsze, niezależnie od odpowiedzi."""

    return _BASE


def fragment(axis: Axis | str, label: str) -> Fragment:
    """Zwraca fragment dla pary oś/etykieta.

    Oś ``base`` nie ma wariantów, więc etykieta jest ignorowana.
    """

    try:
        axis = Axis(axis)
    except ValueError as exc:
        raise UnknownChoiceError(str(axis), label) from exc

    if axis is Axis.BASE:
        return _BASE

    label = getattr(label, "value", label)
    try:
        return _VARIANTS[axis][label]
    except KeyError as exc:
        raise UnknownChoiceError(axis.value, label) from exc


def labels(axis: Axis | str) -> Tuple[str, ...]:
    """Etykiety dostępne na danej osi, w kolejności katalogu."""

    axis = Axis(axis)
    if axis is Axis.BASE:
        return ()
    return tuple(_VARIANTS[axis])


__all__ = ["Axis", "Fragment", "Setting", "base_fragment", "fragment", "labels"]
