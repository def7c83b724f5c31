"""Modele odpowiedzi użytkownika."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Strictness(str, Enum):
    """Poziom rygoru sprawdzania typów."""

    STRICTEST = "strictest"
    STRICT = "strict"
    LOOSE = "loose"


class YesNo(str, Enum):
    """Odpowiedź na pytanie zamknięte."""

    YES = "yes"
    NO = "no"

    @classmethod
    def from_bool(cls, value: bool) -> "YesNo":
        return cls.YES if value else cls.NO


@dataclass(frozen=True, slots=True)
class Answers:
    """Odpowiedzi zebrane podczas jednego przebiegu wywiadu.

    ``library`` i ``monorepo`` mają trzy stany: ``None`` (pytanie pominięte),
    ``YesNo.YES`` oraz ``YesNo.NO``.
    """

    strictness: Strictness
    transpilation: YesNo
    dom: YesNo
    library: Optional[YesNo] = None
    monorepo: Optional[YesNo] = None

    def effective(self) -> "EffectiveChoices":
        """Sprowadza odpowiedzi do wartości logicznych z domyślnym ``no``."""

        transpiled = self.transpilation is YesNo.YES
        library = transpiled and self.library is YesNo.YES
        monorepo = library and self.monorepo is YesNo.YES
        return EffectiveChoices(
            strictness=self.strictness,
            transpiled=transpiled,
            dom=self.dom is YesNo.YES,
            library=library,
            monorepo=monorepo,
        )


@dataclass(frozen=True, slots=True)
class EffectiveChoices:
    """Znormalizowane wybory używane przy scalaniu fragmentów."""

    strictness: Strictness
    transpiled: bool
    dom: bool
    library: bool
    monorepo: bool
