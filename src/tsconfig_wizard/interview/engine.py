"""Przebieg wywiadu z warunkowym pomijaniem pytań."""

from __future__ import annotations

from typing import Optional

import structlog

from tsconfig_wizard.core.models import Answers, Strictness, YesNo
from tsconfig_wizard.shared.errors import UnknownChoiceError
from tsconfig_wizard.shared.localization import LocalizationManager

from .backend import PromptBackend
from .questions import DOM, LIBRARY, MONOREPO, STRICTNESS, TRANSPILATION, Question


class Interviewer:
    """Zadaje pytania w stałej kolejności i zwraca zebrane odpowiedzi.

    Pytanie o bibliotekę pada tylko przy transpilacji, a pytanie o monorepo
    tylko wtedy, gdy budowana jest biblioteka.
    """

    def __init__(
        self,
        backend: PromptBackend,
        localization: Optional[LocalizationManager] = None,
    ) -> None:
        self._backend = backend
        self._localization = localization or LocalizationManager()
        self._logger = structlog.get_logger(__name__)

    def run(self) -> Answers:
        self._logger.debug("interview-started")

        strictness = Strictness(self._ask(STRICTNESS))
        transpilation = YesNo(self._ask(TRANSPILATION))
        dom = YesNo(self._ask(DOM))

        library: Optional[YesNo] = None
        if transpilation is YesNo.YES:
            library = YesNo(self._ask(LIBRARY))
        else:
            self._logger.debug("question-skipped", question=LIBRARY.name, reason="not-transpiled")

        monorepo: Optional[YesNo] = None
        if library is YesNo.YES:
            monorepo = YesNo(self._ask(MONOREPO))
        else:
            self._logger.debug("question-skipped", question=MONOREPO.name, reason="not-a-library")

        answers = Answers(
            strictness=strictness,
            transpilation=transpilation,
            dom=dom,
            library=library,
            monorepo=monorepo,
        )
        self._logger.debug("interview-finished")
        return answers

    def _ask(self, question: Question) -> str:
        message = self._localization.text(question.message_key)
        answer = self._backend.choose(message, question.choices)
        if answer not in question.choices:
            raise UnknownChoiceError(question.name, answer)
        self._logger.debug("question-answered", question=question.name, answer=answer)
        return answer


__all__ = ["Interviewer"]
