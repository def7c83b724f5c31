"""Testy przebiegu wywiadu."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from tsconfig_wizard.core import Strictness, YesNo
from tsconfig_wizard.interview import ALL_QUESTIONS, Interviewer, RichPromptBackend
from tsconfig_wizard.shared import LocalizationManager, UnknownChoiceError


def test_not_transpiled_skips_library_and_monorepo(scripted_backend, scenario_answers) -> None:
    backend = scripted_backend(*scenario_answers["A"])
    answers = Interviewer(backend).run()

    assert [message for message, _ in backend.asked] == [
        "How strict should TS be?",
        "Will TS code be transpiled to JS?",
        "Will the code run in the DOM (Frontend)?",
    ]
    assert answers.strictness is Strictness.STRICTEST
    assert answers.transpilation is YesNo.NO
    assert answers.library is None
    assert answers.monorepo is None


def test_application_skips_monorepo(scripted_backend, scenario_answers) -> None:
    backend = scripted_backend(*scenario_answers["B"])
    answers = Interviewer(backend).run()

    assert len(backend.asked) == 4
    assert backend.asked[-1][0] == "Are you building for a library?"
    assert answers.library is YesNo.NO
    assert answers.monorepo is None


def test_library_asks_monorepo(scripted_backend, scenario_answers) -> None:
    backend = scripted_backend(*scenario_answers["C"])
    answers = Interviewer(backend).run()

    assert backend.remaining == 0
    assert backend.asked[-1][0] == "Is the library in a monorepo?"
    assert answers.library is YesNo.YES
    assert answers.monorepo is YesNo.YES


def test_choices_are_offered_in_order(scripted_backend, scenario_answers) -> None:
    backend = scripted_backend(*scenario_answers["C"])
    Interviewer(backend).run()

    assert [choices for _, choices in backend.asked] == [
        ("strictest", "strict", "loose"),
        ("yes", "no"),
        ("yes", "no"),
        ("yes", "no"),
        ("yes", "no"),
    ]


def test_answer_outside_choices_is_rejected(scripted_backend) -> None:
    backend = scripted_backend("pedantic")
    with pytest.raises(UnknownChoiceError):
        Interviewer(backend).run()


def test_questions_use_selected_locale(scripted_backend) -> None:
    localization = LocalizationManager()
    localization.set_locale("pl")
    backend = scripted_backend("loose", "no", "no")

    Interviewer(backend, localization).run()

    assert backend.asked[0][0] == "Jak rygorystyczny ma być TS?"


def test_interrupt_propagates() -> None:
    class _AbortingBackend:
        def choose(self, message, choices):
            raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        Interviewer(_AbortingBackend()).run()


def test_every_question_has_translations() -> None:
    for locale in ("en", "pl"):
        manager = LocalizationManager(locale=locale)
        for question in ALL_QUESTIONS:
            assert manager.text(question.message_key)


def test_rich_backend_repeats_until_valid_choice(monkeypatch) -> None:
    replies = iter(["maybe", "no"])
    monkeypatch.setattr("builtins.input", lambda *_a: next(replies))
    output = io.StringIO()
    backend = RichPromptBackend(console=Console(file=output, force_terminal=False))

    result = backend.choose("Will TS code be transpiled to JS?", ["yes", "no"])

    assert result == "no"
    assert "[yes/no]" in output.getvalue()
