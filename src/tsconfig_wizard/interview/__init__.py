"""Wywiad z użytkownikiem: pytania, warstwa interakcji i przebieg."""

from .backend import PromptBackend, RichPromptBackend
from .engine import Interviewer
from .questions import ALL_QUESTIONS, Question

__all__ = ["ALL_QUESTIONS", "Interviewer", "PromptBackend", "Question", "RichPromptBackend"]
