"""Test configuration shared across this project's pytest suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure tests can import the pixeledit package without requiring editable install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pixeledit.core.bitmap import Bitmap  # noqa: E402
from pixeledit.core.controller import InteractionController  # noqa: E402
from pixeledit.core.session import SessionState  # noqa: E402


class FakeDialog:
    """Stands in for the main window's save / question prompts."""

    def __init__(self, save_path=None, answer: bool = True) -> None:
        self.save_path = save_path
        self.answer = answer
        self.save_prompts = 0
        self.questions = 0

    def ask_save_path(self, default_name: str):
        self.save_prompts += 1
        self.last_default_name = default_name
        return None if self.save_path is None else str(self.save_path)

    def ask_question(self, title: str, message: str) -> bool:
        self.questions += 1
        return self.answer


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def dialog() -> FakeDialog:
    return FakeDialog()


@pytest.fixture
def controller(session, dialog) -> InteractionController:
    ctl = InteractionController(session, dialog=dialog)
    ctl.errors = []
    ctl.on_error = lambda title, message: ctl.errors.append((title, message))
    return ctl


@pytest.fixture
def bitmap_8x8() -> Bitmap:
    return Bitmap.create(8, 8)
