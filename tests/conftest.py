"""Shared fixtures for the match tests."""

import pytest
from PySide6.QtCore import QCoreApplication

from brainblast_app.core.models import Question


def make_question(index: int) -> Question:
    return Question(
        text=f"Question {index}?",
        correct_answer=f"right-{index}",
        options=(f"right-{index}", f"wrong-{index}-a", f"wrong-{index}-b", f"wrong-{index}-c"),
    )


@pytest.fixture
def questions():
    """Ten distinct questions, Q0..Q9."""
    return [make_question(i) for i in range(10)]


@pytest.fixture(scope="session")
def qapp():
    """Qt objects with timers need a core application instance."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
