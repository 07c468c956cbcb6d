"""Test configuration and fixtures."""

import logfire
import pytest

from qna.domain.model import Question
from qna.domain.value import QuestionId

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_question(
    question_id: int | None = 1,
    title: str = "What is Rust?",
    content: str = "Rust is a systems programming language.",
    tags: list[str] | None = None,
) -> Question:
    """Build a question for tests."""
    return Question(
        id=QuestionId(question_id) if question_id is not None else None,
        title=title,
        content=content,
        tags=tags,
    )


@pytest.fixture
def rust_question() -> Question:
    return make_question(1, tags=["rust"])
