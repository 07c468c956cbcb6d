"""Loading of seed questions for the memory store."""

import json
from pathlib import Path
from typing import List

import logfire
from pydantic import TypeAdapter, ValidationError

from qna.domain.model import Question
from qna.util.error import SeedFileError

_questions_adapter = TypeAdapter(List[Question])


def load_seed_questions(path: Path) -> List[Question]:
    """Read questions from a JSON file.

    The file holds either an array of questions or an object mapping
    identifiers to questions, e.g. ``{"1": {"id": 1, "title": ..., ...}}``.
    When a mapped question has no ``id`` the key is used.

    Raises:
        SeedFileError: If the file cannot be read or holds invalid questions
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SeedFileError(path, f"cannot read ({e})") from e

    if isinstance(raw, dict):
        raw = [
            {"id": key, **value} if isinstance(value, dict) and "id" not in value else value
            for key, value in raw.items()
        ]

    try:
        questions = _questions_adapter.validate_python(raw)
    except ValidationError as e:
        raise SeedFileError(path, f"invalid questions ({e})") from e

    logfire.info("Seed questions loaded", path=str(path), count=len(questions))
    return questions
