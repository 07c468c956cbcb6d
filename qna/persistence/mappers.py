"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from qna.domain.model import Account, Answer, ClientCredential, Question
from qna.domain.value import AccountId, AnswerId, QuestionId


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model (tags normalized, so an empty array reads as None)
    """
    return Question(
        id=QuestionId(row["id"]),
        title=row["title"],
        content=row["content"],
        tags=row.get("tags"),
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    The id is only included when set, so the serial default applies otherwise.
    """
    data: Dict[str, Any] = {
        "title": question.title,
        "content": question.content,
        "tags": sorted(question.tags) if question.tags is not None else None,
    }
    if question.id is not None:
        data["id"] = question.id.root
    return data


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(row["id"]),
        content=row["content"],
        question_id=QuestionId(row["corresponding_question"]),
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    data: Dict[str, Any] = {
        "content": answer.content,
        "corresponding_question": answer.question_id.root,
    }
    if answer.id is not None:
        data["id"] = answer.id.root
    return data


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=AccountId(row["id"]),
        email=row["email"],
        password=row["password"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    data: Dict[str, Any] = {
        "email": account.email,
        "password": account.password,
    }
    if account.id is not None:
        data["id"] = account.id.root
    return data


def row_to_credential(row: Dict[str, Any]) -> ClientCredential:
    """Convert database row to ClientCredential domain model."""
    return ClientCredential(
        client_id=row["client_id"],
        client_secret=row["client_secret"],
        full_name=row["full_name"],
        email=row["email"],
    )
