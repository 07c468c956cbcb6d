"""Answer use cases."""

from .create_answer import CreateAnswerRequest, CreateAnswerResponse, CreateAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase
from .update_answer import UpdateAnswerRequest, UpdateAnswerResponse, UpdateAnswerUseCase

__all__ = [
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "UpdateAnswerRequest",
    "UpdateAnswerResponse",
    "UpdateAnswerUseCase",
]
