"""Answer entity."""

from typing import Optional

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, QuestionId


class Answer(DomainModel):
    """Answer to a question.

    The owning question is referenced by ``question_id`` only; stores do not
    check that it exists, and deleting a question leaves its answers in place.
    """

    id: Optional[AnswerId] = None
    content: str
    question_id: QuestionId

    def with_id(self, answer_id: AnswerId) -> "Answer":
        """Return a copy of this answer stored under ``answer_id``."""
        return self.model_copy(update={"id": answer_id})
