"""Question entity.

Questions are the primary record of the service. Each one may carry a set of
free-form tags; an empty tag collection is stored as "no tags" (None).
"""

from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import NormalizedTags, QuestionId


class Question(DomainModel):
    """Question record.

    ``id`` is None only before insertion when the store assigns identifiers.
    Every question returned by a store carries its identifier.
    """

    id: Optional[QuestionId] = None
    title: str = Field(max_length=255)
    content: str
    tags: NormalizedTags = None

    def with_id(self, question_id: QuestionId) -> "Question":
        """Return a copy of this question stored under ``question_id``."""
        return self.model_copy(update={"id": question_id})
