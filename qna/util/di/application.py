"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.answer import (
    CreateAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from qna.application.usecase.auth import LoginUseCase
from qna.application.usecase.question import (
    CreateQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from qna.domain.service import (
    AnswerService,
    AuthService,
    ProfanityFilter,
    QuestionService,
)
from qna.util.di.base import ProviderBase


class ApplicationProvider(ProviderBase):
    """Application use cases provider."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, profanity_filter: ProfanityFilter
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, profanity_filter=profanity_filter
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService, profanity_filter: ProfanityFilter
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service, profanity_filter=profanity_filter
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        profanity_filter: ProfanityFilter,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            question_service=question_service,
            answer_service=answer_service,
            profanity_filter=profanity_filter,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_answer_use_case(
        self, answer_service: AnswerService, profanity_filter: ProfanityFilter
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(
            answer_service=answer_service, profanity_filter=profanity_filter
        )

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            question_service=question_service, answer_service=answer_service
        )

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)
