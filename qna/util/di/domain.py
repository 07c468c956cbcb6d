"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings
from qna.domain.repository import (
    AccountRepository,
    AnswerRepository,
    CredentialRepository,
    QuestionRepository,
)
from qna.domain.service import (
    AccountService,
    AnswerService,
    AuthService,
    JWTService,
    QuestionService,
)
from qna.util.di.base import ProviderBase


class DomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_account_service(
        self, account_repository: AccountRepository
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(account_repository=account_repository)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self,
        jwt_service: JWTService,
        credential_repository: CredentialRepository,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            jwt_service=jwt_service, credential_repository=credential_repository
        )
