from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.decks.use_cases.deck_use_case import DeckUseCase
from flashdeck.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from flashdeck.application.identity.use_cases.password_reset_use_case import (
    PasswordResetUseCase,
)
from flashdeck.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from flashdeck.application.study.use_cases.progress_use_case import ProgressUseCase
from flashdeck.application.study.use_cases.study_session_use_case import StudySessionUseCase
from flashdeck.config import get_settings
from flashdeck.domain.study.services.progress_aggregator import ProgressAggregator
from flashdeck.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork
from flashdeck.infrastructure.decks.repositories import DeckRepository
from flashdeck.infrastructure.identity.repositories.user_repository import UserRepository
from flashdeck.infrastructure.identity.services.password_service import PasswordService
from flashdeck.infrastructure.identity.services.token_service_adapter import TokenServiceAdapter
from flashdeck.infrastructure.study.repositories import (
    CardProgressRepository,
    ProgressQueryRepository,
    StudySessionRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    uow = providers.Factory(SqlAlchemyUnitOfWork, db=db)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    deck_repository = providers.Factory(DeckRepository, db=db)
    card_progress_repository = providers.Factory(CardProgressRepository, db=db)
    study_session_repository = providers.Factory(StudySessionRepository, db=db)
    progress_query_repository = providers.Factory(ProgressQueryRepository, db=db)

    # Identity services
    password_service = providers.Singleton(
        PasswordService, pepper=settings.provided.PASSWORD_PEPPER
    )
    token_service = providers.Singleton(TokenServiceAdapter)

    # Domain services (pure domain logic, no db)
    progress_aggregator = providers.Factory(ProgressAggregator)

    # Identity use cases
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        uow=uow,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )

    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        uow=uow,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
        min_password_length=settings.provided.MIN_PASSWORD_LENGTH,
    )

    password_reset_use_case = providers.Factory(
        PasswordResetUseCase,
        uow=uow,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
        require_reset_token=settings.provided.PASSWORD_RESET_REQUIRES_TOKEN,
        min_password_length=settings.provided.MIN_PASSWORD_LENGTH,
    )

    # Decks module use cases
    deck_use_case = providers.Factory(
        DeckUseCase,
        uow=uow,
        deck_repository=deck_repository,
    )

    # Study module use cases
    study_session_use_case = providers.Factory(
        StudySessionUseCase,
        uow=uow,
        deck_repository=deck_repository,
        card_progress_repository=card_progress_repository,
        study_session_repository=study_session_repository,
    )

    progress_use_case = providers.Factory(
        ProgressUseCase,
        uow=uow,
        progress_query_repository=progress_query_repository,
        study_session_repository=study_session_repository,
        progress_aggregator=progress_aggregator,
    )


# Initialize container
container = Container()
