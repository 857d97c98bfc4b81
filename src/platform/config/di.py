"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.museum.driven_adapter.payment.razorpay_payment_gateway import (
    RazorpayPaymentGateway,
)
from src.service.museum.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.museum.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.museum.driven_adapter.repo.exhibition_command_repo_impl import (
    ExhibitionCommandRepoImpl,
)
from src.service.museum.driven_adapter.repo.exhibition_query_repo_impl import (
    ExhibitionQueryRepoImpl,
)
from src.service.museum.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.museum.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.museum.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.museum.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)

    # Repositories (stateless - use session_factory per-request)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    exhibition_command_repo = providers.Singleton(
        ExhibitionCommandRepoImpl, session_factory=database.provided.session
    )
    exhibition_query_repo = providers.Singleton(
        ExhibitionQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(
        JwtAuth, user_query_repo=user_query_repo, config=config_service
    )

    # Payment gateway (Razorpay)
    payment_gateway = providers.Singleton(RazorpayPaymentGateway, config=config_service)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
