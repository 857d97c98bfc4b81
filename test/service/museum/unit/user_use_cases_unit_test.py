"""
Unit tests for sign-up, login, admin seeding and user deletion
"""

from unittest.mock import AsyncMock, Mock

import attrs
from pydantic import SecretStr
import pytest

from src.platform.exception.exceptions import DomainError, LoginError, NotFoundError
from src.service.museum.app.command.delete_user_use_case import DeleteUserUseCase
from src.service.museum.app.command.seed_admin_use_case import SeedAdminUseCase
from src.service.museum.app.command.sign_up_user_use_case import SignUpUserUseCase
from src.service.museum.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.museum.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.museum.domain.entity.user_entity import UserEntity, UserRole


def _with_id(user_entity: UserEntity) -> UserEntity:
    return attrs.evolve(user_entity, id=7)


@pytest.fixture
def mock_password_hasher() -> Mock:
    hasher = Mock()
    hasher.hash_password = Mock(return_value='hashed-secret')
    return hasher


@pytest.fixture
def mock_user_command_repo() -> Mock:
    repo = AsyncMock()
    repo.create = AsyncMock(side_effect=_with_id)
    return repo


@pytest.fixture
def mock_user_query_repo() -> Mock:
    repo = AsyncMock()
    repo.exists_by_email = AsyncMock(return_value=False)
    return repo


@pytest.fixture
def sign_up(
    mock_user_command_repo: Mock, mock_user_query_repo: Mock, mock_password_hasher: Mock
) -> SignUpUserUseCase:
    return SignUpUserUseCase(
        user_command_repo=mock_user_command_repo,
        user_query_repo=mock_user_query_repo,
        password_hasher=mock_password_hasher,
    )


@pytest.mark.unit
class TestSignUpUser:
    @pytest.mark.asyncio
    async def test_creates_visitor_with_hashed_password(
        self, sign_up: SignUpUserUseCase, mock_user_query_repo: Mock
    ):
        created = await sign_up.execute(
            name=' Test Visitor ', email='Visitor@Example.com', password='P@ssw0rd'
        )

        assert created.id == 7
        assert created.email == 'visitor@example.com'
        assert created.name == 'Test Visitor'
        assert created.role == UserRole.USER
        assert created.hashed_password == 'hashed-secret'
        mock_user_query_repo.exists_by_email.assert_awaited_once_with('visitor@example.com')

    @pytest.mark.asyncio
    async def test_fail_on_duplicate_email(
        self,
        sign_up: SignUpUserUseCase,
        mock_user_query_repo: Mock,
        mock_user_command_repo: Mock,
    ):
        mock_user_query_repo.exists_by_email = AsyncMock(return_value=True)

        with pytest.raises(DomainError, match='User already exists'):
            await sign_up.execute(name='Visitor', email='visitor@example.com', password='P@ssw0rd')
        mock_user_command_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_fail_on_short_password(
        self, sign_up: SignUpUserUseCase, mock_user_command_repo: Mock
    ):
        with pytest.raises(DomainError, match='Password must be at least 6 characters'):
            await sign_up.execute(name='Visitor', email='visitor@example.com', password='123')
        mock_user_command_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_fail_on_invalid_email(self, sign_up: SignUpUserUseCase):
        with pytest.raises(DomainError, match='Please provide a valid email'):
            await sign_up.execute(name='Visitor', email='not-an-email', password='P@ssw0rd')


@pytest.mark.unit
class TestSeedAdmin:
    @pytest.fixture
    def admin_settings(self) -> Mock:
        return Mock(
            ADMIN_EMAIL='admin@museum.test',
            ADMIN_PASSWORD=SecretStr('Adm1nP@ss'),
            ADMIN_NAME='Administrator',
        )

    @pytest.mark.asyncio
    async def test_creates_admin(self, sign_up: SignUpUserUseCase, admin_settings: Mock):
        admin = await SeedAdminUseCase(sign_up_user_use_case=sign_up).execute(
            settings=admin_settings
        )

        assert admin is not None
        assert admin.role == UserRole.ADMIN
        assert admin.email == 'admin@museum.test'

    @pytest.mark.asyncio
    async def test_skips_existing_admin(
        self,
        sign_up: SignUpUserUseCase,
        admin_settings: Mock,
        mock_user_query_repo: Mock,
    ):
        mock_user_query_repo.exists_by_email = AsyncMock(return_value=True)

        result = await SeedAdminUseCase(sign_up_user_use_case=sign_up).execute(
            settings=admin_settings
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_skips_when_not_configured(
        self, sign_up: SignUpUserUseCase, mock_user_command_repo: Mock
    ):
        result = await SeedAdminUseCase(sign_up_user_use_case=sign_up).execute(
            settings=Mock(ADMIN_EMAIL=None, ADMIN_PASSWORD=None)
        )

        assert result is None
        mock_user_command_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_admin_settings_propagate(
        self, sign_up: SignUpUserUseCase, admin_settings: Mock
    ):
        admin_settings.ADMIN_PASSWORD = SecretStr('123')

        with pytest.raises(DomainError, match='Password must be at least 6 characters'):
            await SeedAdminUseCase(sign_up_user_use_case=sign_up).execute(settings=admin_settings)


@pytest.mark.unit
class TestAuthenticateUser:
    @pytest.fixture
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher()

    @pytest.fixture
    def stored_user(
        self, visitor_entity: UserEntity, password_hasher: BcryptPasswordHasher
    ) -> UserEntity:
        visitor_entity.set_password('P@ssw0rd', password_hasher)
        return visitor_entity

    @pytest.fixture
    def use_case(
        self,
        stored_user: UserEntity,
        mock_user_query_repo: Mock,
        password_hasher: BcryptPasswordHasher,
    ) -> AuthenticateUserUseCase:
        mock_user_query_repo.get_by_email = AsyncMock(return_value=stored_user)
        return AuthenticateUserUseCase(
            user_query_repo=mock_user_query_repo, password_hasher=password_hasher
        )

    @pytest.mark.asyncio
    async def test_login_with_correct_password(
        self, use_case: AuthenticateUserUseCase, mock_user_query_repo: Mock
    ):
        user = await use_case.execute(email=' VISITOR@example.com', password='P@ssw0rd')

        assert user.id == 2
        mock_user_query_repo.get_by_email.assert_awaited_once_with('visitor@example.com')

    @pytest.mark.asyncio
    async def test_fail_on_wrong_password(self, use_case: AuthenticateUserUseCase):
        with pytest.raises(LoginError, match='Invalid credentials'):
            await use_case.execute(email='visitor@example.com', password='wrong-password')

    @pytest.mark.asyncio
    async def test_fail_on_unknown_email(
        self, use_case: AuthenticateUserUseCase, mock_user_query_repo: Mock
    ):
        mock_user_query_repo.get_by_email = AsyncMock(return_value=None)

        with pytest.raises(LoginError, match='Invalid credentials'):
            await use_case.execute(email='nobody@example.com', password='P@ssw0rd')


@pytest.mark.unit
class TestBcryptPasswordHasher:
    def test_hash_and_verify(self):
        hasher = BcryptPasswordHasher()
        hashed = hasher.hash_password(plain_password=SecretStr('P@ssw0rd'))

        assert hashed != 'P@ssw0rd'
        assert hasher.verify_password(plain_password=SecretStr('P@ssw0rd'), hashed_password=hashed)
        assert not hasher.verify_password(
            plain_password=SecretStr('other'), hashed_password=hashed
        )

    def test_rejects_non_bcrypt_hash(self):
        hasher = BcryptPasswordHasher()
        assert not hasher.verify_password(
            plain_password=SecretStr('P@ssw0rd'), hashed_password='plain-text'
        )
        assert not hasher.verify_password(plain_password=SecretStr('P@ssw0rd'), hashed_password='')


@pytest.mark.unit
class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_deletes_other_user(self, mock_user_command_repo: Mock):
        mock_user_command_repo.delete = AsyncMock(return_value=True)

        await DeleteUserUseCase(user_command_repo=mock_user_command_repo).execute(
            user_id=2, requested_by=1
        )

        mock_user_command_repo.delete.assert_awaited_once_with(user_id=2)

    @pytest.mark.asyncio
    async def test_fail_on_self_delete(self, mock_user_command_repo: Mock):
        with pytest.raises(DomainError, match='You cannot delete your own account'):
            await DeleteUserUseCase(user_command_repo=mock_user_command_repo).execute(
                user_id=1, requested_by=1
            )
        mock_user_command_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_fail_on_missing_user(self, mock_user_command_repo: Mock):
        mock_user_command_repo.delete = AsyncMock(return_value=False)

        with pytest.raises(NotFoundError, match='User not found'):
            await DeleteUserUseCase(user_command_repo=mock_user_command_repo).execute(
                user_id=99, requested_by=1
            )
