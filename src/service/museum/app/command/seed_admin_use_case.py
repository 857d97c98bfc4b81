from typing import Optional

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.command.sign_up_user_use_case import SignUpUserUseCase
from src.service.museum.domain.entity.user_entity import UserEntity, UserRole


class SeedAdminUseCase:
    """Create the configured administrator at startup unless the email is already taken."""

    def __init__(self, *, sign_up_user_use_case: SignUpUserUseCase) -> None:
        self.sign_up_user_use_case = sign_up_user_use_case

    @Logger.io
    async def execute(self, *, settings: Settings) -> Optional[UserEntity]:
        if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
            Logger.base.info('⏭️  [SEED_ADMIN] ADMIN_EMAIL/ADMIN_PASSWORD not set, skipping')
            return None

        try:
            admin = await self.sign_up_user_use_case.execute(
                name=settings.ADMIN_NAME,
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD.get_secret_value(),
                role=UserRole.ADMIN,
            )
        except DomainError as e:
            if e.message != 'User already exists':
                raise
            Logger.base.info('✅ [SEED_ADMIN] Admin account already present')
            return None

        Logger.base.info(f'🔑 [SEED_ADMIN] Admin account {admin.id} created')
        return admin
