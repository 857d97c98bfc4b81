from datetime import datetime
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.museum.app.interface.i_exhibition_query_repo import IExhibitionQueryRepo
from src.service.museum.domain.chatbot_domain import (
    ChatReply,
    detect_intent,
    generate_reply,
    handle_option,
)


MAX_MESSAGE_LENGTH = 1000


class ChatbotUseCase:
    def __init__(self, *, exhibition_query_repo: IExhibitionQueryRepo) -> None:
        self.exhibition_query_repo = exhibition_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        exhibition_query_repo: IExhibitionQueryRepo = Depends(
            Provide[Container.exhibition_query_repo]
        ),
    ) -> Self:
        return cls(exhibition_query_repo=exhibition_query_repo)

    @Logger.io
    async def reply_to_message(
        self,
        *,
        message: str,
        context: Optional[List[str]] = None,
        now: Optional[datetime] = None,
    ) -> ChatReply:
        message = message.strip()
        if not message:
            raise DomainError('Message cannot be empty')
        if len(message) > MAX_MESSAGE_LENGTH:
            raise DomainError(f'Message cannot be longer than {MAX_MESSAGE_LENGTH} characters')

        intent, new_context = detect_intent(message, context or [])
        exhibitions = await self.exhibition_query_repo.list_all()
        reply = generate_reply(intent, message, exhibitions=exhibitions, now=now or datetime.now())
        reply.context = new_context

        Logger.base.info(f'💬 [CHATBOT] Intent {intent.value} for message of {len(message)} chars')
        return reply

    @Logger.io
    async def select_option(self, *, value: str, now: Optional[datetime] = None) -> ChatReply:
        if not value.strip():
            raise DomainError('Option value cannot be empty')

        exhibitions = await self.exhibition_query_repo.list_all()
        return handle_option(value.strip(), exhibitions=exhibitions, now=now or datetime.now())
