from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.museum.app.query.chatbot_use_case import ChatbotUseCase
from src.service.museum.driving_adapter.http_controller.schema.chatbot_schema import (
    ChatMessageRequest,
    ChatOptionRequest,
    ChatReplyResponse,
)


router = APIRouter()


@router.post('/message', response_model=ChatReplyResponse)
@Logger.io
async def send_message(
    request: ChatMessageRequest,
    use_case: ChatbotUseCase = Depends(ChatbotUseCase.depends),
) -> ChatReplyResponse:
    reply = await use_case.reply_to_message(message=request.message, context=request.context)
    return ChatReplyResponse.from_reply(reply)


@router.post('/option', response_model=ChatReplyResponse)
@Logger.io
async def select_option(
    request: ChatOptionRequest,
    use_case: ChatbotUseCase = Depends(ChatbotUseCase.depends),
) -> ChatReplyResponse:
    reply = await use_case.select_option(value=request.value)
    return ChatReplyResponse.from_reply(reply)
