from typing import Any, Dict, List, Optional

from pydantic import ConfigDict

from src.service.museum.domain.chatbot_domain import ChatReply
from src.service.museum.driving_adapter.http_controller.schema.camel_schema import CamelModel


class ChatMessageRequest(CamelModel):
    message: str
    context: List[str] = []

    model_config = ConfigDict(
        json_schema_extra={'example': {'message': 'When does it end?', 'context': ['exhibition']}}
    )


class ChatOptionRequest(CamelModel):
    value: str

    model_config = ConfigDict(json_schema_extra={'example': {'value': 'current_exhibitions'}})


class ChatOptionResponse(CamelModel):
    text: str
    value: str


class ChatActionResponse(CamelModel):
    type: str
    path: str


class ChatReplyResponse(CamelModel):
    intent: Optional[str] = None
    content: str
    options: List[ChatOptionResponse] = []
    rich_content: Optional[Dict[str, Any]] = None
    action: Optional[ChatActionResponse] = None
    context: List[str] = []

    @classmethod
    def from_reply(cls, reply: ChatReply) -> 'ChatReplyResponse':
        return cls(
            intent=reply.intent.value if reply.intent else None,
            content=reply.content,
            options=[ChatOptionResponse(text=o.text, value=o.value) for o in reply.options],
            rich_content=reply.rich_content,
            action=(
                ChatActionResponse(type=reply.action.type, path=reply.action.path)
                if reply.action
                else None
            ),
            context=reply.context,
        )
