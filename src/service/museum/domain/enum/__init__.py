from src.service.museum.domain.enum.booking_status import BookingStatus
from src.service.museum.domain.enum.chatbot_intent import ChatbotIntent, ConversationTopic
from src.service.museum.domain.enum.exhibition_status import ExhibitionCategory, ExhibitionStatus


__all__ = [
    'BookingStatus',
    'ChatbotIntent',
    'ConversationTopic',
    'ExhibitionCategory',
    'ExhibitionStatus',
]
