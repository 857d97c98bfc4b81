from enum import StrEnum


class ChatbotIntent(StrEnum):
    GREETING = 'greeting'
    BUY_TICKETS = 'buy_tickets'
    EXHIBITION_INFO = 'exhibition_info'
    OPENING_HOURS = 'opening_hours'
    PRICING = 'pricing'
    LOCATION = 'location'
    FACILITIES = 'facilities'
    ACCESSIBILITY = 'accessibility'
    FAQ = 'faq'
    MEMBERSHIP = 'membership'
    EVENTS = 'events'
    FEEDBACK = 'feedback'
    HELP = 'help'
    UNKNOWN = 'unknown'


class ConversationTopic(StrEnum):
    """Topics remembered between chat turns to resolve follow-up questions."""

    TICKET = 'ticket'
    EXHIBITION = 'exhibition'
