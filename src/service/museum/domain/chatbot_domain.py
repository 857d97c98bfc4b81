"""
Museum assistant chatbot

Stateless: the caller passes back the conversation topics returned by the
previous turn, so follow-up questions ("when does it end?") resolve against
what was discussed before.
"""

from datetime import datetime
import re
from typing import Any, Optional, Sequence

import attrs

from src.service.museum.domain.entity.exhibition_entity import Exhibition
from src.service.museum.domain.enum.chatbot_intent import ChatbotIntent, ConversationTopic
from src.service.museum.domain.faq_knowledge_base import search_faq
from src.service.museum.domain.value_object.ticket_type import GENERAL_ADMISSION


WELCOME_MESSAGE = (
    "Hello! I'm your virtual assistant. How can I help you with your museum visit today?"
)
ANYTHING_ELSE = "\n\nIs there anything else you'd like to know?"

TICKETS_PATH = '/tickets'
EXHIBITIONS_PATH = '/exhibitions'


@attrs.frozen
class ChatOption:
    text: str
    value: str


@attrs.frozen
class ChatAction:
    type: str
    path: str


@attrs.define
class ChatReply:
    content: str
    options: list[ChatOption] = attrs.field(factory=list)
    intent: Optional[ChatbotIntent] = None
    rich_content: Optional[dict[str, Any]] = None
    action: Optional[ChatAction] = None
    context: list[str] = attrs.field(factory=list)


BOOK_TICKETS_OPTION = ChatOption('Book Your Tickets', 'buy_tickets')
EXHIBITIONS_OPTION = ChatOption('Exhibitions', 'exhibition_info')
OPENING_HOURS_OPTION = ChatOption('Opening hours', 'opening_hours')
VIEW_ALL_EXHIBITIONS_OPTION = ChatOption('View all exhibitions', 'view_exhibitions')
GO_TO_TICKETS_OPTION = ChatOption('Go to tickets', 'go_to_tickets')


# Checked in order; the first pattern that matches decides the intent
_FOLLOW_UP_PATTERNS: tuple[tuple[ConversationTopic, re.Pattern[str], ChatbotIntent], ...] = (
    (
        ConversationTopic.EXHIBITION,
        re.compile(r'\b(when|date|time|how long|duration|until|end|running)\b'),
        ChatbotIntent.EXHIBITION_INFO,
    ),
    (
        ConversationTopic.TICKET,
        re.compile(r'\b(how many|which|type|discount|offer|bundle|deal)\b'),
        ChatbotIntent.BUY_TICKETS,
    ),
)

_INTENT_PATTERNS: tuple[tuple[ChatbotIntent, re.Pattern[str]], ...] = tuple(
    (intent, re.compile(rf'\b({"|".join(words)})\b'))
    for intent, words in (
        (
            ChatbotIntent.GREETING,
            (
                'hello', 'hi', 'hey', 'hola', 'bonjour', 'guten tag', 'ciao', 'greetings',
                'good morning', 'good afternoon', 'good evening', 'howdy',
            ),
        ),
        (
            ChatbotIntent.BUY_TICKETS,
            (
                'ticket', 'tickets', 'buy', 'purchase', 'book', 'booking', 'reserve',
                'reservation', 'admit', 'admission', 'entry', 'entrance', 'pass', 'passes',
            ),
        ),
        (
            ChatbotIntent.EXHIBITION_INFO,
            (
                'exhibit', 'exhibition', 'gallery', 'display', 'showing', 'art', 'collection',
                'artist', 'artwork', 'painting', 'sculpture', 'installation',
            ),
        ),
        (
            ChatbotIntent.OPENING_HOURS,
            (
                'open', 'opening', 'hours', 'time', 'schedule', 'when', 'close', 'closing',
                'day', 'days', 'monday', 'tuesday', 'wednesday', 'thursday', 'friday',
                'saturday', 'sunday', 'weekend', 'weekday',
            ),
        ),
        (
            ChatbotIntent.PRICING,
            (
                'price', 'cost', 'fee', 'admission', 'how much', 'charges', 'pay', 'pricing',
                'dollar', 'money', 'expensive', 'cheap', 'affordable', 'discount', 'offer',
                'deal', 'special',
            ),
        ),
        (
            ChatbotIntent.LOCATION,
            (
                'where', 'location', 'address', 'directions', 'how to get', 'find', 'map',
                'nearby', 'area', 'district', 'neighborhood', 'transport', 'parking', 'drive',
                'bus', 'train', 'subway', 'metro', 'taxi', 'uber',
            ),
        ),
        (
            ChatbotIntent.FACILITIES,
            (
                'facilities', 'amenities', 'services', 'cafe', 'restaurant', 'food', 'drink',
                'coffee', 'shop', 'store', 'gift', 'souvenir', 'restroom', 'toilet', 'bathroom',
                'wifi', 'internet', 'coat check', 'locker', 'storage',
            ),
        ),
        (
            ChatbotIntent.ACCESSIBILITY,
            (
                'accessible', 'accessibility', 'wheelchair', 'disabled', 'disability',
                'special needs', 'service animal', 'hearing', 'visual', 'impairment', 'aid',
                'assistance',
            ),
        ),
        (
            ChatbotIntent.FAQ,
            (
                'faq', 'question', 'answer', 'explain', 'tell me about', 'information', 'info',
                'learn about', 'curious about', 'wondering about',
            ),
        ),
        (
            ChatbotIntent.MEMBERSHIP,
            (
                'member', 'membership', 'subscribe', 'subscription', 'join', 'annual',
                'monthly', 'pass', 'benefit', 'discount', 'special', 'vip',
            ),
        ),
        (
            ChatbotIntent.EVENTS,
            (
                'event', 'events', 'program', 'activity', 'workshop', 'lecture', 'talk', 'tour',
                'special', 'happening', 'upcoming', 'calendar', 'schedule',
            ),
        ),
        (
            ChatbotIntent.FEEDBACK,
            (
                'feedback', 'suggest', 'suggestion', 'improve', 'review', 'experience',
                'opinion', 'thought', 'comment', 'complain', 'complaint', 'issue', 'problem',
            ),
        ),
        (
            ChatbotIntent.HELP,
            (
                'help', 'assist', 'support', 'guide', 'how do i', 'how to', 'what can you do',
                'commands', 'options', 'capabilities',
            ),
        ),
    )
)

# Detecting these intents puts their topic into the conversation context
_INTENT_TOPICS = {
    ChatbotIntent.BUY_TICKETS: ConversationTopic.TICKET,
    ChatbotIntent.EXHIBITION_INFO: ConversationTopic.EXHIBITION,
}


def detect_intent(message: str, context: Sequence[str] = ()) -> tuple[ChatbotIntent, list[str]]:
    """Classify a visitor message; returns the intent and the updated context."""
    lower_message = message.lower()
    new_context = list(context)

    for topic, pattern, intent in _FOLLOW_UP_PATTERNS:
        if topic in new_context and pattern.search(lower_message):
            return intent, new_context

    for intent, pattern in _INTENT_PATTERNS:
        if pattern.search(lower_message):
            topic = _INTENT_TOPICS.get(intent)
            if topic and topic not in new_context:
                new_context.append(topic)
            return intent, new_context

    if search_faq(message):
        return ChatbotIntent.FAQ, new_context
    return ChatbotIntent.UNKNOWN, new_context


def _greeting_for(hour: int) -> str:
    if hour < 12:
        return 'Good morning'
    if hour < 18:
        return 'Good afternoon'
    return 'Good evening'


def _date_range(exhibition: Exhibition) -> str:
    return f'{exhibition.start_date.isoformat()} - {exhibition.end_date.isoformat()}'


def _general_admission_lines() -> list[str]:
    return [
        f'{ticket.name}: ${ticket.price:g} - {ticket.description}' for ticket in GENERAL_ADMISSION
    ]


def _buy_tickets_reply() -> ChatReply:
    return ChatReply(
        content=(
            'I can help you purchase tickets! Would you like to see our ticket options or go '
            'directly to the booking page?'
        ),
        options=[
            ChatOption('Show ticket options', 'show_ticket_options'),
            ChatOption('Go to booking page', 'go_to_booking'),
            ChatOption('Group bookings', 'group_booking'),
            ChatOption('Special discounts', 'ticket_discounts'),
        ],
    )


def generate_reply(
    intent: ChatbotIntent,
    message: str,
    *,
    exhibitions: Sequence[Exhibition],
    now: datetime,
) -> ChatReply:
    faq_match = search_faq(message)

    if intent == ChatbotIntent.GREETING:
        reply = ChatReply(
            content=f'{_greeting_for(now.hour)}! {WELCOME_MESSAGE} How can I assist you today?',
            options=[
                BOOK_TICKETS_OPTION,
                EXHIBITIONS_OPTION,
                OPENING_HOURS_OPTION,
                ChatOption('Museum Facilities', 'facilities'),
            ],
        )
    elif intent == ChatbotIntent.FAQ and faq_match:
        reply = ChatReply(
            content=f'{faq_match.answer}{ANYTHING_ELSE}',
            options=[
                ChatOption('Book tickets', 'buy_tickets'),
                ChatOption('Exhibition information', 'exhibition_info'),
            ],
        )
    elif intent in (ChatbotIntent.FAQ, ChatbotIntent.BUY_TICKETS):
        reply = _buy_tickets_reply()
    elif intent == ChatbotIntent.EXHIBITION_INFO:
        reply = ChatReply(
            content=(
                'We have several fascinating exhibitions currently on display. '
                'Here are some highlights:'
            ),
            rich_content={
                'type': 'exhibition',
                'data': {
                    'exhibitions': [
                        {
                            'id': exhibition.id,
                            'name': exhibition.name,
                            'description': exhibition.description,
                            'dates': _date_range(exhibition),
                        }
                        for exhibition in exhibitions
                        if exhibition.is_active
                    ]
                },
            },
            options=[
                ChatOption('Current exhibitions', 'current_exhibitions'),
                ChatOption('Upcoming exhibitions', 'upcoming_exhibitions'),
                ChatOption('Book exhibition tickets', 'go_to_booking'),
            ],
        )
    elif intent == ChatbotIntent.OPENING_HOURS:
        reply = ChatReply(
            content=(
                'Our opening hours:\n'
                '• Monday: Closed\n'
                '• Tuesday - Friday: 10:00 - 18:00\n'
                '• Saturday - Sunday: 09:00 - 20:00\n'
                '• Public Holidays: 10:00 - 16:00\n\n'
                'Please note that last admission is 1 hour before closing.'
            )
        )
    elif intent == ChatbotIntent.PRICING:
        pricing = '\n• '.join(_general_admission_lines())
        reply = ChatReply(
            content=(
                f'Our admission prices are as follows:\n\n• {pricing}\n\n'
                'Would you like to purchase tickets now?'
            ),
            options=[
                ChatOption('Purchase tickets', 'buy_tickets'),
                ChatOption('More information', 'pricing_details'),
            ],
        )
    elif intent == ChatbotIntent.LOCATION:
        reply = ChatReply(
            content=(
                'Our museum is located at 123 Art Avenue, Cultural District, City. We are '
                'accessible by public transportation (buses 10, 24, and 35 stop nearby) and have '
                'parking available.'
            ),
            options=[
                ChatOption('Get directions', 'get_directions'),
                ChatOption('Parking information', 'parking_info'),
            ],
        )
    elif intent == ChatbotIntent.FACILITIES:
        reply = ChatReply(
            content=(
                'Our museum features a café, gift shop, coat check, free Wi-Fi, and restrooms on '
                'every floor. All facilities are accessible for visitors with disabilities.'
            )
        )
    elif intent == ChatbotIntent.ACCESSIBILITY:
        reply = ChatReply(
            content=(
                'Our museum is fully accessible for visitors with disabilities. We offer '
                'wheelchair ramps, elevators, accessible restrooms, and assistive listening '
                'devices. Service animals are welcome.'
            ),
            options=[ChatOption('Accessibility services', 'accessibility_services')],
        )
    elif faq_match:
        reply = ChatReply(
            content=f'{faq_match.answer}{ANYTHING_ELSE}',
            options=[BOOK_TICKETS_OPTION, EXHIBITIONS_OPTION],
        )
    else:
        reply = ChatReply(
            content=(
                "I'm not sure I understand. Can you please rephrase or select one of these "
                'options?'
            ),
            options=[
                BOOK_TICKETS_OPTION,
                EXHIBITIONS_OPTION,
                OPENING_HOURS_OPTION,
                ChatOption('Museum Location', 'location'),
                ChatOption('Help', 'help'),
            ],
        )

    reply.intent = intent
    return reply


def _navigate(content: str, path: str) -> ChatReply:
    return ChatReply(content=content, action=ChatAction(type='navigate', path=path))


def _find_exhibition(
    exhibitions: Sequence[Exhibition], exhibition_id: str
) -> Optional[Exhibition]:
    return next((e for e in exhibitions if str(e.id) == exhibition_id), None)


_INTENT_OPTION_VALUES = frozenset(
    intent.value
    for intent in ChatbotIntent
    if intent not in (ChatbotIntent.BUY_TICKETS, ChatbotIntent.UNKNOWN)
)

_STATIC_OPTION_REPLIES: dict[str, str] = {
    'get_directions': (
        "You can find directions to our museum using Google Maps. We're located at "
        '123 Art Avenue, Cultural District, City.'
    ),
    'pricing_details': (
        'We also offer family passes ($50 for 2 adults and up to 3 children) and annual '
        'memberships starting at $75. Members enjoy unlimited free admission, special '
        'exhibition discounts, and invitations to exclusive events.'
    ),
    'parking_info': (
        'We have a parking garage with 200 spaces. Parking costs $5 for the first 2 hours and '
        '$2 for each additional hour. Museum members receive a 50% discount on parking fees.'
    ),
    'accessibility_services': (
        'We offer specialized tours for visitors with visual or hearing impairments, '
        'large-print and Braille materials, and sign language interpretation with advance '
        'notice. Please contact us at accessibility@museum.com for more information or to '
        'request specific accommodations.'
    ),
    'exhibition_notify': (
        'To receive notifications about upcoming exhibitions, please enter your email address '
        'on our "About" page or sign up for our newsletter.'
    ),
    'ticket_discounts': (
        'We offer several discount options:\n\n'
        '• Students: 40% off with valid ID\n'
        '• Seniors (65+): 25% off\n'
        '• Military personnel: 25% off\n'
        '• Museum members: Free admission\n'
        '• City residents: Free admission on the first Sunday of each month\n\n'
        'Discounts cannot be combined with other offers.'
    ),
    'request_group': (
        'To request a group booking, please contact our group sales department at '
        'groups@museum.com or call (555) 123-4567. Please provide your preferred date, time, '
        'group size, and any special requirements.'
    ),
    'group_rates': (
        'Our group rates (10+ people) are:\n\n'
        '• Adults: $16 per person (20% off)\n'
        '• Students: $9 per person (25% off)\n'
        '• Seniors: $12 per person (20% off)\n'
        '• Children: $8 per person (20% off)\n\n'
        'One free chaperone ticket is provided for every 10 students for school groups.'
    ),
}


def handle_option(
    value: str, *, exhibitions: Sequence[Exhibition], now: datetime
) -> ChatReply:
    """Reply to a quick-reply button the visitor clicked."""
    today = now.date()
    if value in _STATIC_OPTION_REPLIES:
        return ChatReply(content=_STATIC_OPTION_REPLIES[value])

    if value == 'buy_tickets':
        return ChatReply(
            content=(
                'Great! Let me help you with ticket booking. Would you like to book tickets for '
                'today or select another date?'
            ),
            options=[
                ChatOption('Book for today', 'book_today'),
                ChatOption('Select a date', 'select_date'),
            ],
        )
    if value == 'book_today':
        return ChatReply(
            content='Perfect! How many tickets would you like to book?',
            options=[GO_TO_TICKETS_OPTION],
        )
    if value == 'select_date':
        return ChatReply(
            content='You can select a date on our tickets page. Would you like to go there now?',
            options=[GO_TO_TICKETS_OPTION],
        )
    if value in ('go_to_tickets', 'go_to_booking'):
        return _navigate('Taking you to our ticket booking page...', TICKETS_PATH)
    if value == 'view_exhibitions':
        return _navigate('Taking you to our exhibitions page...', EXHIBITIONS_PATH)

    if value == 'show_ticket_options':
        lines = [f'• {line}' for line in _general_admission_lines()] + [
            f'• {exhibition.name}: ${exhibition.price:g} - {exhibition.description}'
            for exhibition in exhibitions
        ]
        ticket_info = '\n'.join(lines)
        return ChatReply(
            content=(
                f'Here are our ticket options:\n\n{ticket_info}\n\n'
                'Would you like to proceed with booking?'
            ),
            options=[ChatOption('Book tickets', 'go_to_booking')],
        )

    if value == 'current_exhibitions':
        active = [exhibition for exhibition in exhibitions if exhibition.is_active]
        if not active:
            return ChatReply(
                content=(
                    "We currently don't have any active exhibitions. Please check back later or "
                    'visit our exhibitions page for upcoming shows.'
                ),
                options=[VIEW_ALL_EXHIBITIONS_OPTION],
            )
        names = '", "'.join(exhibition.name for exhibition in active)
        return ChatReply(
            content=(
                f'Our current exhibitions include "{names}." Would you like more details about '
                'any of these?'
            ),
            options=[ChatOption(e.name, f'exhibition_{e.id}') for e in active]
            + [VIEW_ALL_EXHIBITIONS_OPTION],
        )

    if value == 'upcoming_exhibitions':
        upcoming = [exhibition for exhibition in exhibitions if exhibition.start_date > today]
        if not upcoming:
            return ChatReply(
                content=(
                    "We don't have any upcoming exhibitions scheduled at the moment. Please check "
                    'our exhibitions page later for updates.'
                ),
                options=[ChatOption('View current exhibitions', 'current_exhibitions')],
            )
        upcoming_list = ' and '.join(
            f'"{e.name}" (starting {e.start_date.isoformat()})' for e in upcoming
        )
        return ChatReply(
            content=(
                f'We have exciting upcoming exhibitions including {upcoming_list}. Would you like '
                'to be notified when these open?'
            ),
            options=[
                ChatOption('Notify me', 'exhibition_notify'),
                ChatOption('More information', 'view_exhibitions'),
            ],
        )

    # Buttons named after an intent answer like the matching free-text question
    if value in _INTENT_OPTION_VALUES:
        return generate_reply(ChatbotIntent(value), value, exhibitions=exhibitions, now=now)

    if value == 'group_booking':
        return ChatReply(
            content=(
                'For groups of 10 or more, we offer special rates and booking options. Large '
                'groups can receive up to 20% discount on regular admission. Would you like to '
                'make a group booking?'
            ),
            options=[
                ChatOption('Request group booking', 'request_group'),
                ChatOption('Group rates', 'group_rates'),
            ],
        )

    if value.startswith('exhibition_'):
        exhibition = _find_exhibition(exhibitions, value.removeprefix('exhibition_'))
        if exhibition is None:
            return ChatReply(
                content=(
                    "I couldn't find information about that exhibition. Would you like to see "
                    'our available exhibitions?'
                ),
                options=[VIEW_ALL_EXHIBITIONS_OPTION],
            )
        return ChatReply(
            content=(
                f'{exhibition.name}: {exhibition.description}\n\n'
                f'Available from {exhibition.start_date.isoformat()} to '
                f'{exhibition.end_date.isoformat()}.\n\n'
                'Would you like to book tickets to see this exhibition?'
            ),
            options=[ChatOption('Book tickets', 'go_to_booking'), VIEW_ALL_EXHIBITIONS_OPTION],
        )

    return ChatReply(
        content="I'm not sure how to handle that request. Can I help you with something else?",
        options=[BOOK_TICKETS_OPTION, EXHIBITIONS_OPTION],
    )
