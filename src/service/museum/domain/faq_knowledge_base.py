"""
Visitor FAQ and the keyword scoring used to match free text against it.
"""

import re
from typing import Optional

import attrs


MIN_MATCH_SCORE = 5


@attrs.frozen
class FaqEntry:
    question: str
    answer: str
    keywords: tuple[str, ...]

    def score(self, query: str) -> int:
        """
        Relevance of a free-text query to this entry:
        +10 when the query contains the whole question,
        +5 per keyword found in the query,
        and per query word longer than 3 characters,
        +2 if the question contains it and +1 per keyword containing it.
        """
        lower_query = query.lower()
        lower_question = self.question.lower()
        score = 0

        if lower_question in lower_query:
            score += 10

        score += 5 * sum(1 for keyword in self.keywords if keyword.lower() in lower_query)

        for word in re.split(r'\s+', lower_query):
            if len(word) <= 3:
                continue
            if word in lower_question:
                score += 2
            score += sum(1 for keyword in self.keywords if word in keyword.lower())

        return score


FAQ_ENTRIES: tuple[FaqEntry, ...] = (
    FaqEntry(
        question='What are your opening hours?',
        answer=(
            'Our museum is open Tuesday to Sunday from 10:00 AM to 6:00 PM. We are closed on '
            'Mondays and major holidays. Last admission is at 5:00 PM.'
        ),
        keywords=('opening', 'hours', 'time', 'schedule', 'when', 'close', 'open', 'visit'),
    ),
    FaqEntry(
        question='How much do tickets cost?',
        answer=(
            'Adult tickets are $20, Seniors (65+) are $15, Students are $12, and Children (6-17) '
            'are $10. Children under 6 are free. We also offer family passes for $50 (2 adults '
            'and up to 3 children).'
        ),
        keywords=('ticket', 'cost', 'price', 'fee', 'admission', 'how much', 'discount'),
    ),
    FaqEntry(
        question='Do you offer guided tours?',
        answer=(
            'Yes, we offer guided tours at 11:00 AM, 1:00 PM, and 3:00 PM daily. Tours last '
            'approximately 90 minutes and are included with your admission. Audio guides are '
            'also available in multiple languages for a small fee.'
        ),
        keywords=('tour', 'guide', 'guided', 'audio'),
    ),
    FaqEntry(
        question='Is the museum accessible for visitors with disabilities?',
        answer=(
            'Yes, our museum is fully accessible for visitors with disabilities. We offer '
            'wheelchair ramps, elevators, accessible restrooms, and assistive listening devices. '
            'Service animals are welcome.'
        ),
        keywords=('accessible', 'accessibility', 'disability', 'wheelchair', 'handicap'),
    ),
    FaqEntry(
        question='What facilities do you have?',
        answer=(
            'Our museum features a café, gift shop, coat check, free Wi-Fi, and restrooms on '
            'every floor. All facilities are accessible for visitors with disabilities.'
        ),
        keywords=(
            'facilities', 'amenities', 'services', 'café', 'cafe', 'shop', 'restroom', 'wifi',
        ),
    ),
    FaqEntry(
        question='Can I take photographs in the museum?',
        answer=(
            'Photography for personal use is permitted in most permanent collection galleries, '
            'but flash photography, tripods, and selfie sticks are not allowed. Photography is '
            'not permitted in some special exhibitions or where specifically prohibited.'
        ),
        keywords=('photo', 'photograph', 'camera', 'picture', 'flash', 'selfie'),
    ),
    FaqEntry(
        question='Do you offer membership?',
        answer=(
            'Yes, we offer annual memberships starting at $75 for individuals. Members enjoy '
            'unlimited free admission, special exhibition discounts, invitations to exclusive '
            'events, and discounts at our café and gift shop.'
        ),
        keywords=('member', 'membership', 'annual', 'subscription'),
    ),
    FaqEntry(
        question='Can I book tickets online?',
        answer=(
            'Yes, you can book tickets online through our website or via our chatbot assistant. '
            'Online booking is recommended to avoid queues, especially during peak times and '
            'for special exhibitions.'
        ),
        keywords=('online', 'book', 'booking', 'reserve', 'advance'),
    ),
)


def search_faq(query: str) -> Optional[FaqEntry]:
    """Best scoring entry, first one on ties, or None below MIN_MATCH_SCORE."""
    best_entry: Optional[FaqEntry] = None
    best_score = 0
    for entry in FAQ_ENTRIES:
        score = entry.score(query)
        if score > best_score:
            best_entry, best_score = entry, score

    if best_entry is not None and best_score >= MIN_MATCH_SCORE:
        return best_entry
    return None
