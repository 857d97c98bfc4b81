from datetime import date
from typing import Optional

import attrs


@attrs.frozen
class TicketType:
    """One bookable ticket kind: a general admission tier or an exhibition."""

    id: str
    name: str
    price: float
    description: str
    is_exhibition: bool = False
    available: bool = True
    start_date: Optional[date] = None
    end_date: Optional[date] = None


GENERAL_ADMISSION: tuple[TicketType, ...] = (
    TicketType(
        id='adult',
        name='Adult',
        price=20,
        description='Regular admission for adults (18-64 years)',
    ),
    TicketType(
        id='child',
        name='Child',
        price=10,
        description='For children (6-17 years)',
    ),
    TicketType(
        id='senior',
        name='Senior',
        price=15,
        description='For seniors (65+ years)',
    ),
    TicketType(
        id='student',
        name='Student',
        price=12,
        description='For students with valid ID',
    ),
)

_GENERAL_ADMISSION_BY_ID = {ticket_type.id: ticket_type for ticket_type in GENERAL_ADMISSION}


def find_general_admission(ticket_id: str) -> Optional[TicketType]:
    return _GENERAL_ADMISSION_BY_ID.get(ticket_id)
