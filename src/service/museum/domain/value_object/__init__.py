from src.service.museum.domain.value_object.ticket_type import (
    GENERAL_ADMISSION,
    TicketType,
    find_general_admission,
)


__all__ = ['GENERAL_ADMISSION', 'TicketType', 'find_general_admission']
