from enum import StrEnum


class ExhibitionStatus(StrEnum):
    ACTIVE = 'active'
    INACTIVE = 'inactive'


class ExhibitionCategory(StrEnum):
    """Where an exhibition's date range sits relative to today."""

    CURRENT = 'current'
    UPCOMING = 'upcoming'
    PAST = 'past'
