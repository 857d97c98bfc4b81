"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.museum.driven_adapter.model.booking_line_item_model import BookingLineItemModel
from src.service.museum.driven_adapter.model.booking_model import BookingModel
from src.service.museum.driven_adapter.model.exhibition_model import ExhibitionModel
from src.service.museum.driven_adapter.model.user_model import UserModel

__all__ = [
    'BookingLineItemModel',
    'BookingModel',
    'ExhibitionModel',
    'UserModel',
]
