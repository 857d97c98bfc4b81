"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.museum.app.command import (
    create_booking_use_case,
    create_exhibition_use_case,
    create_payment_order_use_case,
    delete_exhibition_use_case,
    delete_user_use_case,
    sign_up_user_use_case,
    update_booking_status_to_cancelled_use_case,
    update_exhibition_use_case,
)
from src.service.museum.app.query import (
    authenticate_user_use_case,
    chatbot_use_case,
    get_analytics_use_case,
    list_bookings_use_case,
    list_exhibitions_use_case,
    list_users_use_case,
)
from src.service.museum.driving_adapter.http_controller import user_controller
from src.service.museum.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    create_exhibition_use_case,
    create_payment_order_use_case,
    delete_exhibition_use_case,
    delete_user_use_case,
    sign_up_user_use_case,
    update_booking_status_to_cancelled_use_case,
    update_exhibition_use_case,
    authenticate_user_use_case,
    chatbot_use_case,
    get_analytics_use_case,
    list_bookings_use_case,
    list_exhibitions_use_case,
    list_users_use_case,
    user_controller,
    role_auth,
]
