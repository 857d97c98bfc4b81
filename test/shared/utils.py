from datetime import date, timedelta
from typing import Any, Dict, Optional

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import ADMIN_EXHIBITIONS, LOGIN, SIGNUP, TICKET_BASE
from test.util_constant import (
    TEST_EXHIBITION_DESCRIPTION,
    TEST_EXHIBITION_NAME,
    TEST_EXHIBITION_PRICE,
)


def assert_response_status(response, expected_status: int, message: str | None = None):
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response.text}'
    )


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def create_user(client: TestClient, email: str, password: str, name: str) -> Dict[str, Any]:
    response = client.post(SIGNUP, json={'name': name, 'email': email, 'password': password})
    assert_response_status(response, 201, f'Failed to sign up {email}: {response.text}')
    return response.json()


def login_user(client: TestClient, email: str, password: str) -> Any:
    login_response = client.post(LOGIN, json={'email': email, 'password': password})
    assert_response_status(login_response, 200, f'Login failed: {login_response.text}')
    return login_response


def create_exhibition(
    client: TestClient,
    admin_token: str,
    *,
    name: str = TEST_EXHIBITION_NAME,
    description: str = TEST_EXHIBITION_DESCRIPTION,
    price: float = TEST_EXHIBITION_PRICE,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    status: str = 'active',
) -> Dict[str, Any]:
    today = date.today()
    payload = {
        'name': name,
        'description': description,
        'price': price,
        'startDate': (start_date or today - timedelta(days=10)).isoformat(),
        'endDate': (end_date or today + timedelta(days=60)).isoformat(),
        'imageUrl': 'https://example.com/exhibition.jpg',
        'status': status,
    }
    response = client.post(ADMIN_EXHIBITIONS, json=payload, headers=auth_headers(admin_token))
    assert_response_status(response, 201, f'Failed to create exhibition: {response.text}')
    return response.json()['exhibition']


def next_open_day(start: date, *, days_ahead: int = 1) -> date:
    """First day on or after start + days_ahead that is not a Monday."""
    day = start + timedelta(days=days_ahead)
    while day.weekday() == 0:
        day += timedelta(days=1)
    return day


def next_monday(start: date) -> date:
    return start + timedelta(days=(7 - start.weekday()) % 7 or 7)


def booking_payload(
    visit_date: date,
    exhibition_id: int,
    *,
    adults: int = 2,
    exhibition_quantity: int = 1,
    **extra: Any,
) -> Dict[str, Any]:
    return {
        'visitDate': visit_date.isoformat(),
        'tickets': [
            {'ticketId': 'adult', 'name': 'Adult', 'price': 20, 'quantity': adults},
            {
                'ticketId': str(exhibition_id),
                'quantity': exhibition_quantity,
                'isExhibition': True,
            },
        ],
        **extra,
    }


def book_tickets(
    client: TestClient, token: str, visit_date: date, exhibition_id: int, **kwargs: Any
) -> Dict[str, Any]:
    response = client.post(
        TICKET_BASE,
        json=booking_payload(visit_date, exhibition_id, **kwargs),
        headers=auth_headers(token),
    )
    assert_response_status(response, 201, f'Failed to book tickets: {response.text}')
    return response.json()['ticket']


def post_raw_json(client: TestClient, url: str, body: str, token: str) -> Any:
    """POST a hand-written JSON body, for literals like NaN that json.dumps will not emit."""
    return client.post(
        url,
        content=body,
        headers={**auth_headers(token), 'Content-Type': 'application/json'},
    )
