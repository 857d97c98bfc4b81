"""
Administrator endpoints: users, exhibitions, transactions and analytics
"""

from datetime import date, timedelta

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    ADMIN_ANALYTICS,
    ADMIN_EXHIBITION,
    ADMIN_EXHIBITIONS,
    ADMIN_TRANSACTIONS,
    ADMIN_USER_DELETE,
    ADMIN_USERS,
    EXHIBITION_GET,
    TICKET_BASE,
    TICKET_CANCEL,
)
from test.shared.utils import (
    assert_response_status,
    auth_headers,
    book_tickets,
    create_exhibition,
    post_raw_json,
)
from test.util_constant import ADMIN_EMAIL, TEST_EMAIL, TEST_EXHIBITION_NAME, TEST_VISITOR_NAME


@pytest.mark.integration
class TestAdminAccess:
    @pytest.mark.parametrize(
        'method,route',
        [
            ('get', ADMIN_USERS),
            ('get', ADMIN_EXHIBITIONS),
            ('get', ADMIN_TRANSACTIONS),
            ('get', ADMIN_ANALYTICS),
            ('delete', ADMIN_USER_DELETE.format(user_id=1)),
        ],
    )
    def test_visitor_is_forbidden(self, client: TestClient, visitor: dict, method: str, route: str):
        response = client.request(method, route, headers=auth_headers(visitor['token']))

        assert_response_status(response, 403)
        assert response.json()['detail'] == 'Admin access required'

    def test_anonymous_is_unauthorized(self, client: TestClient):
        response = client.get(ADMIN_USERS)

        assert_response_status(response, 401)


@pytest.mark.integration
class TestAdminUsers:
    def test_list_users_newest_first(self, client: TestClient, admin: dict, visitor: dict):
        response = client.get(ADMIN_USERS, headers=auth_headers(admin['token']))

        assert_response_status(response, 200)
        users = response.json()['users']
        assert [u['email'] for u in users] == [TEST_EMAIL, ADMIN_EMAIL]
        assert users[1]['role'] == 'admin'

    def test_delete_user_removes_their_bookings(
        self, client: TestClient, admin: dict, visitor: dict, visit_date: date
    ):
        exhibition = create_exhibition(client, admin['token'])
        book_tickets(client, visitor['token'], visit_date, exhibition['id'])

        response = client.delete(
            ADMIN_USER_DELETE.format(user_id=visitor['user']['id']),
            headers=auth_headers(admin['token']),
        )

        assert_response_status(response, 200)
        assert response.json() == {'message': 'User deleted successfully'}
        transactions = client.get(ADMIN_TRANSACTIONS, headers=auth_headers(admin['token']))
        assert transactions.json()['transactions'] == []

    def test_cannot_delete_self(self, client: TestClient, admin: dict):
        response = client.delete(
            ADMIN_USER_DELETE.format(user_id=admin['user']['id']),
            headers=auth_headers(admin['token']),
        )

        assert_response_status(response, 400)
        assert response.json()['detail'] == 'You cannot delete your own account'

    def test_delete_missing_user(self, client: TestClient, admin: dict):
        response = client.delete(
            ADMIN_USER_DELETE.format(user_id=999999), headers=auth_headers(admin['token'])
        )

        assert_response_status(response, 404)
        assert response.json()['detail'] == 'User not found'


@pytest.mark.integration
class TestAdminExhibitions:
    def test_create(self, client: TestClient, admin: dict):
        today = date.today()
        response = client.post(
            ADMIN_EXHIBITIONS,
            json={
                'name': 'Modern Sculpture',
                'description': 'Bronze and steel',
                'startDate': today.isoformat(),
                'endDate': (today + timedelta(days=30)).isoformat(),
                'price': 18.5,
            },
            headers=auth_headers(admin['token']),
        )

        assert_response_status(response, 201)
        body = response.json()
        assert body['message'] == 'Exhibition created successfully'
        assert body['exhibition']['price'] == 18.5
        assert body['exhibition']['status'] == 'active'
        assert body['exhibition']['imageUrl'] == ''

    @pytest.mark.parametrize(
        'overrides,detail',
        [
            ({'price': -1}, 'Exhibition price cannot be negative'),
            ({'price': 100_001}, 'Exhibition price cannot be more than 100000'),
            ({'name': '  '}, 'Exhibition name cannot be empty'),
            (
                {'startDate': '2027-02-01', 'endDate': '2027-01-01'},
                'Exhibition end date must be on or after its start date',
            ),
        ],
    )
    def test_create_invalid(self, client: TestClient, admin: dict, overrides: dict, detail: str):
        payload = {
            'name': 'Modern Sculpture',
            'description': 'Bronze and steel',
            'startDate': '2027-01-01',
            'endDate': '2027-02-01',
            'price': 10,
            **overrides,
        }

        response = client.post(
            ADMIN_EXHIBITIONS, json=payload, headers=auth_headers(admin['token'])
        )

        assert_response_status(response, 400)
        assert response.json()['detail'] == detail

    @pytest.mark.parametrize('literal', ['NaN', 'Infinity', '-Infinity'])
    def test_create_rejects_non_finite_price(self, client: TestClient, admin: dict, literal: str):
        body = (
            '{"name": "Modern Sculpture", "description": "Bronze and steel", '
            '"startDate": "2027-01-01", "endDate": "2027-02-01", "price": ' + literal + '}'
        )

        response = post_raw_json(client, ADMIN_EXHIBITIONS, body, admin['token'])

        assert_response_status(response, 400)
        assert response.json()['detail'][0]['loc'] == ['body', 'price']

    def test_update_rejects_nan_price(self, client: TestClient, admin: dict):
        exhibition = create_exhibition(client, admin['token'])

        response = client.put(
            ADMIN_EXHIBITION.format(exhibition_id=exhibition['id']),
            content='{"price": NaN}',
            headers={**auth_headers(admin['token']), 'Content-Type': 'application/json'},
        )

        assert_response_status(response, 400)

    def test_list_includes_inactive(self, client: TestClient, admin: dict):
        create_exhibition(client, admin['token'], name='Hidden Show', status='inactive')

        response = client.get(ADMIN_EXHIBITIONS, headers=auth_headers(admin['token']))

        assert_response_status(response, 200)
        assert [e['status'] for e in response.json()['exhibitions']] == ['inactive']

    def test_partial_update(self, client: TestClient, admin: dict):
        exhibition = create_exhibition(client, admin['token'])

        response = client.put(
            ADMIN_EXHIBITION.format(exhibition_id=exhibition['id']),
            json={'price': 22, 'status': 'inactive'},
            headers=auth_headers(admin['token']),
        )

        assert_response_status(response, 200)
        updated = response.json()['exhibition']
        assert response.json()['message'] == 'Exhibition updated successfully'
        assert updated['price'] == 22.0
        assert updated['status'] == 'inactive'
        assert updated['name'] == TEST_EXHIBITION_NAME
        assert updated['startDate'] == exhibition['startDate']

    def test_update_rejects_reversed_dates(self, client: TestClient, admin: dict):
        exhibition = create_exhibition(client, admin['token'])

        response = client.put(
            ADMIN_EXHIBITION.format(exhibition_id=exhibition['id']),
            json={'endDate': '2000-01-01'},
            headers=auth_headers(admin['token']),
        )

        assert_response_status(response, 400)

    def test_update_missing(self, client: TestClient, admin: dict):
        response = client.put(
            ADMIN_EXHIBITION.format(exhibition_id=999999),
            json={'price': 22},
            headers=auth_headers(admin['token']),
        )

        assert_response_status(response, 404)
        assert response.json()['detail'] == 'Exhibition not found'

    def test_delete_keeps_booked_lines(
        self, client: TestClient, admin: dict, visitor: dict, visit_date: date
    ):
        exhibition = create_exhibition(client, admin['token'])
        book_tickets(client, visitor['token'], visit_date, exhibition['id'])

        response = client.delete(
            ADMIN_EXHIBITION.format(exhibition_id=exhibition['id']),
            headers=auth_headers(admin['token']),
        )

        assert_response_status(response, 200)
        assert response.json() == {'message': 'Exhibition deleted successfully'}
        gone = client.get(EXHIBITION_GET.format(exhibition_id=exhibition['id']))
        assert_response_status(gone, 404)
        bookings = client.get(TICKET_BASE, headers=auth_headers(visitor['token'])).json()
        assert bookings['tickets'][0]['tickets'][1]['name'] == TEST_EXHIBITION_NAME

    def test_delete_missing(self, client: TestClient, admin: dict):
        response = client.delete(
            ADMIN_EXHIBITION.format(exhibition_id=999999), headers=auth_headers(admin['token'])
        )

        assert_response_status(response, 404)


@pytest.mark.integration
class TestAdminReporting:
    def test_transactions_include_owner(
        self, client: TestClient, admin: dict, visitor: dict, visit_date: date
    ):
        exhibition = create_exhibition(client, admin['token'])
        booking = book_tickets(client, visitor['token'], visit_date, exhibition['id'])

        response = client.get(ADMIN_TRANSACTIONS, headers=auth_headers(admin['token']))

        assert_response_status(response, 200)
        transactions = response.json()['transactions']
        assert len(transactions) == 1
        assert transactions[0]['id'] == booking['id']
        assert transactions[0]['userName'] == TEST_VISITOR_NAME
        assert transactions[0]['userEmail'] == TEST_EMAIL

    def test_analytics(
        self,
        client: TestClient,
        admin: dict,
        visitor: dict,
        another_visitor: dict,
        visit_date: date,
    ):
        impressionists = create_exhibition(client, admin['token'])
        cities = create_exhibition(client, admin['token'], name='Future Cities', price=12)
        book_tickets(
            client, visitor['token'], visit_date, impressionists['id'], exhibition_quantity=3
        )
        book_tickets(client, another_visitor['token'], visit_date, cities['id'], adults=1)
        cancelled = book_tickets(client, visitor['token'], visit_date, cities['id'])
        client.put(
            TICKET_CANCEL.format(booking_id=cancelled['id']), headers=auth_headers(visitor['token'])
        )

        response = client.get(ADMIN_ANALYTICS, headers=auth_headers(admin['token']))

        assert_response_status(response, 200)
        body = response.json()
        assert body['totalUsers'] == 3
        assert body['totalTransactions'] == 3
        # 2 adults + 3 x 15, and 1 adult + 1 x 12; the cancelled booking is excluded
        assert body['totalRevenue'] == 117.0
        assert body['activeExhibitions'] == 2
        assert len(body['recentTransactions']) == 3
        assert body['recentTransactions'][0]['id'] == cancelled['id']
        assert body['popularExhibitions'] == [
            {'name': TEST_EXHIBITION_NAME, 'ticketCount': 3, 'revenue': 45.0},
            {'name': 'Future Cities', 'ticketCount': 1, 'revenue': 12.0},
        ]
