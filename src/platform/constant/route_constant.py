# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes (signup and login are served under both prefixes)
AUTH_BASE = f'{API_BASE}/auth'
SIGNUP = f'{API_BASE}/signup'
LOGIN = f'{API_BASE}/login'
AUTH_SIGNUP = f'{AUTH_BASE}/signup'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_VALIDATE = f'{AUTH_BASE}/validate'

# Booking routes
TICKET_BASE = f'{API_BASE}/tickets'
TICKET_CANCEL = f'{TICKET_BASE}/{{booking_id}}/cancel'

# Exhibition routes
EXHIBITION_BASE = f'{API_BASE}/exhibitions'
EXHIBITION_GET = f'{EXHIBITION_BASE}/{{exhibition_id}}'
EXHIBITION_AVAILABILITY = f'{EXHIBITION_BASE}/{{exhibition_id}}/availability'
TICKET_TYPES = f'{API_BASE}/ticket-types'

# Admin routes
ADMIN_BASE = f'{API_BASE}/admin'
ADMIN_USERS = f'{ADMIN_BASE}/users'
ADMIN_USER_DELETE = f'{ADMIN_USERS}/{{user_id}}'
ADMIN_EXHIBITIONS = f'{ADMIN_BASE}/exhibitions'
ADMIN_EXHIBITION = f'{ADMIN_EXHIBITIONS}/{{exhibition_id}}'
ADMIN_TRANSACTIONS = f'{ADMIN_BASE}/transactions'
ADMIN_ANALYTICS = f'{ADMIN_BASE}/analytics'

# Chatbot routes
CHATBOT_BASE = f'{API_BASE}/chatbot'
CHATBOT_MESSAGE = f'{CHATBOT_BASE}/message'
CHATBOT_OPTION = f'{CHATBOT_BASE}/option'

# Payment routes
PAYMENT_BASE = f'{API_BASE}/payment'
PAYMENT_ORDER = f'{PAYMENT_BASE}/order'

# Operational
HEALTH = '/health'
