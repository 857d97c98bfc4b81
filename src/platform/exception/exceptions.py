class CustomBaseError(Exception):
    def __init__(self, message: str, status_code: int):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message, status_code)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str = 'Authentication required'):
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str = 'Access denied'):
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str):
        super().__init__(message, 409)


class LoginError(CustomBaseError):
    def __init__(self, message: str = 'Invalid credentials'):
        super().__init__(message, 400)


class PaymentGatewayError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 503):
        super().__init__(message, status_code)
