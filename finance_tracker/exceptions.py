"""
Domain errors raised by the services.
Each carries the HTTP status the API answers with; main.py turns them into
a {"message": ...} JSON body.
"""


class FinanceTrackerError(Exception):
    """Base class for errors reported to API clients"""
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(FinanceTrackerError):
    """Missing or malformed input"""
    status_code = 400


class AuthError(FinanceTrackerError):
    """Bad credentials, bad token or an invalid one-time code"""
    status_code = 400


class ConflictError(FinanceTrackerError):
    """Unique value (email) already taken"""
    status_code = 400


class AuthorizationError(FinanceTrackerError):
    """Record exists but belongs to another user"""
    status_code = 401


class NotFoundError(FinanceTrackerError):
    status_code = 404


class ServerError(FinanceTrackerError):
    status_code = 500
