"""
Custom application-specific exceptions.

Each exception carries the HTTP status the API layer answers with.
"""

class BaseAppException(Exception):
    """Base exception for the application."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class QuizNotFoundError(BaseAppException):
    """Raised when no quiz exists with the requested id."""
    status_code = 404

    def __init__(self, quiz_id):
        super().__init__(f"QuizID {quiz_id} has not been found")
        self.quiz_id = quiz_id


class InvalidRequestError(BaseAppException):
    """Raised for a missing, null or unusable write payload."""
    pass


class DependencyFailureError(BaseAppException):
    """Raised when a collaborator (store, author lookup) cannot serve the request."""
    pass


class AuthorNotFoundError(DependencyFailureError):
    """Raised when the author of a new quiz cannot be resolved."""

    def __init__(self, user_name):
        super().__init__(f"Author '{user_name}' could not be resolved")
        self.user_name = user_name
