class ServiceError(Exception):
    """Base error converted into a `{Status: false, Error}` response."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class DuplicateError(ServiceError):
    status_code = 409


class PersistenceError(ServiceError):
    status_code = 500
