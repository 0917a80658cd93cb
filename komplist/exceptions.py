class KomplistError(Exception):
    """Base error that maps onto an HTTP status."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class BadRequestError(KomplistError):
    status_code = 400


class TaskNotFoundError(KomplistError):
    status_code = 404
