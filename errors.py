"""Error taxonomy surfaced by the API."""


class LedgerError(Exception):
    """Base class for failures that are reported to API clients."""

    kind = 'error'
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = str(message)

    def to_dict(self):
        return {'error': self.message, 'kind': self.kind}


class ValidationError(LedgerError):
    """Raised when a request payload is missing or has malformed fields."""

    kind = 'validation'
    status_code = 400


class PersistenceError(LedgerError):
    """Raised when the transaction store fails to read or write."""

    kind = 'persistence'


class TransportError(LedgerError):
    """Raised when the mail transport rejects a reminder."""

    kind = 'transport'
