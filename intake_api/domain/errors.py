"""Intake error taxonomy.

Client errors map to 400, infrastructure errors to 500. The two families never
share a base below ``IntakeError`` so a queue outage cannot be reported as a bad
request.
"""


class IntakeError(Exception):
    """Base class for every failure the intake endpoint reports."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(IntakeError):
    """The request envelope itself is unusable."""
    status_code = 400


class MissingFieldError(ClientInputError):
    """Required envelope field is absent or empty."""

    def __init__(self, field: str):
        super().__init__(f"Please provide a valid '{field}' in the request body.")
        self.field = field


class MalformedBodyError(ClientInputError):
    """Request body is not a JSON object of the expected shape."""


class GrammarMismatchError(IntakeError):
    """Identifier does not match the identifier grammar."""
    status_code = 400

    def __init__(self, raw: str, expected_grammar: str):
        super().__init__(
            f"File name '{raw}' does not match the expected format '{expected_grammar}'"
        )
        self.raw = raw
        self.expected_grammar = expected_grammar


class FieldRangeError(IntakeError):
    """A decoded field is outside its allowed range."""
    status_code = 400


class InvalidMonthError(FieldRangeError):
    def __init__(self, value: int, identifier: str):
        super().__init__(f"Invalid month value: {value} in file name '{identifier}'")
        self.value = value
        self.identifier = identifier


class UnsupportedDocumentTypeError(IntakeError):
    """Extension is not in the configured allow-list."""
    status_code = 400

    def __init__(self, value: str):
        super().__init__(f"Unsupported document type: {value}")
        self.value = value


class InfrastructureError(IntakeError):
    status_code = 500


class QueueUnavailableError(InfrastructureError):
    """The submission queue did not confirm the send."""
