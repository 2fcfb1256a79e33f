"""Consumer-side errors. Both are handled inside the listener and only logged."""


class MessageDeserializationError(Exception):
    """Payload could not be turned into a file metadata record."""


class ConsumerValidationError(Exception):
    """A deserialized record failed the semantic re-check."""

    def __init__(self, field: str, value, reason: str):
        super().__init__(f"Invalid {field}: {value}. {reason}")
        self.field = field
        self.value = value
        self.reason = reason
