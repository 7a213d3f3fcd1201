import msgspec


class DeserializationError(Exception):
    """
    Base class for all errors raised while deserializing a JSON:API document.
    """


class NoDeserializableResource(DeserializationError):
    """
    Exception thrown if a document deserializer is invoked without a resource deserializer configured.
    """


class MalformedDocumentError(DeserializationError):
    """
    Exception thrown if a payload could not be decoded as a JSON:API document.

    Attributes:
        error -- underlying msgspec decode error
    """
    def __init__(self, message: str, error: msgspec.DecodeError):
        self.error = error
        super().__init__(message)


class MalformedResourceError(MalformedDocumentError):
    """
    Exception thrown if a resource, resource identifier or relationship does not have the expected shape,
    e.g. a missing 'type' or 'id'.
    """
