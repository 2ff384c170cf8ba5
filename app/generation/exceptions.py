class GenerationError(Exception):
    """Base exception for all title generation errors."""


class RequestValidationError(GenerationError):
    """Raised when a request cannot be built from the supplied fields."""


class GenerationTransportError(GenerationError):
    """Raised when the generation call could not complete (connectivity, timeout)."""


class GenerationProtocolError(GenerationError):
    """Raised when the upstream service answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "", reason: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.reason = reason
        status_line = f"{status_code} {reason}".strip()
        super().__init__(f"Webhook failed: {status_line} - {body}")


class MalformedPayloadError(GenerationError):
    """Raised inside the extraction chain when a payload has an unexpected shape.

    Never surfaced to the user; the offending strategy is skipped.
    """
