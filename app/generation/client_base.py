from abc import ABC, abstractmethod

from app.generation.models import HttpResponse


class BaseGenerationClient(ABC):
    """Contract for transports that deliver a payload to the generation service."""

    @abstractmethod
    def send(self, payload: dict[str, object]) -> HttpResponse:
        """POST the payload and return the status line and body text.

        Non-2xx statuses are returned, not raised.

        Raises:
            GenerationTransportError: if the call could not complete.
        """

    def close(self) -> None:
        """Release any connections held by the transport."""
