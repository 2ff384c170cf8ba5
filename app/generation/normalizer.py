"""Turns raw agent-run responses into display-ready outcomes."""

import json
from typing import Any, ClassVar

from app.generation.candidates import build_title_set
from app.generation.exceptions import GenerationProtocolError
from app.generation.extractors import STRATEGIES, Strategy, run_extraction_chain
from app.generation.models import (
    ErrorInfo,
    Failure,
    HttpResponse,
    RequestOutcome,
    Success,
    SuccessOpaque,
)
from app.logging.logger import Log


class ResponseNormalizer:
    """Extracts a ranked TitleSet from whatever shape the service returned.

    Only HTTP-level failures become a Failure. Every content-shape problem
    degrades to SuccessOpaque so the server's answer is always shown.
    """

    EMPTY_BODY_MESSAGE: ClassVar[str] = "Success (No content)"

    def __init__(self, strategies: tuple[Strategy, ...] = STRATEGIES) -> None:
        self._strategies = strategies

    def normalize(self, response: HttpResponse) -> RequestOutcome:
        if not response.is_success:
            error = GenerationProtocolError(
                response.status_code, body=response.text, reason=response.reason
            )
            Log.error(str(error))
            return Failure(
                ErrorInfo(
                    message=str(error),
                    status_code=response.status_code,
                    reason=response.reason,
                    body=response.text,
                )
            )
        return self.normalize_body(response.text)

    def normalize_body(self, text: str) -> RequestOutcome:
        """Normalize the body of a successful response."""
        if not text or not text.strip():
            return SuccessOpaque(self.EMPTY_BODY_MESSAGE)
        try:
            body = json.loads(text)
        except (ValueError, RecursionError):
            Log.warning("Response was not JSON, showing it as text")
            return SuccessOpaque(text)
        Log.debug(f"Generation raw response:\n{text}")

        extraction = run_extraction_chain(body, self._strategies)
        if extraction.titles is not None:
            title_set = build_title_set(extraction.titles)
            if len(title_set) or not extraction.titles:
                Log.info(
                    f"Extracted {len(title_set)} titles via {extraction.strategy}"
                )
                return Success(title_set)

        Log.info("No titles found in response, showing raw result")
        return SuccessOpaque(self._display_text(extraction.payload), payload=extraction.payload)

    @staticmethod
    def _display_text(value: Any) -> str:
        if isinstance(value, str):
            return value
        return json.dumps(value, indent=2, ensure_ascii=False)
