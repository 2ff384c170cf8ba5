"""Preview-mode generation client.

Used when no upstream agent is wired up (``generation_provider=example``).
Implement BaseGenerationClient and register the provider in
GenerationClientFactory to add a real transport.
"""

import json
from typing import ClassVar

from app.generation.client_base import BaseGenerationClient
from app.generation.models import HttpResponse


class ExampleClientAdapter(BaseGenerationClient):
    """Returns a fixed successful agent-run body without any network calls."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "result": {
            "titles": [
                {
                    "youtube_title": "Why Most Ideas Fail in Year One",
                    "thumbnail_text": "YEAR ONE",
                    "ctr_rationale": "Curiosity gap around a common failure",
                    "rank": 1,
                },
                {
                    "youtube_title": "The One Metric That Changes Everything",
                    "thumbnail_text": "ONE METRIC",
                    "ctr_rationale": "Promises a single clear answer",
                    "rank": 2,
                },
            ]
        }
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def send(self, payload: dict[str, object]) -> HttpResponse:
        _ = payload
        return HttpResponse(status_code=200, text=json.dumps(self._response), reason="OK")
