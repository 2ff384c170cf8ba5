from app.generation.exceptions import RequestValidationError
from app.generation.models import VARIATION_COUNTS, GenerationRequest, Tone


class RequestBuilder:
    """Assembles the agent-run payload from a GenerationRequest."""

    def __init__(self, *, agent_id: str, workflow: str = "Main") -> None:
        self._agent_id = agent_id
        self._workflow = workflow

    def build(self, request: GenerationRequest) -> dict[str, object]:
        """Return the JSON-ready payload for the agent run endpoint.

        Raises:
            RequestValidationError: if the topic is empty, the variation count
                is not an integer, or the tone is unknown.
        """
        if not request.topic or not request.topic.strip():
            raise RequestValidationError("topic is required")
        return {
            "agentId": self._agent_id,
            "workflow": self._workflow,
            "variables": {
                "webhookParams": {
                    "topic": request.topic,
                    "key_points": request.key_points,
                    "target_audience": request.target_audience,
                    "main_takeaway": request.main_takeaway,
                    "description_count": self._coerce_count(request.variation_count),
                    "tone": self._coerce_tone(request.tone),
                }
            },
        }

    def is_buildable(self, request: GenerationRequest) -> bool:
        try:
            self.build(request)
        except RequestValidationError:
            return False
        return True

    @staticmethod
    def _coerce_count(value: int | str) -> int:
        if isinstance(value, bool):
            raise RequestValidationError(f"variation count must be an integer, got {value!r}")
        try:
            count = int(value)
        except (TypeError, ValueError) as exc:
            raise RequestValidationError(
                f"variation count must be an integer, got {value!r}"
            ) from exc
        if count not in VARIATION_COUNTS:
            raise RequestValidationError(
                f"variation count must be one of {list(VARIATION_COUNTS)}, got {count}"
            )
        return count

    @staticmethod
    def _coerce_tone(value: Tone | str) -> str:
        try:
            return Tone(value).value
        except ValueError as exc:
            supported = [t.value for t in Tone]
            raise RequestValidationError(
                f"Unknown tone '{value}'. Choose from: {supported}"
            ) from exc
