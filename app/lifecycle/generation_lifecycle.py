from enum import Enum

from app.config.settings import Settings
from app.generation.client_base import BaseGenerationClient
from app.generation.exceptions import GenerationTransportError, RequestValidationError
from app.generation.factory import GenerationClientFactory
from app.generation.models import (
    ErrorInfo,
    Failure,
    GenerationForm,
    RequestOutcome,
)
from app.generation.normalizer import ResponseNormalizer
from app.generation.request_builder import RequestBuilder
from app.logging.logger import Log


class GenerationState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class GenerationLifecycle:
    """Single-flight state machine around one generation attempt at a time.

    Idle -> Loading -> Success | Failure; a new generate() replaces the
    previous outcome, reset() returns to Idle with a blank form.
    """

    def __init__(
        self,
        builder: RequestBuilder,
        client: BaseGenerationClient,
        normalizer: ResponseNormalizer,
        template_variables: dict[str, str | int] | None = None,
    ) -> None:
        self._builder = builder
        self._client = client
        self._normalizer = normalizer
        self.form = GenerationForm.from_template_variables(template_variables or {})
        self._state = GenerationState.IDLE
        self._outcome: RequestOutcome | None = None
        self._attempt = 0

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def outcome(self) -> RequestOutcome | None:
        return self._outcome

    @property
    def is_loading(self) -> bool:
        return self._state is GenerationState.LOADING

    @property
    def can_generate(self) -> bool:
        """Whether the generate action should be enabled."""
        return not self.is_loading and self._builder.is_buildable(self.form.to_request())

    def generate(self) -> RequestOutcome | None:
        """Run one attempt with the current form values.

        Returns the new outcome, or None when the attempt was not started
        (already loading, or the form is not buildable).
        """
        if self.is_loading:
            Log.debug("Generation already in progress, ignoring request")
            return None
        try:
            payload = self._builder.build(self.form.to_request())
        except RequestValidationError as exc:
            Log.debug(f"Generation not started: {exc}")
            return None

        self._attempt += 1
        attempt = self._attempt
        self._state = GenerationState.LOADING
        self._outcome = None
        Log.info(f"Generating titles for topic '{self.form.topic}'")
        Log.debug(f"Generation payload: {payload}")

        try:
            response = self._client.send(payload)
            outcome = self._normalizer.normalize(response)
        except GenerationTransportError as exc:
            Log.error(f"Submission failed: {exc}")
            outcome = Failure(ErrorInfo(message=str(exc)))
        except Exception as exc:
            Log.exception(f"Submission failed unexpectedly: {exc}")
            outcome = Failure(ErrorInfo(message=str(exc) or type(exc).__name__))

        if attempt != self._attempt or not self.is_loading:
            Log.debug("Discarding outcome of an attempt that was reset")
            return outcome
        self._finish(outcome)
        return outcome

    def reset(self) -> None:
        """Clear every field and any stored outcome."""
        self._attempt += 1
        self.form = GenerationForm()
        self._outcome = None
        self._state = GenerationState.IDLE

    def close(self) -> None:
        self._client.close()

    def _finish(self, outcome: RequestOutcome) -> None:
        self._outcome = outcome
        if isinstance(outcome, Failure):
            self._state = GenerationState.FAILURE
        else:
            self._state = GenerationState.SUCCESS


def build_lifecycle(
    settings: Settings,
    client: BaseGenerationClient | None = None,
) -> GenerationLifecycle:
    """Build a GenerationLifecycle wired from application settings."""
    builder = RequestBuilder(
        agent_id=settings.mindstudio_agent_id,
        workflow=settings.mindstudio_workflow,
    )
    return GenerationLifecycle(
        builder=builder,
        client=client if client is not None else GenerationClientFactory.create(settings),
        normalizer=ResponseNormalizer(),
        template_variables=settings.template_variables,
    )
