import httpx

from app.generation.client_base import BaseGenerationClient
from app.generation.exceptions import GenerationTransportError
from app.generation.models import HttpResponse
from app.logging.logger import Log


class HttpxClientAdapter(BaseGenerationClient):
    """Generation client that POSTs JSON to the agent run endpoint over httpx."""

    def __init__(
        self,
        *,
        endpoint_url: str,
        api_key: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.Client(
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    def send(self, payload: dict[str, object]) -> HttpResponse:
        Log.debug(f"POST {self._endpoint_url}")
        try:
            response = self._client.post(self._endpoint_url, json=payload)
        except httpx.TimeoutException as exc:
            raise GenerationTransportError(f"Generation request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise GenerationTransportError(f"Generation request failed: {exc}") from exc
        return HttpResponse(
            status_code=response.status_code,
            text=response.text,
            reason=response.reason_phrase,
        )

    def close(self) -> None:
        self._client.close()
