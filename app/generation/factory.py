from typing import ClassVar

from app.config.settings import Settings
from app.generation.client_base import BaseGenerationClient
from app.generation.example_client_adapter import ExampleClientAdapter
from app.generation.httpx_client_adapter import HttpxClientAdapter
from app.logging.logger import Log


class GenerationClientFactory:
    """Creates the configured generation transport."""

    AGENT_RUN_PATH: ClassVar[str] = "/developer/v2/agents/run"
    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "mindstudio")

    @classmethod
    def create(cls, settings: Settings) -> BaseGenerationClient:
        provider = settings.generation_provider.lower()
        if provider == "example":
            Log.warning("Generation agent not configured. Using preview mode.")
            return ExampleClientAdapter()
        if provider == "mindstudio":
            return HttpxClientAdapter(
                endpoint_url=cls.resolve_endpoint(settings),
                api_key=settings.mindstudio_api_key,
                timeout_seconds=settings.mindstudio_timeout_seconds,
            )
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @classmethod
    def resolve_endpoint(cls, settings: Settings) -> str:
        """Dev builds go through the proxy when one is configured, others hit the API directly."""
        base_url = settings.mindstudio_base_url
        proxy = settings.mindstudio_proxy_base_url.strip()
        if settings.app_env.lower() == "dev" and proxy:
            base_url = proxy
        return base_url.rstrip("/") + cls.AGENT_RUN_PATH
