from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    generation_provider: str = "mindstudio"

    mindstudio_base_url: str = "https://v1.mindstudio-api.com"
    mindstudio_proxy_base_url: str = ""
    mindstudio_api_key: str = ""
    mindstudio_agent_id: str = "606f273e-7fc0-44a9-835a-dfc50f6429b4"
    mindstudio_workflow: str = "Main"
    mindstudio_timeout_seconds: int = 120

    template_variables: dict[str, str | int] = {}
