from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Only needed for role writes under RLS

    # Hugging Face inference (optional, local affirmations are the fallback)
    huggingface_api_key: Optional[str] = None
    huggingface_api_url: str = "https://api-inference.huggingface.co/models"
    huggingface_model: str = "distilgpt2"
    huggingface_timeout: float = 10.0

    # Client timing
    toast_duration_ms: int = 4000
    affirmation_reveal_delay_ms: int = 150

    # Auth
    auth_cache_ttl_sec: int = 60
    auth_cache_max_size: int = 500

    # App
    app_name: str = "vitalspark-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:8081,http://localhost:19006,http://127.0.0.1:8081,http://127.0.0.1:19006"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore"
    )


settings = Settings()
