from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_title: str = "Lumina Market"
    log_level: str = "INFO"
    request_log_body_limit: int = 4000

    # OpenAI: chat widget ("Lumi")
    openai_api_key: str | None = None
    chat_model: str = "gpt-4.1-mini"
    chat_max_tokens: int = 500
    # Max seconds to wait for the next streamed fragment before giving up
    chat_fragment_timeout_seconds: float = 30.0

    # Mock authentication
    login_delay_seconds: float = 1.0
    # Demo-only administrator bypass. Override via .env, never a real secret.
    admin_email: str = "admin@lumina.com"
    admin_password: str = "123456"

    # Storefront
    currency_symbol: str = "₩"
    placeholder_image_url: str = "https://picsum.photos/400/600"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
