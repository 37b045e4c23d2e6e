from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql://postgres:postgres@db:5432/cookify"
    anthropic_api_key: str = ""

    vision_model: str = "claude-sonnet-4-5-20250929"  # Recipe photo extraction
    vision_max_tokens: int = 2000  # Bilingual recipes run long; avoid truncated JSON

    # Anthropic API timeout settings (seconds)
    anthropic_timeout: int = 180
    anthropic_connect_timeout: int = 10

    # Uploaded recipe photos
    max_image_bytes: int = 1 * 1024 * 1024  # 1MB
    max_image_width: int = 1920

    # Localized text bounds (applied at the API boundary)
    localized_text_max_length: int = 1000
    default_language: str = "en"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
