from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "RecycleLocal"
    debug: bool = False
    log_level: str = "INFO"

    note_context_chars: int = 50
    multi_source_threshold: int = 2

    no_results_error: str = "No recycling info found for this area"


settings = Settings()
