from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # ROADS_ROWS, ROADS_COLUMNS, ROADS_API_KEY, ...
    model_config = SettingsConfigDict(env_prefix="ROADS_", env_file=".env", extra="ignore")

    rows: int = 6
    columns: int = 30
    api_key: str | None = None
    log_level: str = "INFO"
    log_format: str = "text"  # 'text' | 'json'

settings = Settings()
