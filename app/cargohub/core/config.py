from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    APP_NAME: str = "CargoHub"
    DATABASE_URL: str = "sqlite+pysqlite:///./cargohub.db"
    LOG_LEVEL: str = "INFO"
    API_KEY_HEADER: str = "x-api-key"
    API_KEY_REQUIRED: bool = False
    API_KEYS: list[str] = []
    REQUEST_LOG_ENABLED: bool = True
    REQUEST_LOG_MAX_BODY: int = 4096
    METRICS_ENABLED: bool = True
    DEFAULT_TRANSFER_STATUS: str = "Pending"
    COMMITTED_TRANSFER_STATUS: str = "Completed"


settings = Settings()
