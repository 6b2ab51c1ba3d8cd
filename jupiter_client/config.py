from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIMEOUT, ApiVersion


class Settings(BaseSettings):
    # Jupiter API
    JUPITER_API_URL: str | None = None
    JUPITER_API_VERSION: ApiVersion = ApiVersion.V6
    JUPITER_API_KEY: str | None = None

    # HTTP
    JUPITER_TIMEOUT: float = DEFAULT_TIMEOUT

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
