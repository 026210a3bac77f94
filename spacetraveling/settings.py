from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Prismic
    PRISMIC_API_ENDPOINT: str = "https://spacetraveling.cdn.prismic.io/api/v2"
    PRISMIC_ACCESS_TOKEN: str = ""
    PRISMIC_TIMEOUT_SECONDS: float = 10.0

    # Blog
    POSTS_PAGE_SIZE: int = 1
    STATIC_PATHS_PAGE_SIZE: int = 3
    WORDS_PER_MINUTE: int = 200

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    SPACETRAVELING_API_KEY: str = ""

    @property
    def prismic_params(self) -> dict:
        if not self.PRISMIC_ACCESS_TOKEN:
            return {}
        return {"access_token": self.PRISMIC_ACCESS_TOKEN}


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
