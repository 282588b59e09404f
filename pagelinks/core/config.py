from pydantic_settings import BaseSettings, SettingsConfigDict

from pagelinks.utils.pagination import LimitBounds


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    APP_TITLE: str = "Page-links-api"
    LOG_LEVEL: str = "INFO"

    DEFAULT_LIMIT: int = 50
    MIN_LIMIT: int = 1
    MAX_LIMIT: int = 1000

    @property
    def limit_bounds(self) -> LimitBounds:
        return LimitBounds(
            minimum=self.MIN_LIMIT,
            maximum=self.MAX_LIMIT,
            default=self.DEFAULT_LIMIT,
        )


settings = Settings()
