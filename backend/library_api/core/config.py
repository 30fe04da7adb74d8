from functools import lru_cache
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=("backend/.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"

    database_url: str | None = None
    db_host: str = "localhost"
    db_user: str = "postgres"
    db_password: str = "123abcd"
    db_name: str = "postgres"
    db_port: int = 5432
    db_sslmode: str = "disable"

    auto_migrate: bool = True
    db_init_retries: int = 3

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    allowed_origins: Annotated[List[str], NoDecode] = ["*"]

    log_level: str = "INFO"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def sql_echo(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url

        query = {}
        if self.db_sslmode and self.db_sslmode != "disable":
            query["ssl"] = self.db_sslmode
        url = URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query=query,
        )
        return url.render_as_string(hide_password=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
