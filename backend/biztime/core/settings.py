from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, model_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "BizTime API"
    ENV: str = Field(default="lab", validation_alias=AliasChoices("BIZTIME_ENV", "ENV"))  # lab|test|prod
    DATABASE_URL: str = Field(default="sqlite:///./biztime.db", validation_alias=AliasChoices("BIZTIME_DATABASE_URL", "DATABASE_URL"))
    DB_ECHO: bool = Field(default=False, validation_alias=AliasChoices("BIZTIME_DB_ECHO", "DB_ECHO"))
    # None = decide pelo ENV (create_all fora de prod)
    DB_CREATE_TABLES: bool | None = Field(default=None, validation_alias=AliasChoices("BIZTIME_DB_CREATE_TABLES", "DB_CREATE_TABLES"))

    # Logging
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("BIZTIME_LOG_LEVEL", "LOG_LEVEL"))
    ACCESS_LOG: bool = Field(default=True, validation_alias=AliasChoices("BIZTIME_ACCESS_LOG", "ACCESS_LOG"))

    @model_validator(mode="after")
    def _schema_invariants(self):
        if self.DB_CREATE_TABLES is None:
            self.DB_CREATE_TABLES = self.ENV != "prod"

        # em prod o schema pertence ao alembic
        if self.ENV == "prod" and self.DB_CREATE_TABLES:
            raise ValueError("ENV=prod requer DB_CREATE_TABLES=false (use alembic upgrade head)")

        self.LOG_LEVEL = (self.LOG_LEVEL or "INFO").strip().upper()
        return self


def get_settings() -> Settings:
    return Settings()
