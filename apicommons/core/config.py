from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_STAGES = ("development", "dev")
TEST_STAGES = ("test", "testing")


class Settings(BaseSettings):
    stage: str = Field(default="development", alias="STAGE")
    context_path: str = Field(default="", alias="CONTEXT_PATH")

    # Project / OpenAPI metadata
    project_name: str = Field(default="apicommons", alias="PROJECT_NAME")
    project_version: str = Field(default="0.1.0", alias="PROJECT_VERSION")
    project_description: str = Field(default="", alias="PROJECT_DESCRIPTION")
    swagger_contact_name: str | None = Field(default=None, alias="SWAGGER_CONTACT_NAME")
    swagger_context_path: str = Field(default="/swagger-ui", alias="SWAGGER_CONTEXT_PATH")
    swagger_json_path: str = Field(default="/swagger-docs", alias="SWAGGER_JSON_PATH")
    powered_by: str = Field(default="FastAPI", alias="POWERED_BY")

    # CORS; all origins are allowed when unset
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    # Pagination
    default_page_size: int = Field(default=20, ge=1, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, ge=1, alias="MAX_PAGE_SIZE")

    # Localization
    default_locale: str = Field(default="en", alias="DEFAULT_LOCALE")

    # JWT Configuration
    secret_key: str | None = Field(default=None, alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", alias="ALGORITHM")

    @field_validator("stage", mode="before")
    @classmethod
    def normalize_stage(cls, v: str | None) -> str:
        """Lowercase the stage name; empty values fall back to development."""
        if not v:
            return "development"
        return str(v).strip().lower()

    @field_validator("context_path", mode="before")
    @classmethod
    def normalize_context_path(cls, v: str | None) -> str:
        """Strip trailing slashes so routes can be appended directly."""
        if not v or v == "/":
            return ""
        v = str(v).rstrip("/")
        return v if v.startswith("/") else f"/{v}"

    @field_validator("frontend_url", "secret_key", "swagger_contact_name", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        if self.default_page_size > self.max_page_size:
            raise ValueError("DEFAULT_PAGE_SIZE must not exceed MAX_PAGE_SIZE")
        return self

    def is_dev(self) -> bool:
        return self.stage in DEV_STAGES

    def is_test(self) -> bool:
        return self.stage in TEST_STAGES

    def summary(self) -> dict[str, object]:
        """Non-secret settings, for startup logging."""
        return self.model_dump(exclude={"secret_key"})

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
