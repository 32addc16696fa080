from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RecordSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RECORDBASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: str = Field(
        default="dev",
        description="Deployment environment (e.g., dev, qa, prod). Attached to every log record."
    )
    log_level: str = Field(
        default="INFO",
        description="Log level used by setup_logging() when no explicit level is passed."
    )
    null_token: str = Field(
        default="NULL",
        min_length=1,
        description="Token describe() renders for a column whose value is None."
    )
    structural_hash: bool = Field(
        default=False,
        description=(
            "Derive record hashes from column values instead of object identity. "
            "Classes can override this with the __structural_hash__ attribute. "
            "Structurally hashed records must not be mutated while stored in a set or dict."
        )
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject names logging does not know."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return level
