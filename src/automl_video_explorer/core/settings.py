"""Environment-derived configuration."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from automl_video_explorer.core.errors import ConfigError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ExplorerSettings(BaseSettings):
    """Project-identifying configuration read once at process start.

    Attributes:
        project_id: Google Cloud project id (``PROJECT_ID``).
        region_name: Compute region of the AutoML resources (``REGION_NAME``).
        log_level: Loguru level for diagnostics on stderr (``LOG_LEVEL``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    project_id: str = Field(
        validation_alias="PROJECT_ID",
        min_length=1,
        description="Google Cloud project id",
    )
    region_name: str = Field(
        validation_alias="REGION_NAME",
        min_length=1,
        description="Compute region, e.g. us-central1",
    )
    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Log level for diagnostics written to stderr",
    )

    @field_validator("project_id", "region_name")
    @classmethod
    def reject_path_separators(cls, v: str) -> str:
        """Resource path segments cannot contain '/'."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        if "/" in v:
            raise ValueError("must not contain '/'")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names loguru does not know."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings(**overrides) -> ExplorerSettings:
    """Load settings from the environment, failing fast on bad input.

    Args:
        **overrides: Keyword arguments forwarded to ``ExplorerSettings``.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If a required variable is missing or invalid.
    """
    try:
        return ExplorerSettings(**overrides)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "settings"
            if error["type"] == "missing":
                problems.append(f"{field} is not set")
            else:
                problems.append(f"{field}: {error['msg']}")
        raise ConfigError("; ".join(problems)) from e
