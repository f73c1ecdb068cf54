"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    SecretStr,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from anvato.domain.entities import GeneralSettings, StationConfig

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class StationSettings(BaseModel):
    """One station (tenant) allowed to query the MCP."""

    id: str = Field(description="Station id, unique within the settings.")
    public_key: str = Field(default="", description="Public key sent as ?id=.")
    private_key: SecretStr = Field(
        default=SecretStr(""),
        description="Private key used to sign requests.",
    )

    @field_validator("id", "public_key", mode="before")
    @classmethod
    def _coerce_str(cls, v: Any) -> Any:
        # YAML turns numeric ids like 123 into ints.
        if isinstance(v, (int, float)):
            return str(v)
        return v

    def to_station_config(self) -> StationConfig:
        return StationConfig(
            id=self.id,
            public_key=self.public_key,
            private_key=self.private_key.get_secret_value(),
        )


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (mcp/http/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="anvato-search", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # MCP (YAML section: mcp.*)
    mcp_url: str = Field(
        default="",
        validation_alias=AliasChoices(
            "mcp_url",
            AliasPath("mcp", "url"),
        ),
        description="Base URL of the MCP catalog API.",
    )
    stations: list[StationSettings] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "stations",
            AliasPath("mcp", "stations"),
        ),
        description="Stations with their public/private keys.",
    )

    # HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=20.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="Overall timeout for one API request in seconds.",
    )
    http_user_agent: str = Field(
        default="anvato-search/0.1.0",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )
    http_max_attempts: int = Field(
        default=3,
        validation_alias=AliasChoices(
            "http_max_attempts",
            AliasPath("http", "max_attempts"),
        ),
        description="Attempts per request, including the first one.",
    )
    http_retry_delay_seconds: float = Field(
        default=1.0,
        validation_alias=AliasChoices(
            "http_retry_delay_seconds",
            AliasPath("http", "retry_delay_seconds"),
        ),
        description="Fixed delay between attempts in seconds.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    @field_validator("mcp_url", mode="before")
    @classmethod
    def _strip_url(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("http_max_attempts")
    @classmethod
    def _validate_max_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError("http_max_attempts must be >= 1")
        return v

    @field_validator("http_retry_delay_seconds")
    @classmethod
    def _validate_retry_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("http_retry_delay_seconds must be >= 0")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def general_settings(self) -> GeneralSettings:
        """Domain view of the MCP section."""
        return GeneralSettings(
            mcp_url=self.mcp_url,
            stations=tuple(s.to_station_config() for s in self.stations),
        )

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.

        Private keys stay masked.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "mcp": {
                "url": self.mcp_url,
                "stations": [
                    {
                        "id": s.id,
                        "public_key": s.public_key,
                        "private_key": str(s.private_key),
                    }
                    for s in self.stations
                ],
            },
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "user_agent": self.http_user_agent,
                "max_attempts": self.http_max_attempts,
                "retry_delay_seconds": self.http_retry_delay_seconds,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Supported env var examples (flat, explicit):
    - ANVATO_MCP_URL
    - ANVATO_STATIONS (JSON list of {"id", "public_key", "private_key"})
    - ANVATO_HTTP_TIMEOUT_SECONDS
    - ANVATO_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ANVATO_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    mcp_url: Optional[str] = None
    stations: Optional[list[dict[str, Any]]] = None

    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None
    http_max_attempts: Optional[int] = None
    http_retry_delay_seconds: Optional[float] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
