"""Station (tenant credential) lookup."""

from __future__ import annotations

from anvato.domain.entities import (
    ConfigurationError,
    ErrorKind,
    GeneralSettings,
    StationConfig,
    StationNotFoundError,
)


def resolve_station(settings: GeneralSettings, station_id: str) -> StationConfig:
    """Return the station whose id equals *station_id*.

    Station ids are expected to be unique; the first match wins.

    Raises:
        ConfigurationError: *station_id* is empty.
        StationNotFoundError: No configured station has that id.
    """
    if not station_id:
        raise ConfigurationError(
            "Please select station.", kind=ErrorKind.MISSING_STATION
        )

    for station in settings.stations:
        if station.id == station_id:
            return station

    raise StationNotFoundError(
        "The selected station is not configured.", detail=station_id
    )


def has_required_settings(settings: GeneralSettings, station: StationConfig) -> bool:
    """MCP URL, public key and private key are all non-empty."""
    return all((settings.mcp_url, station.public_key, station.private_key))


def ensure_required_settings(
    settings: GeneralSettings, station: StationConfig
) -> None:
    if not has_required_settings(settings, station):
        raise ConfigurationError(
            "The MCP URL, Public Key, and Private Key settings are required.",
            kind=ErrorKind.MISSING_REQUIRED_SETTINGS,
            detail=station.id,
        )
