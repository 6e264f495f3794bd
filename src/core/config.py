"""Application configuration.

Why here:
- One settings contract (pydantic-settings) for the CLI and the adapters.
- Values come from `ZOOM_SWAP_*` env vars or a local `.env`.

Note: API credentials are absent on purpose; they only come from argv.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WaitMode(str, Enum):
    """How the swap waits for the remote side to apply a change."""

    FIXED = "fixed"
    POLL = "poll"


class AppSettings(BaseSettings):
    """Central settings for the swap tool.

    Values can be overridden with `ZOOM_SWAP_*` environment variables or a
    local `.env` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZOOM_SWAP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.zoom.us/v2",
        min_length=8,
        description="Base URL of the Zoom REST API.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="zoom-seat-swap/0.1",
        min_length=1,
        description="User-Agent sent with API requests.",
    )
    page_size: int = Field(
        default=300,
        ge=1,
        le=300,
        description="Users requested per page when listing the account.",
    )
    jwt_ttl_seconds: int = Field(
        default=60,
        ge=5,
        le=3600,
        description="Lifetime of the signed API token.",
    )

    wait_mode: WaitMode = Field(
        default=WaitMode.FIXED,
        description="Propagation strategy: fixed delays or bounded polling.",
    )
    donor_delay_seconds: float = Field(
        default=4.0,
        ge=0,
        description="Fixed wait after removing the donor's license.",
    )
    verify_delay_seconds: float = Field(
        default=3.0,
        ge=0,
        description="Fixed wait before re-reading both users.",
    )
    poll_initial_seconds: float = Field(
        default=0.5,
        gt=0,
        description="First polling interval in poll mode.",
    )
    poll_backoff_factor: float = Field(
        default=2.0,
        ge=1.0,
        description="Multiplier applied to the interval after each poll.",
    )
    poll_max_interval_seconds: float = Field(
        default=4.0,
        gt=0,
        description="Upper bound for a single polling interval.",
    )
    poll_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Overall budget for one polling wait.",
    )
