"""Pydantic v2 configuration schema with strict validation."""

from dataclasses import dataclass

from pydantic import BaseModel, Field

SMHI_BASE_URL = "https://opendata-download-metfcst.smhi.se"
DEFAULT_USER_AGENT = "smhicast/0.1.0"


@dataclass(frozen=True)
class Location:
    name: str
    lon: float
    lat: float


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = SMHI_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_entries: int = Field(default=8, ge=1, le=100)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    client: ClientConfig = ClientConfig()
    display: DisplayConfig = DisplayConfig()
