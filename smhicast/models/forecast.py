"""SMHI point forecast models."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel


class Parameter(BaseModel):
    model_config = {"extra": "ignore"}

    name: str
    values: list[Any]  # only values read for display are type-checked


class ForecastEntry(BaseModel):
    model_config = {"extra": "ignore"}

    validTime: str
    parameters: list[Parameter]


class ForecastDocument(BaseModel):
    model_config = {"extra": "ignore"}

    approvedTime: str | None = None
    referenceTime: str | None = None
    timeSeries: list[Any]  # entries validated individually, after truncation


@dataclass(frozen=True)
class DisplayRecord:
    timestamp: str
    temperature: float = 0.0
    precipitation: float = 0.0
