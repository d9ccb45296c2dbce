"""Pydantic models for clipp configuration.

Every field has a default, so an empty JSON object (or no file at all)
yields the stock behaviour.
"""

from __future__ import annotations

import codecs

from pydantic import BaseModel, Field, field_validator


class EnvironmentConfig(BaseModel):
    """Where the environment probe looks for its signals."""

    display_var: str = Field(
        default="DISPLAY",
        description="Environment variable announcing an X display.",
    )
    wayland_display_var: str = Field(
        default="WAYLAND_DISPLAY",
        description="Environment variable announcing a Wayland display.",
    )
    version_file: str = Field(
        default="/proc/version",
        description="Kernel version file read for WSL detection.",
    )
    wsl_marker: str = Field(
        default="microsoft",
        min_length=1,
        description="Case-insensitive vendor string marking a WSL kernel.",
    )


class WaylandConfig(BaseModel):
    """wl-clipboard options."""

    primary: bool = Field(
        default=True,
        description="Pass -p to wl-copy / wl-paste.",
    )


class ClippConfig(BaseModel):
    """Root configuration model."""

    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig)
    wayland: WaylandConfig = Field(default_factory=WaylandConfig)
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used on tool pipes.",
    )

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value
