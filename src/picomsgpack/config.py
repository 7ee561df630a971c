"""Packer options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PackOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    max_depth: int = Field(
        default=512,
        ge=1,
        description="Deepest allowed container nesting; the top-level container is depth 1",
    )
    sort_keys: bool = Field(
        default=True,
        description=(
            "Emit map entries in ascending key order. False keeps iteration order,"
            " so equal maps may pack to different, non-canonical bytes"
        ),
    )


__all__: tuple[str, ...] = ("PackOptions",)
