"""Settings for the volume-keys demo."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .state import Volume


class DemoConfig(BaseModel):
    """
    Static settings for one run of the demo.

    Key names use Textual's spelling (`"up"`, `"down"`, `"k"`, ...).
    """

    model_config = ConfigDict(frozen=True)

    title: str = "Textual Global Keypress Demo"
    max_volume: int = Field(default=10, ge=1)
    glyph: str = Field(default="▉", min_length=1)
    up_keys: tuple[str, ...] = ("up",)
    down_keys: tuple[str, ...] = ("down",)

    @model_validator(mode="after")
    def check_keys(self) -> DemoConfig:
        overlap = set(self.up_keys) & set(self.down_keys)
        if overlap:
            raise ValueError(f"keys bound to both up and down: {sorted(overlap)}")
        return self

    def initial_volume(self) -> Volume:
        return Volume.centred(maximum=self.max_volume)
