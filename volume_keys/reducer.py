"""Translation of raw input into events, and the volume reducer."""

from __future__ import annotations

from typing import assert_never

from .config import DemoConfig
from .state import Volume
from .types import (
    DownClicked,
    DownPressed,
    InputEvent,
    OtherKey,
    UpClicked,
    UpPressed,
)

DEFAULT_CONFIG = DemoConfig()


def key_to_event(key: str, config: DemoConfig = DEFAULT_CONFIG) -> InputEvent:
    """Map a Textual key name to an input event."""
    if key in config.up_keys:
        return UpPressed()
    if key in config.down_keys:
        return DownPressed()
    return OtherKey(key)


def button_to_event(button_id: str | None) -> InputEvent:
    """Map a button id to an input event."""
    match button_id:
        case "up":
            return UpClicked()
        case "down":
            return DownClicked()
    raise ValueError(f"No event for button {button_id!r}")


def volume_reducer(state: Volume, event: InputEvent) -> Volume:
    """Process an input event and return the new volume."""
    match event:
        case UpPressed() | UpClicked():
            return state.increased()
        case DownPressed() | DownClicked():
            return state.decreased()
        case OtherKey():
            return state
        case _:
            assert_never(event)
