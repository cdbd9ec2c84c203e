"""
Volume Keys - global keypress handling for a Textual window.

A small demo of routing every key press to one window rather than to
whichever control last took focus, while buttons mutate the same state.

Key pieces:
- Volume / VolumeState: a bounded counter and its container
- volume_reducer: exhaustive reducer over the input event variants
- FocusGuard: keeps focus on a single owner widget
- VolumeWindow: the window that owns the controls
- VolumeKeysApp: the application

Example:
    ```python
    from volume_keys import DemoConfig, VolumeKeysApp

    VolumeKeysApp(DemoConfig(max_volume=20)).run()
    ```
"""

# Events
from .types import (
    DownClicked,
    DownPressed,
    InputEvent,
    OtherKey,
    Reducer,
    UpClicked,
    UpPressed,
)

# State
from .state import (
    Volume,
    VolumeState,
)

# Reducer
from .reducer import (
    button_to_event,
    key_to_event,
    volume_reducer,
)

# Config
from .config import DemoConfig

# UI
from .focus import FocusGuard
from .view import VolumeWindow, volume_bar
from .app import VolumeKeysApp, main

__version__ = "0.1.0a1"

__all__ = [
    # Events
    "DownClicked",
    "DownPressed",
    "InputEvent",
    "OtherKey",
    "Reducer",
    "UpClicked",
    "UpPressed",
    # State
    "Volume",
    "VolumeState",
    # Reducer
    "button_to_event",
    "key_to_event",
    "volume_reducer",
    # Config
    "DemoConfig",
    # UI
    "FocusGuard",
    "VolumeWindow",
    "volume_bar",
    "VolumeKeysApp",
    "main",
]
