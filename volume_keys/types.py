"""Input event variants and type definitions for volume-keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from .state import Volume


@dataclass(frozen=True, slots=True)
class UpPressed:
    """The up key was pressed while the window held focus."""


@dataclass(frozen=True, slots=True)
class DownPressed:
    """The down key was pressed while the window held focus."""


@dataclass(frozen=True, slots=True)
class OtherKey:
    """Any key without a binding."""

    key: str


@dataclass(frozen=True, slots=True)
class UpClicked:
    """The Up button was pressed."""


@dataclass(frozen=True, slots=True)
class DownClicked:
    """The Down button was pressed."""


InputEvent = UpPressed | DownPressed | OtherKey | UpClicked | DownClicked


class Reducer(Protocol):
    """Protocol for reducer functions."""

    def __call__(self, state: Volume, event: InputEvent) -> Volume:
        """Process an event and return the new volume."""
        ...


class VolumeCallback(Protocol):
    """Protocol for volume change callbacks."""

    def __call__(self, old_value: Volume, new_value: Volume) -> None:
        """Called when the volume changes."""
        ...


Unwatch = Callable[[], None]
