"""Volume model and its mutable state container."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from .types import InputEvent, Reducer, Unwatch, VolumeCallback


class Volume(BaseModel):
    """
    A bounded volume level.

    Instances are immutable; the stepping methods return copies that
    saturate at the bounds instead of leaving them.

    Example:
        ```python
        volume = Volume(level=9)
        volume.increased().level   # 10
        volume.increased().increased().level   # still 10
        ```
    """

    model_config = ConfigDict(frozen=True)

    level: int
    minimum: int = 0
    maximum: int = 10

    @model_validator(mode="after")
    def check_bounds(self) -> Volume:
        if self.minimum >= self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must be below maximum ({self.maximum})"
            )
        if not self.minimum <= self.level <= self.maximum:
            raise ValueError(
                f"level {self.level} outside [{self.minimum}, {self.maximum}]"
            )
        return self

    @classmethod
    def centred(cls, minimum: int = 0, maximum: int = 10) -> Volume:
        """Build the start-up volume, halfway to the maximum."""
        level = max(maximum // 2, minimum)
        return cls(level=level, minimum=minimum, maximum=maximum)

    @property
    def can_increase(self) -> bool:
        return self.level < self.maximum

    @property
    def can_decrease(self) -> bool:
        return self.level > self.minimum

    def increased(self) -> Volume:
        """Return a copy one step louder, clamped at the maximum."""
        if not self.can_increase:
            return self
        return self.model_copy(update={"level": self.level + 1})

    def decreased(self) -> Volume:
        """Return a copy one step quieter, clamped at the minimum."""
        if not self.can_decrease:
            return self
        return self.model_copy(update={"level": self.level - 1})


class VolumeState:
    """
    Holds the current `Volume` for the lifetime of the application.

    All mutation goes through `increase`, `decrease` or `dispatch`. Watchers
    registered with `watch` are told about every real change; steps that
    saturate at a bound leave the model untouched and notify nobody.

    Example:
        ```python
        state = VolumeState(Volume.centred())
        state.watch(lambda old, new: print(old.level, "->", new.level))
        state.increase()   # prints "5 -> 6"
        ```
    """

    __slots__ = ("_value", "_reducer", "_watchers", "_name")

    def __init__(
        self,
        initial: Volume,
        *,
        reducer: Reducer | None = None,
        name: str | None = None,
    ) -> None:
        """
        Initialize the container.

        Args:
            initial: The starting volume.
            reducer: Function (volume, event) -> volume used by `dispatch`.
                Defaults to `volume_reducer`.
            name: Optional name for debugging purposes.
        """
        if reducer is None:
            from .reducer import volume_reducer

            reducer = volume_reducer

        self._value = initial
        self._reducer = reducer
        self._watchers: list[VolumeCallback] = []
        self._name = name

    @property
    def value(self) -> Volume:
        """Get the current volume model."""
        return self._value

    @property
    def volume(self) -> int:
        """Get the current volume level."""
        return self._value.level

    def increase(self) -> None:
        self._set_value(self._value.increased())

    def decrease(self) -> None:
        self._set_value(self._value.decreased())

    def dispatch(self, event: InputEvent) -> None:
        """Apply one input event through the reducer."""
        self._set_value(self._reducer(self._value, event))

    def _set_value(self, new_value: Volume) -> None:
        """Store the new model and notify watchers if it differs."""
        old_value = self._value
        if old_value == new_value:
            return

        self._value = new_value

        for watcher in list(self._watchers):
            watcher(old_value, new_value)

    def watch(self, callback: VolumeCallback) -> Unwatch:
        """
        Register `callback` to hear about every level change.

        The callback gets the previous and the new `Volume`. Saturated
        steps are not changes, so they never reach it.

        Returns:
            A zero-argument function that detaches the callback again.
        """
        self._watchers.append(callback)
        return lambda: self._watchers.remove(callback)

    def __repr__(self) -> str:
        name = f" name={self._name!r}" if self._name else ""
        return f"VolumeState({self._value.level!r}{name})"
