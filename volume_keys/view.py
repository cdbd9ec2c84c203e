"""The volume window: controls, input handling and rendering."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Static

from .config import DemoConfig
from .focus import FocusGuard
from .reducer import button_to_event, key_to_event
from .state import Volume, VolumeState
from .types import InputEvent, OtherKey

INSTRUCTIONS = "Click the buttons or press the up and down arrows..."


def volume_bar(level: int, glyph: str = "▉") -> str:
    """Display text for a volume level."""
    return "Volume: " + glyph * level


class VolumeWindow(Container, can_focus=True):
    """
    Window that owns every control and receives all key presses.

    The buttons are excluded from focus, so the window is the only
    widget that can hold it. Every handler dispatches one event and then
    calls `update_view`, which redraws the volume and hands focus back to
    the window.
    """

    DEFAULT_CSS = """
    VolumeWindow {
        width: 40;
        height: 13;
        padding: 1 2;
        border: round $primary;
    }

    VolumeWindow:focus {
        border: round $accent;
    }

    VolumeWindow #instructions {
        height: 3;
    }

    VolumeWindow #volume {
        height: 3;
        text-style: bold;
    }

    VolumeWindow Horizontal {
        height: auto;
    }

    VolumeWindow Button {
        width: 1fr;
        margin: 0 1;
    }
    """

    def __init__(
        self,
        state: VolumeState,
        config: DemoConfig | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.volume_state = state
        self.settings = config or DemoConfig()
        self.guard = FocusGuard(self)
        self.volume_text = ""
        self._unwatch = None

    def compose(self) -> ComposeResult:
        down = Button("Down", id="down")
        up = Button("Up", id="up")
        self.guard.exclude(down, up)
        # Every click must register, even ones inside the press animation.
        down.active_effect_duration = up.active_effect_duration = 0

        yield Static(INSTRUCTIONS, id="instructions")
        yield Static(id="volume")
        with Horizontal():
            yield down
            yield up

    def on_mount(self) -> None:
        self._unwatch = self.volume_state.watch(self._log_change)
        self.update_view()

    def on_unmount(self) -> None:
        if self._unwatch is not None:
            self._unwatch()
            self._unwatch = None

    def update_view(self) -> None:
        """Redraw the volume display, then make sure the window has focus."""
        self.volume_text = volume_bar(self.volume_state.volume, self.settings.glyph)
        self.query_one("#volume", Static).update(self.volume_text)

        self.guard.reassert()

    def apply_event(self, event: InputEvent) -> None:
        """Apply an input event to the state and redraw."""
        self.volume_state.dispatch(event)
        self.update_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.apply_event(button_to_event(event.button.id))

    def on_key(self, event: events.Key) -> None:
        self.log.debug("key pressed", key=event.key)

        input_event = key_to_event(event.key, self.settings)
        if not isinstance(input_event, OtherKey):
            # Claimed keys stop here; others still bubble to app bindings.
            event.stop()
        self.apply_event(input_event)

    def _log_change(self, old: Volume, new: Volume) -> None:
        self.log.info("volume changed", old=old.level, new=new.level)
