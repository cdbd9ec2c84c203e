"""The volume-keys Textual application."""

from __future__ import annotations

from textual.app import App, ComposeResult

from .config import DemoConfig
from .state import VolumeState
from .view import VolumeWindow


class VolumeKeysApp(App):
    """
    Demo app: one window that takes every key press, plus two buttons.

    Up/down arrows and the Up/Down buttons step a volume between 0 and the
    configured maximum. Quit with ctrl+q.
    """

    CSS = """
    Screen {
        align: center middle;
    }
    """

    def __init__(self, config: DemoConfig | None = None) -> None:
        super().__init__()
        self.settings = config or DemoConfig()
        self.volume_state = VolumeState(self.settings.initial_volume(), name="volume")
        self.title = self.settings.title

    def compose(self) -> ComposeResult:
        yield VolumeWindow(self.volume_state, self.settings, id="window")


def main() -> None:
    VolumeKeysApp().run()
