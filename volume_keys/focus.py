"""Keeping keyboard focus on a single owner widget."""

from __future__ import annotations

from textual.widget import Widget


class FocusGuard:
    """
    Makes one widget the explicit owner of keyboard focus.

    Controls handed to `exclude` can never take focus, and `reassert`
    puts focus back on the owner whenever something else has it. Calling
    `reassert` after every state change means key presses keep arriving
    at the owner no matter which control handled the previous event.

    Example:
        ```python
        class Window(Container, can_focus=True):
            def on_mount(self):
                self.guard = FocusGuard(self)
                self.guard.exclude(*self.query(Button))

            def on_button_pressed(self, event):
                ...
                self.guard.reassert()
        ```
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: Widget) -> None:
        if not owner.can_focus:
            raise ValueError(f"{owner!r} cannot take focus")
        self._owner = owner

    @property
    def owner(self) -> Widget:
        """The widget that should always hold focus."""
        return self._owner

    @property
    def holds_focus(self) -> bool:
        """Whether the owner is the focused widget on its screen."""
        return self._owner.screen.focused is self._owner

    def exclude(self, *widgets: Widget) -> None:
        """Stop the given controls from ever capturing focus."""
        for widget in widgets:
            widget.can_focus = False

    def reassert(self) -> bool:
        """
        Request focus for the owner if it does not already have it.

        Returns:
            True if focus had drifted and a correction was requested.
        """
        if self.holds_focus:
            return False

        focused = self._owner.screen.focused
        self._owner.log.debug("focus restored to owner", was=focused)
        self._owner.focus(scroll_visible=False)
        return True
