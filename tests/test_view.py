"""Tests for the volume window, driven through Textual's pilot."""

import asyncio

from textual.widgets import Button

from volume_keys import DemoConfig, VolumeKeysApp, VolumeWindow, volume_bar


def run_app(scenario, config=None):
    """Run `scenario(app, pilot)` inside a headless app."""

    async def runner():
        app = VolumeKeysApp(config)
        async with app.run_test() as pilot:
            await pilot.pause()
            await scenario(app, pilot)

    asyncio.run(runner())


class TestVolumeBar:
    """Tests for volume_bar."""

    def test_repeats_glyph(self):
        assert volume_bar(0) == "Volume: "
        assert volume_bar(3) == "Volume: ▉▉▉"
        assert volume_bar(2, "#") == "Volume: ##"

    def test_longer_for_higher_levels(self):
        assert len(volume_bar(4)) < len(volume_bar(5))


class TestStartup:
    """Tests for the initial render."""

    def test_initial_render(self):
        async def scenario(app, pilot):
            window = app.query_one(VolumeWindow)
            assert window.volume_text == volume_bar(5)

        run_app(scenario)

    def test_text_independent_of_history(self):
        async def scenario(app, pilot):
            window = app.query_one(VolumeWindow)
            untouched = window.volume_text

            await pilot.press("up", "up", "up")
            await pilot.click("#down")
            await pilot.pause()
            await pilot.press("down", "down")
            await pilot.pause()

            assert app.volume_state.volume == 5
            assert window.volume_text == untouched

        run_app(scenario)

    def test_window_holds_focus(self):
        async def scenario(app, pilot):
            window = app.query_one(VolumeWindow)
            assert app.focused is window
            assert window.guard.holds_focus

        run_app(scenario)

    def test_buttons_cannot_focus(self):
        async def scenario(app, pilot):
            for button in app.query(Button):
                assert button.can_focus is False

        run_app(scenario)


class TestKeyboard:
    """Tests for key press handling."""

    def test_arrow_keys(self):
        async def scenario(app, pilot):
            await pilot.press("up")
            await pilot.pause()
            assert app.volume_state.volume == 6

            await pilot.press("down", "down")
            await pilot.pause()
            assert app.volume_state.volume == 4

            window = app.query_one(VolumeWindow)
            assert window.volume_text == volume_bar(4)

        run_app(scenario)

    def test_other_keys_ignored(self):
        async def scenario(app, pilot):
            await pilot.press("x", "left", "space")
            await pilot.pause()

            assert app.volume_state.volume == 5
            assert app.focused is app.query_one(VolumeWindow)

        run_app(scenario)

    def test_saturates_at_maximum(self):
        async def scenario(app, pilot):
            await pilot.press(*["up"] * 8)
            await pilot.pause()

            window = app.query_one(VolumeWindow)
            assert app.volume_state.volume == 10
            assert window.volume_text == volume_bar(10)

        run_app(scenario)

    def test_custom_keys(self):
        config = DemoConfig(up_keys=("up", "k"), down_keys=("down", "j"))

        async def scenario(app, pilot):
            await pilot.press("k", "k", "j")
            await pilot.pause()
            assert app.volume_state.volume == 6

        run_app(scenario, config)


class TestButtons:
    """Tests for button clicks."""

    def test_click_up_and_down(self):
        async def scenario(app, pilot):
            await pilot.click("#up")
            await pilot.pause()
            assert app.volume_state.volume == 6

            await pilot.click("#down")
            await pilot.click("#down")
            await pilot.pause()
            assert app.volume_state.volume == 4

        run_app(scenario)

    def test_rapid_clicks_all_register(self):
        async def scenario(app, pilot):
            for _ in range(4):
                await pilot.click("#down")
            await pilot.pause()

            window = app.query_one(VolumeWindow)
            assert app.volume_state.volume == 1
            assert window.volume_text == volume_bar(1)
            assert app.focused is window

        run_app(scenario)

    def test_key_press_reaches_window_after_click(self):
        async def scenario(app, pilot):
            await pilot.click("#up")
            await pilot.pause()
            await pilot.press("up")
            await pilot.pause()

            window = app.query_one(VolumeWindow)
            assert app.volume_state.volume == 7
            assert window.volume_text == volume_bar(7)
            assert app.focused is window

        run_app(scenario)


class TestFocusGuard:
    """Tests for focus being handed back to the window."""

    def test_render_restores_lost_focus(self):
        async def scenario(app, pilot):
            window = app.query_one(VolumeWindow)

            app.set_focus(None)
            await pilot.pause()
            assert app.focused is None

            window.update_view()
            await pilot.pause()
            assert app.focused is window

        run_app(scenario)

    def test_reassert_reports_correction(self):
        async def scenario(app, pilot):
            window = app.query_one(VolumeWindow)
            assert window.guard.reassert() is False

            app.set_focus(None)
            await pilot.pause()
            assert window.guard.reassert() is True

        run_app(scenario)
