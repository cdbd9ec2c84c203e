"""
Vim Keys Example - Demonstrates DemoConfig.

Same window as the default app, with j/k bound alongside the arrows
and a longer volume bar.
"""

from volume_keys import DemoConfig, VolumeKeysApp


config = DemoConfig(
    title="Volume Keys (vim)",
    max_volume=16,
    glyph="|",
    up_keys=("up", "k"),
    down_keys=("down", "j"),
)


if __name__ == "__main__":
    VolumeKeysApp(config).run()
