"""
Knödeltown: marquee selection demo.

Drag with the mouse to draw a rectangle. On release, every unit whose centre is
inside the rectangle is selected and outlined in yellow. Selections stay until
the next rectangle is released.

Every two seconds the name, position and selection state of each unit is
printed. Run with MARQUEE_DEBUG=1 to also log drag lifecycle events.

Press ESC at any time to exit the application.
"""

from __future__ import annotations

import arcade

from marquee import MarqueeConfig, MarqueePipeline, PointerEventQueue, SelectableSprite, SelectionReporter

# ---------------------------------------------------------------------------
# Window configuration
# ---------------------------------------------------------------------------
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 900
WINDOW_TITLE = "Knödeltown"
BACKGROUND_COLOR = (64, 0, 0)

# ---------------------------------------------------------------------------
# Scene configuration (world space, origin at the window centre)
# ---------------------------------------------------------------------------
WALL_THICKNESS = 10
ARENA_SIZE = (800, 800)

UNITS = [
    # name, position, size, colour
    ("Minka", (350, 350), (100, 73), arcade.color.LIGHT_BROWN),
    ("Nacho", (100, 100), (75, 100), arcade.color.SANDY_BROWN),
    ("Chip", (200, 200), (100, 100), arcade.color.DARK_TAN),
]


def create_units() -> arcade.SpriteList:
    units = arcade.SpriteList()
    for name, (x, y), (width, height), color in UNITS:
        units.append(SelectableSprite(width, height, x, y, color, name=name))
    return units


def create_walls() -> arcade.SpriteList:
    walls = arcade.SpriteList()
    bound_x, bound_y = ARENA_SIZE
    specs = [
        # left, right, bottom, top
        ((-bound_x / 2, 0), (WALL_THICKNESS, bound_y + WALL_THICKNESS)),
        ((bound_x / 2, 0), (WALL_THICKNESS, bound_y + WALL_THICKNESS)),
        ((0, -bound_y / 2), (bound_x + WALL_THICKNESS, WALL_THICKNESS)),
        ((0, bound_y / 2), (bound_x + WALL_THICKNESS, WALL_THICKNESS)),
    ]
    for (x, y), (width, height) in specs:
        walls.append(arcade.SpriteSolidColor(width, height, x, y, arcade.color.BLACK))
    return walls


class KnodeltownView(arcade.View):
    def __init__(self, config: MarqueeConfig):
        super().__init__()
        self.background_color = BACKGROUND_COLOR
        self.units = create_units()
        self.walls = create_walls()

        # World coordinates are centred on the window.
        self.camera = arcade.Camera2D(position=(0, 0))

        self.events = PointerEventQueue()
        self.marquee = MarqueePipeline(self.units, config)
        self.marquee.add_stage(SelectionReporter(self.units, interval=config.report_interval))

        self.title = arcade.Text(
            "Welcome to Knödeltown",
            self.window.width / 2,
            self.window.height - 50,
            arcade.color.WHITE,
            40,
            anchor_x="center",
        )

    def on_update(self, delta_time: float):
        self.marquee.tick(self.events.drain(), delta_time)

    def on_draw(self):
        self.clear()
        with self.camera.activate():
            self.walls.draw()
            self.units.draw()
            self.marquee.draw()
        self.title.draw()

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self.events.on_mouse_motion(x, y, dx, dy)

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int):
        self.events.on_mouse_drag(x, y, dx, dy, buttons, modifiers)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        self.events.on_mouse_press(x, y, button, modifiers)

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        self.events.on_mouse_release(x, y, button, modifiers)

    def on_key_press(self, key: int, modifiers: int):
        if key == arcade.key.ESCAPE:
            self.window.close()


def main():
    config = MarqueeConfig.from_env()
    window = arcade.Window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
    window.show_view(KnodeltownView(config))
    arcade.run()


if __name__ == "__main__":
    main()
