"""The lit scene: two textured walls, a movable light sphere and a ground plane."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .geometry import GenericVertex, make_cube, make_sphere
from .matrix4 import (
    Matrix4,
    get_translation,
    inv,
    lin_fact,
    normal_matrix,
    trans_fact,
)
from .vec import Vec
from .viewport import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    GROUND_SIZE,
    GROUND_Y,
    ButtonState,
    MouseButton,
    MouseTracker,
    frust_fov_y,
    help_text,
)
from .viewport import projection_matrix as _projection_matrix

SHADER_FILES = (
    ("./shaders/basic.vshader", "./shaders/diffuse.fshader"),
    ("./shaders/basic.vshader", "./shaders/specular.fshader"),
)
"""Vertex and fragment shader files of each selectable shader."""

TEXTURE_FILES = ("Fieldstone.ppm", "FieldstoneNormal.ppm")
"""Colour texture and normal map used on the walls."""

SCREENSHOT_FILE = "out.ppm"

LIGHT_POSITION = Vec(0.0, 2.0, 0.0)
GROUND_COLOR = Vec(0.1, 0.95, 0.1)

_ESCAPE = "\x1b"


@dataclass(frozen=True)
class DrawCall:
    """One object to draw, with the uniforms in effect when it is drawn."""

    geometry: str
    model_view: Matrix4
    normal_matrix: Matrix4
    color: Vec
    use_texture: int
    sphere: bool


def make_ground() -> tuple[list[GenericVertex], list[int]]:
    """The ground: an x-z square at the ground height, facing +Y."""
    zero = Vec(0.0, 0.0, 0.0)
    normal = Vec(0.0, 1.0, 0.0)
    s = GROUND_SIZE
    corners = (
        ((-s, -s), (0, 0)),
        ((-s, s), (0, 1)),
        ((s, s), (1, 1)),
        ((s, -s), (1, 0)),
    )
    vertices = [
        GenericVertex(Vec(x, GROUND_Y, z), normal, Vec(*tex), zero, zero)
        for (x, z), tex in corners
    ]
    return vertices, [0, 1, 2, 0, 2, 3]


def _initial_objects() -> list[Matrix4]:
    wall_scale = Matrix4.make_scale((0.2, 2, 2))
    left_wall = (
        Matrix4.make_translation((-1, 0, 0)) * Matrix4.make_y_rotation(-20) * wall_scale
    )
    right_wall = (
        Matrix4.make_translation((1, 0, 0)) * Matrix4.make_y_rotation(20) * wall_scale
    )
    return [left_wall, right_wall, Matrix4.make_translation(LIGHT_POSITION)]


class Scene:
    """State of the viewer and its reactions to window, mouse and keyboard events."""

    def __init__(self) -> None:
        self.window_width = DEFAULT_WINDOW_WIDTH
        self.window_height = DEFAULT_WINDOW_HEIGHT
        self.fov_y = frust_fov_y(self.window_width, self.window_height)
        self.sky_rbt = Matrix4.make_translation((0.0, 0.25, 4.0))
        self.object_rbts = _initial_objects()
        self.object_colors = [Vec(1, 0, 0), Vec(0, 0, 1), Vec(1, 1, 0)]
        self.active_cube = 2
        self.active_shader = 0
        self.tracker = MouseTracker()
        self.pending_screenshot: str | None = None
        self.meshes = {
            "ground": make_ground(),
            "cube": make_cube(1),
            "sphere": make_sphere(0.5, 20, 20),
        }

    def reshape(self, width: int, height: int) -> None:
        """Record a new window size and update the field of view."""
        self.window_width = width
        self.window_height = height
        print(f"Size of window is now {width}x{height}", file=sys.stderr)
        self.fov_y = frust_fov_y(width, height)

    def projection_matrix(self) -> Matrix4:
        """The projection for the current window size."""
        return _projection_matrix(self.window_width, self.window_height)

    def eye_light(self) -> Vec:
        """The light position, taken from the sphere, in eye coordinates."""
        world = get_translation(self.object_rbts[2]).resized(4, 1.0)
        return (inv(self.sky_rbt) * world).resized(3)

    def mouse(self, button: MouseButton | int, state: ButtonState | int, x: int, y: int) -> None:
        """Handle a mouse button press or release."""
        self.tracker.update(button, state, x, y, self.window_height)

    def motion(self, x: int, y: int) -> bool:
        """Handle a mouse drag; returns whether the scene changed."""
        t = self.tracker
        dx = float(x - t.click_x)
        dy = float(self.window_height - y - 1 - t.click_y)
        changed = False

        if t.is_down():
            active = self.active_cube
            a = trans_fact(self.object_rbts[active]) * lin_fact(self.sky_rbt)
            m = Matrix4.identity()
            if t.left and not t.right:
                m = Matrix4.make_x_rotation(-dy) * Matrix4.make_y_rotation(dx)
                self.object_rbts[active] = a * m * inv(a) * self.object_rbts[active]
            elif t.right and not t.left:
                m = Matrix4.make_translation(Vec(dx, dy, 0) * 0.01)
                self.object_rbts[active] = a * m * inv(a) * self.object_rbts[active]
            elif t.middle or (t.left and t.right):
                m = Matrix4.make_translation(Vec(0, 0, -dy) * 0.01)
                self.object_rbts[active] = a * m * inv(a) * self.object_rbts[active]
            if active == 2:
                # The light sphere receives the motion a second time.
                self.object_rbts[active] = a * m * inv(a) * self.object_rbts[active]
            changed = True

        t.click_x = x
        t.click_y = self.window_height - y - 1
        return changed

    def keyboard(self, key: str | int) -> str | None:
        """Handle a key press; returns text to show the user, if any.

        Escape raises SystemExit. 's' records a screenshot request in
        ``pending_screenshot``.
        """
        if isinstance(key, int):
            key = chr(key)
        if key == _ESCAPE:
            raise SystemExit(0)
        if key == "h":
            return help_text()
        if key == "s":
            self.pending_screenshot = SCREENSHOT_FILE
        elif key == "o":
            self.active_cube = 2
        elif key == "1":
            self.active_shader = 0
        elif key == "2":
            self.active_shader = 1
        return None

    def draw_calls(self) -> list[DrawCall]:
        """The objects of one frame in drawing order."""
        inv_eye = inv(self.sky_rbt)

        def call(name: str, rbt: Matrix4, color: Vec, use_texture: int, sphere: bool) -> DrawCall:
            mvm = inv_eye * rbt
            return DrawCall(name, mvm, normal_matrix(mvm), color, use_texture, sphere)

        return [
            call("ground", Matrix4.identity(), GROUND_COLOR, 0, False),
            call("cube", self.object_rbts[0], GROUND_COLOR, 2, False),
            call("cube", self.object_rbts[1], GROUND_COLOR, 2, False),
            call("sphere", self.object_rbts[2], self.object_colors[2], 0, True),
        ]