"""Camera frustum settings, the help text and mouse button tracking."""

from __future__ import annotations

import math
from enum import IntEnum

from .matrix4 import Matrix4
from .vec import PI

FRUST_MIN_FOV = 60.0
"""The smallest vertical field of view, in degrees."""

FRUST_NEAR = -0.1
"""Near clipping plane."""

FRUST_FAR = -50.0
"""Far clipping plane."""

GROUND_Y = -2.0
"""The y coordinate of the ground."""

GROUND_SIZE = 10.0
"""Half the side length of the ground."""

DEFAULT_WINDOW_WIDTH = 512
DEFAULT_WINDOW_HEIGHT = 512

_HELP_LINES = (
    " ============== H E L P ==============",
    "",
    "h\t\thelp menu",
    "s\t\tsave screenshot",
    "f\t\tToggle flat shading on/off.",
    "o\t\tCycle object to edit",
    "1\t\tDiffuse only",
    "2\t\tDiffuse and specular",
    "drag left mouse to rotate",
)


class MouseButton(IntEnum):
    """Mouse buttons, numbered as the windowing toolkit reports them."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class ButtonState(IntEnum):
    """Whether a button event is a press or a release."""

    DOWN = 0
    UP = 1


def frust_fov_y(width: int, height: int) -> float:
    """Vertical field of view in degrees for a window of the given size.

    A window at least as wide as it is tall keeps the minimal field of view;
    a taller window narrows it so the horizontal view keeps that minimum.
    """
    if width >= height:
        return FRUST_MIN_FOV
    rad_per_deg = 0.5 * PI / 180
    return (
        math.atan2(
            math.sin(FRUST_MIN_FOV * rad_per_deg) * height / width,
            math.cos(FRUST_MIN_FOV * rad_per_deg),
        )
        / rad_per_deg
    )


def projection_matrix(width: int, height: int) -> Matrix4:
    """The perspective projection used for a window of the given size."""
    return Matrix4.make_projection(
        frust_fov_y(width, height), width / float(height), FRUST_NEAR, FRUST_FAR
    )


def help_text() -> str:
    """The text printed when the user asks for help."""
    return "\n".join(_HELP_LINES) + "\n"


class MouseTracker:
    """Which mouse buttons are held and where the last click or drag happened.

    Click coordinates are stored with the y axis pointing up, counted from the
    bottom row of the window.
    """

    def __init__(self) -> None:
        self.left = False
        self.right = False
        self.middle = False
        self.click_x = 0
        self.click_y = 0

    def update(
        self,
        button: MouseButton | int,
        state: ButtonState | int,
        x: int,
        y: int,
        window_height: int,
    ) -> None:
        """Record a button press or release at window position ``(x, y)``."""
        button = MouseButton(button)
        state = ButtonState(state)
        self.click_x = x
        self.click_y = window_height - y - 1

        pressed = state is ButtonState.DOWN
        if button is MouseButton.LEFT:
            self.left = pressed
        elif button is MouseButton.RIGHT:
            self.right = pressed
        else:
            self.middle = pressed

    def is_down(self) -> bool:
        """Whether any button is held."""
        return self.left or self.right or self.middle