"""A fly-through camera and the view and projection matrices it produces.

Matrices are returned as 16 floats in column-major order.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from .vecmath import cross, dot, normalize
from .vectors import Float3


class Movement(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


def calculate_lookat(eye, center, up):
    """View matrix looking from ``eye`` towards ``center``."""
    f = normalize(center - eye)
    s = normalize(cross(f, up))
    u = cross(s, f)
    return [
        s.x, u.x, -f.x, 0.0,
        s.y, u.y, -f.y, 0.0,
        s.z, u.z, -f.z, 0.0,
        -dot(s, eye), -dot(u, eye), dot(f, eye), 1.0,
    ]


def calculate_perspective(fovy, aspect, near, far):
    """Perspective projection with vertical field of view ``fovy`` in degrees."""
    tan_half = math.tan(math.radians(fovy / 2.0))
    return [
        1.0 / (aspect * tan_half), 0.0, 0.0, 0.0,
        0.0, 1.0 / tan_half, 0.0, 0.0,
        0.0, 0.0, -(far + near) / (far - near), -1.0,
        0.0, 0.0, -(2.0 * far * near) / (far - near), 0.0,
    ]


@dataclass
class Camera:
    """Mouse-look camera with yaw/pitch angles and a zoomable field of view."""

    yaw: float = -90.0
    pitch: float = 0.0
    zoom: float = 45.0
    last_x: float = 400.0
    last_y: float = 300.0
    first_mouse: bool = True
    position: Float3 = field(default_factory=lambda: Float3(0.0, 0.0, 50.0))
    front: Float3 = field(default_factory=lambda: Float3(0.0, 0.0, -1.0))
    up: Float3 = field(default_factory=lambda: Float3(0.0, 1.0, 0.0))
    speed: float = 0.05
    sensitivity: float = 0.1
    near: float = 0.1
    far: float = 100.0

    def on_mouse(self, xpos, ypos):
        """Turn the camera by the cursor's movement since the last call."""
        if self.first_mouse:
            self.last_x, self.last_y = xpos, ypos
            self.first_mouse = False
        xoffset = (xpos - self.last_x) * self.sensitivity
        yoffset = (self.last_y - ypos) * self.sensitivity
        self.last_x, self.last_y = xpos, ypos

        self.yaw += xoffset
        self.pitch = min(89.0, max(-89.0, self.pitch + yoffset))

        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        direction = Float3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = normalize(direction)

    def on_scroll(self, yoffset):
        """Zoom by changing the field of view, kept within [1, 45] degrees."""
        self.zoom = min(45.0, max(1.0, self.zoom - float(yoffset)))

    def move(self, direction):
        """Step the camera one ``speed`` unit in ``direction``."""
        direction = Movement(direction)
        right = normalize(cross(self.front, self.up)) * self.speed
        if direction is Movement.FORWARD:
            self.position = self.position + self.speed * self.front
        elif direction is Movement.BACKWARD:
            self.position = self.position - self.speed * self.front
        elif direction is Movement.LEFT:
            self.position = self.position - right
        else:
            self.position = self.position + right

    def view_matrix(self):
        return calculate_lookat(self.position, self.position + self.front, self.up)

    def projection_matrix(self, width, height):
        if height <= 0 or width <= 0:
            raise ValueError(f"invalid framebuffer size {width}x{height}")
        return calculate_perspective(self.zoom, width / height, self.near, self.far)