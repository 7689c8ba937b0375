"""Many-body gravity toy: small bodies attract each other and a movable heavy body."""

from __future__ import annotations

import itertools
import math
import random
from dataclasses import dataclass
from typing import Optional

G = 6.67430e-02
DAMPING = 0.7
MIN_ATTRACTOR_MASS = 10000.0
MAX_ATTRACTOR_MASS = 1000000.0
ATTRACTOR_MASS = 100000.0
ATTRACTOR_COLOR = 0xFFFF0000
_MIN_MASS = 5 * 5 * math.pi
_MAX_MASS = 14 * 14 * math.pi


@dataclass
class Body:
    x: float
    y: float
    vx: float
    vy: float
    r: float
    mass: float
    color: int


def _attractor_radius(mass: float) -> float:
    return math.sqrt(mass / 3.14)


class BodySimulation:
    """Small bodies scattered around the middle of the screen plus one heavy attractor."""

    def __init__(self, width: int, height: int, count: int = 600,
                 rng: Optional[random.Random] = None):
        if width <= 400 or height <= 400:
            raise ValueError("width and height must both exceed 400")
        if count < 0:
            raise ValueError("count must be non-negative")
        rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.bodies = [self._random_body(rng) for _ in range(count)]
        self.attractor = Body(x=float(width // 2), y=float(height // 2), vx=0.0, vy=0.0,
                              r=_attractor_radius(ATTRACTOR_MASS), mass=ATTRACTOR_MASS,
                              color=ATTRACTOR_COLOR)

    def _random_body(self, rng: random.Random) -> Body:
        x = float(rng.randrange(self.width - 400) + 200)
        y = float(rng.randrange(self.height - 400) + 200)
        r = float(rng.randrange(10) + 5)
        mass = r * r * math.pi
        intensity = (mass - _MIN_MASS) / (_MAX_MASS - _MIN_MASS) * 0.8 + 0.2
        alpha = int(intensity * 255) & 0xFF
        color = (alpha << 24) | (0 << 16) | (255 << 8) | 0
        return Body(x=x, y=y, vx=0.0, vy=0.0, r=r, mass=mass, color=color)

    def move_attractor(self, x: float, y: float) -> None:
        self.attractor.x = x
        self.attractor.y = y

    def scroll(self, amount: int) -> None:
        """Scale the attractor's mass by 1.1 per scroll step, within fixed limits."""
        if amount == 0:
            return
        mass = self.attractor.mass * 1.1 ** amount
        mass = min(max(mass, MIN_ATTRACTOR_MASS), MAX_ATTRACTOR_MASS)
        self.attractor.mass = mass
        self.attractor.r = _attractor_radius(mass)

    def step(self) -> None:
        """Apply one tick of gravity, damping and motion."""
        for a, b in itertools.combinations(self.bodies, 2):
            dx = b.x - a.x
            dy = b.y - a.y
            dist = math.sqrt(dx * dx + dy * dy)
            if dist > 5:
                force = G * (a.mass * b.mass) / (dist * dist)
                ax = force * dx / dist
                ay = force * dy / dist
                a.vx += ax / a.mass
                a.vy += ay / a.mass
                b.vx -= ax / b.mass
                b.vy -= ay / b.mass

        heavy = self.attractor
        for body in self.bodies:
            dx = heavy.x - body.x
            dy = heavy.y - body.y
            dist = math.sqrt(dx * dx + dy * dy)
            if dist > 20:
                force = G * (heavy.mass * body.mass) / (dist * dist)
                body.vx += force * dx / dist / body.mass
                body.vy += force * dy / dist / body.mass
            if dist > 500:
                force = G * (heavy.mass * body.mass) / 100
                body.vx += force * dx / dist / body.mass
                body.vy += force * dy / dist / body.mass

        for body in self.bodies:
            body.vx *= DAMPING
            body.vy *= DAMPING
            body.x += body.vx
            body.y += body.vy