"""Contact-only physics: circle bodies, velocity integration, begin-contact events.

Bodies never push each other apart. A pair is reported once when its overlap
begins and must separate before it can be reported again.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable

from pygame.math import Vector2


@dataclass(eq=False)
class PhysicsBody:
    """
    A circular body.

    Attributes
    ----------
    category : int
        Category bits this body belongs to.
    contact_mask : int
        Categories this body wants contact notifications for.
    radius : float
        Circle radius in field units.
    dynamic : bool
        Only dynamic bodies are integrated by ``simulate``.
    """
    body_id: int
    category: int
    contact_mask: int
    radius: float
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    dynamic: bool = True

    def overlaps(self, other: PhysicsBody) -> bool:
        reach = self.radius + other.radius
        return self.position.distance_squared_to(other.position) < reach * reach

    def tests_against(self, other: PhysicsBody) -> bool:
        return bool(self.category & other.contact_mask) or bool(other.category & self.contact_mask)


@dataclass(frozen=True)
class Contact:
    body_a: PhysicsBody
    body_b: PhysicsBody


ContactListener = Callable[[Contact], object]


class PhysicsWorld:
    """
    Integrates dynamic bodies and reports new overlaps to ``contact_listener``.

    Notes
    - Gravity is zero; bodies move only by their assigned velocity.
    - Contacts are dispatched synchronously from inside ``simulate``.
    """

    def __init__(self, contact_listener: ContactListener | None = None) -> None:
        self.contact_listener = contact_listener
        self._bodies: dict[int, PhysicsBody] = {}
        self._touching: set[frozenset[int]] = set()
        self._ids = itertools.count(1)

    def add_body(
        self,
        category: int,
        contact_mask: int,
        radius: float,
        position=(0.0, 0.0),
        velocity=(0.0, 0.0),
        dynamic: bool = True,
    ) -> PhysicsBody:
        body = PhysicsBody(
            next(self._ids), int(category), int(contact_mask), float(radius),
            Vector2(position), Vector2(velocity), dynamic,
        )
        self._bodies[body.body_id] = body
        return body

    def remove_body(self, body: PhysicsBody) -> None:
        self._bodies.pop(body.body_id, None)
        self._touching = {pair for pair in self._touching if body.body_id not in pair}

    def freeze(self, body: PhysicsBody) -> None:
        """Stop a body where it is: zero velocity, no further integration."""
        body.velocity = Vector2(0, 0)
        body.dynamic = False

    def __contains__(self, body: PhysicsBody) -> bool:
        return self._bodies.get(body.body_id) is body

    def simulate(self, dt: float) -> None:
        """
        Advance one step of ``dt`` seconds and dispatch begin-contact events.

        Parameters
        ----------
        dt : float
            Step length; non-positive steps do nothing.
        """
        if dt <= 0:
            return
        for body in self._bodies.values():
            if body.dynamic:
                body.position += body.velocity * dt
        self._detect_contacts()

    def _detect_contacts(self) -> None:
        touching: set[frozenset[int]] = set()
        began: list[Contact] = []
        for a, b in itertools.combinations(list(self._bodies.values()), 2):
            if not a.tests_against(b) or not a.overlaps(b):
                continue
            pair = frozenset((a.body_id, b.body_id))
            touching.add(pair)
            if pair not in self._touching:
                began.append(Contact(a, b))
        self._touching = touching
        for contact in began:
            # an earlier listener call may have removed one of the bodies
            if contact.body_a in self and contact.body_b in self:
                if self.contact_listener is not None:
                    self.contact_listener(contact)

