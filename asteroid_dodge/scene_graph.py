"""Scene graph: an id-keyed arena of visual nodes plus the current field bounds.

Game code never holds node objects across frames; it creates a node, keeps the
returned id, and issues commands by id. Child positions are relative to their
parent, so moving a group moves everything inside it.
"""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass, field

import pygame
from pygame.math import Vector2

from .models import Bounds


class NodeKind(enum.Enum):
    GROUP = "group"
    SPRITE = "sprite"
    CIRCLE = "circle"
    RECT = "rect"
    LABEL = "label"


class Align(enum.Enum):
    CENTER = "center"
    TOP_LEFT = "top_left"


@dataclass
class Node:
    """
    A single visual node.

    Attributes
    ----------
    node_id : int
        Stable id handed out by the graph.
    kind : NodeKind
        Drawing primitive.
    name : str
        Free-form tag used for lookups (e.g. ``"asteroid"``).
    parent : int | None
        Parent node id, or None for top-level nodes.
    position : Vector2
        Position relative to the parent (centre for shapes, anchor for labels).
    size : tuple[float, float]
        Width/height for sprites and rects.
    radius : float
        Radius for circles (and sprite circle fallbacks).
    """
    node_id: int
    kind: NodeKind
    name: str = ""
    parent: int | None = None
    position: Vector2 = field(default_factory=Vector2)
    size: tuple[float, float] = (0.0, 0.0)
    radius: float = 0.0
    color: tuple = (255, 255, 255)
    text: str = ""
    font_size: int = 0
    align: Align = Align.CENTER
    corner_radius: int = 0
    image_path: str | None = None
    z: int = 0
    hidden: bool = False


class SceneGraph:
    """Owns every visual node and the authoritative field bounds."""

    def __init__(self, width: float, height: float) -> None:
        self.frame = Bounds.from_size(width, height)
        self._nodes: dict[int, Node] = {}
        self._children: dict[int | None, list[int]] = {None: []}
        self._ids = itertools.count(1)

    def resize(self, width: float, height: float) -> Bounds:
        self.frame = Bounds.from_size(width, height)
        return self.frame

    # --------------------------------- Nodes ----------------------------------------

    def create(self, kind: NodeKind, name: str = "", parent: int | None = None, **attrs) -> int:
        """
        Create a node and return its id.

        Parameters
        ----------
        kind : NodeKind
            Drawing primitive
        name : str
            Lookup tag
        parent : int | None
            Existing parent id; None attaches the node to the root
        **attrs
            Any other ``Node`` field (position, size, color, text, ...)
        """
        if parent is not None and parent not in self._nodes:
            raise KeyError(f"unknown parent node {parent}")
        node_id = next(self._ids)
        position = attrs.pop("position", (0.0, 0.0))
        node = Node(node_id, kind, name=name, parent=parent, position=Vector2(position), **attrs)
        self._nodes[node_id] = node
        self._children.setdefault(parent, []).append(node_id)
        self._children[node_id] = []
        return node_id

    def get(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def __contains__(self, node_id: int) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def remove(self, node_id: int) -> None:
        """Remove a node and all of its descendants. Unknown ids are ignored."""
        node = self._nodes.get(node_id)
        if node is None:
            return
        for child_id in list(self._children.get(node_id, [])):
            self.remove(child_id)
        self._children.pop(node_id, None)
        self._children[node.parent].remove(node_id)
        del self._nodes[node_id]

    def set_position(self, node_id: int, position) -> None:
        self._nodes[node_id].position = Vector2(position)

    def set_hidden(self, node_id: int, hidden: bool) -> None:
        self._nodes[node_id].hidden = hidden

    def set_text(self, node_id: int, text: str) -> None:
        self._nodes[node_id].text = text

    def set_size(self, node_id: int, size: tuple[float, float]) -> None:
        self._nodes[node_id].size = (float(size[0]), float(size[1]))

    def children_named(self, name: str, parent: int | None = None) -> list[int]:
        return [nid for nid in self._children.get(parent, []) if self._nodes[nid].name == name]

    # --------------------------------- Queries --------------------------------------

    def world_position(self, node_id: int) -> Vector2:
        node = self._nodes[node_id]
        pos = Vector2(node.position)
        while node.parent is not None:
            node = self._nodes[node.parent]
            pos += node.position
        return pos

    def world_z(self, node_id: int) -> int:
        node = self._nodes[node_id]
        z = node.z
        while node.parent is not None:
            node = self._nodes[node.parent]
            z += node.z
        return z

    def is_visible(self, node_id: int) -> bool:
        node = self._nodes[node_id]
        while True:
            if node.hidden:
                return False
            if node.parent is None:
                return True
            node = self._nodes[node.parent]

    def contains_point(self, node_id: int, point) -> bool:
        """
        Hit-test a field-coordinate point against a node's current shape.

        Rects and sprites test their box, circles their radius. Groups, labels
        and hidden nodes have no hit area.
        """
        node = self._nodes.get(node_id)
        if node is None or not self.is_visible(node_id):
            return False
        center = self.world_position(node_id)
        if node.kind in (NodeKind.RECT, NodeKind.SPRITE):
            rect = pygame.Rect(0, 0, int(node.size[0]), int(node.size[1]))
            rect.center = (int(round(center.x)), int(round(center.y)))
            return rect.collidepoint(int(point[0]), int(point[1]))
        if node.kind is NodeKind.CIRCLE:
            return center.distance_squared_to(Vector2(point)) <= node.radius * node.radius
        return False

    def draw_order(self) -> list[Node]:
        """Visible nodes sorted back to front; parents before their children on ties."""
        ordered: list[tuple[int, int, Node]] = []

        def walk(parent: int | None) -> None:
            for nid in self._children.get(parent, []):
                node = self._nodes[nid]
                if node.hidden:
                    continue
                ordered.append((self.world_z(nid), len(ordered), node))
                walk(nid)

        walk(None)
        ordered.sort(key=lambda item: (item[0], item[1]))
        return [node for _, _, node in ordered]
