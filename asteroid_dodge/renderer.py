"""Draws the scene graph onto a pygame surface."""

from __future__ import annotations

import os

import pygame

from .constants import BACKGROUND_PATH, BG_COLOR, FONT_NAME
from .scene_graph import Align, Node, NodeKind, SceneGraph


def to_screen(pos, height: float) -> tuple[int, int]:
    """Field coordinates (y up) to screen pixels (y down)."""
    return (int(round(pos[0])), int(round(height - pos[1])))


class PygameRenderer:
    """
    Renders nodes back to front. Fonts and images are loaded lazily and cached;
    missing or unreadable images fall back to drawn shapes.
    """

    def __init__(self) -> None:
        self.fonts: dict[int, pygame.font.Font] = {}
        self.images: dict[str, pygame.Surface | None] = {}
        self.scaled: dict[tuple[str, int, int], pygame.Surface] = {}
        self.background_path = BACKGROUND_PATH

    # --------------------------------- Assets ---------------------------------------

    def get_font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self.fonts[size] = pygame.font.Font(FONT_NAME, size)
        return self.fonts[size]

    def load_image(self, path: str | None) -> pygame.Surface | None:
        """Load an image once; returns None when it is absent or broken."""
        if not path:
            return None
        if path not in self.images:
            img = None
            if os.path.exists(path):
                try:
                    img = pygame.image.load(path)
                    if pygame.display.get_surface() is not None:
                        img = img.convert_alpha()
                except Exception as e:
                    print(f"Failed to load image {path}: {e}")
                    img = None
            self.images[path] = img
        return self.images[path]

    def scaled_image(self, path: str | None, size: tuple[float, float]) -> pygame.Surface | None:
        img = self.load_image(path)
        if img is None:
            return None
        w, h = max(1, int(size[0])), max(1, int(size[1]))
        key = (path, w, h)
        if key not in self.scaled:
            self.scaled[key] = pygame.transform.smoothscale(img, (w, h))
        return self.scaled[key]

    # --------------------------------- Drawing --------------------------------------

    def draw_background(self, surf: pygame.Surface) -> None:
        background = self.scaled_image(self.background_path, surf.get_size())
        if background is not None:
            surf.blit(background, (0, 0))
        else:
            surf.fill(BG_COLOR)

    def draw(self, surf: pygame.Surface, scene: SceneGraph) -> None:
        """Compose the frame: background, then every visible node by z-order."""
        self.draw_background(surf)
        height = surf.get_height()
        for node in scene.draw_order():
            center = to_screen(scene.world_position(node.node_id), height)
            self.draw_node(surf, node, center)

    def draw_node(self, surf: pygame.Surface, node: Node, center: tuple[int, int]) -> None:
        if node.kind is NodeKind.CIRCLE:
            pygame.draw.circle(surf, node.color, center, int(node.radius))
        elif node.kind is NodeKind.SPRITE:
            img = self.scaled_image(node.image_path, node.size)
            if img is not None:
                surf.blit(img, img.get_rect(center=center))
            else:
                pygame.draw.circle(surf, node.color, center, int(node.radius))
        elif node.kind is NodeKind.RECT:
            self.draw_rect(surf, node, center)
        elif node.kind is NodeKind.LABEL:
            text = self.get_font(node.font_size).render(node.text, True, node.color)
            if node.align is Align.TOP_LEFT:
                rect = text.get_rect(topleft=center)
            else:
                rect = text.get_rect(center=center)
            surf.blit(text, rect)

    def draw_rect(self, surf: pygame.Surface, node: Node, center: tuple[int, int]) -> None:
        w, h = int(node.size[0]), int(node.size[1])
        if w <= 0 or h <= 0:
            return
        rect = pygame.Rect(0, 0, w, h)
        rect.center = center
        if len(node.color) == 4:
            # translucent fill needs its own surface
            overlay = pygame.Surface((w, h), pygame.SRCALPHA)
            pygame.draw.rect(overlay, node.color, overlay.get_rect(), border_radius=node.corner_radius)
            surf.blit(overlay, rect)
        else:
            pygame.draw.rect(surf, node.color, rect, border_radius=node.corner_radius)
