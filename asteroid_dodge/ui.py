"""HUD and Game Over overlay, built as scene-graph nodes."""

from __future__ import annotations

from .constants import (
    FONT_SIZE_LARGE, FONT_SIZE_MEDIUM, FONT_SIZE_SMALL, HUD_PADDING, OVERLAY_COLOR,
    RESTART_BUTTON_COLOR, RESTART_BUTTON_RADIUS, RESTART_BUTTON_SIZE, RESTART_LABEL_COLOR,
    RESTART_OFFSET_Y, TEXT_COLOR, TITLE_COLOR, TITLE_OFFSET_Y, Z_OVERLAY, Z_OVERLAY_CONTENT,
    Z_OVERLAY_LABEL
)
from .models import Bounds
from .scene_graph import Align, NodeKind, SceneGraph


class HUD:
    """Score label pinned to the top-left corner."""

    def __init__(self, scene: SceneGraph) -> None:
        self.scene = scene
        self.score_label = scene.create(
            NodeKind.LABEL, name="score", text="Score: 0", font_size=FONT_SIZE_SMALL,
            color=TEXT_COLOR, align=Align.TOP_LEFT,
        )

    def set_text(self, text: str) -> None:
        self.scene.set_text(self.score_label, text)

    def layout(self, bounds: Bounds) -> None:
        self.scene.set_position(self.score_label, (bounds.min_x + HUD_PADDING, bounds.max_y - HUD_PADDING))


class GameOverScreen:
    """
    Overlay shown while the game is over: dimmed backdrop, title, final score
    and a "New Game" button.

    The nodes exist only while the overlay is shown. Every position is derived
    from the bounds passed to ``layout``, so a resize just lays it out again.
    """

    def __init__(self, scene: SceneGraph) -> None:
        self.scene = scene
        self.overlay: int | None = None
        self.backdrop: int | None = None
        self.title: int | None = None
        self.final_score: int | None = None
        self.restart_button: int | None = None
        self.restart_label: int | None = None

    @property
    def shown(self) -> bool:
        return self.overlay is not None

    def show(self, score_text: str) -> None:
        """
        Build the overlay nodes.

        Parameters
        ----------
        score_text : str
            Final score label, e.g. ``"Score: 12"``
        """
        if self.shown:
            self.hide()
        scene = self.scene
        self.overlay = scene.create(NodeKind.GROUP, name="overlay", z=Z_OVERLAY)
        self.backdrop = scene.create(
            NodeKind.RECT, name="backdrop", parent=self.overlay, color=OVERLAY_COLOR,
        )
        self.title = scene.create(
            NodeKind.LABEL, name="title", parent=self.overlay, text="Game Over",
            font_size=FONT_SIZE_LARGE, color=TITLE_COLOR, z=Z_OVERLAY_CONTENT - Z_OVERLAY,
        )
        self.final_score = scene.create(
            NodeKind.LABEL, name="final_score", parent=self.overlay, text=score_text,
            font_size=FONT_SIZE_MEDIUM, color=TEXT_COLOR, z=Z_OVERLAY_CONTENT - Z_OVERLAY,
        )
        self.restart_button = scene.create(
            NodeKind.RECT, name="restart", parent=self.overlay, size=RESTART_BUTTON_SIZE,
            color=RESTART_BUTTON_COLOR, corner_radius=RESTART_BUTTON_RADIUS,
            z=Z_OVERLAY_CONTENT - Z_OVERLAY,
        )
        # label sits at the button's origin and moves with it
        self.restart_label = scene.create(
            NodeKind.LABEL, name="restart_label", parent=self.restart_button, text="New Game",
            font_size=FONT_SIZE_MEDIUM, color=RESTART_LABEL_COLOR,
            z=Z_OVERLAY_LABEL - Z_OVERLAY_CONTENT,
        )
        self.layout(scene.frame)

    def hide(self) -> None:
        if self.overlay is not None:
            self.scene.remove(self.overlay)
        self.overlay = None
        self.backdrop = None
        self.title = None
        self.final_score = None
        self.restart_button = None
        self.restart_label = None

    def layout(self, bounds: Bounds) -> None:
        if not self.shown:
            return
        scene = self.scene
        scene.set_size(self.backdrop, bounds.size)
        scene.set_position(self.backdrop, bounds.center)
        scene.set_position(self.title, (bounds.mid_x, bounds.mid_y + TITLE_OFFSET_Y))
        scene.set_position(self.final_score, (bounds.mid_x, bounds.mid_y))
        scene.set_position(self.restart_button, (bounds.mid_x, bounds.mid_y + RESTART_OFFSET_Y))

    def restart_contains(self, point) -> bool:
        return self.restart_button is not None and self.scene.contains_point(self.restart_button, point)
