"""Survival scoring: one point per whole second spent playing."""

from __future__ import annotations

from .constants import SCORE_INCREMENT_SECONDS


class ScoreKeeper:
    """
    Converts elapsed frame time into whole-point increments.

    The sub-second remainder is carried in ``accumulator``, which stays in
    ``[0, increment)`` after every ``advance``. A single large delta (e.g. the
    window was backgrounded) awards several points at once.
    """

    def __init__(self, increment: float = SCORE_INCREMENT_SECONDS) -> None:
        self.increment = increment
        self.score = 0
        self.accumulator = 0.0

    def advance(self, delta: float) -> int:
        """
        Add ``delta`` seconds of play time.

        Parameters
        ----------
        delta : float
            Seconds since the previous frame; zero or negative deltas are ignored

        Returns
        -------
        int
            Points awarded by this call
        """
        if delta <= 0:
            return 0
        self.accumulator += delta
        awarded = 0
        while self.accumulator >= self.increment:
            self.accumulator -= self.increment
            awarded += 1
        self.score += awarded
        return awarded

    def reset(self) -> None:
        self.score = 0
        self.accumulator = 0.0

    @property
    def label(self) -> str:
        return f"Score: {self.score}"
