"""Keyed repeating actions driven by the frame clock.

An action runs its callback on the first tick after it is armed and then once
every ``interval`` seconds, measured from the tick that last fired it. A tick
that arrives several intervals late fires the action once, never in a burst.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class RepeatingAction:
    key: str
    interval: float
    callback: Callable[[], None]
    next_fire_at: float | None = None   # None: fire on the next tick

    def is_due(self, now: float) -> bool:
        return self.next_fire_at is None or now >= self.next_fire_at


class ActionScheduler:
    """
    Holds at most one repeating action per key.

    Notes
    - ``run_repeating`` replaces any action already registered under the key.
    - Callbacks may cancel or re-arm actions (including their own) while the
      scheduler is ticking.
    """

    def __init__(self) -> None:
        self._actions: dict[str, RepeatingAction] = {}

    def run_repeating(self, key: str, interval: float, callback: Callable[[], None]) -> None:
        """
        Arm ``callback`` to fire now and then every ``interval`` seconds.

        Parameters
        ----------
        key : str
            Name used to cancel or replace the action later
        interval : float
            Seconds between firings
        callback : Callable[[], None]
            Work to run on each firing
        """
        self._actions[key] = RepeatingAction(key, interval, callback)

    def remove_action(self, key: str) -> None:
        self._actions.pop(key, None)

    def has_action(self, key: str) -> bool:
        return key in self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def tick(self, now: float) -> None:
        """Fire every action that is due at ``now``."""
        for key, action in list(self._actions.items()):
            # skip actions cancelled or replaced by an earlier callback this tick
            if self._actions.get(key) is not action or not action.is_due(now):
                continue
            action.next_fire_at = now + action.interval
            action.callback()
