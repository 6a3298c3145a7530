# src/glass_todo/core/celebration.py

from __future__ import annotations

import logging
import random
from collections.abc import Callable

logger = logging.getLogger(__name__)

CONFETTI_GLYPHS = "*+.o~^"
CONFETTI_WIDTH = 60


class ConfettiCelebration:
    """
    Terminal confetti: emits a burst of glyphs when every task is done.

    particle_count is the number of glyphs scattered over the burst lines.
    """

    def __init__(
        self,
        emit: Callable[[str], None],
        *,
        particle_count: int = 150,
        width: int = CONFETTI_WIDTH,
        rng: random.Random | None = None,
    ) -> None:
        self._emit = emit
        self._particle_count = max(0, int(particle_count))
        self._width = max(1, int(width))
        self._rng = rng or random.Random()
        self.bursts = 0

    def render_burst(self) -> list[str]:
        rows = max(1, -(-self._particle_count // self._width))
        cells = [[" "] * self._width for _ in range(rows)]
        for _ in range(self._particle_count):
            r = self._rng.randrange(rows)
            c = self._rng.randrange(self._width)
            cells[r][c] = self._rng.choice(CONFETTI_GLYPHS)
        return ["".join(row).rstrip() for row in cells]

    def on_all_completed(self) -> None:
        self.bursts += 1
        logger.debug("All tasks completed; celebrating (burst=%d).", self.bursts)
        for line in self.render_burst():
            self._emit(line)
        self._emit("All tasks completed!")


class NullCelebration:
    """Celebration disabled in settings."""

    def on_all_completed(self) -> None:
        logger.debug("All tasks completed (celebration disabled).")
