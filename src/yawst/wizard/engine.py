"""Step navigation engine shared by all scenarios."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from yawst.wizard.types import Advance, Retreat, WizardStep


class WizardEngine:
    """Walk an ordered list of steps forward and backward.

    Answers are kept per step. Going back re-enters the previous step with
    its last answer as the default; slots are only overwritten when a step
    advances again.
    """

    def __init__(self, steps: Sequence[WizardStep]) -> None:
        self.steps: tuple[WizardStep, ...] = tuple(steps)
        self.cursor = 0
        self.answers: list[Any] = [None] * len(self.steps)

    @property
    def finished(self) -> bool:
        return self.cursor == len(self.steps)

    def run(self) -> list[Any] | None:
        """Run steps until the last one advances or the first one retreats.

        Returns:
            Answers in step order, or None if the user backed out of the
            first step.
        """
        while self.cursor < len(self.steps):
            result = self.steps[self.cursor].handle(self.answers[self.cursor])

            if isinstance(result, Retreat):
                if self.cursor == 0:
                    return None
                self.cursor -= 1
                continue

            if not isinstance(result, Advance):
                raise TypeError(f"Step returned {result!r}, expected Advance or Retreat")

            self.answers[self.cursor] = result.value
            self.cursor += 1

        return list(self.answers)
