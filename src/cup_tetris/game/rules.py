from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    # Points per landing are lines ** exponent, so two rows at once score 4.
    line_exponent: int = 2

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines ** self.line_exponent
