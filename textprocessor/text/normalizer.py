"""Text normalization stage.

Responsibilities:
- Apply the ordered spacing, bracket, and capitalization rules.
- Keep normalization deterministic and free of side effects.
"""

from __future__ import annotations

from .rules import NormalizationRule, default_rules


class TextNormalizer:
    """Normalize raw text into canonically spaced, capitalized text."""

    def __init__(self, rules: list[NormalizationRule] | None = None) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules = rules if rules is not None else default_rules()

    def normalize(self, text: str) -> str:
        """Apply all configured rules in order, feeding each the previous output."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current
