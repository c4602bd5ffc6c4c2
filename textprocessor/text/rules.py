"""Deterministic text normalization rules.

Responsibilities:
- Provide composable spacing, bracket, and capitalization rewrites.
- Keep each rewrite a pure function of its input text.

Only the space character counts as spacing in the bracket and punctuation
rules; tabs are left untouched.
"""

from __future__ import annotations

import re
from typing import Protocol


class NormalizationRule(Protocol):
    """Protocol for text normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization rewrite."""


class StripSpaceAfterOpeningBracket:
    """Remove spaces right after `(`, `{`, or `[`."""

    _PATTERN = re.compile(r"([({\[]) +")

    def apply(self, text: str) -> str:
        """Turn `( foo` into `(foo`."""

        return self._PATTERN.sub(r"\1", text)


class StripSpaceBeforeClosingBracket:
    """Remove spaces right before `)`, `}`, or `]`."""

    _PATTERN = re.compile(r" +([)}\]])")

    def apply(self, text: str) -> str:
        """Turn `foo )` into `foo)`."""

        return self._PATTERN.sub(r"\1", text)


class SpaceBeforeOpeningBracket:
    """Separate an opening bracket from the non-space character preceding it."""

    _PATTERN = re.compile(r"(?<=[^ ])([({\[])")

    def apply(self, text: str) -> str:
        """Turn `word(` into `word (`."""

        return self._PATTERN.sub(r" \1", text)


class SpaceAfterClosingBracket:
    """Separate a closing bracket from the non-space character following it."""

    _PATTERN = re.compile(r"([)}\]])(?=[^ ])")

    def apply(self, text: str) -> str:
        """Turn `)word` into `) word`."""

        return self._PATTERN.sub(r"\1 ", text)


class NormalizePunctuationSpacing:
    """Attach clause punctuation to the left and follow it with one space."""

    _PATTERN = re.compile(r" *([.,!?;:]) *")

    def apply(self, text: str) -> str:
        """Turn `word , word` into `word, word`."""

        return self._PATTERN.sub(r"\1 ", text)


class CollapseSpaces:
    """Collapse runs of spaces across the whole text."""

    _PATTERN = re.compile(r" +")

    def apply(self, text: str) -> str:
        """Replace every run of spaces with a single space."""

        return self._PATTERN.sub(" ", text)


class TrimLines:
    """Strip leading and trailing whitespace from every line."""

    def apply(self, text: str) -> str:
        """Trim each `\\n`-separated line and rejoin."""

        return "\n".join(line.strip() for line in text.split("\n"))


class CapitalizeSentences:
    """Uppercase the first letter of the text and of every sentence.

    Opening brackets in front of the letter are skipped, so `(hello` becomes
    `(Hello`. Only ASCII whitespace separates sentences.
    """

    _PATTERN = re.compile(r"(?:[.?!]\s+|^)[{\[(]*[a-z]", re.ASCII)

    def apply(self, text: str) -> str:
        """Uppercase letters starting the text or following `.`, `?`, `!`."""

        return self._PATTERN.sub(lambda match: match.group(0).upper(), text)


def default_rules() -> list[NormalizationRule]:
    """Return the canonical rule order; later rules rely on earlier output."""

    return [
        StripSpaceAfterOpeningBracket(),
        StripSpaceBeforeClosingBracket(),
        SpaceBeforeOpeningBracket(),
        SpaceAfterClosingBracket(),
        NormalizePunctuationSpacing(),
        CollapseSpaces(),
        TrimLines(),
        CapitalizeSentences(),
    ]
