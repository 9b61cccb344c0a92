"""
errors.py
=========

Does: Define the failure taxonomy of the resolver. Every error keeps the
      structured context a caller needs to correct its input (palette key,
      offending value, valid alternatives or ranked suggestions).
Used By: Catalog validation, name/color matchers, orchestrator and CLI.
"""

from __future__ import annotations

from typing import Mapping, Sequence

__all__ = [
    "PaletteError",
    "ValidationError",
    "UnknownPaletteError",
    "UnmatchedNameError",
    "InvalidInputError",
    "UnsupportedMetricError",
]
__docformat__ = "google"


def _quoted(items: Sequence[str]) -> str:
    return ", ".join(f'"{x}"' for x in items)


class PaletteError(ValueError):
    """Base class of every resolver failure."""


class ValidationError(PaletteError):
    """A raw palette failed validation at catalog load."""

    def __init__(self, palette: str, field: str, message: str):
        self.palette = palette
        self.field = field
        self.detail = message
        super().__init__(f'Palette "{palette}" field <{field}>: {message}')


class UnknownPaletteError(PaletteError, KeyError):
    """No palette has this key (case-insensitive)."""

    def __init__(self, palette: str, valid: Sequence[str]):
        self.palette = palette
        self.valid = tuple(valid)
        super().__init__(
            f'Palette "{palette}" is not supported. The palette name must be one of: '
            f"{_quoted(self.valid)}."
        )

    def __str__(self) -> str:  # KeyError would repr() the message
        return str(self.args[0])


class UnmatchedNameError(PaletteError):
    """One or more name queries matched no entry of the palette."""

    def __init__(
        self,
        palette: str,
        unmatched: Mapping[str, Sequence[str]] | Sequence[tuple[str, Sequence[str]]],
    ):
        self.palette = palette
        pairs = unmatched.items() if isinstance(unmatched, Mapping) else unmatched
        # one (query, suggestions) pair per failing query, repeats included
        self.unmatched = tuple((q, tuple(s)) for q, s in pairs)
        self.suggestions = dict(self.unmatched)
        lines = [f"  {q!r:<17} -> {_quoted(s)}" for q, s in self.unmatched]
        super().__init__(
            f'Palette "{palette}" does not contain these colors: '
            f"{_quoted(self.queries)}.\n"
            "Palette color names that are similar to the requested names:\n"
            + "\n".join(lines)
        )

    @property
    def queries(self) -> tuple[str, ...]:
        return tuple(q for q, _ in self.unmatched)


class InvalidInputError(PaletteError):
    """A color sample (or other query argument) is malformed or out of range."""

    def __init__(self, position: int | None, value: object, reason: str):
        self.position = position
        self.value = value
        self.reason = reason
        where = "" if position is None else f" #{position}"
        super().__init__(f"Invalid input{where} {value!r}: {reason}")


class UnsupportedMetricError(PaletteError):
    """The requested color-difference metric is not registered."""

    def __init__(self, metric: object, valid: Sequence[str]):
        self.metric = metric
        self.valid = tuple(valid)
        super().__init__(
            f'Color difference metric "{metric}" is not supported. '
            f"The supported metrics are: {_quoted(self.valid)}."
        )
