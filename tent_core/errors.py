from __future__ import annotations


class TentCalcError(ValueError):
    """Base error for solver contract violations."""


class MissingInputError(TentCalcError):
    """A dimension required by the selected mode was not provided."""

    def __init__(self, mode: str, fields: tuple[str, ...]) -> None:
        self.mode = mode
        self.fields = tuple(fields)
        verb = "is" if len(self.fields) == 1 else "are"
        super().__init__(f"{', '.join(self.fields)} {verb} required for {mode} mode")


class UnknownModeError(TentCalcError):
    """Mode outside the supported set; a caller-side programming error."""

    def __init__(self, mode: object) -> None:
        self.mode = mode
        super().__init__(f"Unknown calculation mode: {mode!r}")
