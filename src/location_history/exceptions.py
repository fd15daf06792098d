"""Custom exception hierarchy for location_history."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _format_path(path: Sequence[str | int]) -> str:
    parts: list[str] = []
    for item in path:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        elif parts:
            parts.append(f".{item}")
        else:
            parts.append(item)
    return "".join(parts)


class LocationHistoryError(Exception):
    """Base exception for all location_history errors."""


class ConfigError(LocationHistoryError):
    """Invalid decoder configuration."""


class DecodeError(LocationHistoryError, ValueError):
    """The input could not be decoded into location entries.

    Parameters
    ----------
    message : str
        Human readable description of the failure.
    field : str or None
        Wire name of the offending field, when known.
    path : sequence of str or int
        Location of the offending value inside the record, e.g.
        ``("activeWifiScan", "accessPoints", 0, "mac")``.
    record_index : int or None
        Position of the record in the ``locations`` array.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        path: Sequence[str | int] = (),
        record_index: int | None = None,
    ) -> None:
        self.message = message
        self.field = field
        self.path: tuple[str | int, ...] = ()
        self.record_index = record_index
        super().__init__(message)
        self.with_context(path=path)

    def with_context(
        self,
        *,
        path: Sequence[str | int] | None = None,
        record_index: int | None = None,
    ) -> DecodeError:
        """Attach location context in place and return ``self``.

        Context already present is kept; the innermost raiser knows best.
        """
        if path and not self.path:
            self.path = tuple(path)
            if self.field is None:
                self.field = next((p for p in reversed(self.path) if isinstance(p, str)), None)
        if record_index is not None and self.record_index is None:
            self.record_index = record_index
        return self

    def __str__(self) -> str:
        context: list[str] = []
        if self.record_index is not None:
            context.append(f"locations[{self.record_index}]")
        if self.path:
            context.append(_format_path(self.path))
        if not context:
            return self.message
        return f"{self.message} (at {' '.join(context)})"


class JsonSyntaxError(DecodeError):
    """The underlying source could not tokenize the input (malformed JSON)."""


class InvalidTypeError(DecodeError):
    """A value has the wrong JSON type for its position."""


class DuplicateFieldError(DecodeError):
    """A field appears more than once in the same object."""

    def __init__(self, field: str, **kwargs) -> None:
        super().__init__(f"duplicate field `{field}`", field=field, **kwargs)


class MissingFieldError(DecodeError):
    """A required field is absent."""

    def __init__(self, field: str, **kwargs) -> None:
        super().__init__(f"missing field `{field}`", field=field, **kwargs)


class UnknownFieldError(DecodeError):
    """A strict structure contains a field outside its declared set."""

    def __init__(self, field: str, **kwargs) -> None:
        super().__init__(f"unknown field `{field}`", field=field, **kwargs)


class UnknownVariantError(DecodeError):
    """An enumerated field carries a token outside its allowed set."""

    def __init__(self, token: str, allowed: Iterable[str], **kwargs) -> None:
        self.token = token
        self.allowed: tuple[str, ...] = tuple(allowed)
        expected = ", ".join(f"`{a}`" for a in self.allowed)
        super().__init__(f"unknown variant `{token}`, expected one of {expected}", **kwargs)


class FormatError(DecodeError):
    """A scalar is present but cannot be parsed into its target shape."""
