"""Base model, enum and scalar types for ``Records.json`` structures.

Every record structure inherits from :class:`LocationHistoryModel` which
provides:

* ``alias_generator=to_camel`` so camelCase wire keys map automatically
  to snake_case fields.
* Frozen (immutable) instances.
* An explicit per-structure unknown-field policy, declared with the
  ``extra=`` class keyword as either :data:`STRICT` or :data:`PERMISSIVE`.
* :meth:`LocationHistoryModel.decode` which turns pydantic validation
  failures into :class:`~location_history.exceptions.DecodeError`
  subclasses.

Enumerated wire tokens inherit from :class:`WireEnum`; unlike a lenient
enum there is no ``UNKNOWN`` fallback for unmapped tokens, they fail with
:class:`~location_history.exceptions.UnknownVariantError`.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Annotated, Any, Final, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from location_history._scalars import INT8, INT32, UINT8, UINT16, UINT32, check_int, decode_e7, parse_rfc3339
from location_history.exceptions import (
    DecodeError,
    FormatError,
    InvalidTypeError,
    MissingFieldError,
    UnknownFieldError,
    UnknownVariantError,
)

STRICT: Final[Literal["forbid"]] = "forbid"
"""Unknown fields are a hard error."""

PERMISSIVE: Final[Literal["ignore"]] = "ignore"
"""Unknown fields are silently dropped."""

TModel = TypeVar("TModel", bound="LocationHistoryModel")
TWire = TypeVar("TWire", bound="WireEnum")

# ---------------------------------------------------------------------------
# Bounded scalar types
# ---------------------------------------------------------------------------


def _bounded(bounds: tuple[int, int], name: str) -> BeforeValidator:
    return BeforeValidator(lambda value: check_int(value, bounds, name))


Int8 = Annotated[int, _bounded(INT8, "i8")]
UInt8 = Annotated[int, _bounded(UINT8, "u8")]
UInt16 = Annotated[int, _bounded(UINT16, "u16")]
Int32 = Annotated[int, _bounded(INT32, "i32")]
UInt32 = Annotated[int, _bounded(UINT32, "u32")]

E7Degrees = Annotated[float, BeforeValidator(decode_e7)]
"""Fixed-point coordinate decoded to single-precision degrees."""

Rfc3339 = Annotated[datetime, BeforeValidator(parse_rfc3339)]
"""Timezone-aware datetime parsed from RFC 3339 text."""


def _check_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidTypeError(f"invalid type: {type(value).__name__}, expected a boolean")
    return value


def _check_str(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidTypeError(f"invalid type: {type(value).__name__}, expected a string")
    return value


WireBool = Annotated[bool, BeforeValidator(_check_bool)]
WireStr = Annotated[str, BeforeValidator(_check_str)]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class WireEnum(enum.Enum):
    """Closed set of named variants decoded from exact wire tokens.

    Member values *are* the wire tokens; member names are free to follow
    Python conventions.
    """

    @classmethod
    def wire_tokens(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def from_wire(cls: type[TWire], token: Any) -> TWire:
        """Look *token* up in the wire table (case-sensitive)."""
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise InvalidTypeError(f"invalid type: {type(token).__name__}, expected a string")
        try:
            return cls(token)
        except ValueError:
            raise UnknownVariantError(token, cls.wire_tokens()) from None

    def __str__(self) -> str:
        return str(self.value)


# ---------------------------------------------------------------------------
# Validation error translation
# ---------------------------------------------------------------------------


def translate_validation_error(exc: ValidationError) -> DecodeError:
    """Map the first pydantic error onto the library's error kinds."""
    errors = exc.errors(include_url=False)
    if not errors:
        return DecodeError(str(exc))
    first = errors[0]
    loc = tuple(first.get("loc", ()))
    kind = first.get("type", "")
    field = loc[-1] if loc and isinstance(loc[-1], str) else None

    if kind == "missing" and field is not None:
        return MissingFieldError(field, path=loc)
    if kind == "extra_forbidden" and field is not None:
        return UnknownFieldError(field, path=loc)

    cause = (first.get("ctx") or {}).get("error")
    if isinstance(cause, DecodeError):
        return cause.with_context(path=loc)

    message = first.get("msg", str(exc))
    if kind.endswith("_type"):
        return InvalidTypeError(message, path=loc)
    return FormatError(message, path=loc)


class LocationHistoryModel(BaseModel):
    """Base for ``Records.json`` structures.

    Subclasses pick their unknown-field policy explicitly::

        class AccessPoint(LocationHistoryModel, extra=STRICT): ...
    """

    model_config = ConfigDict(
        frozen=True,
        extra=STRICT,
        alias_generator=to_camel,
    )

    @classmethod
    def decode(cls: type[TModel], data: Any) -> TModel:
        """Validate a decoded JSON value into this structure.

        Raises
        ------
        DecodeError
            The value does not have the shape of this structure.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise translate_validation_error(exc) from None
