"""Event sources the decoder can be driven by.

The decoder only needs a self-describing event stream: an iterable of
``(event, value)`` pairs using the ijson *basic* vocabulary

===============  =====================================
``start_map``    ``None``
``map_key``      key text
``end_map``      ``None``
``start_array``  ``None``
``end_array``    ``None``
``null``         ``None``
``boolean``      ``bool``
``number``       ``int`` or ``decimal.Decimal``
``string``       ``str``
===============  =====================================

(``integer`` and ``double`` from older ijson releases are accepted as
scalars too).  Two adapters are provided: :func:`json_events` for JSON
byte streams and :func:`python_events` for values already held in memory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from decimal import Decimal
from typing import IO, Any

import ijson

from location_history.config import DecoderConfig
from location_history.exceptions import ConfigError, InvalidTypeError, JsonSyntaxError

_logger = logging.getLogger(__name__)

Event = tuple[str, Any]
EventSource = Iterable[Event]

CONTAINER_START: frozenset[str] = frozenset({"start_map", "start_array"})
CONTAINER_END: frozenset[str] = frozenset({"end_map", "end_array"})

_EVENT_KINDS: dict[str, str] = {
    "start_map": "map",
    "start_array": "sequence",
    "string": "string",
    "number": "number",
    "integer": "integer",
    "double": "floating point",
    "boolean": "boolean",
    "null": "null",
}


def describe_event(event: str) -> str:
    """Name the JSON kind an opening event stands for, for error messages."""
    return _EVENT_KINDS.get(event, event)


def _load_backend(name: str | None) -> Any:
    if name is None:
        return ijson
    try:
        return ijson.get_backend(name)
    except ImportError as exc:
        raise ConfigError(f"ijson backend {name!r} is not available") from exc


def json_events(fp: IO[bytes] | IO[str], config: DecoderConfig | None = None) -> Iterator[Event]:
    """Drive ijson incrementally over *fp*.

    Tokenizer failures are re-raised as :class:`JsonSyntaxError` with the
    original ijson message; the ijson exception is kept as ``__cause__``.
    The caller owns *fp* and is responsible for closing it.
    """
    config = config or DecoderConfig()
    backend = _load_backend(config.backend)
    _logger.debug("JSON source: backend=%s buf_size=%d", getattr(backend, "backend_name", "default"), config.buf_size)
    try:
        yield from backend.basic_parse(fp, buf_size=config.buf_size)
    except ijson.JSONError as exc:
        raise JsonSyntaxError(str(exc)) from exc


def python_events(value: Any) -> Iterator[Event]:
    """Walk an in-memory JSON-like value, emitting basic events.

    Useful when the document was produced by another parser (e.g. a
    msgpack or YAML loader) and only needs validating.
    """
    if value is None:
        yield ("null", None)
    elif isinstance(value, bool):
        yield ("boolean", value)
    elif isinstance(value, (int, float, Decimal)):
        yield ("number", value)
    elif isinstance(value, str):
        yield ("string", value)
    elif isinstance(value, Mapping):
        yield ("start_map", None)
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidTypeError(f"invalid type: map key {key!r}, expected a string")
            yield ("map_key", key)
            yield from python_events(item)
        yield ("end_map", None)
    elif isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        yield ("start_array", None)
        for item in value:
            yield from python_events(item)
        yield ("end_array", None)
    else:
        raise InvalidTypeError(f"invalid type: {type(value).__name__} is not a JSON value")
