"""Streaming decoder for ``Records.json`` location-history exports.

The export is a single object whose ``locations`` field holds a very
large array.  Entries are assembled one at a time from an event stream
(see :mod:`location_history._source`), validated into
:class:`~location_history.models.LocationEntry` and handed to the caller
before the next one is read, so memory use does not grow with the size
of the export.

Typical use::

    with open("Records.json", "rb") as fp:
        read_json_entries(fp, lambda entry: points.add(entry.lnglat))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import IO, Any

from location_history._source import (
    CONTAINER_END,
    CONTAINER_START,
    Event,
    EventSource,
    describe_event,
    json_events,
)
from location_history.config import DecoderConfig
from location_history.exceptions import DecodeError, DuplicateFieldError, InvalidTypeError, JsonSyntaxError
from location_history.models.location import LocationEntry

_logger = logging.getLogger(__name__)

LOCATIONS_KEY = "locations"

Sink = Callable[[LocationEntry], object]


def _next(events: Iterator[Event]) -> Event:
    try:
        return next(events)
    except StopIteration:
        raise JsonSyntaxError("unexpected end of input") from None


def _skip_value(events: Iterator[Event]) -> None:
    """Consume one complete value without materialising it."""
    event, _ = _next(events)
    if event not in CONTAINER_START:
        return
    depth = 1
    while depth:
        event, _ = _next(events)
        if event in CONTAINER_START:
            depth += 1
        elif event in CONTAINER_END:
            depth -= 1


def _slot_path(stack: list[list[Any]]) -> list[str | int]:
    path: list[str | int] = []
    for container, key in stack:
        path.append(key if isinstance(container, dict) else len(container))
    return path


def _assemble(first: Event, events: Iterator[Event]) -> Any:
    """Build one JSON value into plain Python objects.

    Works like ``ijson.ObjectBuilder`` but rejects duplicate keys in any
    object, and keeps no state once the value is complete.
    """
    event, value = first
    # Each frame is [container, key of the slot currently being filled].
    stack: list[list[Any]] = []
    while True:
        if not stack and (event == "map_key" or event in CONTAINER_END):
            raise JsonSyntaxError(f"unexpected {event} event, expected a value")
        if event == "start_map":
            stack.append([{}, None])
        elif event == "start_array":
            stack.append([[], None])
        elif event == "map_key":
            frame = stack[-1]
            if value in frame[0]:
                raise DuplicateFieldError(value, path=[*_slot_path(stack[:-1]), value])
            frame[1] = value
        else:
            if event in CONTAINER_END:
                value = stack.pop()[0]
            if not stack:
                return value
            container, key = stack[-1]
            if isinstance(container, dict):
                container[key] = value
            else:
                container.append(value)
        event, value = _next(events)


def _decode_entry(raw: Any, index: int) -> LocationEntry:
    try:
        return LocationEntry.decode(raw)
    except DecodeError as exc:
        raise exc.with_context(record_index=index)


def _iter_locations(events: Iterator[Event], progress_interval: int) -> Iterator[LocationEntry]:
    event, _ = _next(events)
    if event != "start_array":
        raise InvalidTypeError(
            f"invalid type: {describe_event(event)}, expected a sequence of location entries",
            path=(LOCATIONS_KEY,),
        )
    index = 0
    while True:
        first = _next(events)
        if first[0] == "end_array":
            _logger.debug("Finished locations array: %d entries", index)
            return
        try:
            raw = _assemble(first, events)
        except DecodeError as exc:
            raise exc.with_context(record_index=index)
        yield _decode_entry(raw, index)
        del raw
        index += 1
        if progress_interval and index % progress_interval == 0:
            _logger.debug("Decoded %d location entries", index)


def iter_entries(source: EventSource, *, config: DecoderConfig | None = None) -> Iterator[LocationEntry]:
    """Lazily decode location entries from an event source.

    Parameters
    ----------
    source : iterable of (event, value)
        Any self-describing event stream (see :mod:`location_history._source`).
    config : DecoderConfig or None
        Decoder configuration; defaults are used when omitted.

    Yields
    ------
    LocationEntry
        One entry per element of the ``locations`` array, in document order.

    Raises
    ------
    DecodeError
        On the first structural or validation error anywhere in the document.
    """
    config = config or DecoderConfig()
    events = iter(source)

    event, _ = _next(events)
    if event != "start_map":
        raise InvalidTypeError(f"invalid type: {describe_event(event)}, expected a map")

    seen_locations = False
    while True:
        event, key = _next(events)
        if event == "end_map":
            break
        if event != "map_key":
            raise JsonSyntaxError(f"unexpected {describe_event(event)} event, expected a map key")
        if key == LOCATIONS_KEY:
            if seen_locations:
                raise DuplicateFieldError(LOCATIONS_KEY)
            seen_locations = True
            yield from _iter_locations(events, config.progress_interval)
        else:
            _logger.debug("Skipping envelope field %r", key)
            _skip_value(events)

    if not seen_locations:
        _logger.debug("Envelope has no %r field", LOCATIONS_KEY)


def read_entries(source: EventSource, sink: Sink, *, config: DecoderConfig | None = None) -> int:
    """Decode every location entry in *source*, calling *sink* once per entry.

    The sink runs synchronously between reads and must not re-enter the
    decoder.  Exceptions raised by the sink propagate unchanged and stop
    decoding; calls already made are not undone.

    Returns
    -------
    int
        Number of entries delivered to *sink*.

    Raises
    ------
    DecodeError
        On the first structural or validation error.
    """
    count = 0
    _logger.debug("Decoding location entries")
    for entry in iter_entries(source, config=config):
        sink(entry)
        count += 1
    _logger.debug("Decoded %d location entries in total", count)
    return count


def iter_json_entries(fp: IO[bytes] | IO[str], *, config: DecoderConfig | None = None) -> Iterator[LocationEntry]:
    """Lazily decode location entries from a ``Records.json`` file object."""
    return iter_entries(json_events(fp, config), config=config)


def read_json_entries(fp: IO[bytes] | IO[str], sink: Sink, *, config: DecoderConfig | None = None) -> int:
    """Decode a ``Records.json`` file object, calling *sink* once per entry.

    Malformed JSON surfaces as :class:`~location_history.exceptions.JsonSyntaxError`
    carrying the tokenizer's own message.  The caller owns *fp*.
    """
    return read_entries(json_events(fp, config), sink, config=config)
