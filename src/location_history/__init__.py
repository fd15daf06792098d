"""location_history - Streaming decoder for Google location-history exports."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("location-history")
except PackageNotFoundError:
    __version__ = "0+local"
from location_history._source import json_events, python_events
from location_history.config import DecoderConfig
from location_history.decoder import iter_entries, iter_json_entries, read_entries, read_json_entries
from location_history.exceptions import (
    ConfigError,
    DecodeError,
    DuplicateFieldError,
    FormatError,
    InvalidTypeError,
    JsonSyntaxError,
    LocationHistoryError,
    MissingFieldError,
    UnknownFieldError,
    UnknownVariantError,
)
from location_history.models import (
    AccessPoint,
    Activity,
    ActivityConfidence,
    ActivityType,
    DeviceDesignation,
    FormFactor,
    LngLat,
    Location,
    LocationEntry,
    LocationMetadata,
    MacAddr,
    PlatformType,
    Source,
    WifiScan,
)

__all__ = [
    "__version__",
    "AccessPoint",
    "Activity",
    "ActivityConfidence",
    "ActivityType",
    "ConfigError",
    "DecodeError",
    "DecoderConfig",
    "DeviceDesignation",
    "DuplicateFieldError",
    "FormFactor",
    "FormatError",
    "InvalidTypeError",
    "JsonSyntaxError",
    "LngLat",
    "Location",
    "LocationEntry",
    "LocationHistoryError",
    "LocationMetadata",
    "MacAddr",
    "MissingFieldError",
    "PlatformType",
    "Source",
    "UnknownFieldError",
    "UnknownVariantError",
    "WifiScan",
    "iter_entries",
    "iter_json_entries",
    "json_events",
    "python_events",
    "read_entries",
    "read_json_entries",
]
