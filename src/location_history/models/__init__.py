"""Data models for ``Records.json`` location-history exports."""

from location_history.models._base import PERMISSIVE, STRICT, LocationHistoryModel, WireEnum
from location_history.models.enums import ActivityType, DeviceDesignation, FormFactor, PlatformType, Source
from location_history.models.location import (
    Activity,
    ActivityConfidence,
    LngLat,
    Location,
    LocationEntry,
    LocationMetadata,
)
from location_history.models.wifi import AccessPoint, MacAddr, WifiScan

__all__ = [
    "AccessPoint",
    "Activity",
    "ActivityConfidence",
    "ActivityType",
    "DeviceDesignation",
    "FormFactor",
    "LngLat",
    "Location",
    "LocationEntry",
    "LocationHistoryModel",
    "LocationMetadata",
    "MacAddr",
    "PERMISSIVE",
    "PlatformType",
    "STRICT",
    "Source",
    "WifiScan",
    "WireEnum",
]
