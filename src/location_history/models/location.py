"""Location record structures.

A ``Records.json`` entry is a base fix (:class:`Location`) extended with
optional device telemetry (:class:`LocationEntry`).  Both are strict:
any field outside the declared set fails decoding.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import Field

from location_history.models._base import (
    PERMISSIVE,
    STRICT,
    E7Degrees,
    Int32,
    LocationHistoryModel,
    Rfc3339,
    UInt8,
    UInt16,
    UInt32,
    WireBool,
    WireStr,
)
from location_history.models.enums import (
    ActivityTypeToken,
    DeviceDesignationToken,
    FormFactorToken,
    PlatformTypeToken,
    SourceToken,
)
from location_history.models.wifi import WifiScan


class LngLat(NamedTuple):
    """Geographic point in single-precision degrees, longitude first."""

    lng: float
    lat: float


class ActivityConfidence(LocationHistoryModel, extra=PERMISSIVE):
    activity_type: ActivityTypeToken = Field(alias="type")
    confidence: UInt8
    """Confidence percentage."""


class Activity(LocationHistoryModel, extra=PERMISSIVE):
    """Activity recognition sample taken near a fix."""

    activity: list[ActivityConfidence]
    timestamp: Rfc3339


class LocationMetadata(LocationHistoryModel, extra=STRICT):
    wifi_scan: WifiScan | None = None
    active_wifi_scan: WifiScan | None = None
    timestamp: Rfc3339


class Location(LocationHistoryModel, extra=STRICT):
    """A bare geographic fix.

    Parameters
    ----------
    timestamp : datetime
        Time of the fix, with the UTC offset it was recorded in.
    latitude : float
        Degrees, decoded from ``latitudeE7``.
    longitude : float
        Degrees, decoded from ``longitudeE7``.
    accuracy : int
        Estimated horizontal accuracy radius in metres.
    """

    timestamp: Rfc3339
    latitude: E7Degrees = Field(alias="latitudeE7")
    longitude: E7Degrees = Field(alias="longitudeE7")
    accuracy: Int32

    @property
    def lnglat(self) -> LngLat:
        return LngLat(self.longitude, self.latitude)


class LocationEntry(Location, extra=STRICT):
    """One element of the ``locations`` array.

    Parameters
    ----------
    source : Source
        Positioning method.
    device_tag : int
        Opaque identifier of the reporting device.
    velocity : int or None
        Metres per second.
    heading : int or None
        Degrees clockwise from north.
    altitude : int or None
        Metres above the WGS84 ellipsoid.
    vertical_accuracy : int or None
        Metres.
    activity : list of Activity or None
        Activity recognition samples.
    device_designation : DeviceDesignation or None
    active_wifi_scan : WifiScan or None
    platform_type : PlatformType or None
    os_level : int or None
        Platform API level.
    server_timestamp, device_timestamp : datetime or None
    battery_charging : bool or None
    form_factor : FormFactor or None
    location_metadata : list of LocationMetadata or None
    inferred_location : list of Location or None
        Alternative fixes the provider inferred for this entry.
    place_id : str or None
    """

    source: SourceToken
    device_tag: Int32
    velocity: UInt32 | None = None
    heading: UInt16 | None = None
    altitude: Int32 | None = None
    vertical_accuracy: Int32 | None = None
    activity: list[Activity] | None = None
    device_designation: DeviceDesignationToken | None = None
    active_wifi_scan: WifiScan | None = None
    platform_type: PlatformTypeToken | None = None
    os_level: UInt8 | None = None
    server_timestamp: Rfc3339 | None = None
    device_timestamp: Rfc3339 | None = None
    battery_charging: WireBool | None = None
    form_factor: FormFactorToken | None = None
    location_metadata: list[LocationMetadata] | None = None
    inferred_location: list[Location] | None = None
    place_id: WireStr | None = None

    @property
    def location(self) -> Location:
        """The base fix without telemetry."""
        return Location.model_construct(
            timestamp=self.timestamp,
            latitude=self.latitude,
            longitude=self.longitude,
            accuracy=self.accuracy,
        )

    @property
    def seconds_of_day(self) -> int:
        """Seconds since local midnight, in the fix's own UTC offset."""
        t = self.timestamp.time()
        return 3600 * t.hour + 60 * t.minute + t.second
