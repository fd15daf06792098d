"""Enumerated wire tokens used in ``Records.json``."""

from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator

from location_history.models._base import WireEnum


class Source(WireEnum):
    """Positioning method that produced a fix."""

    GPS = "GPS"
    CELL = "CELL"
    WIFI = "WIFI"
    UNKNOWN = "UNKNOWN"


class ActivityType(WireEnum):
    STILL = "STILL"
    UNKNOWN = "UNKNOWN"
    IN_VEHICLE = "IN_VEHICLE"
    ON_FOOT = "ON_FOOT"
    TILTING = "TILTING"
    ON_BICYCLE = "ON_BICYCLE"
    EXITING_VEHICLE = "EXITING_VEHICLE"
    WALKING = "WALKING"
    RUNNING = "RUNNING"
    IN_ROAD_VEHICLE = "IN_ROAD_VEHICLE"
    IN_RAIL_VEHICLE = "IN_RAIL_VEHICLE"
    IN_FOUR_WHEELER_VEHICLE = "IN_FOUR_WHEELER_VEHICLE"
    IN_TWO_WHEELER_VEHICLE = "IN_TWO_WHEELER_VEHICLE"
    IN_CAR = "IN_CAR"
    IN_BUS = "IN_BUS"


class DeviceDesignation(WireEnum):
    UNKNOWN = "UNKNOWN"
    PRIMARY = "PRIMARY"


class PlatformType(WireEnum):
    ANDROID = "ANDROID"


class FormFactor(WireEnum):
    PHONE = "PHONE"


SourceToken = Annotated[Source, BeforeValidator(Source.from_wire)]
ActivityTypeToken = Annotated[ActivityType, BeforeValidator(ActivityType.from_wire)]
DeviceDesignationToken = Annotated[DeviceDesignation, BeforeValidator(DeviceDesignation.from_wire)]
PlatformTypeToken = Annotated[PlatformType, BeforeValidator(PlatformType.from_wire)]
FormFactorToken = Annotated[FormFactor, BeforeValidator(FormFactor.from_wire)]
