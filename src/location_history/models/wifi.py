"""Wi-Fi scan structures."""

from __future__ import annotations

import dataclasses
from typing import Annotated, Any

from pydantic import BeforeValidator

from location_history._scalars import decode_mac
from location_history.models._base import PERMISSIVE, STRICT, Int8, LocationHistoryModel, UInt16, WireBool


@dataclasses.dataclass(frozen=True, order=True)
class MacAddr:
    """A 48-bit hardware address.

    Compares, sorts and hashes as its byte sequence, most significant
    byte first.
    """

    octets: bytes

    def __post_init__(self) -> None:
        if len(self.octets) != 6:
            raise ValueError(f"mac address must be 6 bytes, got {len(self.octets)}")

    @classmethod
    def from_wire(cls, value: Any) -> MacAddr:
        """Decode the decimal-string wire form (see :func:`decode_mac`)."""
        if isinstance(value, cls):
            return value
        return cls(decode_mac(value))

    def __bytes__(self) -> bytes:
        return self.octets

    def __int__(self) -> int:
        return int.from_bytes(self.octets, "big")

    def __str__(self) -> str:
        return ":".join(f"{b:02X}" for b in self.octets)


MacAddrField = Annotated[MacAddr, BeforeValidator(MacAddr.from_wire)]


class AccessPoint(LocationHistoryModel, extra=STRICT):
    """One access point seen during a Wi-Fi scan.

    Parameters
    ----------
    mac : MacAddr
        BSSID of the access point.
    strength : int
        Signal strength in dBm.
    frequency_mhz : int
        Channel centre frequency.
    is_connected : bool
        Whether the device was associated with this access point.
    """

    mac: MacAddrField
    strength: Int8
    frequency_mhz: UInt16
    is_connected: WireBool = False


class WifiScan(LocationHistoryModel, extra=PERMISSIVE):
    access_points: list[AccessPoint] | None = None
