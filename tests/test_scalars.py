from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from location_history._scalars import check_int, decode_e7, decode_mac, parse_rfc3339, to_f32
from location_history.exceptions import FormatError, InvalidTypeError

# ------------------------------------------------------------------
# Fixed-point coordinates
# ------------------------------------------------------------------


class TestDecodeE7:
    def test_positive(self) -> None:
        assert decode_e7(593293000) == pytest.approx(59.3293, abs=1e-5)

    def test_negative_exact(self) -> None:
        assert decode_e7(-700000000) == -70.0

    def test_result_is_single_precision(self) -> None:
        value = decode_e7(593293000)
        assert to_f32(value) == value
        # float64 division would give exactly 59.3293
        assert value != 59.3293

    def test_int32_bounds(self) -> None:
        assert decode_e7(2**31 - 1) == pytest.approx(214.7483647, abs=1e-4)
        with pytest.raises(FormatError):
            decode_e7(2**31)

    @pytest.mark.parametrize("value", ["593293000", 59.3, True, None])
    def test_non_integer_rejected(self, value: object) -> None:
        with pytest.raises(InvalidTypeError):
            decode_e7(value)


# ------------------------------------------------------------------
# Hardware addresses
# ------------------------------------------------------------------


class TestDecodeMac:
    def test_all_48_bits_set(self) -> None:
        assert decode_mac("281474976710655") == b"\xff" * 6

    def test_most_significant_first(self) -> None:
        assert decode_mac(str(0x0123456789AB)) == bytes.fromhex("0123456789ab")

    def test_zero(self) -> None:
        assert decode_mac("0") == bytes(6)

    def test_leading_plus(self) -> None:
        assert decode_mac("+281474976710655") == b"\xff" * 6

    def test_all_64_bits_set_is_range_error(self) -> None:
        with pytest.raises(FormatError, match="value exceeds 48 bits"):
            decode_mac("18446744073709551615")

    def test_49th_bit_is_range_error(self) -> None:
        with pytest.raises(FormatError, match="48 bits"):
            decode_mac(str(2**48))

    def test_beyond_u64(self) -> None:
        with pytest.raises(FormatError, match="u64"):
            decode_mac("18446744073709551616")

    @pytest.mark.parametrize("value", ["", "abc", "-1", "+", "++5", "+-5", " 12", "1_000", "12.0", "١٢"])
    def test_not_decimal(self, value: str) -> None:
        with pytest.raises(FormatError):
            decode_mac(value)

    def test_number_instead_of_string(self) -> None:
        with pytest.raises(InvalidTypeError):
            decode_mac(281474976710655)


# ------------------------------------------------------------------
# RFC 3339 date-times
# ------------------------------------------------------------------


class TestParseRfc3339:
    def test_zulu(self) -> None:
        assert parse_rfc3339("2022-03-01T10:15:30Z") == datetime(2022, 3, 1, 10, 15, 30, tzinfo=UTC)

    def test_offset_preserved(self) -> None:
        parsed = parse_rfc3339("2022-03-01T10:15:30+01:00")
        assert parsed.utcoffset() == timedelta(hours=1)
        assert parsed.hour == 10

    def test_fraction_truncated_to_microseconds(self) -> None:
        parsed = parse_rfc3339("2022-03-01T10:15:30.123456789Z")
        assert parsed.microsecond == 123456

    def test_short_fraction(self) -> None:
        assert parse_rfc3339("2022-03-01T10:15:30.5-03:30").microsecond == 500000

    def test_lowercase_separators(self) -> None:
        expected = datetime(2022, 3, 1, 10, 15, 30, tzinfo=timezone.utc)
        assert parse_rfc3339("2022-03-01t10:15:30z") == expected

    @pytest.mark.parametrize(
        "value",
        [
            "2022-03-01",
            "2022-03-01T10:15:30",
            "2022-03-01T10:15Z",
            "2022-13-01T10:15:30Z",
            "2022-02-30T10:15:30Z",
            "2022-03-01T25:15:30Z",
            "2022-03-01T10:15:30+0100",
            "2022-03-01T10:15:30Z\n",
            "2022-03-01T10:15:30+01:00\n",
            " 2022-03-01T10:15:30Z",
            "1646129730",
            "",
        ],
    )
    def test_malformed(self, value: str) -> None:
        with pytest.raises(FormatError):
            parse_rfc3339(value)

    def test_non_string(self) -> None:
        with pytest.raises(InvalidTypeError):
            parse_rfc3339(1646129730)


def test_check_int_rejects_bool() -> None:
    with pytest.raises(InvalidTypeError):
        check_int(True, (0, 255))


def test_check_int_bounds() -> None:
    assert check_int(255, (0, 255)) == 255
    with pytest.raises(FormatError):
        check_int(256, (0, 255))
