import datetime as dt
import os
import unittest
from unittest import mock

from mcp_time_tools.datetime_common import (
    InvalidTimezoneError,
    format_snapshot,
    iso_instant,
    resolve_now_ms,
    resolve_timezone,
)


NEW_YEAR_NOON_UTC = int(dt.datetime(2023, 1, 1, 12, 0, tzinfo=dt.timezone.utc).timestamp() * 1000)


class DateTimeCommonTest(unittest.TestCase):
    def test_snapshot_in_shanghai(self):
        snap = format_snapshot(now_ms=NEW_YEAR_NOON_UTC, tz=resolve_timezone("Asia/Shanghai"))
        self.assertEqual(snap.time, "20:00:00")
        self.assertEqual(snap.date, "2023/01/01")
        self.assertEqual(snap.weekday, "星期日")
        self.assertEqual(snap.timestamp, NEW_YEAR_NOON_UTC)
        self.assertEqual(snap.iso, "2023-01-01T12:00:00.000Z")

    def test_weekday_follows_target_zone(self):
        at = int(dt.datetime(2026, 1, 1, 23, 30, tzinfo=dt.timezone.utc).timestamp() * 1000)
        utc = format_snapshot(now_ms=at, tz=resolve_timezone("UTC"))
        cn = format_snapshot(now_ms=at, tz=resolve_timezone("Asia/Shanghai"))
        self.assertEqual(utc.date, "2026/01/01")
        self.assertEqual(utc.weekday, "星期四")
        self.assertEqual(cn.date, "2026/01/02")
        self.assertEqual(cn.weekday, "星期五")
        self.assertEqual(utc.iso, cn.iso)

    def test_configured_timezone_replaces_local(self):
        with mock.patch.dict(os.environ, {"TIMEZONE": "Asia/Tokyo"}):
            snap = format_snapshot(now_ms=NEW_YEAR_NOON_UTC, tz=resolve_timezone(None))
        self.assertEqual(snap.time, "21:00:00")

    def test_blank_timezone_without_config_is_host_local(self):
        with mock.patch.dict(os.environ, {"TIMEZONE": ""}):
            self.assertIsNone(resolve_timezone("  "))

    def test_invalid_timezone_is_rejected(self):
        for name in ("Mars/Olympus_Mons", "../etc/passwd", "Not A Zone", "Asia", "America"):
            with self.assertRaises(InvalidTimezoneError):
                resolve_timezone(name)

    def test_same_instant_formats_identically(self):
        tz = resolve_timezone("Europe/London")
        self.assertEqual(format_snapshot(now_ms=NEW_YEAR_NOON_UTC, tz=tz), format_snapshot(now_ms=NEW_YEAR_NOON_UTC, tz=tz))

    def test_iso_keeps_milliseconds(self):
        self.assertEqual(iso_instant(NEW_YEAR_NOON_UTC + 123), "2023-01-01T12:00:00.123Z")

    def test_resolve_now_ms(self):
        self.assertEqual(resolve_now_ms(42), 42)
        self.assertGreater(resolve_now_ms(None), NEW_YEAR_NOON_UTC)


if __name__ == "__main__":
    unittest.main()
