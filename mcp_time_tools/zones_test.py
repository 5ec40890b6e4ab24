import re
import unittest
from zoneinfo import ZoneInfo

from mcp_time_tools.zones import TIMEZONE_MAP, city_alternation, list_cities, timezone_for_city


class ZonesTest(unittest.TestCase):
    def test_lookup_is_exact(self):
        self.assertEqual(timezone_for_city("北京"), "Asia/Shanghai")
        self.assertEqual(timezone_for_city("孟买"), "Asia/Kolkata")
        self.assertIsNone(timezone_for_city("北京 "))
        self.assertIsNone(timezone_for_city("beijing"))
        self.assertIsNone(timezone_for_city(None))

    def test_cities_keep_registry_order(self):
        cities = list_cities()
        self.assertEqual(cities[:3], ["北京", "上海", "广州"])
        self.assertEqual(cities[-1], "曼谷")
        self.assertEqual(len(cities), len(set(cities)))

    def test_every_zone_is_known(self):
        for city, name in TIMEZONE_MAP.items():
            self.assertIsNotNone(ZoneInfo(name), city)

    def test_registry_is_read_only(self):
        with self.assertRaises(TypeError):
            TIMEZONE_MAP["火星"] = "Mars/Base"

    def test_alternation_matches_whole_names(self):
        pattern = re.compile(rf"^(?:{city_alternation()})$")
        for city in list_cities():
            self.assertRegex(city, pattern)
        self.assertNotRegex("火星", pattern)


if __name__ == "__main__":
    unittest.main()
