import inspect
import unittest

from util import error_codes
from util.error_codes import Upstream


class ErrorCodesTest(unittest.TestCase):

    def __local_codes(self) -> dict[str, int]:
        members = inspect.getmembers(error_codes)
        return {
            name: value
            for name, value in members
            if not name.startswith("_") and isinstance(value, int)
        }

    def test_no_duplicate_error_codes(self):
        seen: dict[int, str] = {}
        duplicates: list[str] = []
        for name, value in self.__local_codes().items():
            if value in seen:
                duplicates.append(f"{name}={value} duplicates {seen[value]}")
            else:
                seen[value] = name
        self.assertEqual(duplicates, [], f"Duplicate error codes found: {duplicates}")

    def test_error_codes_in_valid_category_ranges(self):
        valid_ranges = [
            (1000, 1999),  # Validation
            (2000, 2999),  # Not Found
            (3000, 3999),  # Authorization
            (5000, 5999),  # External Service
            (7000, 7999),  # Configuration
            (8000, 8999),  # Internal
        ]
        for name, value in self.__local_codes().items():
            in_range = any(low <= value <= high for low, high in valid_ranges)
            self.assertTrue(in_range, f"{name}={value} is not in any valid category range")

    def test_upstream_codes_do_not_leak_into_local_codes(self):
        upstream = {value for name, value in vars(Upstream).items() if isinstance(value, int)}

        self.assertFalse(upstream & set(self.__local_codes().values()))
        self.assertEqual(Upstream.RATE_LIMIT_CODES, (80007, 130429))
        self.assertEqual(Upstream.PERMISSION_CODES, (10, 200))
