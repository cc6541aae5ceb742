import unittest
from decimal import Decimal

from boto3.dynamodb.types import Binary

from roster_api.sanitize import sanitize


class SanitizeTests(unittest.TestCase):
    def test_plain_values_are_unchanged(self):
        self.assertEqual(sanitize("abc"), "abc")
        self.assertEqual(sanitize(3), 3)
        self.assertIs(sanitize(True), True)
        self.assertEqual(sanitize([1, [2, "x"]]), [1, [2, "x"]])
        self.assertEqual(
            sanitize({"a": {"b": [1, {"c": "d"}]}}), {"a": {"b": [1, {"c": "d"}]}}
        )

    def test_none_is_terminal(self):
        self.assertIsNone(sanitize(None))
        self.assertEqual(sanitize({"image": None}), {"image": None})

    def test_decimals_become_numbers(self):
        result = sanitize({"age": Decimal("27"), "rating": Decimal("7.5")})
        self.assertEqual(result, {"age": 27, "rating": 7.5})
        self.assertIsInstance(result["age"], int)
        self.assertIsInstance(result["rating"], float)

    def test_nested_store_values(self):
        item = {
            "id": "1700000000000",
            "stats": [{"goals": Decimal("3")}, Decimal("0.25")],
            "tags": {"b", "a"},
        }
        self.assertEqual(
            sanitize(item),
            {"id": "1700000000000", "stats": [{"goals": 3}, 0.25], "tags": ["a", "b"]},
        )

    def test_binary_values_become_text(self):
        self.assertEqual(sanitize(Binary(b"hello")), "hello")
        self.assertEqual(sanitize(b"\xff\x00"), "/wA=")

    def test_does_not_mutate_input(self):
        item = {"n": Decimal("1"), "list": [Decimal("2")]}
        sanitize(item)
        self.assertEqual(item, {"n": Decimal("1"), "list": [Decimal("2")]})


if __name__ == "__main__":
    unittest.main()
