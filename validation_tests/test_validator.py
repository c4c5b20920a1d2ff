import unittest
from unittest import mock

from grn import GrnArgumentError, GrnType, GrnValidator, detect_type, is_valid, validate
from grn.validation.rules import CHECK_ORDER, REGION_CODES

VALID_EGRUL = {
    "1009900000000": GrnType.OGRN,
    "5009900000004": GrnType.OGRN,
    "2009900000001": GrnType.GRN_EGRUL,
    "6009900000005": GrnType.GRN_EGRUL,
    "7009900000006": GrnType.GRN_EGRUL,
    "8009900000007": GrnType.GRN_EGRUL,
    "9009900000008": GrnType.GRN_EGRUL,
}
VALID_EGRIP = {
    "300990000000007": GrnType.OGRNIP,
    "400990000000008": GrnType.GRN_EGRIP,
}
VALID = {**VALID_EGRUL, **VALID_EGRIP}

PERMITTED_FIRST_CHARS = {
    GrnType.OGRN: "15",
    GrnType.GRN_EGRUL: "26789",
    GrnType.OGRNIP: "3",
    GrnType.GRN_EGRIP: "4",
}
LENGTHS = {GrnType.OGRN: 13, GrnType.GRN_EGRUL: 13, GrnType.OGRNIP: 15, GrnType.GRN_EGRIP: 15}
DIVISORS = {GrnType.OGRN: 11, GrnType.GRN_EGRUL: 11, GrnType.OGRNIP: 13, GrnType.GRN_EGRIP: 13}


def with_checksum(prefix: str, divisor: int) -> str:
    return prefix + str(int(prefix) // divisor % 10)


def build(first: str, grn_type: GrnType, region: str = "99") -> str:
    body = first + "00" + region + "0" * (LENGTHS[grn_type] - 6)
    return with_checksum(body, DIVISORS[grn_type])


class ChecksumExamplesTests(unittest.TestCase):
    def test_known_valid_numbers(self) -> None:
        for value, grn_type in VALID.items():
            with self.subTest(value=value):
                self.assertTrue(is_valid(value))
                self.assertTrue(is_valid(value, grn_type))
                self.assertTrue(is_valid(value, GrnType.ANY))

    def test_wrong_check_digit(self) -> None:
        for value in (
            "1009900000009",
            "5009900000009",
            "2009900000009",
            "6009900000009",
            "7009900000009",
            "8009900000009",
            "9009900000009",
            "300990000000000",
            "400990000000000",
        ):
            with self.subTest(value=value):
                self.assertFalse(is_valid(value))

    def test_checksum_reason(self) -> None:
        result = validate("1009900000009", GrnType.OGRN)
        self.assertFalse(result.is_valid)
        self.assertEqual(result.reason, "checksum")


class StructureTests(unittest.TestCase):
    def test_wrong_length_is_rejected_for_every_type(self) -> None:
        for grn_type, length in LENGTHS.items():
            for size in range(0, 21):
                if size == length:
                    continue
                value = "1" + "0" * (size - 1) if size else ""
                with self.subTest(grn_type=grn_type, size=size):
                    self.assertFalse(is_valid(value, grn_type))
                    self.assertEqual(validate(value, grn_type).reason, "length")

    def test_numeric_strings_of_other_lengths_are_rejected(self) -> None:
        for size in range(0, 21):
            if size in (13, 15):
                continue
            with self.subTest(size=size):
                self.assertFalse(is_valid("3" * size))

    def test_permitted_first_chars_are_accepted(self) -> None:
        for grn_type, chars in PERMITTED_FIRST_CHARS.items():
            for first in chars:
                value = build(first, grn_type)
                with self.subTest(value=value):
                    self.assertTrue(is_valid(value, grn_type))
                    self.assertTrue(is_valid(value))
                    self.assertIs(detect_type(value), grn_type)

    def test_other_first_chars_are_rejected(self) -> None:
        candidates = "0123456789aZ-+ "
        for grn_type, chars in PERMITTED_FIRST_CHARS.items():
            for first in candidates:
                if first in chars:
                    continue
                tail = build("1", grn_type)[1:]
                value = first + tail
                with self.subTest(grn_type=grn_type, first=first):
                    self.assertFalse(is_valid(value, grn_type))
                    self.assertEqual(validate(value, grn_type).reason, "first_char")

    def test_region_codes_outside_the_set_are_rejected(self) -> None:
        for code in range(100):
            region = f"{code:02d}"
            if region in REGION_CODES:
                continue
            for grn_type, chars in PERMITTED_FIRST_CHARS.items():
                value = build(chars[0], grn_type, region)
                with self.subTest(region=region, grn_type=grn_type):
                    self.assertFalse(is_valid(value))
                    self.assertEqual(validate(value, grn_type).reason, "region")

    def test_region_zero_is_rejected(self) -> None:
        for value in (
            "1000000000000",
            "5000000000000",
            "2000000000000",
            "6000000000000",
            "7000000000000",
            "8000000000000",
            "9000000000000",
            "300000000000000",
            "400000000000000",
        ):
            with self.subTest(value=value):
                self.assertFalse(is_valid(value))

    def test_non_digit_in_digit_positions_is_rejected(self) -> None:
        for grn_type, chars in PERMITTED_FIRST_CHARS.items():
            length = LENGTHS[grn_type]
            for first in chars:
                base = build(first, grn_type)
                for index in [1, 2] + list(range(5, length)):
                    for bad in ("a", " ", "١", "٣"):
                        value = base[:index] + bad + base[index + 1:]
                        with self.subTest(value=value):
                            self.assertFalse(is_valid(value))
                            self.assertFalse(is_valid(value, grn_type))

    def test_reasons_follow_check_order(self) -> None:
        self.assertEqual(validate("1a09900000000", GrnType.OGRN).reason, "year")
        self.assertEqual(validate("10099000a0000", GrnType.OGRN).reason, "digits")
        self.assertEqual(validate("100990000000a", GrnType.OGRN).reason, "checksum")
        self.assertEqual(validate("1009a00000000", GrnType.OGRN).reason, "region")

    def test_year_is_not_checked_against_calendar(self) -> None:
        value = build("1", GrnType.OGRN)
        for year in ("00", "45", "99"):
            candidate = with_checksum(value[0] + year + value[3:-1], 11)
            with self.subTest(year=year):
                self.assertTrue(is_valid(candidate, GrnType.OGRN))

    def test_input_is_not_trimmed(self) -> None:
        self.assertFalse(is_valid(" 1009900000000"))
        self.assertFalse(is_valid("1009900000000\n"))


class TypeDispatchTests(unittest.TestCase):
    def test_types_are_mutually_exclusive(self) -> None:
        for value, grn_type in VALID.items():
            for other in CHECK_ORDER:
                with self.subTest(value=value, other=other):
                    self.assertEqual(is_valid(value, other), other is grn_type)

    def test_any_matches_untyped_call(self) -> None:
        samples = list(VALID) + [
            "",
            "1",
            "1009900000009",
            "300990000000000",
            "100990000000",
            "3009900000000",
            "1009900000000000",
            "abcdefghijklm",
        ]
        for value in samples:
            with self.subTest(value=value):
                self.assertEqual(is_valid(value, GrnType.ANY), is_valid(value))
                self.assertEqual(validate(value).is_valid, is_valid(value))

    def test_validate_agrees_with_is_valid(self) -> None:
        samples = list(VALID) + ["1009900000009", "4009900000000", "0009900000000"]
        for value in samples:
            for grn_type in GrnType:
                with self.subTest(value=value, grn_type=grn_type):
                    self.assertEqual(validate(value, grn_type).is_valid, is_valid(value, grn_type))

    def test_any_tries_types_in_fixed_order(self) -> None:
        validator = GrnValidator()
        self.assertEqual(
            validator.order,
            (GrnType.OGRN, GrnType.GRN_EGRUL, GrnType.OGRNIP, GrnType.GRN_EGRIP),
        )
        with mock.patch.object(validator, "_matches", return_value=False) as matches:
            validator.is_valid("1009900000000")
        self.assertEqual([c.args[1] for c in matches.call_args_list], list(validator.order))

    def test_any_stops_at_first_match(self) -> None:
        validator = GrnValidator()
        with mock.patch.object(validator, "_matches", side_effect=[False, True]) as matches:
            self.assertTrue(validator.is_valid("2009900000001"))
        self.assertEqual(matches.call_count, 2)

    def test_detect_type(self) -> None:
        self.assertIs(detect_type("300990000000007"), GrnType.OGRNIP)
        self.assertIs(detect_type("2009900000001"), GrnType.GRN_EGRUL)
        self.assertIsNone(detect_type("300990000000000"))

    def test_no_match_reason_for_any(self) -> None:
        result = validate("0009900000000")
        self.assertFalse(result.is_valid)
        self.assertIsNone(result.grn_type)
        self.assertEqual(result.reason, "no_match")

    def test_calls_are_repeatable(self) -> None:
        for value in list(VALID) + ["1009900000009"]:
            with self.subTest(value=value):
                self.assertEqual(validate(value), validate(value))
                self.assertEqual(is_valid(value), is_valid(value))


class ArgumentContractTests(unittest.TestCase):
    def test_missing_grn(self) -> None:
        with self.assertRaisesRegex(GrnArgumentError, "Grn must be not null"):
            is_valid(None)
        for grn_type in GrnType:
            with self.subTest(grn_type=grn_type):
                with self.assertRaisesRegex(GrnArgumentError, "Grn must be not null"):
                    is_valid(None, grn_type)
        with self.assertRaisesRegex(GrnArgumentError, "Grn must be not null"):
            validate(None)

    def test_missing_type(self) -> None:
        with self.assertRaisesRegex(GrnArgumentError, "Type must be not null"):
            is_valid("1009900000000", None)
        with self.assertRaisesRegex(GrnArgumentError, "Type must be not null"):
            validate("1009900000000", None)

    def test_missing_grn_is_reported_before_type(self) -> None:
        with self.assertRaisesRegex(GrnArgumentError, "Grn must be not null"):
            is_valid(None, None)

    def test_argument_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(GrnArgumentError, ValueError))


class CustomValidatorTests(unittest.TestCase):
    def test_custom_region_codes(self) -> None:
        validator = GrnValidator(region_codes=["77"])
        self.assertTrue(validator.is_valid("1007700000000"))
        self.assertFalse(validator.is_valid("1009900000000"))
        self.assertEqual(validator.validate("1009900000000", GrnType.OGRN).reason, "region")

    def test_missing_rule_for_type(self) -> None:
        from grn.validation.rules import FORMAT_RULES

        validator = GrnValidator(rules={GrnType.OGRN: FORMAT_RULES[GrnType.OGRN]})
        self.assertEqual(validator.order, (GrnType.OGRN,))
        self.assertFalse(validator.is_valid("300990000000007"))
        self.assertFalse(validator.is_valid("300990000000007", GrnType.OGRNIP))
        self.assertEqual(validator.validate("300990000000007", GrnType.OGRNIP).reason, "no_rule")
        self.assertTrue(validator.is_valid("1009900000000"))


if __name__ == "__main__":
    unittest.main()
