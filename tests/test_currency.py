"""
Tests for Indian price formatting and crore/lakh parsing.
"""

import random
from decimal import Decimal

from django.test import TestCase

from apps.core.currency import (
    InvalidPriceError,
    MAX_PRICE_AMOUNT,
    format_indian_price,
    group_indian_digits,
    parse_price_strict,
    parse_price_to_number,
)


class FormatIndianPriceTests(TestCase):
    """Test Indian digit grouping with the rupee symbol."""

    def test_zero(self):
        self.assertEqual(format_indian_price(0), '₹0')

    def test_nan(self):
        self.assertEqual(format_indian_price(float('nan')), '₹0')

    def test_none_and_garbage(self):
        """Invalid input renders the zero string instead of raising."""
        self.assertEqual(format_indian_price(None), '₹0')
        self.assertEqual(format_indian_price('abc'), '₹0')
        self.assertEqual(format_indian_price([]), '₹0')

    def test_infinity(self):
        self.assertEqual(format_indian_price(float('inf')), '₹0')
        self.assertEqual(format_indian_price(float('-inf')), '₹0')

    def test_oversized_amount_formats_as_zero(self):
        self.assertEqual(format_indian_price(Decimal('1e5000')), '₹0')
        self.assertEqual(format_indian_price('-1e5000'), '₹0')
        self.assertEqual(format_indian_price(10 ** 31), '₹0')

    def test_thirty_digit_amount_still_formatted(self):
        amount = 10 ** 29
        self.assertEqual(
            format_indian_price(amount),
            '₹' + group_indian_digits(str(amount)),
        )

    def test_below_one_thousand_not_grouped(self):
        self.assertEqual(format_indian_price(999), '₹999')
        self.assertEqual(format_indian_price(7), '₹7')

    def test_one_thousand(self):
        self.assertEqual(format_indian_price(1000), '₹1,000')

    def test_one_lakh(self):
        self.assertEqual(format_indian_price(100000), '₹1,00,000')

    def test_crores(self):
        self.assertEqual(format_indian_price(28000000), '₹2,80,00,000')
        self.assertEqual(format_indian_price(2800000000), '₹2,80,00,00,000')

    def test_fifty_lakh(self):
        self.assertEqual(format_indian_price(5000000), '₹50,00,000')

    def test_rounds_to_nearest_rupee(self):
        self.assertEqual(format_indian_price(999.4), '₹999')
        self.assertEqual(format_indian_price(999.5), '₹1,000')
        self.assertEqual(format_indian_price(Decimal('123456.50')), '₹1,23,457')

    def test_numeric_string(self):
        self.assertEqual(format_indian_price('1234567'), '₹12,34,567')

    def test_negative_sign_before_symbol(self):
        self.assertEqual(format_indian_price(-100000), '-₹1,00,000')
        self.assertEqual(format_indian_price(-5), '-₹5')

    def test_negative_rounding_to_zero(self):
        self.assertEqual(format_indian_price(-0.4), '₹0')

    def test_custom_symbol(self):
        self.assertEqual(format_indian_price(100000, symbol='Rs. '), 'Rs. 1,00,000')

    def test_group_count_and_last_group(self):
        """n digits > 3 → ceil((n - 3) / 2) + 1 groups, last group 3 digits."""
        rng = random.Random(20240601)
        for _ in range(500):
            n = rng.randint(1000, 10 ** 12)
            digits = len(str(n))
            groups = format_indian_price(n)[1:].split(',')
            with self.subTest(n=n):
                self.assertEqual(len(groups), -(-(digits - 3) // 2) + 1)
                self.assertEqual(len(groups[-1]), 3)
                self.assertTrue(all(len(g) == 2 for g in groups[1:-1]))
                self.assertIn(len(groups[0]), (1, 2))
                self.assertEqual(int(''.join(groups)), n)

    def test_idempotent(self):
        rng = random.Random(7)
        for _ in range(200):
            amount = rng.uniform(0, 10 ** 12)
            with self.subTest(amount=amount):
                self.assertEqual(
                    format_indian_price(amount),
                    format_indian_price(amount),
                )

    def test_always_starts_with_symbol(self):
        for amount in (0, 1, 12, 123, 1234, 10 ** 12):
            self.assertTrue(format_indian_price(amount).startswith('₹'))


class GroupIndianDigitsTests(TestCase):

    def test_short_strings_unchanged(self):
        self.assertEqual(group_indian_digits(''), '')
        self.assertEqual(group_indian_digits('12'), '12')

    def test_odd_and_even_heads(self):
        self.assertEqual(group_indian_digits('12345'), '12,345')
        self.assertEqual(group_indian_digits('123456'), '1,23,456')


class ParsePriceToNumberTests(TestCase):
    """Test lenient shorthand parsing."""

    def test_empty(self):
        self.assertEqual(parse_price_to_number(''), 0)
        self.assertEqual(parse_price_to_number(None), 0)

    def test_crore(self):
        self.assertEqual(parse_price_to_number('2Cr'), 20000000)
        self.assertEqual(parse_price_to_number('₹2.8 Cr'), 28000000)
        self.assertEqual(parse_price_to_number('2 crore'), 20000000)

    def test_lakh(self):
        self.assertEqual(parse_price_to_number('1.5L'), 150000)
        self.assertEqual(parse_price_to_number('50 Lakh'), 5000000)
        self.assertEqual(parse_price_to_number('75lac'), 7500000)

    def test_plain_number(self):
        self.assertEqual(parse_price_to_number('500000'), 500000)
        self.assertEqual(parse_price_to_number('₹ 5,00,000'), 500000)

    def test_plain_number_rounded(self):
        self.assertEqual(parse_price_to_number('1234.6'), 1235)

    def test_garbage(self):
        self.assertEqual(parse_price_to_number('garbage'), 0)

    def test_unit_without_number(self):
        self.assertEqual(parse_price_to_number('Cr'), 0)
        self.assertEqual(parse_price_to_number('hello'), 0)

    def test_trailing_text_ignored(self):
        self.assertEqual(parse_price_to_number('3cr onwards'), 30000000)
        self.assertEqual(parse_price_to_number('12abc'), 12)

    def test_sign_not_enforced(self):
        self.assertEqual(parse_price_to_number('-2cr'), -20000000)

    def test_huge_exponent_returns_zero(self):
        self.assertEqual(parse_price_to_number('1e999999999cr'), 0)

    def test_oversized_amount_returns_zero(self):
        self.assertEqual(parse_price_to_number('1e5000'), 0)
        self.assertEqual(parse_price_to_number('1e25cr'), 0)
        self.assertEqual(parse_price_to_number('1e20cr'), 10 ** 27)

    def test_round_trip_plain_numbers(self):
        """format(n) stripped of symbol and commas parses back to n."""
        rng = random.Random(99)
        for _ in range(200):
            n = rng.randint(0, 10 ** 12)
            with self.subTest(n=n):
                self.assertEqual(parse_price_to_number(str(n)), n)


class ParsePriceStrictTests(TestCase):
    """Test strict parsing used on write paths."""

    def test_valid_values(self):
        self.assertEqual(parse_price_strict('28 Cr'), 280000000)
        self.assertEqual(parse_price_strict('2.5 crore'), 25000000)
        self.assertEqual(parse_price_strict('75 Lakh'), 7500000)
        self.assertEqual(parse_price_strict('₹5,00,000'), 500000)
        self.assertEqual(parse_price_strict(1500000), 1500000)

    def test_empty_rejected(self):
        for value in (None, '', '   '):
            with self.subTest(value=value):
                with self.assertRaises(InvalidPriceError):
                    parse_price_strict(value)

    def test_malformed_rejected(self):
        for value in ('garbage', '3cr onwards', 'Cr', '1.2.3', '-5', 'inf'):
            with self.subTest(value=value):
                with self.assertRaises(InvalidPriceError):
                    parse_price_strict(value)

    def test_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_price_strict('abc')

    def test_above_column_limit_rejected(self):
        for value in ('99999999999999cr', '9223372036854775808', '9' * 40):
            with self.subTest(value=value):
                with self.assertRaises(InvalidPriceError):
                    parse_price_strict(value)

    def test_column_limit_accepted(self):
        self.assertEqual(
            parse_price_strict('9223372036854775807'), MAX_PRICE_AMOUNT,
        )
