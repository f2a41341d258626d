"""
Tests for EMI calculation using Decimal precision.
"""

import random
from decimal import Decimal

from django.test import TestCase

from apps.core.utils import (
    EMIResult,
    calculate_emi,
    emi_changed,
    validate_loan_parameters,
)


def reference_emi(principal, annual_rate, years):
    """Independent float recomputation with unrounded intermediates."""
    r = annual_rate / 100 / 12
    n = years * 12
    if r == 0:
        emi = principal / n
        return emi, 0.0
    factor = (1 + r) ** n
    emi = principal * r * factor / (factor - 1)
    return emi, emi * n - principal


class CalculateEMITests(TestCase):
    """Test the amortization formula with Decimal."""

    def test_down_payment_covers_price(self):
        """Principal of 0 → no EMI and no interest."""
        result = calculate_emi(2000000, 2000000, 20, 8.5)
        self.assertEqual(result.emi, 0)
        self.assertEqual(result.total_interest, 0)
        self.assertEqual(result.principal, 0)

    def test_down_payment_exceeds_price(self):
        result = calculate_emi(1000000, 3000000, 20, 8.5)
        self.assertEqual(result, EMIResult(0, 0, 0, 240))

    def test_zero_interest(self):
        """0% interest → simple division, rounded."""
        result = calculate_emi(10000000, 2000000, 20, 0)
        self.assertEqual(result.emi, 33333)
        self.assertEqual(result.total_interest, 0)
        self.assertEqual(result.principal, 8000000)

    def test_standard_home_loan(self):
        """1 Cr property, 20L down, 20 years at 8.5%."""
        result = calculate_emi(10000000, 2000000, 20, 8.5)
        self.assertGreater(result.emi, 0)
        self.assertIsInstance(result.emi, int)
        self.assertIsInstance(result.total_interest, int)

        expected_emi, expected_interest = reference_emi(8000000, 8.5, 20)
        self.assertLessEqual(abs(result.emi - expected_emi), 1)
        self.assertLessEqual(abs(result.total_interest - expected_interest), 1)

        # Rounded EMI drifts at most half a rupee per month
        self.assertLessEqual(
            abs(result.emi * 240 - 8000000 - result.total_interest), 120,
        )

    def test_one_year_tenure(self):
        """Manually verified: P=1200000, r=1%, n=12 → 106618.55."""
        result = calculate_emi(1200000, 0, 1, 12)
        self.assertEqual(result.emi, 106619)
        self.assertEqual(result.tenure_months, 12)

    def test_total_payment(self):
        result = calculate_emi(5000000, 1000000, 10, 9)
        self.assertEqual(result.total_payment, 4000000 + result.total_interest)

    def test_accepts_int_float_and_decimal_inputs(self):
        r1 = calculate_emi(10000000, 2000000, 20, 8.5)
        r2 = calculate_emi(10000000.0, 2000000.0, 20.0, 8.5)
        r3 = calculate_emi(
            Decimal('10000000'), Decimal('2000000'), 20, Decimal('8.5'),
        )
        self.assertEqual(r1, r3)
        self.assertEqual(r2, r3)

    def test_zero_tenure_rejected(self):
        with self.assertRaises(ValueError):
            calculate_emi(10000000, 2000000, 0, 8.5)

    def test_negative_tenure_rejected(self):
        with self.assertRaises(ValueError):
            calculate_emi(10000000, 2000000, -5, 8.5)

    def test_negative_rate_rejected(self):
        with self.assertRaises(ValueError):
            calculate_emi(10000000, 2000000, 20, -1)

    def test_non_finite_rejected(self):
        for args in (
            (float('inf'), 0, 20, 8.5),
            (10000000, float('nan'), 20, 8.5),
            (10000000, 0, float('inf'), 8.5),
            (10000000, 0, 20, float('inf')),
        ):
            with self.subTest(args=args):
                with self.assertRaises(ValueError):
                    calculate_emi(*args)

    def test_non_numeric_rejected(self):
        with self.assertRaises(ValueError):
            calculate_emi('ten lakh', 0, 20, 8.5)

    def test_rejection_checked_before_zero_principal(self):
        """Invalid tenure is an error even when no loan is needed."""
        with self.assertRaises(ValueError):
            calculate_emi(1000000, 1000000, 0, 8.5)

    def test_matches_reference_across_ranges(self):
        """Randomized: deterministic and within ±1 of a float recomputation."""
        rng = random.Random(42)
        for _ in range(300):
            price = rng.randint(0, 10 ** 12)
            down = rng.randint(0, price)
            years = rng.randint(1, 30)
            rate = round(rng.uniform(0, 20), 2)
            with self.subTest(price=price, down=down, years=years, rate=rate):
                first = calculate_emi(price, down, years, rate)
                second = calculate_emi(price, down, years, rate)
                self.assertEqual(first, second)

                if price - down <= 0:
                    self.assertEqual((first.emi, first.total_interest), (0, 0))
                    continue

                expected_emi, expected_interest = reference_emi(
                    price - down, rate, years,
                )
                self.assertLessEqual(
                    abs(first.emi - expected_emi), 1 + expected_emi * 1e-9,
                )
                self.assertLessEqual(
                    abs(first.total_interest - expected_interest),
                    1 + abs(expected_interest) * 1e-9,
                )


class ValidateLoanParametersTests(TestCase):

    def test_returns_decimals(self):
        values = validate_loan_parameters(100, 10, 5, 8.5)
        self.assertTrue(all(isinstance(v, Decimal) for v in values))
        self.assertEqual(values[3], Decimal('8.5'))

    def test_zero_rate_allowed(self):
        self.assertEqual(validate_loan_parameters(100, 0, 1, 0)[3], Decimal('0'))


class EMIChangedTests(TestCase):
    """The update signal consumers use to decide whether to animate."""

    def test_first_calculation_counts_as_change(self):
        self.assertTrue(emi_changed(None, calculate_emi(1000000, 0, 10, 9)))

    def test_same_inputs_no_change(self):
        previous = calculate_emi(1000000, 0, 10, 9)
        current = calculate_emi(1000000, 0, 10, 9)
        self.assertFalse(emi_changed(previous, current))

    def test_new_rate_changes_emi(self):
        previous = calculate_emi(1000000, 0, 10, 9)
        current = calculate_emi(1000000, 0, 10, 9.5)
        self.assertTrue(emi_changed(previous, current))

    def test_previous_emi_amount(self):
        current = calculate_emi(1000000, 0, 10, 9)
        self.assertFalse(emi_changed(current.emi, current))
        self.assertTrue(emi_changed(current.emi + 1, current))
