"""
Serializers for the EMI calculator and price helper endpoints.
"""

from decimal import Decimal

from rest_framework import serializers


class EMICalculatorSerializer(serializers.Serializer):
    """Serializer for EMI calculator request."""

    property_price = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0'),
        required=True,
        help_text="Property price in rupees.",
    )
    down_payment = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0'),
        required=True,
        help_text="Down payment in rupees.",
    )
    tenure_years = serializers.IntegerField(
        min_value=1,
        max_value=40,
        required=True,
        help_text="Loan tenure in years.",
    )
    interest_rate = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal('0'),
        max_value=Decimal('100'),
        required=True,
        help_text="Annual interest rate (%).",
    )
    previous_emi = serializers.IntegerField(
        min_value=0,
        required=False,
        allow_null=True,
        default=None,
        help_text="EMI shown before this change, to detect updates.",
    )


class EMICalculatorResponseSerializer(serializers.Serializer):
    """Serializer for EMI calculator response."""

    loan_amount = serializers.IntegerField()
    tenure_months = serializers.IntegerField()
    emi = serializers.IntegerField()
    total_interest = serializers.IntegerField()
    total_payment = serializers.IntegerField()
    emi_changed = serializers.BooleanField()
    formatted = serializers.DictField(child=serializers.CharField())


class FormatPriceSerializer(serializers.Serializer):
    """Serializer for price formatting request."""

    amount = serializers.JSONField(
        required=True,
        allow_null=True,
        help_text="Amount in rupees. Non-numeric values format as ₹0.",
    )


class ParsePriceSerializer(serializers.Serializer):
    """Serializer for price parsing request."""

    text = serializers.CharField(
        max_length=100,
        required=True,
        allow_blank=True,
        trim_whitespace=False,
        help_text="Price text, e.g. '2.8 Cr', '50 Lakh' or '₹5,00,000'.",
    )
    strict = serializers.BooleanField(
        required=False,
        default=False,
        help_text="Reject malformed text instead of returning 0.",
    )
