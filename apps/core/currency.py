"""
Indian currency helpers for the Luxury Estate backend.

Formats rupee amounts with Indian digit grouping (last three digits,
then pairs) and parses the crore/lakh shorthand used in listing prices.

Display helpers never raise: invalid input renders as ``₹0`` or parses
as ``0``. Write paths use ``parse_price_strict`` instead.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

RUPEE_SYMBOL = '₹'

CRORE = 10000000
LAKH = 100000

# Amounts beyond this many integer digits display as zero
MAX_DISPLAY_DIGITS = 30

# Largest rupee amount a listing price can hold (signed 64-bit column)
MAX_PRICE_AMOUNT = 9223372036854775807

# Characters dropped before shorthand parsing
_STRIP_PATTERN = re.compile(r'[₹,\s]')

# Leading float, same reach as a JavaScript-style parseFloat
_NUMBER_PREFIX = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?')

_LAKH_TOKEN = re.compile(r'l(ac|akh)?')

_STRICT_PATTERN = re.compile(
    r'^(?P<number>\d+(\.\d+)?|\.\d+)(?P<unit>crore|cr|lakh|lac|l)?$'
)

_UNIT_MULTIPLIERS = {
    'crore': CRORE,
    'cr': CRORE,
    'lakh': LAKH,
    'lac': LAKH,
    'l': LAKH,
}


class InvalidPriceError(ValueError):
    """Raised by the strict parser for text that is not a valid price."""


def _too_large(number) -> bool:
    return number.adjusted() >= MAX_DISPLAY_DIGITS


def _to_decimal(value):
    """Coerce a number-like value to a finite Decimal, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite() or _too_large(number):
        return None
    return number


def round_rupees(value) -> int:
    """Round to the nearest whole rupee, halves away from zero."""
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))


def group_indian_digits(digits: str) -> str:
    """
    Group a string of digits the Indian way.

    Examples:
        group_indian_digits('999') → '999'
        group_indian_digits('100000') → '1,00,000'
        group_indian_digits('28000000') → '2,80,00,000'
    """
    if len(digits) <= 3:
        return digits

    last_three = digits[-3:]
    remaining = digits[:-3]

    groups = []
    while len(remaining) > 2:
        groups.insert(0, remaining[-2:])
        remaining = remaining[:-2]
    if remaining:
        groups.insert(0, remaining)

    return ','.join(groups + [last_three])


def format_indian_price(amount, symbol: str = RUPEE_SYMBOL) -> str:
    """
    Format a rupee amount for display, e.g. 28000000 → '₹2,80,00,000'.

    The amount is rounded to the nearest rupee first. Negative amounts
    carry their sign ahead of the symbol ('-₹1,00,000').

    Args:
        amount: int, float, Decimal or numeric string.
        symbol: Currency glyph to prefix.

    Returns:
        The display string. None, NaN, infinities, non-numeric input
        and amounts over MAX_DISPLAY_DIGITS digits give '₹0'.
    """
    number = _to_decimal(amount)
    if number is None:
        return f'{symbol}0'

    rounded = round_rupees(number)
    sign = '-' if rounded < 0 else ''
    return f'{sign}{symbol}{group_indian_digits(str(abs(rounded)))}'


def _leading_number(text: str):
    """Return the leading numeric prefix of ``text`` as a Decimal, or None."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return None
    return _to_decimal(match.group(0))


def clean_price_text(text: str) -> str:
    """Strip the rupee symbol, commas and whitespace, and lowercase."""
    return _STRIP_PATTERN.sub('', text).lower()


def parse_price_to_number(text) -> int:
    """
    Parse a human-entered price into whole rupees.

    Understands crore ('2Cr', '2.8 crore'), lakh ('1.5L', '75 lac',
    '50 Lakh') and plain numbers ('₹5,00,000'). Anything after the
    leading number is ignored.

    Returns:
        Integer rupee amount. 0 for empty, unparseable or oversized input.
    """
    if not text:
        return 0

    cleaned = clean_price_text(str(text))

    if 'cr' in cleaned:
        number = _leading_number(cleaned.replace('cr', '', 1))
        multiplier = CRORE
    elif 'l' in cleaned:
        number = _leading_number(_LAKH_TOKEN.sub('', cleaned, count=1))
        multiplier = LAKH
    else:
        number = _leading_number(cleaned)
        multiplier = 1

    if number is None:
        return 0
    try:
        amount = number * multiplier
    except ArithmeticError:
        return 0
    if _too_large(amount):
        return 0
    return round_rupees(amount)


def parse_price_strict(text) -> int:
    """
    Parse a price, rejecting anything that is not a clean amount.

    Accepts the same notation as ``parse_price_to_number`` but the whole
    text must be a non-negative number with an optional crore/lakh unit.

    Raises:
        InvalidPriceError: If the text is empty, malformed or above
            MAX_PRICE_AMOUNT.
    """
    if text is None or not str(text).strip():
        raise InvalidPriceError('Price is required.')

    cleaned = clean_price_text(str(text))
    match = _STRICT_PATTERN.match(cleaned)
    if match is None:
        raise InvalidPriceError(f"'{text}' is not a valid price.")

    number = Decimal(match.group('number'))
    multiplier = _UNIT_MULTIPLIERS.get(match.group('unit'), 1)
    rounded = (number * multiplier).to_integral_value(rounding=ROUND_HALF_UP)
    if rounded > MAX_PRICE_AMOUNT:
        raise InvalidPriceError(f"'{text}' is too large a price.")
    return int(rounded)
