#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All amount comparisons in the labeler use integer arithmetic to avoid
floating-point drift when checking for exact equality.

Currency Systems:
- YNAB uses milliunits: 1000 milliunits = $1.00
- Labels use cents: 100 cents = $1.00
- Display uses dollar strings: "$12.34"

Key Principles:
- Never use floating-point arithmetic for currency values
- Convert cents to milliunits (exact) rather than milliunits to cents (lossy)
  whenever two amounts are compared
"""

MILLIUNITS_PER_CENT = 10


def milliunits_to_cents(milliunits: int) -> int:
    """
    Convert YNAB milliunits to cents, preserving sign.

    Any sub-cent remainder is truncated toward zero.

    Args:
        milliunits: YNAB amount in milliunits (1000 = $1.00)

    Returns:
        Amount in cents (100 = $1.00)

    Example:
        milliunits_to_cents(-45990) -> -4599
    """
    if milliunits < 0:
        return -(-milliunits // MILLIUNITS_PER_CENT)
    return milliunits // MILLIUNITS_PER_CENT


def cents_to_milliunits(cents: int) -> int:
    """
    Convert cents to YNAB milliunits. Always exact.

    Example:
        cents_to_milliunits(4599) -> 45990
    """
    return cents * MILLIUNITS_PER_CENT


def is_whole_cents(milliunits: int) -> bool:
    """Check whether a milliunit amount converts to cents without remainder."""
    return milliunits % MILLIUNITS_PER_CENT == 0


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(-4599) -> "-45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse dollar string to cents using integer arithmetic only.

    Accepts a leading "-" or accounting-style parentheses for negative amounts.

    Args:
        dollars_str: String representation of dollar amount

    Returns:
        Amount in cents

    Raises:
        ValueError: If the string is not a dollar amount

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$12.34") -> 1234
        parse_dollars_to_cents("-$1,234.56") -> -123456
        parse_dollars_to_cents("(12.50)") -> -1250
        parse_dollars_to_cents("12") -> 1200
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    if not clean:
        raise ValueError(f"Empty dollar amount: {dollars_str!r}")

    is_negative = False
    if clean.startswith("(") and clean.endswith(")"):
        is_negative = True
        clean = clean[1:-1].strip()
    if clean.startswith("-"):
        is_negative = not is_negative
        clean = clean[1:].strip()
    elif clean.startswith("+"):
        clean = clean[1:].strip()

    whole, _, fraction = clean.partition(".")
    if not whole and not fraction:
        raise ValueError(f"Invalid dollar amount: {dollars_str!r}")
    if (whole and not whole.isdigit()) or (fraction and not fraction.isdigit()):
        raise ValueError(f"Invalid dollar amount: {dollars_str!r}")
    if len(fraction) > 2 and int(fraction[2:]) != 0:
        raise ValueError(f"Dollar amount has fractional cents: {dollars_str!r}")

    total = int(whole or "0") * 100 + int(fraction[:2].ljust(2, "0") or "0")
    return -total if is_negative else total


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    return f"${cents_to_dollars_str(cents)}"


def format_milliunits(milliunits: int) -> str:
    """Format milliunits as dollar string with $ prefix."""
    return format_cents(milliunits_to_cents(milliunits))
