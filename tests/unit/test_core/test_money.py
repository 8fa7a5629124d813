#!/usr/bin/env python3
"""Tests for Money primitive type."""

import pytest

from labeler.core.money import Money


class TestMoneyConstruction:
    """Test Money class construction."""

    @pytest.mark.currency
    def test_from_cents(self):
        """Test creating Money from cents."""
        m = Money.from_cents(1234)
        assert m.to_cents() == 1234

    @pytest.mark.currency
    def test_from_milliunits(self):
        """Test creating Money from YNAB milliunits."""
        assert Money.from_milliunits(12340).to_cents() == 1234
        assert Money.from_milliunits(-45990).to_cents() == -4599

    @pytest.mark.currency
    def test_from_dollars_string(self):
        """Test parsing from dollar strings."""
        assert Money.from_dollars("$12.34").to_cents() == 1234
        assert Money.from_dollars("(12.34)").to_cents() == -1234

    @pytest.mark.currency
    def test_from_dollars_int(self):
        """Test creating from integer dollars."""
        assert Money.from_dollars(12).to_cents() == 1200

    @pytest.mark.currency
    def test_from_dollars_invalid(self):
        with pytest.raises(ValueError):
            Money.from_dollars("twelve")


class TestMoneyArithmetic:
    """Test Money arithmetic and comparisons."""

    @pytest.mark.currency
    def test_add_and_subtract(self):
        a = Money.from_cents(1000)
        b = Money.from_cents(250)
        assert a + b == Money.from_cents(1250)
        assert a - b == Money.from_cents(750)

    @pytest.mark.currency
    def test_negation(self):
        m = Money.from_cents(-4599)
        assert -m == Money.from_cents(4599)

    @pytest.mark.currency
    def test_ordering(self):
        assert Money.from_cents(-100) < Money.from_cents(0) < Money.from_cents(100)

    @pytest.mark.currency
    def test_immutability(self):
        m = Money.from_cents(100)
        with pytest.raises(AttributeError):
            m.cents = 200  # type: ignore[misc]

    @pytest.mark.currency
    def test_to_milliunits(self):
        assert Money.from_cents(-4599).to_milliunits() == -45990


class TestMoneyFormatting:
    """Test Money string formatting."""

    @pytest.mark.currency
    def test_str(self):
        assert str(Money.from_cents(4599)) == "$45.99"
        assert str(Money.from_cents(-4599)) == "$-45.99"

    @pytest.mark.currency
    def test_repr(self):
        assert repr(Money.from_cents(1234)) == "Money(cents=1234)"
