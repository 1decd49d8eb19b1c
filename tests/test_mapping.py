"""Tests for IPv4-mapped IPv6 conversion."""

import pytest

from first_host.mapping import ipv4_mapped_ipv6


def test_documented_example():
    """Test the canonical example address."""
    assert ipv4_mapped_ipv6("172.16.4.33") == "0:0:0:0:0:ffff:ac10:0421"


@pytest.mark.parametrize(
    "ipv4, expected",
    [
        ("192.168.1.1", "0:0:0:0:0:ffff:c0a8:0101"),
        ("10.0.0.1", "0:0:0:0:0:ffff:0a00:0001"),
        ("0.0.0.0", "0:0:0:0:0:ffff:0000:0000"),
        ("255.255.255.255", "0:0:0:0:0:ffff:ffff:ffff"),
    ],
)
def test_groups_are_zero_padded(ipv4, expected):
    """Each 16-bit group is written as four hex digits."""
    assert ipv4_mapped_ipv6(ipv4) == expected


def test_output_is_lowercase():
    """Hex digits are lowercase."""
    result = ipv4_mapped_ipv6("171.205.239.1")
    assert result == result.lower()
    assert result.endswith("abcd:ef01")


@pytest.mark.parametrize("value", ["not-an-ip", "256.1.1.1", "1.2.3", "2001:db8::1", ""])
def test_invalid_address_raises(value):
    """Non-IPv4 input raises ValueError."""
    with pytest.raises(ValueError):
        ipv4_mapped_ipv6(value)


@pytest.mark.parametrize("value", [3232235777, b"\xc0\xa8\x01\x01", None])
def test_non_string_raises(value):
    """Integers and packed bytes are not dotted-decimal addresses."""
    with pytest.raises(ValueError, match="must be a string"):
        ipv4_mapped_ipv6(value)
