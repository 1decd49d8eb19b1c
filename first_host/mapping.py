"""IPv4 to IPv4-mapped IPv6 conversion."""

from ipaddress import AddressValueError, IPv4Address

IPV4_MAPPED_PREFIX = "0:0:0:0:0:ffff:"


def ipv4_mapped_ipv6(ipv4: str) -> str:
    """Convert a dotted-decimal IPv4 address to its IPv4-mapped IPv6 form.

    The four octets are paired into two 16-bit groups, each written as four
    lowercase hex digits, e.g. ``172.16.4.33`` -> ``0:0:0:0:0:ffff:ac10:0421``.

    Args:
        ipv4: Dotted-decimal IPv4 address

    Returns:
        str: IPv4-mapped IPv6 address

    Raises:
        ValueError: If ipv4 is not a valid IPv4 address
    """
    if not isinstance(ipv4, str):
        raise ValueError(f"IPv4 address must be a string, got {type(ipv4).__name__}")

    try:
        octets = IPv4Address(ipv4).packed
    except AddressValueError as e:
        raise ValueError(f"Invalid IPv4 address: {str(e)}") from e

    high = f"{octets[0]:02x}{octets[1]:02x}"
    low = f"{octets[2]:02x}{octets[3]:02x}"
    return f"{IPV4_MAPPED_PREFIX}{high}:{low}"
