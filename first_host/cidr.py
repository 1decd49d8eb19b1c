"""CIDR validation and address enumeration.

The resolver only depends on the two operations of :class:`CidrParser`, so any
implementation (for tests or a different parsing library) can be plugged in.
"""

from ipaddress import AddressValueError, IPv4Network, NetmaskValueError
from typing import Protocol


class InvalidCidrError(ValueError):
    """Raised when a string is not a valid IPv4 network in CIDR notation."""


class CidrParser(Protocol):
    """Capability used by the resolver to validate and walk a network."""

    def is_valid(self, cidr: str) -> bool: ...

    def addresses_in_range(self, cidr: str, offset: int, count: int) -> list[str]: ...


class IPv4CidrParser:
    """CidrParser backed by the standard library ``ipaddress`` module.

    Host bits are allowed, so ``172.16.4.33/24`` is read as ``172.16.4.0/24``.
    """

    def parse(self, cidr: str) -> IPv4Network:
        """Parse a CIDR string into an IPv4Network.

        Raises:
            InvalidCidrError: If the string is not ``<ipv4>/<0-32>``
        """
        if not isinstance(cidr, str):
            raise InvalidCidrError(f"CIDR must be a string, got {type(cidr).__name__}")

        address, sep, prefix = cidr.partition("/")
        if not sep:
            raise InvalidCidrError(f"Missing prefix length in '{cidr}'")

        # Netmask notation (a.b.c.d/255.255.255.0) and padded prefixes (/0000024) are not CIDR
        if not (prefix.isascii() and prefix.isdigit() and len(prefix) <= 2):
            raise InvalidCidrError(f"Invalid prefix length '{prefix}' in '{cidr}'")

        try:
            return IPv4Network(f"{address}/{int(prefix)}", strict=False)
        except (AddressValueError, NetmaskValueError, ValueError) as e:
            raise InvalidCidrError(f"Invalid CIDR '{cidr}': {str(e)}") from e

    def is_valid(self, cidr: str) -> bool:
        try:
            self.parse(cidr)
        except InvalidCidrError:
            return False
        return True

    def addresses_in_range(self, cidr: str, offset: int, count: int) -> list[str]:
        """Return up to ``count`` addresses starting ``offset`` past the network address.

        The list is truncated at the end of the network, so it may be empty.
        """
        if offset < 0 or count < 0:
            raise ValueError("offset and count must not be negative")

        network = self.parse(cidr)
        stop = min(offset + count, network.num_addresses)
        return [str(network.network_address + i) for i in range(offset, stop)]
