"""First host address resolution.

The resolver validates a CIDR string, takes the address one past the network
address and pairs it with its IPv4-mapped IPv6 form. Workflow engines that
expect callbacks use :func:`get_first_ip_address`, which hands the caller
``(result, error)`` in that order.
"""

import logging
from collections.abc import Callable
from typing import Any

from .cidr import CidrParser, InvalidCidrError, IPv4CidrParser
from .mapping import ipv4_mapped_ipv6
from .models.address import AddressResult

FIRST_HOST_OFFSET = 1

INVALID_CIDR_MESSAGE = "Error: Invalid CIDR passed to getFirstIpAddress."


class AddressResolver:
    """Resolve the first host address of an IPv4 subnet."""

    def __init__(self, logger: logging.Logger, parser: CidrParser | None = None):
        self.logger = logger
        self.parser = parser if parser is not None else IPv4CidrParser()
        self.logger.info("Starting the IpAddress product.")

    def resolve_first_host(self, cidr: str) -> AddressResult:
        """Calculate the first host address of a CIDR subnet.

        Args:
            cidr: IPv4 subnet in CIDR notation (e.g., 172.16.4.0/24)

        Returns:
            AddressResult: ipv4 and IPv4-mapped ipv6 forms of the first host

        Raises:
            InvalidCidrError: If cidr is invalid or has no address at offset 1 (/32)
        """
        if not self.parser.is_valid(cidr):
            raise InvalidCidrError(f"Invalid CIDR: {cidr!r}")

        addresses = self.parser.addresses_in_range(cidr, FIRST_HOST_OFFSET, 1)
        if not addresses:
            raise InvalidCidrError(f"Invalid CIDR: {cidr!r} has no host address at offset {FIRST_HOST_OFFSET}")

        [ipv4] = addresses
        return AddressResult(ipv4=ipv4, ipv6=ipv4_mapped_ipv6(ipv4))


def get_first_ip_address(
    resolver: AddressResolver,
    cidr: str,
    callback: Callable[[dict, str | None], Any],
) -> Any:
    """Resolve the first host and deliver it through a result-first callback.

    The callback receives the result dict first and the error second. On
    failure the result holds ``{"ipv4": None, "ipv6": None}`` and the error is
    a message string; on success the error is None.

    Returns:
        Whatever the callback returns
    """
    try:
        result = resolver.resolve_first_host(cidr)
        error = None
    except InvalidCidrError:
        result = AddressResult()
        error = INVALID_CIDR_MESSAGE

    return callback(result.model_dump(), error)
