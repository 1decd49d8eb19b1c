"""First host address resolver for IPv4 CIDR subnets."""

from .cidr import CidrParser, InvalidCidrError, IPv4CidrParser
from .mapping import ipv4_mapped_ipv6
from .resolver import AddressResolver, get_first_ip_address

__all__ = [
    "AddressResolver",
    "CidrParser",
    "InvalidCidrError",
    "IPv4CidrParser",
    "get_first_ip_address",
    "ipv4_mapped_ipv6",
]
