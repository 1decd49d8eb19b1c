"""Pydantic models for the first host address API."""

from pydantic import BaseModel, Field


class AddressResult(BaseModel):
    """First host address of a subnet, in IPv4 and IPv4-mapped IPv6 form.

    Both fields are None when resolution fails.
    """

    ipv4: str | None = Field(default=None, description="Dotted-decimal IPv4 address (e.g., 172.16.4.33)")
    ipv6: str | None = Field(
        default=None, description="IPv4-mapped IPv6 address (e.g., 0:0:0:0:0:ffff:ac10:0421)"
    )


class FirstHostRequest(BaseModel):
    """Request model for first host calculation."""

    cidr: str = Field(..., description="IPv4 network in CIDR notation (e.g., 192.168.1.0/24)")


class FirstHostResponse(AddressResult):
    """Response model for first host calculation."""

    cidr: str


class MappedAddressRequest(BaseModel):
    """Request model for IPv4-mapped IPv6 conversion."""

    address: str = Field(..., description="Dotted-decimal IPv4 address")


class MappedAddressResponse(BaseModel):
    """Response model for IPv4-mapped IPv6 conversion."""

    ipv4: str
    ipv6: str
