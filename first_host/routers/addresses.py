"""First host address endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..cidr import InvalidCidrError
from ..mapping import ipv4_mapped_ipv6
from ..models.address import (
    FirstHostRequest,
    FirstHostResponse,
    MappedAddressRequest,
    MappedAddressResponse,
)
from ..resolver import AddressResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/ipv4", tags=["ipv4"])


def get_resolver(request: Request) -> AddressResolver:
    """Dependency returning the process-wide resolver."""
    return request.app.state.resolver


def _first_host(resolver: AddressResolver, cidr: str) -> FirstHostResponse:
    try:
        result = resolver.resolve_first_host(cidr)
    except InvalidCidrError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return FirstHostResponse(cidr=cidr, **result.model_dump())


@router.post("/first-host", response_model=FirstHostResponse)
async def first_host(request: FirstHostRequest, resolver: AddressResolver = Depends(get_resolver)):
    """Calculate the first host address of an IPv4 subnet.

    The first host is the address directly after the network address. For a
    /31 that is the second address of the pair; a /32 has no first host.

    Args:
        request: Request with the subnet in CIDR notation
        resolver: Shared resolver (from dependency)

    Returns:
        First host address in IPv4 and IPv4-mapped IPv6 form

    Raises:
        HTTPException: 400 if the CIDR is invalid
    """
    return _first_host(resolver, request.cidr)


@router.get("/first-host", response_model=FirstHostResponse)
async def first_host_query(
    cidr: str = Query(..., description="IPv4 network in CIDR notation (e.g., 192.168.1.0/24)"),
    resolver: AddressResolver = Depends(get_resolver),
):
    """Query-string variant of POST /first-host."""
    return _first_host(resolver, cidr)


@router.post("/ipv4-mapped", response_model=MappedAddressResponse)
async def ipv4_mapped(request: MappedAddressRequest):
    """Convert a single IPv4 address to its IPv4-mapped IPv6 form.

    Raises:
        HTTPException: 400 if the address is not a dotted-decimal IPv4 address
    """
    try:
        ipv6 = ipv4_mapped_ipv6(request.address)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MappedAddressResponse(ipv4=request.address, ipv6=ipv6)
