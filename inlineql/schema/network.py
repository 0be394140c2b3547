"""Network address value models (``inet``/``cidr`` and ``macaddr``)."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress

_FROZEN = ConfigDict(frozen=True, extra="forbid")

#: A single MAC address octet.
Octet = Annotated[int, Field(ge=0, le=255)]


class Inet(BaseModel):
    """An IP address with an optional prefix length.

    Example::

        Inet(address="127.0.0.1", netmask=24)   # renders '127.0.0.1/24'
        Inet(address="::1")                     # renders '::1'

    Attributes:
        address: IPv4 or IPv6 address.
        netmask: Prefix length, or ``None`` for a bare host address.
    """

    model_config = _FROZEN

    address: IPvAnyAddress
    netmask: int | None = Field(None, ge=0)


class MacAddress(BaseModel):
    """A six-octet hardware address: ``MacAddress(address=(8, 1, 43, 5, 7, 9))``."""

    model_config = _FROZEN

    address: tuple[Octet, Octet, Octet, Octet, Octet, Octet]

    @classmethod
    def from_bytes(cls, data: bytes) -> MacAddress:
        """Build a MacAddress from six raw bytes."""
        return cls(address=tuple(data))
