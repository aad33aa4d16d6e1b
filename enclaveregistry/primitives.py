"""Low level data types shared by the chain's modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

AccountT = TypeVar("AccountT")

BlockNumber = int
Balance = int
Moment = int
Index = int
AccountIndex = int
TextFormat = bytes

MarketplaceId = int
MarketplaceCommission = int
NFTId = int
NFTSeriesId = bytes

U8_MAX = 2**8 - 1
U32_MAX = 2**32 - 1


class MarketplaceType(Enum):
    """Whether a marketplace is open to everyone or restricted."""

    PUBLIC = "Public"
    PRIVATE = "Private"


@dataclass
class MarketplaceInformation(Generic[AccountT]):
    """Description and access rules of a marketplace."""

    kind: MarketplaceType
    commission_fee: MarketplaceCommission
    owner: AccountT
    allow_list: list[AccountT] = field(default_factory=list)
    disallow_list: list[AccountT] = field(default_factory=list)
    name: TextFormat = b""
    uri: TextFormat | None = None
    logo_uri: TextFormat | None = None
    description: TextFormat | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, MarketplaceType):
            raise TypeError(f"kind must be a MarketplaceType, got {self.kind!r}")
        if not 0 <= self.commission_fee <= U8_MAX:
            raise ValueError(
                f"commission fee must fit in one byte, got {self.commission_fee}"
            )


@dataclass
class NFTData(Generic[AccountT]):
    """State of a single NFT: ownership, content reference and lock flags."""

    owner: AccountT
    creator: AccountT
    ipfs_reference: TextFormat
    series_id: NFTSeriesId
    listed_for_sale: bool = False
    in_transmission: bool = False
    converted_to_capsule: bool = False
    viewer: AccountT | None = None

    @classmethod
    def new_default(
        cls, owner: AccountT, ipfs_reference: TextFormat, series_id: NFTSeriesId
    ) -> "NFTData[AccountT]":
        """An NFT created by its owner, with every flag cleared and no viewer."""
        return cls(
            owner=owner,
            creator=owner,
            ipfs_reference=ipfs_reference,
            series_id=series_id,
        )


@dataclass
class NFTSeriesDetails(Generic[AccountT]):
    """Owner of a series and whether it is still a draft.

    While a series is a draft its owner may add NFTs to it but may not list
    them for sale.
    """

    owner: AccountT
    draft: bool = False