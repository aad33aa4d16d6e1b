import pytest

from enclaveregistry.primitives import (
    MarketplaceInformation,
    MarketplaceType,
    NFTData,
    NFTSeriesDetails,
)


def test_new_default_uses_owner_as_creator():
    nft = NFTData.new_default(7, b"\x00", b"\x32")
    assert nft.owner == 7
    assert nft.creator == 7
    assert nft.ipfs_reference == b"\x00"
    assert nft.series_id == b"\x32"


def test_new_default_clears_flags_and_viewer():
    nft = NFTData.new_default("alice", b"ref", b"series")
    assert (nft.listed_for_sale, nft.in_transmission, nft.converted_to_capsule) == (
        False,
        False,
        False,
    )
    assert nft.viewer is None


def test_new_default_equals_explicit_construction():
    explicit = NFTData("bob", "bob", b"abc", b"s", False, False, False, None)
    assert NFTData.new_default("bob", b"abc", b"s") == explicit


def test_nft_data_is_mutable():
    nft = NFTData.new_default(1, b"x", b"y")
    nft.in_transmission = True
    nft.owner = 2
    assert nft.in_transmission is True
    assert nft.owner == 2
    assert nft.creator == 1


def test_series_details_fields():
    details = NFTSeriesDetails(5, True)
    assert details.owner == 5
    assert details.draft is True
    assert NFTSeriesDetails(5) == NFTSeriesDetails(5, False)


def test_marketplace_type_from_name():
    assert MarketplaceType("Public") is MarketplaceType.PUBLIC
    assert MarketplaceType("Private") is MarketplaceType.PRIVATE


def test_marketplace_information_defaults():
    info = MarketplaceInformation(MarketplaceType.PUBLIC, 10, "owner", name=b"shop")
    assert info.allow_list == []
    assert info.disallow_list == []
    assert info.uri is None
    assert info.logo_uri is None
    assert info.description is None
    assert info.name == b"shop"


def test_marketplace_lists_are_independent():
    first = MarketplaceInformation(MarketplaceType.PRIVATE, 0, 1)
    second = MarketplaceInformation(MarketplaceType.PRIVATE, 0, 1)
    first.allow_list.append(3)
    assert second.allow_list == []


@pytest.mark.parametrize("fee", [-1, 256])
def test_marketplace_commission_out_of_range(fee):
    with pytest.raises(ValueError):
        MarketplaceInformation(MarketplaceType.PUBLIC, fee, 1)


def test_marketplace_kind_must_be_enum():
    with pytest.raises(TypeError):
        MarketplaceInformation("Public", 1, 1)