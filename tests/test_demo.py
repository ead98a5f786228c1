"""
Pytest test vectors for the demo helpers built on top of keccak256.
Selectors are the well-known ERC-20 ones; addresses are the EIP-55 examples.
"""

import pytest
from demo import function_selector, is_checksum_address, to_checksum_address

EIP55_ADDRESSES = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]


@pytest.mark.parametrize(
    "signature,expected",
    [
        ("transfer(address,uint256)", "a9059cbb"),
        ("balanceOf(address)", "70a08231"),
        ("approve(address,uint256)", "095ea7b3"),
    ],
)
def test_function_selector(signature, expected):
    assert function_selector(signature).hex() == expected


@pytest.mark.parametrize("address", EIP55_ADDRESSES)
def test_checksum_address_from_lower_and_upper(address):
    """Both all-lowercase and all-uppercase input give the EIP-55 form."""
    assert to_checksum_address(address.lower()) == address
    assert to_checksum_address("0x" + address[2:].upper()) == address
    assert to_checksum_address(address[2:]) == address


@pytest.mark.parametrize("address", EIP55_ADDRESSES)
def test_is_checksum_address(address):
    assert is_checksum_address(address)
    assert not is_checksum_address(address.lower())


@pytest.mark.parametrize("bad", ["", "0x", "0x1234", "0x" + "g" * 40, "0x" + "a" * 41])
def test_malformed_address_rejected(bad):
    with pytest.raises(ValueError):
        to_checksum_address(bad)
    assert not is_checksum_address(bad)
