import string

from keccak256 import Keccak256, keccak256


_HEX = set(string.hexdigits)


# ABI function selector: first 4 bytes of the hash of the canonical signature
def function_selector(signature: str) -> bytes:
    return keccak256(signature.encode('ascii'))[:4]


def _strip_address(address: str) -> str:
    if address[:2] in ('0x', '0X'):
        address = address[2:]
    if len(address) != 40 or not set(address) <= _HEX:
        raise ValueError("Address must be 20 bytes of hex, optionally prefixed with 0x")
    return address.lower()


# EIP-55 mixed-case checksum encoding
def to_checksum_address(address: str) -> str:
    addr = _strip_address(address)
    h = keccak256(addr.encode('ascii')).hex()
    out = ''.join(c.upper() if int(h[i], 16) >= 8 else c for i, c in enumerate(addr))
    return '0x' + out


def is_checksum_address(address: str) -> bool:
    try:
        return to_checksum_address(address) == address
    except ValueError:
        return False


# Example usage
if __name__ == '__main__':
    for msg in (b'', b'abc', b'The quick brown fox jumps over the lazy dog'):
        print("keccak256(%r) =" % msg, keccak256(msg).hex())

    # Streaming: finalize() is a snapshot, write() keeps extending the message
    h = Keccak256().write(b'The quick brown fox ')
    print("Prefix digest:", h.hexdigest())
    h.write(b'jumps over the lazy dog')
    print("Full digest:  ", h.hexdigest())
    h.reset().write(b'abc')
    print("After reset:  ", h.hexdigest())

    sig = 'transfer(address,uint256)'
    print("Selector of %s:" % sig, function_selector(sig).hex())

    addr = '0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed'
    print("Checksum address:", to_checksum_address(addr))
