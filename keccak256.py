"""
Simple, pure-Python Keccak-256 implementation.

This is the original Keccak submission with 256-bit output (rate 1088 bits,
capacity 512 bits, padding byte 0x01), the variant Ethereum uses. It is NOT
NIST SHA3-256, which differs only in its padding byte (0x06).

The goal is clarity over speed. The module uses only Python built-ins.
"""
from typing import List, Optional


# Sponge parameters, all in bytes. The rate is fixed by the digest size.
DIGEST_SIZE: int = 32
CAPACITY: int = 2 * DIGEST_SIZE
RATE: int = 200 - CAPACITY  # 136 bytes = 1088 bits

# Domain separation byte of the original Keccak padding
KECCAK_SUFFIX: int = 0x01

# 64-bit mask (all ones)
_MASK: int = 0xFFFFFFFFFFFFFFFF


# Rotate left on a 64-bit word.
# n == 0 is the identity: x >> 64 is 0 for any 64-bit x.
def _rol(x: int, n: int) -> int:
    return ((x << n) | (x >> (64 - n))) & _MASK


# Round constants for Keccak-f[1600], one per round
_RC: List[int] = [0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000, 0x000000000000808B,
                  0x0000000080000001, 0x8000000080008081, 0x8000000000008009, 0x000000000000008A, 0x0000000000000088,
                  0x0000000080008009, 0x000000008000000A, 0x000000008000808B, 0x800000000000008B, 0x8000000000008089,
                  0x8000000000008003, 0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
                  0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008]

# Rotation offsets r[x][y]
_RO: List[List[int]] = [
    [0, 36, 3, 41, 18],
    [1, 44, 10, 45, 2],
    [62, 6, 43, 15, 61],
    [28, 55, 25, 21, 56],
    [27, 20, 39, 8, 14]
]


def _keccak_f(s: List[int]) -> List[int]:
    """Apply the Keccak-f[1600] permutation to the 5x5 state array.

    The state is a flat list of 25 unsigned 64-bit words in "lane order":
    index = x + 5*y for coordinates (x, y) with x,y in 0..4.

    Each of the 24 rounds runs:
    - Theta: xor every lane with the parities of two neighbouring columns.
    - Rho+Pi: rotate each lane, then move (x, y) to (y, 2x+3y mod 5).
    - Chi: non-linear row mixing with AND and NOT.
    - Iota: xor a round constant into lane (0, 0).

    The state is modified in place and also returned.
    """
    for rc in _RC:
        # Theta
        c = [s[x] ^ s[x + 5] ^ s[x + 10] ^ s[x + 15] ^ s[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ _rol(c[(x + 1) % 5], 1) for x in range(5)]
        for i in range(25):
            s[i] ^= d[i % 5]
        # Rho and Pi
        b = [0] * 25
        for y in range(5):
            for x in range(5):
                b[y + 5 * ((2 * x + 3 * y) % 5)] = _rol(s[x + 5 * y], _RO[x][y])
        # Chi
        for y in range(5):
            t = b[5 * y:5 * y + 5]
            for x in range(5):
                s[x + 5 * y] = (t[x] ^ ((~t[(x + 1) % 5]) & t[(x + 2) % 5])) & _MASK
        # Iota
        s[0] ^= rc
    return s


def _xor_block(s: List[int], block) -> None:
    # XOR a rate-sized block into the first RATE/8 lanes (little-endian).
    # Byte offset o lands in lane j = o // 8, i.e. (x, y) = (j % 5, j // 5), flat index j.
    for j in range(RATE // 8):
        s[j] ^= int.from_bytes(block[8 * j:8 * j + 8], 'little')


def _absorb(data, suffix: int = KECCAK_SUFFIX) -> List[int]:
    """Run the sponge over the whole message and return the final state.

    Every full 136-byte block is XORed in and permuted. The remaining
    0..135 bytes get pad10*1 padding: `suffix` at the first free byte and
    0x80 on the last byte of the block. With 135 bytes left over both land
    on the same byte and combine (0x81 for Keccak). The padded block is
    XORed in and permuted once more, so an input of exactly one block is
    followed by a second, otherwise empty block.
    """
    s = [0] * 25
    view = memoryview(data).cast('B')
    full = len(view) - len(view) % RATE
    for i in range(0, full, RATE):
        _xor_block(s, view[i:i + RATE])
        _keccak_f(s)
    tail = view[full:]
    b = bytearray(RATE)
    b[:len(tail)] = tail
    b[len(tail)] ^= suffix
    b[RATE - 1] ^= 0x80
    _xor_block(s, b)
    _keccak_f(s)
    return s


def _squeeze(s: List[int], n: int = DIGEST_SIZE) -> bytes:
    """Serialize the first n bytes (n <= RATE) of the state, little-endian per lane."""
    out = bytearray()
    for j in range((n + 7) // 8):
        out += s[j].to_bytes(8, 'little')
    return bytes(out[:n])


class Keccak256:
    """Streaming Keccak-256 hasher.

    Simple usage:
      h = Keccak256().write(b"hello").write(b" world")
      out = h.finalize()  # 32 bytes (alias: digest)

    Notes:
    - write() only buffers. All hashing happens in finalize().
    - finalize() does not consume the buffer. Calling it again returns the
      same digest, and a later write() extends the same message: the next
      finalize() covers every byte written since the last reset().
    - reset() empties the buffer so the instance can hash a new message.
    - An instance is not thread-safe; use one per thread.
    """

    name: str = "keccak256"
    digest_size: int = DIGEST_SIZE
    block_size: int = RATE

    def __init__(self) -> None:
        # Every byte written since construction or the last reset()
        self._buf: bytearray = bytearray()

    def write(self, data: bytes) -> "Keccak256":
        """Append bytes to the message. Returns self so calls can be chained."""
        if isinstance(data, str):
            raise TypeError("Strings must be encoded before hashing")
        if data is None:
            raise TypeError("data must be a bytes-like object, not None")
        self._buf += memoryview(data).cast('B')
        return self

    # hashlib-style name for write()
    update = write

    def finalize(self, out: Optional[bytearray] = None) -> bytes:
        """Hash everything buffered so far and return the 32-byte digest.

        If `out` is given it must be a writable buffer of exactly 32 bytes;
        the digest is copied into it as well. The buffer of written bytes
        is left untouched.
        """
        target = None
        if out is not None:
            target = memoryview(out).cast('B')
            if target.readonly:
                raise TypeError("output buffer must be writable")
            if len(target) != DIGEST_SIZE:
                raise ValueError(f"output buffer must be exactly {DIGEST_SIZE} bytes, got {len(target)}")
        digest = _squeeze(_absorb(bytes(self._buf)), DIGEST_SIZE)
        if target is not None:
            target[:] = digest
        return digest

    def reset(self) -> "Keccak256":
        """Forget all written bytes. Returns self."""
        self._buf.clear()
        return self

    # hashlib-compatible API
    def digest(self) -> bytes:
        return self.finalize()

    def hexdigest(self) -> str:
        return self.finalize().hex()

    @staticmethod
    def get_hash(data: bytes) -> bytes:
        """One-shot digest: fresh hasher, a single write, finalize."""
        return Keccak256().write(data).finalize()


def keccak256(data: bytes) -> bytes:
    """One-shot Keccak-256 of data."""
    return Keccak256.get_hash(data)


def keccak256_hex(data: bytes) -> str:
    return keccak256(data).hex()
