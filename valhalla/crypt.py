"""Packet obfuscation and AES-OFB stream cipher used by the game client."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = [
    "MapleCipher",
    "packet_length",
    "rol",
    "ror",
    "maple_encrypt",
    "maple_decrypt",
]

ENCRYPT_HEADER_SIZE = 4
BLOCK_SIZE = 1460

_IV_SHIFT_KEY = bytes((
    0xEC, 0x3F, 0x77, 0xA4, 0x45, 0xD0, 0x71, 0xBF, 0xB7, 0x98, 0x20, 0xFC, 0x4B, 0xE9, 0xB3, 0xE1,
    0x5C, 0x22, 0xF7, 0x0C, 0x44, 0x1B, 0x81, 0xBD, 0x63, 0x8D, 0xD4, 0xC3, 0xF2, 0x10, 0x19, 0xE0,
    0xFB, 0xA1, 0x6E, 0x66, 0xEA, 0xAE, 0xD6, 0xCE, 0x06, 0x18, 0x4E, 0xEB, 0x78, 0x95, 0xDB, 0xBA,
    0xB6, 0x42, 0x7A, 0x2A, 0x83, 0x0B, 0x54, 0x67, 0x6D, 0xE8, 0x65, 0xE7, 0x2F, 0x07, 0xF3, 0xAA,
    0x27, 0x7B, 0x85, 0xB0, 0x26, 0xFD, 0x8B, 0xA9, 0xFA, 0xBE, 0xA8, 0xD7, 0xCB, 0xCC, 0x92, 0xDA,
    0xF9, 0x93, 0x60, 0x2D, 0xDD, 0xD2, 0xA2, 0x9B, 0x39, 0x5F, 0x82, 0x21, 0x4C, 0x69, 0xF8, 0x31,
    0x87, 0xEE, 0x8E, 0xAD, 0x8C, 0x6A, 0xBC, 0xB5, 0x6B, 0x59, 0x13, 0xF1, 0x04, 0x00, 0xF6, 0x5A,
    0x35, 0x79, 0x48, 0x8F, 0x15, 0xCD, 0x97, 0x57, 0x12, 0x3E, 0x37, 0xFF, 0x9D, 0x4F, 0x51, 0xF5,
    0xA3, 0x70, 0xBB, 0x14, 0x75, 0xC2, 0xB8, 0x72, 0xC0, 0xED, 0x7D, 0x68, 0xC9, 0x2E, 0x0D, 0x62,
    0x46, 0x17, 0x11, 0x4D, 0x6C, 0xC4, 0x7E, 0x53, 0xC1, 0x25, 0xC7, 0x9A, 0x1C, 0x88, 0x58, 0x2C,
    0x89, 0xDC, 0x02, 0x64, 0x40, 0x01, 0x5D, 0x38, 0xA5, 0xE2, 0xAF, 0x55, 0xD5, 0xEF, 0x1A, 0x7C,
    0xA7, 0x5B, 0xA6, 0x6F, 0x86, 0x9F, 0x73, 0xE6, 0x0A, 0xDE, 0x2B, 0x99, 0x4A, 0x47, 0x9C, 0xDF,
    0x09, 0x76, 0x9E, 0x30, 0x0E, 0xE4, 0xB2, 0x94, 0xA0, 0x3B, 0x34, 0x1D, 0x28, 0x0F, 0x36, 0xE3,
    0x23, 0xB4, 0x03, 0xD8, 0x90, 0xC8, 0x3C, 0xFE, 0x5E, 0x32, 0x24, 0x50, 0x1F, 0x3A, 0x43, 0x8A,
    0x96, 0x41, 0x74, 0xAC, 0x52, 0x33, 0xF0, 0xD9, 0x29, 0x80, 0xB1, 0x16, 0xD3, 0xAB, 0x91, 0xB9,
    0x84, 0x7F, 0x61, 0x1E, 0xCF, 0xC5, 0xD1, 0x56, 0x3D, 0xCA, 0xF4, 0x05, 0xC6, 0xE5, 0x08, 0x49,
))

_AES_KEY = bytes((
    0x13, 0x00, 0x00, 0x00,
    0x08, 0x00, 0x00, 0x00,
    0x06, 0x00, 0x00, 0x00,
    0xB4, 0x00, 0x00, 0x00,
    0x1B, 0x00, 0x00, 0x00,
    0x0F, 0x00, 0x00, 0x00,
    0x33, 0x00, 0x00, 0x00,
    0x52, 0x00, 0x00, 0x00,
))


def rol(value: int, count: int) -> int:
    """Rotate a byte left by ``count`` bits."""
    value &= 0xFF
    count %= 8
    return ((value << count) | (value >> (8 - count))) & 0xFF


def ror(value: int, count: int) -> int:
    """Rotate a byte right by ``count`` bits."""
    value &= 0xFF
    count %= 8
    return ((value >> count) | (value << (8 - count))) & 0xFF


def packet_length(header: bytes | bytearray) -> int:
    """Payload length encoded in a four-byte encrypted header."""
    if len(header) < ENCRYPT_HEADER_SIZE:
        raise ValueError(f"header needs {ENCRYPT_HEADER_SIZE} bytes, got {len(header)}")
    first = header[0] | (header[1] << 8)
    second = header[2] | (header[3] << 8)
    return first ^ second


def maple_encrypt(data: bytes | bytearray) -> bytes:
    """Apply the client's byte-shuffling obfuscation."""
    buf = bytearray(data)
    n = len(buf)
    for _ in range(3):
        a = 0
        for j in range(n, 0, -1):
            index = n - j
            c = rol(buf[index], 3)
            c = (c + j) & 0xFF
            c ^= a
            a = c
            c = ror(a, j)
            c ^= 0xFF
            c = (c + 0x48) & 0xFF
            buf[index] = c

        a = 0
        for j in range(n, 0, -1):
            c = rol(buf[j - 1], 4)
            c = (c + j) & 0xFF
            c ^= a
            a = c
            c ^= 0x13
            c = ror(c, 3)
            buf[j - 1] = c
    return bytes(buf)


def maple_decrypt(data: bytes | bytearray) -> bytes:
    """Undo :func:`maple_encrypt`."""
    buf = bytearray(data)
    n = len(buf)
    for _ in range(3):
        a = b = 0
        for j in range(n, 0, -1):
            c = rol(buf[j - 1], 3)
            c ^= 0x13
            a = c
            c ^= b
            c = (c - j) & 0xFF
            c = ror(c, 4)
            b = a
            buf[j - 1] = c

        a = b = 0
        for j in range(n, 0, -1):
            index = n - j
            c = (buf[index] - 0x48) & 0xFF
            c ^= 0xFF
            c = rol(c, j)
            a = c
            c ^= b
            c = (c - j) & 0xFF
            c = ror(c, 3)
            b = a
            buf[index] = c
    return bytes(buf)


class MapleCipher:
    """One direction of a client connection's cipher state.

    The 16-byte IV is the 4-byte session key repeated, and it is
    shuffled after every packet.
    """

    def __init__(self, key: bytes | bytearray, maple_version: int) -> None:
        key = bytes(key)
        if len(key) != 4:
            raise ValueError(f"session key must be 4 bytes, got {len(key)}")
        self._iv = bytearray(key * 4)
        self.maple_version = maple_version

    @property
    def iv(self) -> bytes:
        return bytes(self._iv)

    def encrypt(self, packet: bytes | bytearray, maple: bool = True, aes: bool = False) -> bytes:
        """Return the packet with its first four bytes replaced by the header
        and the rest encrypted."""
        if len(packet) < ENCRYPT_HEADER_SIZE:
            raise ValueError("packet is shorter than its header")
        body = bytes(packet[ENCRYPT_HEADER_SIZE:])
        header = self._header(len(body))
        if maple:
            body = maple_encrypt(body)
        if aes:
            body = self._aes(body)
        self.shuffle()
        return header + body

    def decrypt(self, data: bytes | bytearray, maple: bool = True, aes: bool = False) -> bytes:
        """Return the decrypted payload of a packet received without its header."""
        body = bytes(data)
        if aes:
            body = self._aes(body)
        if maple:
            body = maple_decrypt(body)
        self.shuffle()
        return body

    def shuffle(self) -> None:
        """Advance the IV to the next packet's value."""
        new_iv = [0xF2, 0x53, 0x50, 0xC6]
        for value in self._iv[:4]:
            shift_val = _IV_SHIFT_KEY[value]
            new_iv[0] = (new_iv[0] + _IV_SHIFT_KEY[new_iv[1]] - value) & 0xFF
            new_iv[1] = (new_iv[1] - (new_iv[2] ^ shift_val)) & 0xFF
            new_iv[2] ^= (_IV_SHIFT_KEY[new_iv[3]] + value) & 0xFF
            new_iv[3] = (new_iv[3] - (new_iv[0] - shift_val)) & 0xFF

            merged = int.from_bytes(bytes(new_iv), "little")
            rotated = ((merged >> 29) | (merged << 3)) & 0xFFFFFFFF
            new_iv = list(rotated.to_bytes(4, "little"))
        self._iv = bytearray(bytes(new_iv) * 4)

    def _header(self, data_length: int) -> bytes:
        a = (self._iv[3] << 8) | self._iv[2]
        a ^= -(self.maple_version + 1)
        b = a ^ data_length
        return bytes((a & 0xFF, (a >> 8) & 0xFF, b & 0xFF, (b >> 8) & 0xFF))

    def _aes(self, data: bytes) -> bytes:
        out = bytearray()
        pos = 0
        size = BLOCK_SIZE - 4
        iv = bytes(self._iv)
        while pos < len(data):
            chunk = data[pos : pos + size]
            stream = Cipher(algorithms.AES(_AES_KEY), modes.OFB(iv)).encryptor()
            out += stream.update(chunk) + stream.finalize()
            pos += size
            size = BLOCK_SIZE
        return bytes(out)