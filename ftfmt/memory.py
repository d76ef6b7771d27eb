"""Byte-buffer helpers with C memory and C string semantics.

Buffers are ``bytearray`` objects changed in place. A "C string" is the bytes
of a buffer up to its first NUL byte, or the whole buffer if it has none.
"""

from __future__ import annotations

from ftfmt.numbers import smaller

SIZE_MAX = 2**64 - 1

BytesLike = "bytes | bytearray"


def _check_span(buf: bytes | bytearray, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what}: negative length {n}")
    if n > len(buf):
        raise ValueError(f"{what}: length {n} exceeds buffer size {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (taken modulo 256)."""
    _check_span(buf, n, "memset")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest."""
    _check_span(dest, n, "memcpy")
    _check_span(src, n, "memcpy")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest.

    The regions may overlap; the result is as if the source bytes were first
    copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("memmove: offsets must not be negative")
    _check_span(buf, dest + n, "memmove")
    _check_span(buf, src + n, "memmove")
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to value (modulo 256) among the first n bytes.

    Returns None when it is not found.
    """
    _check_span(data, n, "memchr")
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes of a and b as unsigned bytes.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span(a, n, "memcmp")
    _check_span(b, n, "memcmp")
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zeroed buffer of nmemb * size bytes.

    A zero count or size gives a one-byte buffer. A product that would not fit
    in a 64-bit size raises OverflowError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("calloc: counts must not be negative")
    if not nmemb or not size:
        return bytearray(1)
    if nmemb > SIZE_MAX // size:
        raise OverflowError(f"calloc: {nmemb} * {size} overflows the size type")
    return bytearray(nmemb * size)


def cstrlen(buf: bytes | bytearray) -> int:
    """Length of the C string held in buf."""
    index = bytes(buf).find(b"\0")
    return len(buf) if index < 0 else index


def _copy_at(dst: bytearray, offset: int, src: bytes | bytearray, size: int) -> None:
    copied = smaller(size - 1, cstrlen(src))
    end = offset + copied + 1
    if end > len(dst):
        raise ValueError(
            f"destination of {len(dst)} bytes cannot hold {end} bytes"
        )
    dst[offset:end] = bytes(src[:copied]) + b"\0"


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy the C string src into dst, writing at most size bytes with the NUL.

    Returns the length of src, so a result >= size means truncation.
    """
    if size < 0:
        raise ValueError("strlcpy: negative size")
    src_len = cstrlen(src)
    if size:
        _copy_at(dst, 0, src, size)
    return src_len


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append the C string src to the C string in dst, within size bytes in all.

    Returns min(size, initial length of dst) plus the length of src.
    """
    if size < 0:
        raise ValueError("strlcat: negative size")
    dst_len = cstrlen(dst)
    total = smaller(size, dst_len) + cstrlen(src)
    if size <= dst_len:
        return total
    _copy_at(dst, dst_len, src, size - dst_len)
    return total