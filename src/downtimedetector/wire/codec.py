"""
Wire Codec Module.

Enum-as-integer encoding of `Downtime` values, bit-exact with the protobuf
wire format: a value is transmitted as a base-128 varint of its code.
Negative codes (never produced by this enum, but legal int32 enum values on
the wire) take the 10-byte two's complement form, as protobuf does.
"""

from typing import Tuple, Union

from downtimedetector.enum import Downtime, is_known

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_UINT64_MASK = (1 << 64) - 1
_MAX_VARINT_BYTES = 10


class WireError(ValueError):
    """Raised when a buffer does not hold a well-formed enum varint."""


def encode_varint(value: int) -> bytes:
    """
    Encodes a non-negative integer (< 2**64) as a base-128 varint.
    """
    if value < 0 or value > _UINT64_MASK:
        raise WireError(f"Varint value out of range: {value}")

    out = bytearray()
    while True:
        bits = value & 0x7F
        value >>= 7
        if value:
            out.append(bits | 0x80)
        else:
            out.append(bits)
            return bytes(out)


def decode_varint(data: bytes, pos: int = 0) -> Tuple[int, int]:
    """
    Decodes a base-128 varint starting at `pos`.

    Returns:
        Tuple[int, int]: The decoded value and the position right after it.

    Raises:
        WireError: If the buffer is truncated or the varint exceeds 10 bytes.
    """
    result = 0
    shift = 0
    for i in range(_MAX_VARINT_BYTES):
        if pos + i >= len(data):
            raise WireError("Truncated varint.")
        b = data[pos + i]
        result |= (b & 0x7F) << shift
        if not b & 0x80:
            return result & _UINT64_MASK, pos + i + 1
        shift += 7
    raise WireError("Varint is longer than 10 bytes.")


def encode_downtime(value: Union[Downtime, int]) -> bytes:
    """
    Encodes an enum code using protobuf int32 enum rules.

    Raises:
        WireError: If the code does not fit in an int32.
    """
    code = int(value)
    if code < _INT32_MIN or code > _INT32_MAX:
        raise WireError(f"Enum code out of int32 range: {code}")
    # Negative int32 values are sign-extended to 64 bits before encoding
    return encode_varint(code & _UINT64_MASK)


def decode_downtime(data: bytes) -> Union[Downtime, int]:
    """
    Decodes a buffer holding exactly one enum varint.

    Known codes are returned as `Downtime` members; unknown codes are kept as
    plain ints so that a newer peer's values survive a decode/encode cycle.

    Raises:
        WireError: On malformed input, trailing bytes, or a non-int32 value.
    """
    raw, end = decode_varint(data)
    if end != len(data):
        raise WireError(f"{len(data) - end} trailing byte(s) after enum value.")

    # Reinterpret as a signed 64-bit integer, then check the int32 range
    code = raw - (1 << 64) if raw & (1 << 63) else raw
    if code < _INT32_MIN or code > _INT32_MAX:
        raise WireError(f"Decoded enum code out of int32 range: {code}")

    if is_known(code):
        return Downtime(code)
    return code
