from .codec import (
    WireError as WireError,
    decode_downtime as decode_downtime,
    decode_varint as decode_varint,
    encode_downtime as encode_downtime,
    encode_varint as encode_varint,
)

__all__ = [
    "WireError",
    "decode_downtime",
    "decode_varint",
    "encode_downtime",
    "encode_varint",
]
