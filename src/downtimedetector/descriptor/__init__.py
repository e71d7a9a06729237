from .file_descriptor import (
    decode_file_descriptor_blob as decode_file_descriptor_blob,
    enum_descriptor as enum_descriptor,
    file_descriptor_blob as file_descriptor_blob,
    file_descriptor_proto as file_descriptor_proto,
    load_enum_descriptor as load_enum_descriptor,
)

__all__ = [
    "decode_file_descriptor_blob",
    "enum_descriptor",
    "file_descriptor_blob",
    "file_descriptor_proto",
    "load_enum_descriptor",
]
