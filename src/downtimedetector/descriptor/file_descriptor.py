"""
Protobuf Descriptor Module.

Builds the reflective schema of the `Downtime` enum as a protobuf
`FileDescriptorProto`, mirroring what a protobuf code generator compiles in:

1.  **Descriptor proto**: the `.proto` file declaring the enum.
2.  **Descriptor blob**: the gzipped serialized file descriptor, the compact
    form embedded by generated code.
3.  **Pool lookup**: an `EnumDescriptor` resolved through a `DescriptorPool`,
    for generic reflective tooling.

The blob is optional metadata: plain enum handling never needs this module.
"""

import gzip
from typing import List, Optional, Tuple
import logging as log

from google.protobuf import descriptor_pb2, descriptor_pool
from google.protobuf.message import DecodeError
from google.protobuf.descriptor import EnumDescriptor

from downtimedetector.config import DEFAULT_CONFIG, RegistrationConfig
from downtimedetector.enum import Downtime

# Position of the enum among the top-level enums of the file.
_ENUM_INDEX = 0


def file_descriptor_proto(
    config: RegistrationConfig = DEFAULT_CONFIG,
) -> descriptor_pb2.FileDescriptorProto:
    """
    Builds the proto3 file descriptor declaring the `Downtime` enum.

    Values are emitted in code order, as in the `.proto` source.
    """
    fdp = descriptor_pb2.FileDescriptorProto()
    fdp.name = config.proto_file
    fdp.package = config.proto_package
    fdp.syntax = "proto3"

    enum_proto = fdp.enum_type.add()
    enum_proto.name = config.enum_name
    for member in Downtime:
        enum_proto.value.add(name=member.name, number=member.value)

    return fdp


def file_descriptor_blob(config: RegistrationConfig = DEFAULT_CONFIG) -> bytes:
    """
    Returns the gzipped serialized file descriptor.
    """
    # mtime is pinned so that the blob is byte-for-byte reproducible
    return gzip.compress(
        file_descriptor_proto(config).SerializeToString(deterministic=True),
        mtime=0,
    )


def decode_file_descriptor_blob(blob: bytes) -> descriptor_pb2.FileDescriptorProto:
    """
    Inverse of `file_descriptor_blob`.

    Raises:
        ValueError: If the blob is not a gzipped, well-formed file descriptor.
    """
    try:
        raw = gzip.decompress(blob)
        return descriptor_pb2.FileDescriptorProto.FromString(raw)
    except (OSError, EOFError, DecodeError) as e:
        raise ValueError(f"Invalid descriptor blob: {e}") from e


def enum_descriptor(
    config: RegistrationConfig = DEFAULT_CONFIG,
) -> Tuple[bytes, List[int]]:
    """
    Returns the descriptor blob together with the path of the enum inside it.
    """
    return file_descriptor_blob(config), [_ENUM_INDEX]


def load_enum_descriptor(
    pool: Optional[descriptor_pool.DescriptorPool] = None,
    config: RegistrationConfig = DEFAULT_CONFIG,
) -> EnumDescriptor:
    """
    Adds the enum's file to a descriptor pool and resolves its `EnumDescriptor`.

    Args:
        pool (Optional[DescriptorPool]): The target pool. A fresh private pool
            is used when omitted, leaving the process-wide default pool untouched.
        config (RegistrationConfig): Naming settings.

    Returns:
        EnumDescriptor: The descriptor of the enum (full name `config.type_name`).
    """
    if pool is None:
        pool = descriptor_pool.DescriptorPool()

    try:
        pool.FindFileByName(config.proto_file)
        log.debug(f"'{config.proto_file}' already present in descriptor pool.")
    except KeyError:
        pool.AddSerializedFile(
            file_descriptor_proto(config).SerializeToString(deterministic=True)
        )
        log.debug(f"Added '{config.proto_file}' to descriptor pool.")

    return pool.FindEnumTypeByName(config.type_name)
