"""
Configuration Module.

This module defines the naming configuration used when the `Downtime` enum is
published to a schema registry or described through a protobuf descriptor.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistrationConfig:
    """
    Naming settings for the registry and descriptor modules.

    Attributes:
        proto_file (str): The path of the `.proto` file declaring the enum.
        proto_package (str): The protobuf package (dot separated).
        enum_name (str): The unqualified enum type name.
    """

    proto_file: str
    proto_package: str
    enum_name: str

    @property
    def type_name(self) -> str:
        """The fully qualified type name, e.g. 'osmosis.downtimedetector.v1beta1.Downtime'."""
        if not self.proto_package:
            return self.enum_name
        return f"{self.proto_package}.{self.enum_name}"


DEFAULT_CONFIG = RegistrationConfig(
    proto_file="osmosis/downtime-detector/v1beta1/downtime_duration.proto",
    proto_package="osmosis.downtimedetector.v1beta1",
    enum_name="Downtime",
)
