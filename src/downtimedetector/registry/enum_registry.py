"""
Enum Schema Registry.

Schema registries record, for each qualified enum type name, the code -> name
and name -> code tables so that generic tooling (JSON encoders, debuggers,
reflection helpers) can render enum values without importing the Python type.

Registration is an explicit call performed once during process setup:

```python
registry = EnumRegistry()
register_downtime(registry)
```

Any object implementing `EnumRegistryProtocol` can be injected in place of the
in-memory `EnumRegistry` provided here.
"""

from dataclasses import dataclass
from threading import Lock
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Protocol
import logging as log

from downtimedetector.config import DEFAULT_CONFIG, RegistrationConfig
from downtimedetector.enum import DOWNTIME_NAME, DOWNTIME_VALUE


@dataclass(frozen=True, eq=False)
class EnumTable:
    """
    The (type-name, code -> name, name -> code) triple handed to a registry.

    Attributes:
        type_name (str): The fully qualified enum type name.
        names (Mapping[int, str]): Code to canonical name.
        values (Mapping[str, int]): Canonical name to code.

    Raises:
        ValueError: If the two mappings are not mutual inverses.
    """

    type_name: str
    names: Mapping[int, str]
    values: Mapping[str, int]

    def __post_init__(self):
        if not self.type_name:
            raise ValueError("Enum tables require a non-empty type name.")

        if len(self.names) != len(self.values) or any(
            self.values.get(name) != code for code, name in self.names.items()
        ):
            raise ValueError(
                f"Enum table '{self.type_name}': name and value tables are not inverses."
            )

        # Freeze the tables so that a registered triple can't drift afterwards
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumTable):
            return NotImplemented
        return (
            self.type_name == other.type_name
            and dict(self.names) == dict(other.names)
            and dict(self.values) == dict(other.values)
        )


class EnumRegistryProtocol(Protocol):
    """
    Protocol for any external registry able to record enum name/value tables.
    """

    def register_enum(self, table: EnumTable) -> None: ...


class EnumRegistry:
    """
    In-memory registry of enum tables, keyed by qualified type name.

    Writes are serialized by a lock; reads go straight to the underlying dict,
    whose registered tables are immutable.
    """

    def __init__(self):
        self._tables: Dict[str, EnumTable] = {}
        self._lock = Lock()

    def register_enum(self, table: EnumTable) -> None:
        """
        Records an enum table under its type name.

        Registering the very same table twice is a no-op.

        Raises:
            ValueError: If a different table is already registered under the same name.
        """
        with self._lock:
            existing = self._tables.get(table.type_name)
            if existing is not None:
                if existing == table:
                    log.debug(f"Enum '{table.type_name}' already registered, skipping.")
                    return
                raise ValueError(
                    f"Duplicate enum type name '{table.type_name}' detected "
                    f"with a different name/value table."
                )
            self._tables[table.type_name] = table

        log.debug(
            f"Registered enum '{table.type_name}' with {len(table.names)} values."
        )

    def get(self, type_name: str) -> Optional[EnumTable]:
        """
        Retrieves the table registered under `type_name`.

        Returns:
            Optional[EnumTable]: The table, or None if not found.
        """
        return self._tables.get(type_name)

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._tables

    def list_registered(self) -> List[str]:
        """
        Returns a list of all registered type names.
        """
        return list(self._tables.keys())

    def reset(self):
        """
        Clears the entire registry.
        Useful for unit testing to ensure isolation between tests.
        """
        with self._lock:
            self._tables.clear()


def downtime_table(config: RegistrationConfig = DEFAULT_CONFIG) -> EnumTable:
    """
    Builds the registry triple of the `Downtime` enum.
    """
    return EnumTable(
        type_name=config.type_name,
        names=DOWNTIME_NAME,
        values=DOWNTIME_VALUE,
    )


def register_downtime(
    registry: EnumRegistryProtocol,
    config: RegistrationConfig = DEFAULT_CONFIG,
) -> EnumTable:
    """
    Publishes the `Downtime` enum table to `registry`.

    Meant to be called once during process setup.

    Args:
        registry (EnumRegistryProtocol): The target registry.
        config (RegistrationConfig): Naming settings (qualified type name).

    Returns:
        EnumTable: The registered triple.

    Raises:
        Exception: Whatever the registry raises is logged and propagated.
    """
    table = downtime_table(config)
    try:
        registry.register_enum(table)
    except Exception as e:
        log.error(f"Failed to register enum '{table.type_name}': {e}")
        raise
    return table
