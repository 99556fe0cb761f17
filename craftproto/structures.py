"""Compound protocol structures: data packs, properties, statistics, death locations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from craftproto.geometry import BlockPos
from craftproto.identifier import Identifier
from craftproto.protocol import (
    read_bool,
    read_string,
    read_varint,
    write_bool,
    write_string,
    write_varint,
)


@dataclass(frozen=True)
class DataPackID:
    namespace: str
    id: str
    version: str

    @classmethod
    def read(cls, it: Iterator[int]) -> DataPackID:
        namespace = read_string(it)
        pack_id = read_string(it)
        version = read_string(it)
        return cls(namespace, pack_id, version)

    def to_bytes(self) -> bytes:
        return write_string(self.namespace) + write_string(self.id) + write_string(self.version)


def read_datapack_ids(it: Iterator[int]) -> list[DataPackID]:
    """Read a VarInt count followed by that many data pack ids."""
    return [DataPackID.read(it) for _ in range(read_varint(it))]


def write_datapack_ids(packs: Iterable[DataPackID]) -> bytes:
    items = list(packs)
    return write_varint(len(items)) + b"".join(pack.to_bytes() for pack in items)


@dataclass
class PackResponse:
    data: list[DataPackID] = field(default_factory=list)

    @classmethod
    def read(cls, it: Iterator[int]) -> PackResponse:
        return cls(read_datapack_ids(it))


@dataclass(frozen=True)
class Property:
    name: str
    value: str
    signature: str | None = None

    def to_bytes(self) -> bytes:
        out = write_string(self.name) + write_string(self.value)
        if self.signature is None:
            return out + write_bool(False)
        return out + write_bool(True) + write_string(self.signature)


def read_property_array(it: Iterator[int]) -> list[Property]:
    """Read a VarInt count followed by that many properties."""
    properties = []
    for _ in range(read_varint(it)):
        name = read_string(it)
        value = read_string(it)
        signature = read_string(it) if read_bool(it) else None
        properties.append(Property(name, value, signature))
    return properties


def write_property_array(properties: Iterable[Property]) -> bytes:
    items = list(properties)
    return write_varint(len(items)) + b"".join(prop.to_bytes() for prop in items)


@dataclass(frozen=True)
class Statistic:
    category_id: int
    statistic_id: int
    value: int

    def to_bytes(self) -> bytes:
        return write_varint(self.category_id) + write_varint(self.statistic_id) + write_varint(self.value)


def write_statistic_array(statistics: Iterable[Statistic]) -> bytes:
    items = list(statistics)
    return write_varint(len(items)) + b"".join(stat.to_bytes() for stat in items)


@dataclass(frozen=True)
class DeathLocation:
    dimension: Identifier
    pos: BlockPos

    def to_bytes(self) -> bytes:
        """Encode the location; only the dimension is written."""
        return self.dimension.to_bytes()