"""Chunk columns, sections and paletted containers in their wire form."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from craftproto.protocol import write_varint, write_varushort

_HEIGHTMAP_SIZE = 256


class PaletteKind(enum.Enum):
    """The registry a palette maps into."""

    BLOCK = "block"
    BIOME = "biome"


# Bits per entry sent for a direct palette of each kind.
_DIRECT_BITS = {PaletteKind.BIOME: 6, PaletteKind.BLOCK: 15}


def write_varushort_array(values: Iterable[int]) -> bytes:
    """Encode a VarInt count followed by each value as a VarUShort."""
    items = list(values)
    return write_varint(len(items)) + b"".join(write_varushort(v) for v in items)


@dataclass(frozen=True)
class SingleValuedPalette:
    """Every entry of the container has the same value."""

    value: int

    def to_bytes(self) -> bytes:
        return b"\x00" + write_varushort(self.value)


@dataclass(frozen=True)
class IndirectPalette:
    """Entries index into a list of registry values."""

    palette: tuple[int, ...]

    def __init__(self, palette: Iterable[int]) -> None:
        object.__setattr__(self, "palette", tuple(palette))

    def to_bytes(self) -> bytes:
        if not self.palette:
            raise ValueError("an indirect palette needs at least one entry")
        bits = len(self.palette).bit_length() - 1
        return bytes([bits]) + write_varushort_array(self.palette)


@dataclass(frozen=True)
class DirectPalette:
    """Entries are registry values themselves."""

    kind: PaletteKind

    def to_bytes(self) -> bytes:
        return bytes([_DIRECT_BITS[self.kind]])


Palette = Union[SingleValuedPalette, IndirectPalette, DirectPalette]


@dataclass
class DataArray:
    """Packed entries stored as unsigned 64-bit longs."""

    data: list[int] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        for value in self.data:
            if not 0 <= value <= 0xFFFFFFFFFFFFFFFF:
                raise ValueError(f"{value} does not fit in an unsigned long")
        return write_varint(len(self.data)) + b"".join(
            value.to_bytes(8, "big") for value in self.data
        )


@dataclass
class PalettedContainer:
    """Palette-based storage of block states or biomes."""

    palette: Palette
    data_array: DataArray


@dataclass
class ChunkSection:
    """A 16x16x16 section: non-air block count, 4096 block states, 64 biome cells."""

    block_count: int
    block_states: PalettedContainer
    biomes: PalettedContainer


@dataclass
class ProtocolChunk:
    """A column of chunk sections with its two heightmaps."""

    chunk_x: int
    chunk_z: int
    data: list[ChunkSection] = field(default_factory=list)
    motion_blocking: list[int] = field(default_factory=lambda: [0] * _HEIGHTMAP_SIZE)
    world_surface: list[int] = field(default_factory=lambda: [0] * _HEIGHTMAP_SIZE)

    def __post_init__(self) -> None:
        for name in ("motion_blocking", "world_surface"):
            if len(getattr(self, name)) != _HEIGHTMAP_SIZE:
                raise ValueError(f"{name} must hold {_HEIGHTMAP_SIZE} entries")