# craftproto

Building blocks for a block-game server's network protocol: wire encodings,
identifiers, geometry, text components, chunk palettes, tags, events and
registry data. It has no dependencies outside the standard library.

## Installation

```
pip install craftproto
```

To run the test suite as well:

```
pip install "craftproto[test]"
pytest
```

## Wire encodings

`craftproto.protocol` reads from any iterator of byte values and writes
`bytes`. It covers VarInts, VarLongs, VarUShorts (write only), strings,
floats, doubles, booleans, signed and unsigned bytes, shorts, ints (write
only), longs, UUIDs, length-prefixed byte arrays, trailing byte arrays,
network NBT and optional values.

Errors are all `ProtocolError` subclasses:

- `IterEndError`: the input ran out before a value was complete.
- `VarIntError` or `VarLongError`: a variable-length number was too long.
- `NotBooleanError`: a boolean byte was neither 0 nor 1.

Writers raise `ValueError` for numbers that do not fit the type.

```python
from craftproto.protocol import read_varint, write_varint, read_string, write_string

data = write_varint(300) + write_string("hello")
it = iter(data)
assert read_varint(it) == 300
assert read_string(it) == "hello"
```

`read_option(it, reader)` and `write_option(value, writer)` wrap any reader
or writer with a presence byte. `read_nbt` and `write_nbt` only add or strip
the empty root name of network NBT. They do not decode NBT.

## Identifiers and geometry

```python
from craftproto.identifier import Identifier
from craftproto.geometry import Angle, BlockPos, Vec3d, BoundingBox

ident = Identifier.parse("stone")          # namespace defaults to "minecraft"
assert str(ident) == "minecraft:stone"

pos = BlockPos.create(10, 4, -5)
packed = pos.to_bytes()

box = BoundingBox(Vec3d(0, 0, 0), Vec3d(1, 1, 1))
assert box.contains(Vec3d(0.5, 0.5, 0.5))
```

`BlockPos` accepts x and z from -25 to 26 and y from -11 to 8. Outside that
range it raises `InvalidPositionError`, whose `kind` is a
`PositionErrorKind`.

`Angle` arithmetic wraps results into [0, 360). `Vec3d` supports `+`, `-`,
and `*` and `/` by a number. `write_identifier_array` writes a count and then
the identifiers. `write_identifiers` writes them without a count.

## Text components

```python
from craftproto.text_component import TextComponent, Formatting, ClickEvent, ClickEventAction

fmt = Formatting.builder().color(0xc).bold(True).build()
component = (
    TextComponent.builder()
    .text("Hello")
    .formatting(fmt)
    .click_event(ClickEvent(ClickEventAction.RUN_COMMAND, "/help"))
    .build()
)
print(component.to_json_string())
```

You choose the content (`text`, `translate` or `keybind`) once. After that
you can set formatting, insertion, events and extra children. `add_extra`
flattens the children of the component it adds into this one.
`HoverEvent.show_text`, `show_item` and `show_entity` build hover events.
`TextComponent.to_bytes` writes the JSON form as a length-prefixed string.

## Other modules

- `craftproto.structures` covers data pack ids (`DataPackID`, `PackResponse`), profile properties (`Property`, `read_property_array`), statistics (`Statistic`, `write_statistic_array`) and `DeathLocation`. `DeathLocation.to_bytes` writes only the dimension.
- `craftproto.gamemode` provides `Gamemode.parse`. It accepts `"0"`, `"s"`, `"survival"`, `"Survival"` and the like for each mode, and raises `InvalidGamemodeError` otherwise.
- `craftproto.chunk` provides single-valued, indirect and direct palettes, `DataArray`, `PalettedContainer`, `ChunkSection` and `ProtocolChunk`.
- `craftproto.tags` works with tag files:
  - `read_registry_json` maps a registries report to protocol ids.
  - `parse_directory` reads a tag directory and resolves `#`-references to ids.
  - `TagRegistry.from_directory` and `write_tag_registries` encode the result.
- `craftproto.events` provides an `EventManager` with prioritised `EventHandler`s.
  - `listen` runs the handlers from lowest to highest priority, then the monitor handlers.
  - It returns the last `EventResult.ALLOW` or `DENY` given, or `DEFAULT` if there was none.
  - Built-in events are `EventOnEnable`, `EventOnDisable` and `EventPlayerLogin`.
- `craftproto.registry` handles registry data:
  - `load_registry` reads `root/<directory>/*.json` files.
  - `classify_element` names an element's `ElementKind`.
  - `DimensionProperties` holds dimension type data.
  - `byte_from_bool` turns JSON booleans into bytes.

## What this package does not do

This is a library of data types only. It does not run a server or listen for
connections. It has no packets, connection states or console, and it does no
world storage or ticking. It does not encode or decode NBT. It does not model
entities, items or plugins. Events are dispatched only when your code calls
`listen`.