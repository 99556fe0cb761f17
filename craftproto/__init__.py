"""Wire encodings, identifiers, geometry, text components, chunk palettes, tags, events and registry data for a block-game server protocol."""

__version__ = "0.1.0"