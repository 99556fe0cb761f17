"""Namespaced identifiers such as ``minecraft:stone``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from craftproto.protocol import write_string, write_varint

DEFAULT_NAMESPACE = "minecraft"


class InvalidIdentifier(ValueError):
    """The text cannot be turned into an identifier."""

    def __init__(self) -> None:
        super().__init__(
            'Identifier must be in the format "minecraft:{thing}", '
            '"[custom_namespace]:{thing}", or "{thing}", where the namespace '
            'is implied to be "minecraft:".'
        )


@dataclass(frozen=True)
class Identifier:
    """A ``namespace:thing`` pair."""

    namespace: str
    thing: str

    @classmethod
    def parse(cls, text: str) -> Identifier:
        """Parse ``namespace:thing`` or a bare ``thing`` in the default namespace.

        With more than one colon the first part is the namespace and the last
        part is the thing.
        """
        if not isinstance(text, str):
            raise InvalidIdentifier()
        parts = text.split(":")
        namespace = parts[0] if len(parts) > 1 else DEFAULT_NAMESPACE
        return cls(namespace, parts[-1])

    def __str__(self) -> str:
        return f"{self.namespace}:{self.thing}"

    def to_bytes(self) -> bytes:
        """Encode as a length-prefixed string."""
        return write_string(str(self))


def write_identifiers(identifiers: Iterable[Identifier]) -> bytes:
    """Encode identifiers back to back, without a count."""
    return b"".join(identifier.to_bytes() for identifier in identifiers)


def write_identifier_array(identifiers: Iterable[Identifier]) -> bytes:
    """Encode identifiers prefixed by their count as a VarInt."""
    items = list(identifiers)
    return write_varint(len(items)) + write_identifiers(items)