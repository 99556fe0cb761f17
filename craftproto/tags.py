"""Tag files, their resolution to protocol ids and their wire form."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from craftproto.identifier import Identifier
from craftproto.protocol import write_varint

_NAMESPACE = "minecraft"


def read_registry_json(text: str) -> dict[str, dict[str, int]]:
    """Map each registry name to its entries' protocol ids.

    ``text`` is a registries report: an object whose values hold an
    ``entries`` object of ``{"protocol_id": n}`` records.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("the registries report must be a JSON object")
    mappings: dict[str, dict[str, int]] = {}
    for registry_name, registry in data.items():
        try:
            entries = registry["entries"]
            mappings[registry_name] = {
                entry_name: int(entry["protocol_id"]) for entry_name, entry in entries.items()
            }
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"malformed registry {registry_name!r}: {exc}") from exc
    return mappings


def load_tag_file(path: str | Path) -> list[str]:
    """Read the ``values`` list of one tag file."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    try:
        values = data["values"]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"tag file {path} has no values list") from exc
    return [str(value) for value in values]


def resolve_tag(tag: str, tags: Mapping[str, list[str]]) -> list[str]:
    """Expand a tag reference (``#name``) into the entries it finally names.

    A value without a leading ``#`` is already an entry and is returned alone.
    """
    return _resolve(tag, tags, frozenset())


def _resolve(tag: str, tags: Mapping[str, list[str]], seen: frozenset[str]) -> list[str]:
    if not tag.startswith("#"):
        return [tag]
    name = tag.lstrip("#")
    if name in seen:
        raise ValueError(f"tag {name!r} refers to itself")
    try:
        values = tags[name]
    except KeyError:
        raise KeyError(f"unknown tag {name!r}") from None
    inner_seen = seen | {name}
    return [entry for value in values for entry in _resolve(value, tags, inner_seen)]


def _collect_tag_files(directory: Path) -> dict[str, list[str]]:
    tags: dict[str, list[str]] = {}
    for path in sorted(directory.iterdir()):
        if path.is_dir():
            for inner in sorted(p for p in path.iterdir() if p.is_file()):
                tags[f"{_NAMESPACE}:{path.name}/{inner.stem}"] = load_tag_file(inner)
        else:
            tags[f"{_NAMESPACE}:{path.stem}"] = load_tag_file(path)
    return tags


def parse_directory(
    path: str | Path, mappings: Mapping[str, Mapping[str, int]]
) -> dict[str, list[int]]:
    """Read every tag in a directory and resolve it to protocol ids.

    The directory's name picks the registry (``minecraft:<name>``) whose ids
    are used. Sub-directories one level deep give tags named ``dir/file``.
    """
    directory = Path(path)
    registry_name = f"{_NAMESPACE}:{directory.name}"
    try:
        ids = mappings[registry_name]
    except KeyError:
        raise KeyError(f"no registry named {registry_name!r}") from None
    tags = _collect_tag_files(directory)
    resolved: dict[str, list[int]] = {}
    for tag_name, values in tags.items():
        entries = [entry for value in values for entry in resolve_tag(value, tags)]
        try:
            resolved[tag_name] = [ids[entry] for entry in entries]
        except KeyError as exc:
            raise KeyError(f"{exc.args[0]!r} is not in registry {registry_name!r}") from None
    return resolved


@dataclass
class Tag:
    """A named tag and the protocol ids it contains."""

    tag_name: Identifier
    entries: list[int] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return (
            self.tag_name.to_bytes()
            + write_varint(len(self.entries))
            + b"".join(write_varint(entry) for entry in self.entries)
        )


@dataclass
class TagRegistry:
    """All tags of one registry."""

    registry: Identifier
    tags: list[Tag] = field(default_factory=list)

    @classmethod
    def from_directory(
        cls,
        name: str,
        tags_root: str | Path,
        mappings: Mapping[str, Mapping[str, int]],
    ) -> TagRegistry:
        """Load the tags of registry ``name`` from ``tags_root/name``."""
        parsed = parse_directory(Path(tags_root) / name, mappings)
        return cls(
            Identifier.parse(f"{_NAMESPACE}:{name}"),
            [Tag(Identifier.parse(tag_name), ids) for tag_name, ids in parsed.items()],
        )

    def to_bytes(self) -> bytes:
        return (
            self.registry.to_bytes()
            + write_varint(len(self.tags))
            + b"".join(tag.to_bytes() for tag in self.tags)
        )


def write_tag_registries(registries: Iterable[TagRegistry]) -> bytes:
    """Encode a VarInt count followed by each registry."""
    items = list(registries)
    return write_varint(len(items)) + b"".join(reg.to_bytes() for reg in items)