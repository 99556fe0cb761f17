"""Data-driven registry entries: classification, dimension properties and loading."""

from __future__ import annotations

import enum
import json
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_NAMESPACE = "minecraft"


def byte_from_bool(value: Any) -> int:
    """Turn a JSON boolean (or a signed byte) into a byte value of 1 or 0."""
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int) and -128 <= value <= 127:
        return value
    raise ValueError(f"expected bool or i8, got {value!r}")


def _field(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _int(data: Mapping[str, Any], key: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _optional_int(data: Mapping[str, Any], key: str) -> int | None:
    return None if data.get(key) is None else _int(data, key)


def _number(data: Mapping[str, Any], key: str) -> float:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _mapping(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = _field(data, key)
    if not isinstance(value, Mapping):
        raise ValueError(f"field {key!r} must be an object, got {value!r}")
    return value


def _flag(data: Mapping[str, Any], key: str) -> int:
    return byte_from_bool(_field(data, key))


@dataclass(frozen=True)
class Uniform:
    """An inclusive integer range."""

    min_inclusive: int
    max_inclusive: int


@dataclass(frozen=True)
class LightLevel:
    """A monster spawn light level: a fixed value or a distribution."""

    fixed: int | None = None
    distribution_type: str | None = None
    distribution: Uniform | None = None

    @classmethod
    def from_json(cls, value: Any) -> LightLevel:
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(fixed=value)
        if isinstance(value, Mapping):
            return cls(
                distribution_type=_string(value, "type"),
                distribution=Uniform(
                    _int(value, "min_inclusive"), _int(value, "max_inclusive")
                ),
            )
        raise ValueError(f"not a light level: {value!r}")


@dataclass(frozen=True)
class DimensionProperties:
    """The properties of a dimension type; flags are kept as bytes."""

    fixed_time: int | None
    skylight: int
    ceiling: int
    ultrawarm: int
    natural: int
    coordinate_scale: float
    beds: int
    respawn_anchors: int
    min_y: int
    height: int
    logical_height: int
    infiniburn: str
    effects: str
    ambient_light: float
    piglin_safe: int
    raids: int
    monster_spawn_light_level: LightLevel
    monster_spawn_block_light_limit: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DimensionProperties:
        """Build from a dimension type JSON object; raises ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("dimension type data must be an object")
        return cls(
            fixed_time=_optional_int(data, "fixed_time"),
            skylight=_flag(data, "has_skylight"),
            ceiling=_flag(data, "has_ceiling"),
            ultrawarm=_flag(data, "ultrawarm"),
            natural=_flag(data, "natural"),
            coordinate_scale=_number(data, "coordinate_scale"),
            beds=_flag(data, "bed_works"),
            respawn_anchors=_flag(data, "respawn_anchor_works"),
            min_y=_int(data, "min_y"),
            height=_int(data, "height"),
            logical_height=_int(data, "logical_height"),
            infiniburn=_string(data, "infiniburn"),
            effects=_string(data, "effects"),
            ambient_light=_number(data, "ambient_light"),
            piglin_safe=_flag(data, "piglin_safe"),
            raids=_flag(data, "has_raids"),
            monster_spawn_light_level=LightLevel.from_json(
                _field(data, "monster_spawn_light_level")
            ),
            monster_spawn_block_light_limit=_int(data, "monster_spawn_block_light_limit"),
        )

    def has_skylight(self) -> bool:
        return self.skylight != 0

    def has_ceiling(self) -> bool:
        return self.ceiling != 0

    def is_ultrawarm(self) -> bool:
        return self.ultrawarm != 0

    def is_natural(self) -> bool:
        return self.natural != 0

    def bed_works(self) -> bool:
        return self.natural != 0

    def respawn_anchor_works(self) -> bool:
        return self.respawn_anchors != 0

    def is_piglin_safe(self) -> bool:
        return self.piglin_safe != 0

    def has_raids(self) -> bool:
        return self.raids != 0


class ElementKind(enum.Enum):
    TRIM_PATTERN = "trim_pattern"
    TRIM_MATERIAL = "trim_material"
    BIOME = "biome"
    CHAT_TYPE = "chat_type"
    DAMAGE_TYPE = "damage_type"
    DIMENSION_TYPE = "dimension_type"
    BANNER_PATTERN = "banner_pattern"
    WOLF_VARIANT = "wolf_variant"
    PAINTING_VARIANT = "painting_variant"


def _check_trim_pattern(data: Mapping[str, Any]) -> None:
    _string(data, "asset_id")
    _string(data, "template_item")
    _field(data, "description")
    _flag(data, "decal")


def _check_trim_material(data: Mapping[str, Any]) -> None:
    _string(data, "asset_name")
    _string(data, "ingredient")
    _number(data, "item_model_index")
    _field(data, "description")


def _check_biome(data: Mapping[str, Any]) -> None:
    _flag(data, "has_precipitation")
    _number(data, "temperature")
    _number(data, "downfall")
    effects = _mapping(data, "effects")
    for key in ("fog_color", "water_color", "water_fog_color", "sky_color"):
        _int(effects, key)
    music = effects.get("music")
    if music is not None:
        if not isinstance(music, Mapping):
            raise ValueError("music must be an object")
        _string(music, "sound")
        _int(music, "min_delay")
        _int(music, "max_delay")
        _flag(music, "replace_current_music")


def _check_decoration(data: Mapping[str, Any], key: str) -> None:
    decoration = _mapping(data, key)
    _string(decoration, "translation_key")
    parameters = _field(decoration, "parameters")
    if not isinstance(parameters, list) or not all(isinstance(p, str) for p in parameters):
        raise ValueError("parameters must be a list of strings")


def _check_chat_type(data: Mapping[str, Any]) -> None:
    _check_decoration(data, "chat")
    _check_decoration(data, "narration")


def _check_damage_type(data: Mapping[str, Any]) -> None:
    _string(data, "scaling")
    _number(data, "exhaustion")
    _string(data, "message_id")


def _check_banner_pattern(data: Mapping[str, Any]) -> None:
    _string(data, "asset_id")
    _string(data, "translation_key")


def _check_wolf_variant(data: Mapping[str, Any]) -> None:
    _string(data, "wild_texture")
    _string(data, "tame_texture")
    _string(data, "angry_texture")
    biomes = _field(data, "biomes")
    if isinstance(biomes, str):
        return
    if not isinstance(biomes, list) or not all(isinstance(b, str) for b in biomes):
        raise ValueError("biomes must be a string or a list of strings")


def _check_painting_variant(data: Mapping[str, Any]) -> None:
    _string(data, "asset_id")
    _int(data, "width")
    _int(data, "height")


_CHECKS: tuple[tuple[ElementKind, Callable[[Mapping[str, Any]], Any]], ...] = (
    (ElementKind.TRIM_PATTERN, _check_trim_pattern),
    (ElementKind.TRIM_MATERIAL, _check_trim_material),
    (ElementKind.BIOME, _check_biome),
    (ElementKind.CHAT_TYPE, _check_chat_type),
    (ElementKind.DAMAGE_TYPE, _check_damage_type),
    (ElementKind.DIMENSION_TYPE, DimensionProperties.from_dict),
    (ElementKind.BANNER_PATTERN, _check_banner_pattern),
    (ElementKind.WOLF_VARIANT, _check_wolf_variant),
    (ElementKind.PAINTING_VARIANT, _check_painting_variant),
)


def classify_element(data: Any) -> ElementKind:
    """Return the first element kind whose shape the data matches."""
    if not isinstance(data, Mapping):
        raise ValueError("a registry element must be a JSON object")
    for kind, check in _CHECKS:
        try:
            check(data)
        except ValueError:
            continue
        return kind
    raise ValueError("data did not match any registry element kind")


@dataclass
class RegistryEntry:
    """One named, numbered element of a registry."""

    name: str
    id: int
    element: dict[str, Any]
    kind: ElementKind

    def dimension_properties(self) -> DimensionProperties:
        if self.kind is not ElementKind.DIMENSION_TYPE:
            raise ValueError(f"{self.name} is not a dimension type")
        return DimensionProperties.from_dict(self.element)


def load_registry(
    root: str | Path, directories: Sequence[str]
) -> dict[str, list[RegistryEntry]]:
    """Load registries from ``root/<directory>/*.json``.

    Files are read in sorted path order and numbered from 0; each entry is
    named ``minecraft:<file stem>`` and each registry ``minecraft:<directory>``.
    """
    registries: dict[str, list[RegistryEntry]] = {}
    for directory in directories:
        files = sorted(p for p in (Path(root) / directory).iterdir() if p.is_file())
        entries = []
        for number, path in enumerate(files):
            with open(path, encoding="utf-8") as handle:
                element = json.load(handle)
            entries.append(
                RegistryEntry(
                    name=f"{_NAMESPACE}:{path.stem}",
                    id=number,
                    element=element,
                    kind=classify_element(element),
                )
            )
        registries[f"{_NAMESPACE}:{directory}"] = entries
    return registries


def sorted_entries(entries: Iterable[RegistryEntry]) -> list[RegistryEntry]:
    """Return the entries ordered by name."""
    return sorted(entries, key=lambda entry: entry.name)