import json

import pytest

from craftproto.registry import (
    DimensionProperties,
    ElementKind,
    LightLevel,
    RegistryEntry,
    Uniform,
    byte_from_bool,
    classify_element,
    load_registry,
    sorted_entries,
)

OVERWORLD = {
    "ultrawarm": False,
    "natural": True,
    "coordinate_scale": 1.0,
    "has_skylight": True,
    "has_ceiling": False,
    "ambient_light": 0.0,
    "bed_works": True,
    "respawn_anchor_works": False,
    "min_y": -64,
    "height": 384,
    "logical_height": 384,
    "infiniburn": "#minecraft:infiniburn_overworld",
    "effects": "minecraft:overworld",
    "piglin_safe": False,
    "has_raids": True,
    "monster_spawn_light_level": {
        "type": "minecraft:uniform",
        "max_inclusive": 7,
        "min_inclusive": 0,
    },
    "monster_spawn_block_light_limit": 0,
}

NETHER = {
    "ultrawarm": True,
    "natural": False,
    "coordinate_scale": 8.0,
    "has_skylight": False,
    "has_ceiling": True,
    "ambient_light": 0.1,
    "fixed_time": 18000,
    "bed_works": False,
    "respawn_anchor_works": True,
    "min_y": 0,
    "height": 256,
    "logical_height": 128,
    "infiniburn": "#minecraft:infiniburn_nether",
    "effects": "minecraft:the_nether",
    "piglin_safe": True,
    "has_raids": False,
    "monster_spawn_light_level": 7,
    "monster_spawn_block_light_limit": 15,
}

TRIM_PATTERN = {
    "asset_id": "minecraft:coast",
    "template_item": "minecraft:coast_armor_trim_smithing_template",
    "description": {"translate": "trim_pattern.minecraft.coast"},
    "decal": False,
}

BANNER_PATTERN = {"asset_id": "minecraft:base", "translation_key": "block.minecraft.banner.base"}

PAINTING = {"asset_id": "minecraft:kebab", "width": 1, "height": 1}

DAMAGE = {"scaling": "never", "exhaustion": 0.1, "message_id": "arrow"}

WOLF = {
    "wild_texture": "minecraft:entity/wolf/wolf",
    "tame_texture": "minecraft:entity/wolf/wolf_tame",
    "angry_texture": "minecraft:entity/wolf/wolf_angry",
    "biomes": "minecraft:taiga",
}

CHAT = {
    "chat": {"translation_key": "chat.type.text", "parameters": ["sender", "content"]},
    "narration": {"translation_key": "chat.type.text.narrate", "parameters": ["sender", "content"]},
}

BIOME = {
    "has_precipitation": True,
    "temperature": 0.8,
    "downfall": 0.4,
    "effects": {
        "fog_color": 12638463,
        "water_color": 4159204,
        "water_fog_color": 329011,
        "sky_color": 7907327,
        "music": {
            "sound": "minecraft:music.overworld.forest",
            "min_delay": 12000,
            "max_delay": 24000,
            "replace_current_music": False,
        },
    },
}

TRIM_MATERIAL = {
    "asset_name": "amethyst",
    "ingredient": "minecraft:amethyst_shard",
    "item_model_index": 1.0,
    "description": {"translate": "trim_material.minecraft.amethyst"},
}


@pytest.mark.parametrize("value, expected", [(True, 1), (False, 0), (5, 5), (-128, -128)])
def test_byte_from_bool(value, expected):
    assert byte_from_bool(value) == expected


@pytest.mark.parametrize("value", [200, "true", None, 1.0])
def test_byte_from_bool_rejects(value):
    with pytest.raises(ValueError):
        byte_from_bool(value)


def test_light_level_fixed():
    assert LightLevel.from_json(7) == LightLevel(fixed=7)


def test_light_level_distribution():
    level = LightLevel.from_json(OVERWORLD["monster_spawn_light_level"])
    assert level.fixed is None
    assert level.distribution_type == "minecraft:uniform"
    assert level.distribution == Uniform(0, 7)


def test_light_level_rejects_bool():
    with pytest.raises(ValueError):
        LightLevel.from_json(True)


def test_overworld_properties():
    props = DimensionProperties.from_dict(OVERWORLD)
    assert props.has_skylight() is True
    assert props.has_ceiling() is False
    assert props.is_ultrawarm() is False
    assert props.is_natural() is True
    assert props.respawn_anchor_works() is False
    assert props.is_piglin_safe() is False
    assert props.has_raids() is True
    assert props.fixed_time is None
    assert props.min_y == -64
    assert props.height == 384
    assert props.coordinate_scale == 1.0


def test_nether_properties():
    props = DimensionProperties.from_dict(NETHER)
    assert props.fixed_time == 18000
    assert props.is_ultrawarm() is True
    assert props.bed_works() is False
    assert props.respawn_anchor_works() is True
    assert props.has_ceiling() is True
    assert props.monster_spawn_light_level == LightLevel(fixed=7)
    assert props.logical_height == 128


def test_dimension_missing_field():
    data = dict(OVERWORLD)
    del data["min_y"]
    with pytest.raises(ValueError):
        DimensionProperties.from_dict(data)


@pytest.mark.parametrize(
    "data, kind",
    [
        (TRIM_PATTERN, ElementKind.TRIM_PATTERN),
        (TRIM_MATERIAL, ElementKind.TRIM_MATERIAL),
        (BIOME, ElementKind.BIOME),
        (CHAT, ElementKind.CHAT_TYPE),
        (DAMAGE, ElementKind.DAMAGE_TYPE),
        (OVERWORLD, ElementKind.DIMENSION_TYPE),
        (NETHER, ElementKind.DIMENSION_TYPE),
        (BANNER_PATTERN, ElementKind.BANNER_PATTERN),
        (WOLF, ElementKind.WOLF_VARIANT),
        (PAINTING, ElementKind.PAINTING_VARIANT),
    ],
)
def test_classify_element(data, kind):
    assert classify_element(data) is kind


def test_classify_first_match_wins():
    data = dict(TRIM_PATTERN, translation_key="x")
    assert classify_element(data) is ElementKind.TRIM_PATTERN


def test_classify_falls_through_on_bad_type():
    data = dict(TRIM_PATTERN, decal="yes", translation_key="x")
    assert classify_element(data) is ElementKind.BANNER_PATTERN


def test_classify_wolf_biome_list():
    assert classify_element(dict(WOLF, biomes=["a", "b"])) is ElementKind.WOLF_VARIANT


def test_classify_unknown():
    with pytest.raises(ValueError):
        classify_element({"something": 1})


def test_classify_not_object():
    with pytest.raises(ValueError):
        classify_element([1, 2])


def test_dimension_properties_wrong_kind():
    entry = RegistryEntry("minecraft:base", 0, BANNER_PATTERN, ElementKind.BANNER_PATTERN)
    with pytest.raises(ValueError):
        entry.dimension_properties()


def test_dimension_properties_from_entry():
    entry = RegistryEntry("minecraft:overworld", 0, OVERWORLD, ElementKind.DIMENSION_TYPE)
    assert entry.dimension_properties().effects == "minecraft:overworld"


def _write(directory, name, data):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")


def test_construct_registry(tmp_path):
    _write(tmp_path / "dimension_type", "the_nether", NETHER)
    _write(tmp_path / "dimension_type", "overworld", OVERWORLD)
    _write(tmp_path / "banner_pattern", "base", BANNER_PATTERN)
    (tmp_path / "banner_pattern" / "nested").mkdir()

    registries = load_registry(tmp_path, ["dimension_type", "banner_pattern"])

    assert set(registries) == {"minecraft:dimension_type", "minecraft:banner_pattern"}
    dims = registries["minecraft:dimension_type"]
    assert [(e.name, e.id) for e in dims] == [
        ("minecraft:overworld", 0),
        ("minecraft:the_nether", 1),
    ]
    assert all(e.kind is ElementKind.DIMENSION_TYPE for e in dims)
    banners = registries["minecraft:banner_pattern"]
    assert len(banners) == 1
    assert banners[0].kind is ElementKind.BANNER_PATTERN


def test_load_registry_bad_element(tmp_path):
    _write(tmp_path / "weird", "thing", {"nope": True})
    with pytest.raises(ValueError):
        load_registry(tmp_path, ["weird"])


def test_sorted_entries():
    entries = [
        RegistryEntry("minecraft:b", 0, PAINTING, ElementKind.PAINTING_VARIANT),
        RegistryEntry("minecraft:c", 1, PAINTING, ElementKind.PAINTING_VARIANT),
        RegistryEntry("minecraft:a", 2, PAINTING, ElementKind.PAINTING_VARIANT),
    ]
    result = sorted_entries(entries)
    assert [e.name for e in result] == ["minecraft:a", "minecraft:b", "minecraft:c"]
    assert [e.id for e in result] == [2, 0, 1]