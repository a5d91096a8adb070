from pathlib import Path

import pytest

from zoohabitat import comfort, config
from zoohabitat.exceptions import ConfigError, DuplicateSpeciesError

ZOO_YAML = Path(__file__).resolve().parents[1] / "configs" / "zoo.yaml"


def _describe(evaluator):
    species = [
        (s.name, s.size, s.biomes, s.comfort) for s in evaluator.registry
    ]
    enclosures = [
        (identifier, e.total_size, e.biomes, {s.name: n for s, n in e.occupants.items()})
        for identifier, e in evaluator.enclosures
    ]
    return species, enclosures


def test_yaml_layout_matches_default_config():
    loaded = config.load_config_from_yaml(ZOO_YAML)
    assert _describe(config.build_evaluator(loaded)) == _describe(config.build_evaluator())


def test_default_zoo_contents():
    evaluator = config.build_evaluator()

    assert evaluator.registry.names() == ("LEAO", "LEOPARDO", "CROCODILO", "MACACO", "GAZELA", "HIPOPOTAMO")
    assert evaluator.registry.lookup("HIPOPOTAMO").comfort == comfort.MixesOnlyInBiomes(frozenset({"savana", "rio"}))
    assert [(i, e.total_size, e.free_size()) for i, e in evaluator.enclosures] == [
        (1, 10, 7),
        (2, 5, 5),
        (3, 7, 5),
        (4, 8, 8),
        (5, 9, 6),
    ]


def test_enclosures_share_registry_instances():
    evaluator = config.build_evaluator()
    monkey = evaluator.registry.lookup("MACACO")
    (resident,) = evaluator.enclosure(1).occupants

    assert resident is monkey


def test_each_build_gets_fresh_enclosures():
    first = config.build_evaluator()
    second = config.build_evaluator()
    first.enclosure(2).try_insert(first.registry.lookup("MACACO"), 2)

    assert second.enclosure(2).occupants == {}


def test_missing_yaml_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        config.load_config_from_yaml(tmp_path / "absent.yaml")


def test_empty_yaml_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert config.load_config_from_yaml(path) == {}


@pytest.mark.parametrize("content", ["- just\n- a list\n", "species: [unclosed\n"])
def test_malformed_yaml(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        config.load_config_from_yaml(path)


@pytest.mark.parametrize(
    "entry",
    [
        {"size": 1, "biomes": ["rio"]},
        {"name": "X", "biomes": ["rio"]},
        {"name": "X", "size": 0, "biomes": ["rio"]},
        {"name": "X", "size": True, "biomes": ["rio"]},
        {"name": "X", "size": 1, "biomes": []},
        {"name": "X", "size": 1, "biomes": ["rio"], "comfort": "grumpy"},
    ],
)
def test_invalid_species_entries(entry):
    with pytest.raises(ConfigError):
        config.build_registry([entry])


def test_duplicate_species_entries():
    entry = {"name": "X", "size": 1, "biomes": ["rio"]}
    with pytest.raises(DuplicateSpeciesError):
        config.build_registry([entry, dict(entry)])


def test_species_section_must_be_a_list():
    with pytest.raises(ConfigError):
        config.build_registry({"name": "X"})


@pytest.mark.parametrize(
    "entry",
    [
        {"size": 5, "biomes": ["rio"]},
        {"id": 1, "biomes": ["rio"]},
        {"id": 1, "size": 5},
        {"id": 1, "size": 5, "biomes": ["rio"], "occupants": ["MACACO"]},
        {"id": 1, "size": 5, "biomes": ["rio"], "occupants": {"UNICORNIO": 1}},
        {"id": 1, "size": 5, "biomes": ["rio"], "occupants": {"MACACO": 0}},
        # A lone monkey in the wrong biome is not a valid starting state.
        {"id": 1, "size": 5, "biomes": ["rio"], "occupants": {"MACACO": 1}},
        {"id": 1, "size": 2, "biomes": ["savana"], "occupants": {"MACACO": 3}},
    ],
)
def test_invalid_enclosure_entries(entry):
    registry = config.build_registry(config.DEFAULT_CONFIG["species"])
    with pytest.raises(ConfigError):
        config.build_enclosures([entry], registry)


def test_custom_layout_from_yaml(tmp_path):
    path = tmp_path / "pond.yaml"
    path.write_text(
        "species:\n"
        "  - {name: PATO, size: 1, biomes: [lago], comfort: social}\n"
        "enclosures:\n"
        "  - {id: 9, size: 4, biomes: [lago]}\n"
    )
    evaluator = config.build_evaluator(config.load_config_from_yaml(path))

    assert evaluator.evaluate("PATO", 1).error is not None
    assert evaluator.evaluate("PATO", 3).viable_enclosures == ("Enclosure 9 (free space: 1 total: 4)",)
