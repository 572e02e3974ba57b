import pytest

from dungeonforge import GenerationParams, InvalidParameter, generate
from dungeonforge.config import GeneratorSettings, coerce_params, random_seed


def test_defaults():
    p = GenerationParams(seed="x")
    assert (p.width, p.height, p.room_count, p.corridor_width) == (20, 20, 8, 1)
    assert (p.difficulty, p.biome, p.enable_ai) == ("medium", "dungeon", True)
    assert p.validate() is p


def test_from_mapping_accepts_camel_and_snake_case():
    p = GenerationParams.from_mapping({"seed": "s", "roomCount": 4, "corridor_width": 2, "enableAI": False, "junk": 1})
    assert p.room_count == 4
    assert p.corridor_width == 2
    assert p.enable_ai is False


def test_to_dict_round_trips_through_from_mapping():
    p = GenerationParams(seed="s", width=30, room_count=12, biome="crypt")
    assert GenerationParams.from_mapping(p.to_dict()) == p
    assert list(p.to_dict()) == [
        "seed", "width", "height", "roomCount", "corridorWidth", "difficulty", "biome", "enableAI",
    ]


def test_missing_seed():
    with pytest.raises(InvalidParameter) as exc:
        GenerationParams.from_mapping({"width": 20})
    assert exc.value.field == "seed"
    assert exc.value.code == "required"


def test_non_mapping_rejected():
    with pytest.raises(InvalidParameter) as exc:
        coerce_params(["seed"])
    assert exc.value.field == "__root__"


@pytest.mark.parametrize(
    "overrides,field,code",
    [
        ({"seed": ""}, "seed", "empty"),
        ({"seed": "   "}, "seed", "empty"),
        ({"seed": 5}, "seed", "type"),
        ({"width": 9}, "width", "range"),
        ({"width": 51}, "width", "range"),
        ({"height": 60}, "height", "range"),
        ({"width": 20.0}, "width", "type"),
        ({"width": True}, "width", "type"),
        ({"room_count": 2}, "room_count", "range"),
        ({"room_count": 21}, "room_count", "range"),
        ({"corridor_width": 4}, "corridor_width", "choice"),
        ({"corridor_width": True}, "corridor_width", "choice"),
        ({"difficulty": "nightmare"}, "difficulty", "choice"),
        ({"biome": "swamp"}, "biome", "choice"),
        ({"enable_ai": "yes"}, "enable_ai", "type"),
    ],
)
def test_single_violation(overrides, field, code):
    kwargs = {"seed": "ok", **overrides}
    with pytest.raises(InvalidParameter) as exc:
        GenerationParams(**kwargs).validate()
    assert exc.value.field == field
    assert exc.value.code == code
    assert isinstance(exc.value, ValueError)


def test_all_violations_collected():
    p = GenerationParams(seed="", width=5, height=99, room_count=0, corridor_width=9, difficulty="x", biome="y")
    with pytest.raises(InvalidParameter) as exc:
        p.validate()
    fields = [e["field"] for e in exc.value.errors]
    assert fields == ["seed", "width", "height", "room_count", "corridor_width", "difficulty", "biome"]
    assert exc.value.field == "seed"
    d = exc.value.to_dict()
    assert d["field"] == "seed" and len(d["errors"]) == 7


@pytest.mark.parametrize("lo_hi", [("width", 10), ("width", 50), ("height", 10), ("height", 50), ("room_count", 3), ("room_count", 20)])
def test_range_edges_accepted(lo_hi):
    name, value = lo_hi
    GenerationParams(seed="edge", **{name: value}).validate()


def test_generate_validates_before_work(monkeypatch):
    import dungeonforge.compose as compose

    def boom(*a, **k):
        raise AssertionError("pipeline should not run")

    monkeypatch.setattr(compose, "generate_dungeon", boom)
    with pytest.raises(InvalidParameter):
        generate({"seed": "x", "width": 5})


def test_random_seed_shape():
    s = random_seed()
    assert len(s) == 11
    assert s.isalnum() and s == s.lower()
    assert random_seed(4) != "" and len(random_seed(4)) == 4


@pytest.mark.parametrize("raw,expected", [("1", True), ("true", True), ("0", False), ("off", False), ("no", False)])
def test_settings_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("DUNGEONFORGE_ENABLE_METRICS", raw)
    assert GeneratorSettings.from_env().enable_metrics is expected


def test_settings_default_on():
    assert GeneratorSettings.from_env().enable_metrics is True
