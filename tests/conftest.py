import os
import sys

import pytest

# Ensure repository root importable early (run.py lives there)
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from dungeonforge import GenerationParams, GeneratorSettings, generate  # noqa: E402
from dungeonforge.dungeon import generate_dungeon  # noqa: E402

GOLDEN_PARAMS = {
    "seed": "test1",
    "width": 20,
    "height": 20,
    "roomCount": 5,
    "corridorWidth": 1,
    "difficulty": "medium",
    "biome": "dungeon",
    "enableAI": True,
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # DUNGEON_* / DUNGEONFORGE_* from the developer shell must not leak into tests
    for key in list(os.environ):
        if key.startswith("DUNGEON_") or key.startswith("DUNGEONFORGE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def settings():
    return GeneratorSettings(enable_metrics=True)


@pytest.fixture()
def golden_bundle():
    return generate(dict(GOLDEN_PARAMS))


@pytest.fixture()
def make_dungeon(settings):
    def _make(seed="test1", **overrides):
        params = GenerationParams(seed=seed, **overrides).validate()
        return generate_dungeon(params, settings)

    return _make
