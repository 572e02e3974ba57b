import importlib
import json
import sys

import pytest


@pytest.fixture()
def run_module():
    # Ensure a clean import each time
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch, tmp_path):
    # Keep a developer .env in the repo root from leaking into CLI runs
    monkeypatch.chdir(tmp_path)


def test_version_flag_outputs_version(run_module, capsys):
    ver = run_module.__version__
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert ver in out
    assert "DungeonForge" in out


def test_default_command_is_generate(run_module):
    assert run_module.parse_args([]).command == "generate"
    ns = run_module.parse_args(["--env-file", "x.env"])
    assert ns.command == "generate" and ns.env_file == "x.env"


def test_generate_prints_banner(run_module, capsys):
    code = run_module.main(["generate", "--seed", "test1", "--rooms", "5"])
    assert code == 0
    out = capsys.readouterr().out
    assert "test1" in out
    assert "Rooms:" in out and "4 (requested 5)" in out
    assert "Encounters:" in out


def test_json_output_is_bundle(run_module, capsys):
    code = run_module.main(["generate", "--seed", "test1", "--rooms", "5", "--json"])
    assert code == 0
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["metadata"]["seed"] == "test1"
    assert data["metadata"]["parameters"]["roomCount"] == 5
    assert len(data["rooms"]) == 4


def test_invalid_params_exit_2(run_module, capsys):
    code = run_module.main(["generate", "--seed", "x", "--width", "5", "--rooms", "40"])
    assert code == 2
    err = capsys.readouterr().err
    assert "width" in err and "room_count" in err


def test_env_overrides_defaults_flags_override_env(run_module, monkeypatch):
    monkeypatch.setenv("DUNGEON_SEED", "from-env")
    monkeypatch.setenv("DUNGEON_WIDTH", "30")
    monkeypatch.setenv("DUNGEON_BIOME", "cave")
    monkeypatch.setenv("DUNGEON_ENABLE_AI", "0")
    args = run_module.parse_args(["generate", "--width", "40"])
    params = run_module.resolve_params(args)
    assert params["seed"] == "from-env"
    assert params["width"] == 40
    assert params["biome"] == "cave"
    assert params["enable_ai"] is False


def test_bad_env_int_exits_2(run_module, monkeypatch):
    monkeypatch.setenv("DUNGEON_ROOMS", "many")
    assert run_module.main(["generate", "--seed", "x"]) == 2


def test_missing_seed_gets_random_one(run_module):
    params = run_module.resolve_params(run_module.parse_args(["generate"]))
    assert len(params["seed"]) == 11


def test_env_file_argument(run_module, tmp_path, capsys, monkeypatch):
    env_file = tmp_path / "custom.env"
    env_file.write_text("DUNGEON_SEED=from-file\nDUNGEON_BIOME=tower\n")
    # load_dotenv writes into os.environ; register the keys so monkeypatch restores them
    monkeypatch.setenv("DUNGEON_SEED", "")
    monkeypatch.delenv("DUNGEON_SEED")
    monkeypatch.setenv("DUNGEON_BIOME", "")
    monkeypatch.delenv("DUNGEON_BIOME")
    code = run_module.main(["--env-file", str(env_file), "generate", "--json"])
    assert code == 0
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["metadata"]["seed"] == "from-file"
    assert data["biome"] == "tower"


def test_no_ai_flag(run_module, capsys):
    run_module.main(["generate", "--seed", "test1", "--no-ai", "--json"])
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["npcs"] == []
    assert data["metadata"]["parameters"]["enableAI"] is False
