"""DungeonForge CLI entry point.

Generates a seeded dungeon and prints a summary banner (or the full JSON
bundle). Accepts configuration via flags and environment variables, with
optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from dungeonforge import __version__, generate, summarize
from dungeonforge.config import BIOMES, CORRIDOR_WIDTHS, DIFFICULTIES, env_flag, random_seed
from dungeonforge.errors import InvalidParameter
from dungeonforge.logging_utils import log, log_to_stderr, set_level

_color_init()

# env var -> GenerationParams field
ENV_INT_FIELDS = {
    "DUNGEON_WIDTH": "width",
    "DUNGEON_HEIGHT": "height",
    "DUNGEON_ROOMS": "room_count",
    "DUNGEON_CORRIDOR_WIDTH": "corridor_width",
}


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    DungeonForge dungeon generator

    Build a reproducible dungeon (rooms, corridors, doors, encounters, NPCs and
    loot) from a seed string. Configuration can be provided via CLI flags or
    environment variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          DUNGEON_SEED             Seed string (default: random)
          DUNGEON_WIDTH            Grid width, 10-50 (default: 20)
          DUNGEON_HEIGHT           Grid height, 10-50 (default: 20)
          DUNGEON_ROOMS            Requested room count, 3-20 (default: 8)
          DUNGEON_CORRIDOR_WIDTH   Corridor width, 1-3 (default: 1)
          DUNGEON_DIFFICULTY       easy|medium|hard|deadly (default: medium)
          DUNGEON_BIOME            dungeon|cave|forest|crypt|temple|tower (default: dungeon)
          DUNGEON_ENABLE_AI        Generate NPCs when truthy (default: 1)

        Examples:
          # Generate with a fixed seed
          python run.py generate --seed test1

          # A larger deadly crypt, no NPCs
          python run.py generate --seed crypt-7 --width 40 --height 40 --rooms 12 --difficulty deadly --biome crypt --no-ai

          # Dump the full bundle as JSON
          python run.py generate --seed test1 --json > dungeon.json

          # Load variables from .env then generate
          python run.py --env-file .env generate
        """
    )

    parser = argparse.ArgumentParser(
        prog="DungeonForge",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"DungeonForge {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a dungeon and print a summary",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a seeded dungeon bundle",
    )
    gen_parser.add_argument("--seed", default=None, help="Seed string (default: env DUNGEON_SEED or random)")
    gen_parser.add_argument("--width", type=int, default=None, help="Grid width (default: env DUNGEON_WIDTH or 20)")
    gen_parser.add_argument("--height", type=int, default=None, help="Grid height (default: env DUNGEON_HEIGHT or 20)")
    gen_parser.add_argument(
        "--rooms",
        dest="room_count",
        type=int,
        default=None,
        help="Requested room count (default: env DUNGEON_ROOMS or 8)",
    )
    gen_parser.add_argument(
        "--corridor-width",
        dest="corridor_width",
        type=int,
        choices=CORRIDOR_WIDTHS,
        default=None,
        help="Corridor width (default: env DUNGEON_CORRIDOR_WIDTH or 1)",
    )
    gen_parser.add_argument("--difficulty", choices=DIFFICULTIES, default=None, help="Encounter/loot difficulty")
    gen_parser.add_argument("--biome", choices=BIOMES, default=None, help="Biome theme")
    gen_parser.add_argument("--no-ai", dest="no_ai", action="store_true", help="Skip NPC generation")
    gen_parser.add_argument("--json", dest="as_json", action="store_true", help="Print the full bundle as JSON")
    gen_parser.add_argument("--verbose", action="store_true", help="Emit debug log lines for each phase")
    gen_parser.set_defaults(command="generate")

    args = parser.parse_args(argv)
    # If no subcommand provided, default to generate
    if args.command is None:
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def resolve_params(args: argparse.Namespace) -> dict:
    """Merge CLI flags over DUNGEON_* env vars over defaults."""
    params = {"seed": args.seed or os.getenv("DUNGEON_SEED") or random_seed()}
    for env_key, name in ENV_INT_FIELDS.items():
        cli_value = getattr(args, name, None)
        if cli_value is not None:
            params[name] = cli_value
        elif os.getenv(env_key):
            raw = os.getenv(env_key)
            try:
                params[name] = int(raw)
            except ValueError:
                raise InvalidParameter(name, f"{env_key}={raw!r} is not an integer", "type") from None
    difficulty = args.difficulty or os.getenv("DUNGEON_DIFFICULTY")
    if difficulty:
        params["difficulty"] = difficulty
    biome = args.biome or os.getenv("DUNGEON_BIOME")
    if biome:
        params["biome"] = biome
    params["enable_ai"] = False if args.no_ai else env_flag("DUNGEON_ENABLE_AI", True)
    return params


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    if getattr(args, "verbose", False):
        set_level("debug")
    log_to_stderr(getattr(args, "as_json", False))

    color = sys.stdout.isatty()

    try:
        params = resolve_params(args)
        bundle = generate(params)
    except InvalidParameter as e:
        for err in e.errors:
            msg = f"[ERROR] {err['field']}: {err['error']}"
            print(f"{Fore.RED}{msg}{Style.RESET_ALL}" if color else msg, file=sys.stderr)
        log.error(event="invalid_parameters", field=e.field, code=e.code, count=len(e.errors))
        return 2

    if getattr(args, "as_json", False):
        print(json.dumps(bundle.to_dict(), ensure_ascii=False, indent=2))
        return 0

    stats = summarize(bundle)
    p = bundle.params

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}DungeonForge {__version__}{Style.RESET_ALL}"
        if color
        else f"DungeonForge {__version__}"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val: str | int | float) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    short = "" if stats.rooms == p.room_count else f" (requested {p.room_count})"
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Seed:'):14} {value(p.seed)}",
        f"  {label('Size:'):14} {value(f'{p.width}x{p.height}')}",
        f"  {label('Biome:'):14} {value(p.biome)}",
        f"  {label('Difficulty:'):14} {value(p.difficulty)}",
        f"  {label('Rooms:'):14} {value(f'{stats.rooms}{short}')}",
        f"  {label('Corridors:'):14} {value(stats.corridors)}",
        f"  {label('Doors:'):14} {value(stats.doors)}",
        f"  {label('Coverage:'):14} {value(f'{stats.coverage:.1%}')}",
        f"  {label('Encounters:'):14} {value(f'{stats.encounters} ({stats.creatures} creatures)')}",
        f"  {label('NPCs:'):14} {value(stats.npcs if p.enable_ai else 'disabled')}",
        f"  {label('Loot:'):14} {value(f'{stats.loot_items} items / {stats.loot_value_gp} gp')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
