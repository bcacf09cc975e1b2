"""Main CLI entry point for managing Agent of Empires sounds.

Usage:
    aoe-sounds install                 # Install bundled CC0 sounds
    aoe-sounds install --force         # Reinstall, overwriting existing files
    aoe-sounds list                    # List installed sounds (alias: ls)
    aoe-sounds test <name>             # Play a sound
    aoe-sounds resolve <state>         # Show which file plays for a state
    aoe-sounds path                    # Show the sounds directory
    aoe-sounds credits                 # Show attribution and license

Customizing:
    Drop a .wav or .ogg file named after a sound (e.g. waiting.wav) into the
    sounds directory. A .wav wins over an .ogg of the same name, and both win
    over the bundled copy.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()


def _build_library(args: argparse.Namespace):
    """Create a SoundLibrary honoring --sounds-dir and the config file."""
    from ..sound.library import SoundLibrary

    sounds_dir = Path(args.sounds_dir).expanduser() if args.sounds_dir else None
    if sounds_dir is None and args.config_obj is not None:
        sounds_dir = args.config_obj.sound.get_sounds_dir()
    return SoundLibrary(sounds_dir)


def cmd_install(args: argparse.Namespace) -> int:
    """Install the bundled sound effects."""
    from ..sound.errors import SoundError

    try:
        library = _build_library(args)
        report = library.install_bundled(force=args.force)
    except (SoundError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Installed bundled CC0 sounds to:")
    print(f"  {report.target_dir}\n")

    if report.installed:
        print(f"Installed {len(report.installed)} sound(s):")
        for name in report.installed:
            print(f"  - {name}")
    if report.skipped:
        print(f"\nKept {len(report.skipped)} existing sound(s) (use --force to overwrite):")
        for name in report.skipped:
            print(f"  - {name}")

    print("\nNext steps:")
    print("  1. Enable sounds in your config (sound.enabled: true)")
    print("  2. Map session states to sounds under sound.transitions")
    print("  3. Try one out: aoe-sounds test waiting")
    print("\nTo customize, copy your own .wav or .ogg files to:")
    print(f"  {report.target_dir}")

    print("\nWant Age of Empires II sounds instead?")
    print("  If you own AoE II, copy the taunt .wav files from:")
    print("    (AoE II dir)/resources/_common/sound/taunt/")
    print("    or (AoE II dir)/Sound/taunt/")
    print(f"  to {report.target_dir}")
    print("  Name a file after a sound (e.g. waiting.wav) to replace it,")
    print("  or map it to a state under sound.transitions in your config.")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List installed sounds."""
    from ..sound.errors import SoundError
    from ..sound.manifest import get_asset

    try:
        library = _build_library(args)
    except SoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sounds = library.list_sounds()
    if not sounds:
        print("No sounds installed yet.")
        print("\nRun 'aoe-sounds install' to get started.")
        return 0

    table = Table(title="Installed sounds")
    table.add_column("Name", style="bold")
    table.add_column("Role")
    table.add_column("Source")
    table.add_column("Path", overflow="fold")

    for name in sounds:
        asset = get_asset(name)
        if asset is None:
            role = "custom"
        elif asset.role is not None:
            role = asset.role.value
        else:
            role = "additional"
        path = library.find_sound(name)
        source = library.sound_source(name) or ""
        table.add_row(name, role, source, str(path) if path else "")

    console.print(table)
    print(f"\nTotal: {len(sounds)} sounds")
    print(f"Location: {library.sounds_dir}")

    missing = library.get_missing_sounds()
    if missing:
        print(f"\n{len(missing)} bundled sound(s) not installed: {', '.join(missing)}")
        print("Run: aoe-sounds install")

    print("\nTest a sound: aoe-sounds test <name>")
    return 0


def cmd_test(args: argparse.Namespace) -> int:
    """Play a single sound."""
    from ..sound.errors import SoundError, SoundNotFoundError
    from ..sound.player import play_sound

    try:
        library = _build_library(args)
    except SoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Playing '{args.name}'...")
    try:
        play_sound(args.name, library=library)
    except SoundNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.available:
            print("\nAvailable sounds:")
            for name in e.available:
                print(f"  - {name}")
        return 1
    except (SoundError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("  (If you don't hear anything, check your audio settings)")
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    """Show which file plays for a session state."""
    from ..sound.errors import SoundError
    from ..sound.manifest import parse_state

    try:
        state = parse_state(args.state)
        library = _build_library(args)
    except SoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = args.config_obj
    if config is not None and config.sound.enabled:
        name = config.sound.sound_for(state)
        if name is None:
            print(f"{state.value}: muted")
            return 0
    else:
        from ..sound.manifest import default_sound_name

        name = default_sound_name(state)

    try:
        path = library.find_sound(name)
    except SoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if path is None:
        print(f"Error: no file found for sound '{name}' ({state.value})", file=sys.stderr)
        return 1

    print(f"{state.value}: {name} -> {path} ({library.sound_source(name)})")
    return 0


def cmd_path(args: argparse.Namespace) -> int:
    """Print the sounds directory."""
    from ..sound.errors import SoundError
    from ..sound.paths import get_sounds_dir

    try:
        if args.platform:
            sounds_dir = get_sounds_dir(platform=args.platform)
        else:
            sounds_dir = _build_library(args).sounds_dir
    except SoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(sounds_dir)
    return 0


def cmd_credits(args: argparse.Namespace) -> int:
    """Print attribution for the bundled sounds."""
    from ..sound.manifest import ATTRIBUTION, DEFAULT_SOUNDS, ADDITIONAL_SOUNDS

    print(f"Sounds: \"{ATTRIBUTION['title']}\" by {ATTRIBUTION['author']}")
    print(f"Source: {ATTRIBUTION['source']}")
    print(f"License: {ATTRIBUTION['license']} ({ATTRIBUTION['license_url']})")
    print()

    table = Table(title="Bundled sounds")
    table.add_column("File", style="bold")
    table.add_column("State")
    table.add_column("Description")
    for asset in [*DEFAULT_SOUNDS.values(), *ADDITIONAL_SOUNDS]:
        table.add_row(asset.filename, asset.role.value if asset.role else "-", asset.description)
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="aoe-sounds",
        description="Agent of Empires sound manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        help="Path to config.yaml (default: ./config.yaml, then the app config dir)",
    )
    parser.add_argument(
        "--sounds-dir",
        help="Sounds directory to use instead of the platform default",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # install command
    install_parser = subparsers.add_parser("install", help="Install bundled sound effects")
    install_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite sounds that already exist",
    )
    install_parser.set_defaults(func=cmd_install)

    # list command
    list_parser = subparsers.add_parser("list", aliases=["ls"], help="List installed sounds")
    list_parser.set_defaults(func=cmd_list)

    # test command
    test_parser = subparsers.add_parser("test", help="Test a sound by playing it")
    test_parser.add_argument("name", help="Sound name (without extension)")
    test_parser.set_defaults(func=cmd_test)

    # resolve command
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Show which file plays for a session state",
    )
    resolve_parser.add_argument(
        "state",
        help="Session state (start, running, waiting, idle, error)",
    )
    resolve_parser.set_defaults(func=cmd_resolve)

    # path command
    path_parser = subparsers.add_parser("path", help="Show the sounds directory")
    path_parser.add_argument(
        "--platform",
        choices=["linux", "darwin", "win32"],
        help="Show the directory for another platform",
    )
    path_parser.set_defaults(func=cmd_path)

    # credits command
    credits_parser = subparsers.add_parser("credits", help="Show sound attribution")
    credits_parser.set_defaults(func=cmd_credits)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import yaml
    from pydantic import ValidationError

    from ..config import load_config

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        args.config_obj = load_config(args.config)
    except (ValidationError, yaml.YAMLError, OSError) as e:
        print(f"Error: invalid config: {e}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else args.config_obj.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
