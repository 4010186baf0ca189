"""palette-lab — Perceptually graded tints and shades from a small palette config.

Usage: palette-lab <command> [options]

Commands:
  build   Compute the palette and write every generator's output file.
  show    Print computed colours as text (or JSON).
  check   Report tint/shade ramps that cannot reach their limit.
  init    Write a starter .palette-lab.json.
  help    Print full docs for a generator.

Generators are auto-discovered from palette_lab/generators/.
Each generator module's docstring is its documentation.

Config lookup:
  --config PATH wins, then the PALETTE_LAB_CONFIG environment variable, then
  .palette-lab.json walking up from the current directory, stopping at the
  nearest .git boundary. Without a config file the built-in palette is used.
"""

import argparse
import sys
from pathlib import Path

from palette_lab import registry
from palette_lab.core.assembler import build_palette
from palette_lab.core.config import CONFIG_FILENAME, LoadedConfig, load_config, write_user_config
from palette_lab.core.report import format_json, format_text
from palette_lab.core.types import PaletteColor, PaletteError
from palette_lab.core.writer import write_file


def _build_parser() -> argparse.ArgumentParser:
    generators = registry.all_generators()

    epilog = (
        'Examples:\n'
        '  palette-lab build\n'
        '  palette-lab build --only scss --config ./design/.palette-lab.json\n'
        '  palette-lab show primary secondary\n'
        '  palette-lab show --json\n'
        '  palette-lab check\n'
        '  palette-lab init\n'
        '  palette-lab help scss\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-lab',
        description='Perceptually graded tints and shades from a small palette config.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    build = sub.add_parser('build', help='Compute the palette and write generator outputs')
    build.add_argument('-c', '--config', metavar='PATH', help='Path to config file')
    build.add_argument(
        '-o',
        '--only',
        nargs='+',
        choices=sorted(generators),
        help='Run only these generators (default: all)',
    )
    build.add_argument('-d', '--out-dir', metavar='DIR', help='Write outputs here instead of the configured paths')

    show = sub.add_parser('show', help='Print computed colours')
    show.add_argument('colors', nargs='*', help='Colour names (default: all)')
    show.add_argument('-c', '--config', metavar='PATH', help='Path to config file')
    show.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    check = sub.add_parser('check', help='Report ramps that cannot reach their limit')
    check.add_argument('-c', '--config', metavar='PATH', help='Path to config file')

    init = sub.add_parser('init', help=f'Write a starter {CONFIG_FILENAME}')
    init.add_argument('path', nargs='?', default=CONFIG_FILENAME, help='Where to write it')

    help_parser = sub.add_parser('help', help='Print full docs for a generator')
    help_parser.add_argument('generator', nargs='?', help='Generator name')

    return parser


def _print_help(name: str | None) -> None:
    """Print full module docstring for a generator."""
    generators = registry.all_generators()

    if name is None:
        print('Available generators:\n')
        for gen_name, gen in sorted(generators.items()):
            print(f'  {gen_name:<10} {gen.help}')
        print('\nRun: palette-lab help <generator> for full docs.')
        return

    if name not in generators:
        print(f'Unknown generator: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(generators))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(name).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _load(config_file: str | None) -> LoadedConfig:
    try:
        loaded = load_config(config_file)
    except PaletteError as e:
        # Only the built-in palette can get here; user palette errors fall back to defaults
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    if loaded.path:
        print(f'palette-lab: loaded {loaded.path}', file=sys.stderr)
    return loaded


def _output_path(config: dict, config_key: str, out_dir: str | None) -> Path:
    path = Path(config[config_key])
    if out_dir:
        return Path(out_dir) / path.name
    return path


def _build(args: argparse.Namespace) -> None:
    loaded = _load(args.config)
    colors = build_palette(loaded.palette)

    names = args.only or sorted(registry.all_generators())
    for name in names:
        gen = registry.get(name)
        if gen.config_key is None or not loaded.config.get(gen.config_key):
            print(f'palette-lab: skipping {name}, no output path configured', file=sys.stderr)
            continue
        path = write_file(_output_path(loaded.config, gen.config_key, args.out_dir), gen.execute(colors, loaded.config))
        print(f'palette-lab: wrote {path}', file=sys.stderr)


def _show(args: argparse.Namespace) -> None:
    loaded = _load(args.config)
    unknown = [name for name in args.colors if name not in loaded.palette]
    if unknown:
        print(f'Error: unknown colour(s): {", ".join(unknown)}', file=sys.stderr)
        print(f'Available: {", ".join(loaded.palette)}', file=sys.stderr)
        sys.exit(1)

    colors = build_palette(loaded.palette, only=args.colors or None)
    if args.json:
        print(format_json(colors))
    else:
        print(format_text(colors, config_path=str(loaded.path) if loaded.path else None))


def infeasible_ramps(colors: dict[str, PaletteColor]) -> list[tuple[str, str, float]]:
    """(colour, 'tints'/'shades', max) for every ramp whose limit cannot be reached."""
    found = []
    for name, color in colors.items():
        for kind, ramp in (('tints', color.tints), ('shades', color.shades)):
            if ramp.levels > 0 and ramp.adjustment is None:
                found.append((name, kind, ramp.max))
    return found


def _check(args: argparse.Namespace) -> None:
    loaded = _load(args.config)
    failures = infeasible_ramps(build_palette(loaded.palette))
    if failures:
        print(f'FAIL: {len(failures)} ramp(s) cannot reach their limit:')
        for name, kind, limit in failures:
            print(f'  {name} {kind}: max {limit:g}')
        sys.exit(1)
    print(f'OK: {len(loaded.palette)} colours')


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.generator)
        return

    if args.command == 'init':
        try:
            path = write_user_config(args.path)
        except FileExistsError:
            print(f'palette-lab: "{args.path}" already exists.', file=sys.stderr)
            return
        print(f'palette-lab: user config file has been created: "{path}".', file=sys.stderr)
        return

    commands = {'build': _build, 'show': _show, 'check': _check}
    commands[args.command](args)


if __name__ == '__main__':
    main()
