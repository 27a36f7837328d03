"""CLI entrypoint: run a survey from a command script, or render a saved map.

Supports ``--config path/to/config.json`` for ``run``. CLI arguments
override config-file values; config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from subsurvey.config.types import NavigationMode, SubmarineConfig, SurveyConfig
from subsurvey.domain.commands import ParseError
from subsurvey.domain.navigation import LimitExceededError
from subsurvey.domain.session import SurveySession
from subsurvey.io.loaders import load_commands, load_scan_table
from subsurvey.io.persistence import read_map_points, write_session

logger = logging.getLogger(__name__)

_SUBMARINE_PRESETS = {
    "none": SubmarineConfig,
    "standard": SubmarineConfig.standard,
    "surface": SubmarineConfig.surface,
    "deep-dive": SubmarineConfig.deep_dive,
    "testing": SubmarineConfig.testing,
}


def _parse_mode(raw_mode: str) -> NavigationMode:
    """Parse CLI mode value into NavigationMode enum."""
    try:
        return NavigationMode(raw_mode)
    except ValueError as exc:
        valid = ", ".join(m.value for m in NavigationMode)
        raise ValueError(f"mode must be one of {valid}") from exc


def _parse_preset(raw_preset: str) -> SubmarineConfig:
    try:
        return _SUBMARINE_PRESETS[raw_preset]()
    except KeyError as exc:
        valid = ", ".join(_SUBMARINE_PRESETS)
        raise ValueError(f"preset must be one of {valid}") from exc


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Navigate a command script and map scanned terrain")
    p.set_defaults(func=_handle_run)
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    p.add_argument("--commands", type=Path, default=None)
    p.add_argument("--scan-data", type=Path, default=None)
    p.add_argument("--mode", type=str, default=None, help="simple or aimed")
    p.add_argument("--preset", type=str, default=None, help="submarine limits preset")
    p.add_argument("--out-dir", type=Path, default=None)
    p.add_argument("--map", action=argparse.BooleanOptionalAction, default=None)


def _build_render_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("render", help="Render a persisted survey map to PNG")
    p.set_defaults(func=_handle_render)
    p.add_argument("--map-points", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--dpi", type=int, default=150)


def _handle_run(args: argparse.Namespace) -> None:
    file_cfg: dict[str, object] = {}
    if args.config is not None:
        file_cfg = json.loads(Path(args.config).read_text())

    def _get(cli_val: object, key: str, default: object) -> object:
        if cli_val is not None:
            return cli_val
        return file_cfg.get(key, default)

    commands_raw = _get(args.commands, "commands", None)
    scan_data_raw = _get(args.scan_data, "scan_data", None)
    if commands_raw is None or scan_data_raw is None:
        raise ValueError("--commands and --scan-data are required (flag or config file)")
    mode = _parse_mode(str(_get(args.mode, "mode", NavigationMode.AIMED.value)))
    submarine = _parse_preset(str(_get(args.preset, "preset", "none")))
    out_dir_raw = _get(args.out_dir, "out_dir", None)
    out_dir = Path(str(out_dir_raw)) if out_dir_raw is not None else None
    show_map = bool(_get(args.map, "map", True))

    session = SurveySession(
        load_scan_table(Path(str(scan_data_raw))),
        config=SurveyConfig(mode=mode, out_dir=out_dir),
        submarine=submarine,
    )
    session.run(load_commands(Path(str(commands_raw))))

    # stdout carries only the JSON summary.
    if show_map:
        session.survey_map.print_map(sys.stderr)
    if out_dir is not None:
        write_session(session, out_dir)
    print(json.dumps(session.summary(), ensure_ascii=False, indent=2))


def _handle_render(args: argparse.Namespace) -> None:
    from subsurvey.viz.render import render_survey_map

    survey_map = read_map_points(args.map_points)
    output = render_survey_map(survey_map, args.output, dpi=args.dpi)
    print(f"Saved: {output}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Submarine navigation and terrain survey")
    parser.add_argument("--log-level", type=str, default="WARNING")
    sub = parser.add_subparsers(dest="command")
    _build_run_parser(sub)
    _build_render_parser(sub)
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        raise SystemExit(1)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    try:
        args.func(args)
    except (ParseError, LimitExceededError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
