"""CLI entrypoint for scan surveys.

This module owns CLI argument parsing; survey execution lives in
``resource_scanner.experiments.survey`` and the scanner itself in
``resource_scanner.scanner``.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from resource_scanner.config.constants import (
    DISCOVERY_LIMIT,
    INITIAL_ENERGY,
    N_CONTENTS,
    WORLD_SIZE,
)
from resource_scanner.config.types import DEFAULT_SURVEY_SHAPES, SurveyConfig, WorldConfig
from resource_scanner.domain.content import ContentKind, parse_content_kind
from resource_scanner.domain.shapes import ScanShape
from resource_scanner.experiments.survey import run_scan_survey, summarize_survey

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_shapes(raw_shapes: str) -> tuple[ScanShape, ...]:
    """Parse comma-delimited ``kind:extent`` shapes and require valid extents."""
    parts = [part.strip() for part in raw_shapes.split(",") if part.strip()]
    if not parts:
        raise ValueError("shapes must not be empty")
    shapes = tuple(ScanShape.parse(part) for part in parts)
    for shape in shapes:
        if not shape.is_valid():
            raise ValueError(f"invalid extent for shape {shape}")
    return shapes


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a resource scan survey in a seeded world")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--world-size", type=int, default=None)
    parser.add_argument("--n-contents", type=int, default=None)
    parser.add_argument("--energy", type=int, default=None)
    parser.add_argument("--discovery-limit", type=int, default=None)
    parser.add_argument("--n-scans", type=int, default=None)
    parser.add_argument(
        "--shapes",
        type=str,
        default=None,
        help="Comma-separated kind:extent list, e.g. area:3,up:2,straight_star:2",
    )
    parser.add_argument(
        "--want",
        type=str,
        choices=[kind.value for kind in ContentKind if kind is not ContentKind.NONE],
        default=None,
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--render",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Save a footprint PNG for every scan",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for scan surveys.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        world_config = WorldConfig(
            world_size=_get_int(args.world_size, "world_size", file_cfg, WORLD_SIZE),
            n_contents=_get_int(args.n_contents, "n_contents", file_cfg, N_CONTENTS),
            initial_energy=_get_int(args.energy, "energy", file_cfg, INITIAL_ENERGY),
            discovery_limit=_get_int(
                args.discovery_limit, "discovery_limit", file_cfg, DISCOVERY_LIMIT
            ),
        )
        survey_config = SurveyConfig(
            world=world_config,
            n_scans=_get_int(args.n_scans, "n_scans", file_cfg, 50),
            shapes=_parse_shapes(
                _get_str(args.shapes, "shapes", file_cfg, ",".join(DEFAULT_SURVEY_SHAPES))
            ),
            want=parse_content_kind(_get_str(args.want, "want", file_cfg, ContentKind.COIN.value)),
            seed=_get_int(args.seed, "seed", file_cfg, 0),
            out_dir=Path(_get_str(args.out_dir, "out_dir", file_cfg, "data")),
        )
        render = _get_bool(args.render, "render", file_cfg, False)
    except ValueError as exc:
        parser.error(str(exc))

    records = run_scan_survey(survey_config, render=render)
    summary = summarize_survey(records, Path(survey_config.out_dir).resolve())
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
