# cli.py
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from .campaign_loader import load_campaign, load_internal_schema
from .config import GenerationSettings
from .errors import ConfigurationError, SchemaValidationError
from .gemini_client import GeminiTextGenerator
from .internal_schema import dump_internal
from .processor import SiteBuild, build_site, process_campaign
from .schema_mapper import view_model_to_dict
from .utils import build_output_name


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Turn an ad campaign export into template-ready marketing site data."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--campaign",
        type=Path,
        help="Path to a campaign export (JSON or YAML).",
    )
    source.add_argument(
        "--internal",
        type=Path,
        help="Path to an edited internal schema JSON file; skips transformation.",
    )
    parser.add_argument(
        "--output",
        required=True,
        type=Path,
        help="Directory where the generated site data will be written.",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip Gemini and build the internal schema with the rule-based fallback.",
    )
    parser.add_argument(
        "--log",
        required=False,
        type=Path,
        help="Optional path to a log file.",
    )

    # If no arguments were supplied, show the help screen instead of failing
    # with a cryptic missing argument error.
    if argv is None and len(sys.argv) == 1:
        parser.print_help(sys.stderr)
        sys.exit(1)

    return parser.parse_args(argv)


def configure_logging(log_path: Optional[Path]) -> None:
    """
    Configure basic logging to stderr and optionally to a file.

    The format is kept simple so logs can be tailed while still being
    parseable if they are later shipped to a log aggregation system.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
        handlers=handlers,
    )


async def _build_from_campaign(path: Path, offline: bool) -> SiteBuild:
    campaign = load_campaign(path)
    logging.info(
        "Loaded %s campaign '%s' for business '%s'",
        campaign.shape,
        campaign.campaign.name or "<unnamed>",
        campaign.business.business_name or "<unnamed>",
    )

    if offline:
        return await process_campaign(campaign, None)

    settings = GenerationSettings.from_env()
    async with GeminiTextGenerator() as generator:
        return await process_campaign(campaign, generator, settings)


def _write_json(path: Path, data: Any) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def write_build(build: SiteBuild, output_root: Path) -> Path:
    """Write internal_schema.json, view_model.json and findings.json."""
    out_dir = output_root / build_output_name(build.schema.business.name)
    out_dir.mkdir(parents=True, exist_ok=True)

    _write_json(out_dir / "internal_schema.json", dump_internal(build.schema))
    _write_json(out_dir / "view_model.json", view_model_to_dict(build.view_model))
    _write_json(
        out_dir / "findings.json",
        [
            {"field": f.field, "label": f.label, "description": f.description, "kind": f.kind}
            for f in build.findings
        ],
    )
    return out_dir


def main(argv: Optional[list] = None) -> int:
    """
    Entry point for the CLI module.

    - Loads a campaign (or an edited internal schema).
    - Transforms the campaign with Gemini, falling back to rules on failure.
    - Audits and maps the schema, then writes the results to disk.
    """
    args = parse_args(argv)
    configure_logging(args.log)

    try:
        if args.internal is not None:
            logging.info("Loading internal schema from %s", args.internal)
            build = build_site(load_internal_schema(args.internal))
        else:
            logging.info("Loading campaign from %s", args.campaign)
            build = asyncio.run(_build_from_campaign(args.campaign, args.offline))
    except SchemaValidationError as exc:
        logging.error("%s", exc)
        for issue in exc.issues:
            logging.error("  %s: %s [%s]", issue.path or "<root>", issue.message, issue.code)
        return 1
    except ConfigurationError as exc:
        logging.error("Configuration error: %s", exc)
        return 2

    out_dir = write_build(build, args.output)
    logging.info("Site data for '%s' written to %s", build.schema.business.name, out_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
