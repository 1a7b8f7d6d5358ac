"""
CLI entrypoint for the catalog taxonomy tools.

Subcommands:
- report: scan tool documents, discover theme candidates, write the analysis report
- discover: log theme candidates with their confidence
- validate-tags: normalize tags and check them against the suggested-tag vocabulary
- activate / increment / recount: theme lifecycle bookkeeping in the theme registry
- add-tag / propose-theme: extend the registry
- pages: regenerate the markdown page of every theme

Fatal errors (missing registry or document tree, malformed registry) exit with
status 1. Documents without a header block are skipped with a warning.
"""

import argparse
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import assemble_report, generate_all_theme_pages, log_report_summary, save_report
from application.constants import LOG_DIR_NAME, LOG_FILENAME
from domain.errors import TaxonomyError
from domain.schemas import ToolRecord
from domain.taxonomy import TagVocabulary
from domain.themes import discover_themes
from infrastructure.config import CatalogConfig, load_catalog_config
from infrastructure.constants import CATALOG_CONFIG_FILE
from infrastructure.io import load_tool_records
from infrastructure.observability import configure_logging, make_run_tag, set_log_context
from infrastructure.registry import ThemeRegistry, load_categories

logger = logging.getLogger(__name__)

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Curate the tag/theme taxonomy of the tool catalog")
    p.add_argument(
        "--config",
        type=str,
        default=str(CATALOG_CONFIG_FILE),
        help="Path to catalog.yaml (default: configs/catalog.yaml; optional when left at default)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file with CATALOG_* overrides (default: .env, optional)",
    )
    p.add_argument("--console-level", type=str, default="INFO", choices=LEVELS, help="Console log level")
    p.add_argument("--file-level", type=str, default="DEBUG", choices=LEVELS, help="File log level")
    p.add_argument(
        "--log-file",
        type=str,
        default=None,
        help=f"Log file path (default: {LOG_DIR_NAME}/{LOG_FILENAME}; pass '' to disable)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    report = sub.add_parser("report", help="Analyze tools and write the theme analysis report")
    report.add_argument("--output", type=str, default=None, help="Report path (default: from config)")
    report.add_argument(
        "--recount",
        action="store_true",
        help="Recount theme tool_count values in the registry before reporting",
    )

    sub.add_parser("discover", help="Log discovered theme candidates")

    validate = sub.add_parser("validate-tags", help="Validate tags against the suggested-tag vocabulary")
    validate.add_argument("tags", nargs="+")

    activate = sub.add_parser("activate", help="Approve themes under review")
    activate.add_argument("theme_ids", nargs="+")
    activate.add_argument("--approved-by", type=str, default="manual")

    increment = sub.add_parser("increment", help="Add 1 to tool_count of each listed theme")
    increment.add_argument("theme_ids", nargs="+")

    sub.add_parser("recount", help="Recompute every theme's tool_count from the documents")

    add_tag = sub.add_parser("add-tag", help="Add a tag to the suggested-tag vocabulary")
    add_tag.add_argument("tag")

    propose = sub.add_parser("propose-theme", help="Register an auto-discovered theme unless it exists")
    propose.add_argument("--id", dest="theme_id", required=True)
    propose.add_argument("--name", required=True)
    propose.add_argument("--description", default="")
    propose.add_argument("--keywords", nargs="*", default=[])
    propose.add_argument("--categories", nargs="*", default=[])

    pages = sub.add_parser("pages", help="Regenerate theme pages")
    pages.add_argument("--out", type=str, default=None, help="Output directory (default: from config)")

    return p.parse_args(argv)


def _load_tools(cfg: CatalogConfig) -> list[ToolRecord]:
    tools = load_tool_records(cfg.docs_dir, exclude_dirs=[cfg.theme_pages_dir])
    return sorted(tools, key=lambda t: (t.name.lower(), t.source_file))


def cmd_report(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    logger.info("Analyzing tools across categories...")
    tools = _load_tools(cfg)
    categories = load_categories(cfg.categories_file)
    registry = ThemeRegistry(cfg.themes_file)

    if args.recount:
        registry.recount_tool_counts(tools)

    report = assemble_report(
        tools=tools,
        categories=categories,
        existing_themes=registry.active_themes(),
        report_cfg=cfg.report,
        discovery_cfg=cfg.discovery,
    )
    log_report_summary(report)

    output = Path(args.output) if args.output else cfg.report.output_file
    save_report(report, output)
    return 0


def cmd_discover(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    candidates = discover_themes(_load_tools(cfg), cfg.discovery)
    threshold = cfg.report.confidence_threshold
    for cand in candidates:
        marker = "high" if cand.confidence >= threshold else "low"
        logger.info(
            "[%s] %s (id=%s, confidence=%.2f, tools=%d, keywords=%s)",
            marker,
            cand.name,
            cand.id,
            cand.confidence,
            len(cand.tools),
            ", ".join(cand.keywords),
        )
    logger.info("%d theme candidates discovered", len(candidates))
    return 0


def cmd_validate_tags(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    vocabulary = TagVocabulary(suggested_tags=ThemeRegistry(cfg.themes_file).suggested_tags())
    invalid = 0
    for raw in args.tags:
        result = vocabulary.validate_tag(raw)
        if not result.valid:
            invalid += 1
            logger.warning("Tag %r is invalid (normalizes to an empty string)", raw)
        elif result.suggestion:
            logger.info("Tag %r -> %r (did you mean %r?)", raw, result.normalized, result.suggestion)
        else:
            logger.info("Tag %r -> %r", raw, result.normalized)
    return 1 if invalid else 0


def cmd_activate(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    activated = ThemeRegistry(cfg.themes_file).activate(args.theme_ids, approved_by=args.approved_by)
    logger.info("Activated %d theme(s): %s", len(activated), ", ".join(activated) or "-")
    return 0


def cmd_increment(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    ThemeRegistry(cfg.themes_file).increment_tool_counts(args.theme_ids)
    return 0


def cmd_recount(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    ThemeRegistry(cfg.themes_file).recount_tool_counts(_load_tools(cfg))
    return 0


def cmd_add_tag(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    ThemeRegistry(cfg.themes_file).add_suggested_tag(args.tag)
    return 0


def cmd_propose_theme(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    theme_id = ThemeRegistry(cfg.themes_file).add_or_get(
        theme_id=args.theme_id,
        name=args.name,
        description=args.description,
        keywords=args.keywords,
        categories=args.categories,
    )
    logger.info("Theme id: %s", theme_id)
    return 0


def cmd_pages(args: argparse.Namespace, cfg: CatalogConfig) -> int:
    registry = ThemeRegistry(cfg.themes_file)
    generate_all_theme_pages(
        registry.load(),
        _load_tools(cfg),
        out_dir=Path(args.out) if args.out else cfg.theme_pages_dir,
        docs_dir=cfg.docs_dir,
        registry_path=cfg.themes_file,
    )
    return 0


COMMANDS: dict[str, Callable[[argparse.Namespace, CatalogConfig], int]] = {
    "report": cmd_report,
    "discover": cmd_discover,
    "validate-tags": cmd_validate_tags,
    "activate": cmd_activate,
    "increment": cmd_increment,
    "recount": cmd_recount,
    "add-tag": cmd_add_tag,
    "propose-theme": cmd_propose_theme,
    "pages": cmd_pages,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    if args.log_file is None:
        log_path: Path | None = Path(LOG_DIR_NAME) / LOG_FILENAME
    else:
        log_path = Path(args.log_file) if args.log_file else None
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )

    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{args.command}"
    set_log_context(run_id_full=run_id, command=args.command)
    logger.debug("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))

    config_path = Path(args.config)
    try:
        cfg = load_catalog_config(config_path, allow_missing=config_path == CATALOG_CONFIG_FILE)
        return COMMANDS[args.command](args, cfg)
    except (TaxonomyError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
