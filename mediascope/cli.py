"""
Command line entry point.

    mediascope <url> [--property <substring>] [--selector <substring>]
               [--output <path>] [--force]

Exit codes: 0 on success, 1 on any error, 130 when interrupted.
"""

from __future__ import annotations

import argparse
import asyncio
import pathlib
import sys
from datetime import date

import dotenv

from mediascope import __version__, config, output, pipeline
from mediascope.analysis import filters
from mediascope.browser import session as browser_session
from mediascope.cache import ResultCache
from mediascope.reporting import console
from mediascope.utils import errors, logger, url as url_mod

log = logger.create_logger("CLI")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mediascope",
        description="Extract CSS media query breakpoints from a website and score their responsive complexity.",
        epilog=(
            "examples:\n"
            "  mediascope https://example.com\n"
            "  mediascope https://example.com --property margin-left\n"
            "  mediascope https://example.com --selector .hero-section"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", help="Absolute URL of the page to analyse")
    parser.add_argument("--property", dest="property_filter", metavar="PROP", help="Filter by CSS property (e.g. margin-left)")
    parser.add_argument("--selector", dest="selector_filter", metavar="SEL", help="Filter by CSS selector (e.g. .hero-section)")
    parser.add_argument("--output", type=pathlib.Path, metavar="FILE", help="Save JSON results to FILE")
    parser.add_argument("--force", action="store_true", help="Force fresh fetch (ignore cache)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the tool and return the process exit code."""
    dotenv.load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        url = url_mod.validate_url(args.url)
    except errors.InvalidUrlError as exc:
        parser.print_usage(sys.stderr)
        print(f"✗ Error: {exc}", file=sys.stderr)
        return 1

    try:
        settings = config.Settings()
        if settings.write_logs_to_file:
            logger.start_log_file(url_mod.extract_domain(url))

        log.section(f"Media Query Extraction: {url}")
        report = asyncio.run(
            pipeline.analyze_media_queries(
                url,
                cache=ResultCache(settings.cache_dir, settings.cache_ttl),
                session_factory=lambda: browser_session.BrowserSession(headless=settings.headless),
                force=args.force,
                navigation_timeout_ms=settings.navigation_timeout_ms,
            )
        )

        filtered = filters.apply_filters(report, args.property_filter, args.selector_filter)
        print(console.render_report(filtered))

        path = args.output or output.default_output_path(url, date.today(), settings.output_root)
        output.write_report(filtered, path)

        log.success("Media query extraction complete")
        if not args.property_filter and not args.selector_filter:
            log.info("Tip: use --property or --selector to filter specific CSS changes")
        if not args.force:
            log.info("Tip: use --force to bypass the cache and fetch fresh data")
        return 0
    except KeyboardInterrupt:
        print("✗ Interrupted", file=sys.stderr)
        return 130
    except Exception as exc:
        print(f"✗ Error extracting media queries: {errors.get_error_message(exc)}", file=sys.stderr)
        return 1
    finally:
        logger.end_log_file()


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
