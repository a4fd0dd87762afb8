"""
Command line entry point.

Usage:
    modcheck [--config FILE] [--format plain|json] [--workers N] PATH...

Exit codes: 0 when no violations were found, 1 when violations or file
errors were found, 2 when the configuration is invalid.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from modcheck import __version__
from modcheck.config import Settings, load_analysis_config, load_settings
from modcheck.exceptions import ConfigurationError
from modcheck.services.analyzer import Analyzer
from modcheck.services.diagnostic_sink import DiagnosticCollector
from modcheck.utils.logging import get_logger, setup_logging
from plugins.manager import create_default_manager

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_CONFIG_ERROR = 2


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modcheck",
        description="Check Java sources for modifiers that should be explicit.",
    )
    parser.add_argument("paths", nargs="+", help="Files or directories to check")
    parser.add_argument(
        "-c", "--config",
        default=settings.config_file,
        help="YAML analysis configuration (default: $MODCHECK_CONFIG_FILE)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=("plain", "json"),
        default=settings.output_format,
        help="Output format for diagnostics",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=settings.max_workers,
        help="Number of files checked concurrently",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configuration_error(error: ConfigurationError) -> int:
    logger.error(f"Configuration error: {error}")
    print(f"modcheck: configuration error: {error}", file=sys.stderr)
    return EXIT_CONFIG_ERROR


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        return _configuration_error(e)

    args = build_parser(settings).parse_args(argv)

    setup_logging(args.log_level)

    try:
        analysis_config = load_analysis_config(args.config)
        plugin_manager = create_default_manager()
        analyzer = Analyzer(plugin_manager, analysis_config, max_workers=args.workers)
        collector = DiagnosticCollector(plugin_manager.get_messages())
        report = asyncio.run(analyzer.analyze_paths(args.paths, sink=collector))
    except ConfigurationError as e:
        return _configuration_error(e)

    if args.format == "json":
        print(collector.render_json())
    else:
        for line in collector.render_plain():
            print(line)

    for error in report.errors:
        print(f"{error.file_path}: error: {error.message}", file=sys.stderr)

    if report.has_violations or report.has_errors:
        return EXIT_VIOLATIONS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
