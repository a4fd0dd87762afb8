"""
Analyzer component for checking source files.

This module provides the Analyzer class that uses language plugins to
parse files and runs the configured checks over each parsed tree.
"""

import asyncio
import time
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from modcheck.config import AnalysisConfig
from modcheck.exceptions import ConfigurationError, ParseError
from modcheck.models import AnalysisReport, ErrorRecord, SourceTree
from modcheck.services.diagnostic_sink import DiagnosticCollector, DiagnosticSink
from modcheck.services.tree_walker import TreeWalker
from modcheck.utils.logging import get_logger, log_error_with_context, log_file_checked
from plugins.base import LanguagePlugin
from plugins.manager import PluginManager

logger = get_logger(__name__)


class _CountingSink(DiagnosticSink):
    """Forwards to another sink and counts what passed through."""

    def __init__(self, target: DiagnosticSink):
        self.target = target
        self.count = 0

    def report(self, diagnostic) -> None:
        self.count += 1
        self.target.report(diagnostic)


class Analyzer:
    """
    Runs tree checks over source files.

    Walkers are built once per language and reused for every file, so
    the checks are configured before any tree is walked and stay
    unchanged for the rest of the run.
    """

    def __init__(
        self,
        plugin_manager: PluginManager,
        config: Optional[AnalysisConfig] = None,
        max_workers: int = 4,
    ):
        """
        Initialize Analyzer.

        Args:
            plugin_manager: PluginManager instance for language-specific parsing and checks
            config: Analysis configuration (defaults for every check if None)
            max_workers: Maximum number of files processed concurrently

        Raises:
            ConfigurationError: If the configuration names unknown checks
        """
        self.plugin_manager = plugin_manager
        self.config = config or AnalysisConfig()
        self.max_workers = max(1, max_workers)
        self._walkers: Dict[str, TreeWalker] = {}

        self.plugin_manager.validate_config(self.config)

    def get_walker(self, plugin: LanguagePlugin) -> TreeWalker:
        """Return the TreeWalker for a plugin, building it on first use."""
        walker = self._walkers.get(plugin.language_name)
        if walker is None:
            walker = TreeWalker(plugin.create_checks(self.config))
            self._walkers[plugin.language_name] = walker
            logger.debug(
                f"Built tree walker for {plugin.language_name} "
                f"with {len(walker.checks)} checks"
            )
        return walker

    async def analyze_source(
        self,
        file_path: str,
        content: str,
        sink: DiagnosticSink,
    ) -> int:
        """
        Parse one source and run the checks over it.

        Args:
            file_path: Path used to select the plugin and to locate diagnostics
            content: Source text
            sink: Receives the diagnostics

        Returns:
            Number of diagnostics reported for the file

        Raises:
            ValueError: If no plugin handles the file
            ParseError: If the source cannot be parsed
        """
        plugin = self.plugin_manager.get_plugin_for_file(file_path)
        if plugin is None:
            raise ValueError(f"No plugin found for file: {file_path}")

        walker = self.get_walker(plugin)
        started = time.perf_counter()

        root = await plugin.parse_file(file_path, content)
        tree = SourceTree(root, file_path=file_path)

        counting_sink = _CountingSink(sink)
        walker.walk(tree, counting_sink)

        log_file_checked(
            logger,
            file_path,
            plugin.language_name,
            counting_sink.count,
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return counting_sink.count

    def collect_files(self, paths: Iterable[Union[str, Path]]) -> List[Path]:
        """
        Expand directories into the files a plugin can handle.

        Explicitly named files are kept even without a matching plugin so
        they can be reported as errors.
        """
        extensions = set(self.plugin_manager.list_supported_extensions())
        files: List[Path] = []

        for raw_path in paths:
            path = Path(raw_path)
            if path.is_dir():
                files.extend(
                    sorted(p for p in path.rglob("*") if p.is_file() and p.suffix in extensions)
                )
            else:
                files.append(path)

        # Keep order, drop duplicates
        return list(dict.fromkeys(files))

    async def analyze_paths(
        self,
        paths: Iterable[Union[str, Path]],
        sink: Optional[DiagnosticCollector] = None,
    ) -> AnalysisReport:
        """
        Check every file under ``paths``.

        Files are processed concurrently, at most ``max_workers`` at a
        time. Files that cannot be read or parsed are recorded as errors
        and do not stop the run.

        Args:
            paths: Files and/or directories to check
            sink: Collector to report into (a new one if None)

        Returns:
            AnalysisReport with diagnostics and per-file errors
        """
        collector = sink if sink is not None else DiagnosticCollector(self.plugin_manager.get_messages())
        files = self.collect_files(paths)
        semaphore = asyncio.Semaphore(self.max_workers)

        logger.info(f"Checking {len(files)} file(s) with {self.max_workers} worker(s)")

        async def _check(path: Path) -> Optional[ErrorRecord]:
            async with semaphore:
                return await self._analyze_file(path, collector)

        results = await asyncio.gather(*(_check(path) for path in files))

        errors = [record for record in results if record is not None]
        report = AnalysisReport(
            files_checked=len(files) - len(errors),
            diagnostics=collector.diagnostics,
            errors=errors,
        )

        logger.info(
            f"Checked {report.files_checked} file(s): "
            f"{len(report.diagnostics)} violation(s), {len(report.errors)} error(s)"
        )
        return report

    async def _analyze_file(self, path: Path, sink: DiagnosticSink) -> Optional[ErrorRecord]:
        file_path = str(path)
        phase = "read"
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
            phase = "check"
            await self.analyze_source(file_path, content, sink)
            return None
        except ConfigurationError:
            raise
        except (OSError, UnicodeDecodeError, ParseError, ValueError) as e:
            log_error_with_context(
                logger,
                f"Failed to check {file_path}: {e}",
                e,
                file_path=file_path,
                phase=phase,
            )
            return ErrorRecord(
                file_path=file_path,
                phase=phase,
                error_type=type(e).__name__,
                message=str(e),
                stack_trace="".join(traceback.format_exception(type(e), e, e.__traceback__)),
                timestamp=datetime.now(timezone.utc),
            )
