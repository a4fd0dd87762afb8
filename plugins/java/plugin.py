"""
Java Language Plugin for code analysis.

This plugin provides Java-specific parsing and check creation
using tree-sitter-java.
"""

import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import tree_sitter
import tree_sitter_java

from modcheck.config import AnalysisConfig
from modcheck.exceptions import ParseError
from modcheck.models import ASTNode
from plugins.base import LanguagePlugin
from plugins.check import AbstractCheck
from plugins.java.checks import JAVA_CHECKS
from plugins.manager import PluginManager

logger = logging.getLogger(__name__)

JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())

# Longest text kept on a converted node
MAX_NODE_TEXT = 1000


def _char_column(source: bytes, byte_offset: int, byte_column: int) -> int:
    """Turn tree-sitter's byte column into a character column."""
    line_prefix = source[byte_offset - byte_column:byte_offset]
    return len(line_prefix.decode("utf8", errors="replace"))


class JavaPlugin(LanguagePlugin):
    """Java language analysis plugin using tree-sitter."""

    def __init__(self, plugin_dir: Optional[Path] = None):
        """
        Initialize the Java plugin.

        Args:
            plugin_dir: Directory holding config.yaml. If None, uses this package's directory.

        Raises:
            ConfigurationError: If config.yaml is missing, malformed or incomplete
        """
        if plugin_dir is None:
            plugin_dir = Path(__file__).parent

        self._config = PluginManager.load_plugin_config(plugin_dir)

        logger.info("Java plugin initialized successfully")

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extensions(self) -> List[str]:
        """Return supported file extensions."""
        return self._config.get('file_extensions', ['.java'])

    @property
    def messages(self) -> Dict[str, str]:
        return dict(self._config.get('messages', {}))

    @property
    def available_checks(self) -> List[str]:
        return list(JAVA_CHECKS)

    @property
    def default_checks(self) -> List[str]:
        """Checks enabled unless the analysis configuration says otherwise."""
        return list(self._config.get('checks', JAVA_CHECKS.keys()))

    async def parse_file(self, file_path: str, content: str) -> ASTNode:
        """
        Parse Java file using tree-sitter-java.

        Parsing runs in a worker thread.

        Args:
            file_path: Path to the file being parsed
            content: File content as string

        Returns:
            ASTNode representing the root of the parsed AST

        Raises:
            ParseError: If the file cannot be parsed
        """
        return await asyncio.to_thread(self.parse_source, file_path, content)

    def parse_source(self, file_path: str, content: str) -> ASTNode:
        """Synchronous variant of ``parse_file``."""
        source = bytes(content, "utf8")

        # Parsers are not shareable between threads, so each parse gets its own
        parser = tree_sitter.Parser(JAVA_LANGUAGE)
        tree = parser.parse(source)

        if tree.root_node is None:
            raise ParseError(f"Failed to parse Java file: {file_path}")

        if tree.root_node.has_error:
            error_node = self._find_error_node(tree.root_node)
            row, byte_column = error_node.start_point
            column = _char_column(source, error_node.start_byte, byte_column)
            raise ParseError(
                f"Syntax error in Java file {file_path} "
                f"at line {row + 1}, column {column + 1}"
            )

        ast_node = self._convert_to_ast_node(tree.root_node, source)

        logger.debug(f"Successfully parsed Java file: {file_path}")
        return ast_node

    @staticmethod
    def _find_error_node(ts_node: tree_sitter.Node) -> tree_sitter.Node:
        """Locate the first ERROR or missing node below ``ts_node``."""
        node = ts_node
        while True:
            culprit = next(
                (child for child in node.children if child.has_error or child.is_missing),
                None,
            )
            if culprit is None or culprit.type == "ERROR" or culprit.is_missing:
                return culprit or node
            node = culprit

    def _convert_to_ast_node(
        self,
        ts_node: tree_sitter.Node,
        source: bytes
    ) -> ASTNode:
        """
        Convert tree-sitter Node to ASTNode model.

        The tree is converted bottom-up with an explicit stack, so long
        expression chains do not hit the interpreter's recursion limit.

        Args:
            ts_node: tree-sitter Node
            source: File content as bytes

        Returns:
            ASTNode model instance
        """
        converted: List[ASTNode] = []
        stack = [(ts_node, False)]

        while stack:
            node, expanded = stack.pop()
            if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
                continue

            # Children were converted in order and sit on top of ``converted``
            child_count = len(node.children)
            children: Tuple[ASTNode, ...] = ()
            if child_count:
                children = tuple(converted[-child_count:])
                del converted[-child_count:]
            converted.append(self._make_ast_node(node, source, children))

        return converted[0]

    @staticmethod
    def _make_ast_node(
        ts_node: tree_sitter.Node,
        source: bytes,
        children: Tuple[ASTNode, ...],
    ) -> ASTNode:
        node_text = source[ts_node.start_byte:ts_node.end_byte].decode("utf8", errors="replace")

        return ASTNode(
            node_type=ts_node.type,
            start_line=ts_node.start_point[0] + 1,  # Convert to 1-indexed
            end_line=ts_node.end_point[0] + 1,
            start_column=_char_column(source, ts_node.start_byte, ts_node.start_point[1]),
            end_column=_char_column(source, ts_node.end_byte, ts_node.end_point[1]),
            children=children,
            text=node_text if len(node_text) < MAX_NODE_TEXT else node_text[:MAX_NODE_TEXT] + "..."
        )

    def create_checks(self, config: AnalysisConfig) -> List[AbstractCheck]:
        """
        Instantiate the Java checks enabled in ``config``.

        A check listed in the plugin's ``checks`` runs unless disabled;
        any other Java check runs only when it appears in ``config``.
        """
        checks = []
        defaults = set(self.default_checks)

        for name, check_class in JAVA_CHECKS.items():
            if name not in defaults and name not in config.checks:
                continue

            check_config = config.for_check(name)
            if not check_config.enabled:
                logger.info(f"Check '{name}' disabled by configuration")
                continue

            check = check_class()
            check.set_severity(check_config.severity)
            if check_config.tokens is not None:
                check.set_tokens(check_config.tokens)
            check.configure(check_config.options)
            checks.append(check)

        logger.debug(f"Created {len(checks)} Java checks: {[c.name for c in checks]}")
        return checks
