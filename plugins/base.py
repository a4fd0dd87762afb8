"""
Base interface for language plugins.

A language plugin turns source text into an ``ASTNode`` tree and
provides the checks that run over trees of that language.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from modcheck.config import AnalysisConfig
from modcheck.models import ASTNode
from plugins.check import AbstractCheck


class LanguagePlugin(ABC):
    """Base interface for language-specific analysis plugins."""

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the language name (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> List[str]:
        """Return supported file extensions (e.g., ['.java'])."""
        pass

    @property
    def messages(self) -> Dict[str, str]:
        """Message templates keyed by message key."""
        return {}

    @property
    def available_checks(self) -> List[str]:
        """Names of every check this plugin can create."""
        return []

    @abstractmethod
    async def parse_file(self, file_path: str, content: str) -> ASTNode:
        """
        Parse file content into AST using language-specific parser.

        Args:
            file_path: Path to the file being parsed
            content: File content as string

        Returns:
            ASTNode representing the root of the parsed AST

        Raises:
            ParseError: If the file cannot be parsed
        """
        pass

    @abstractmethod
    def create_checks(self, config: AnalysisConfig) -> List[AbstractCheck]:
        """
        Instantiate and configure the checks enabled for this language.

        Args:
            config: Analysis configuration

        Returns:
            Configured check instances, ready to be handed to a TreeWalker

        Raises:
            ConfigurationError: If a check rejects its configuration
        """
        pass
