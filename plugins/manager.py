"""
Plugin Manager for language-specific analysis plugins.

This module manages plugin registration, plugin config loading, and selection based on file extensions.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional
import yaml

from modcheck.config import AnalysisConfig
from modcheck.exceptions import ConfigurationError
from modcheck.services.messages import MessageBundle
from plugins.base import LanguagePlugin

logger = logging.getLogger(__name__)

REQUIRED_PLUGIN_FIELDS = ("name", "version", "file_extensions")


class PluginManager:
    """Manages language plugin registration and selection."""

    def __init__(self):
        """Initialize the plugin manager."""
        self._plugins: Dict[str, LanguagePlugin] = {}
        self._extension_map: Dict[str, str] = {}

    def register_plugin(self, plugin: LanguagePlugin) -> None:
        """
        Register a language plugin.

        Args:
            plugin: LanguagePlugin instance to register
        """
        language_name = plugin.language_name

        if language_name in self._plugins:
            logger.warning(f"Plugin for language '{language_name}' already registered, overwriting")

        self._plugins[language_name] = plugin

        # Map file extensions to language
        for ext in plugin.file_extensions:
            if ext in self._extension_map:
                logger.warning(
                    f"Extension '{ext}' already mapped to '{self._extension_map[ext]}', "
                    f"overwriting with '{language_name}'"
                )
            self._extension_map[ext] = language_name

        logger.info(
            f"Registered plugin for language '{language_name}' "
            f"with extensions: {plugin.file_extensions}"
        )

    def get_plugin_for_file(self, file_path: str) -> Optional[LanguagePlugin]:
        """
        Get appropriate plugin based on file extension.

        Args:
            file_path: Path to the file

        Returns:
            LanguagePlugin instance if found, None otherwise
        """
        ext = Path(file_path).suffix
        language = self._extension_map.get(ext)

        if language:
            return self._plugins.get(language)

        logger.debug(f"No plugin found for file extension '{ext}' (file: {file_path})")
        return None

    def get_plugin(self, language_name: str) -> Optional[LanguagePlugin]:
        """Get plugin by language name."""
        return self._plugins.get(language_name)

    def list_supported_languages(self) -> List[str]:
        return list(self._plugins.keys())

    def list_supported_extensions(self) -> List[str]:
        return list(self._extension_map.keys())

    def get_messages(self) -> MessageBundle:
        """
        Merge the message templates of every registered plugin.

        Returns:
            MessageBundle covering all plugins' message keys
        """
        bundle = MessageBundle()
        for plugin in self._plugins.values():
            bundle.update(plugin.messages)
        return bundle

    def validate_config(self, config: AnalysisConfig) -> None:
        """
        Make sure every configured check is provided by some plugin.

        Raises:
            ConfigurationError: If a check name is unknown
        """
        known = set()
        for plugin in self._plugins.values():
            known.update(plugin.available_checks)

        unknown = sorted(set(config.checks) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown checks in configuration: {unknown}. "
                f"Available checks: {sorted(known)}"
            )

    @staticmethod
    def load_plugin_config(plugin_dir: Path) -> Dict:
        """
        Load and validate a plugin's config.yaml.

        Args:
            plugin_dir: Directory containing the plugin and config.yaml

        Returns:
            Dictionary containing plugin configuration

        Raises:
            ConfigurationError: If config.yaml is missing, malformed or lacks a required field
        """
        config_path = plugin_dir / "config.yaml"

        if not config_path.exists():
            raise ConfigurationError(f"Plugin configuration not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse plugin configuration {config_path}: {e}")
            raise ConfigurationError(f"Failed to parse plugin configuration {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigurationError(f"Plugin configuration {config_path} must be a mapping")

        # Validate required fields
        for field in REQUIRED_PLUGIN_FIELDS:
            if field not in config:
                raise ConfigurationError(f"Missing required field '{field}' in {config_path}")

        logger.info(f"Loaded plugin configuration {config['name']} v{config['version']} from {config_path}")
        return config

    def unregister_plugin(self, language_name: str) -> bool:
        """
        Unregister a plugin.

        Args:
            language_name: Name of the language plugin to unregister

        Returns:
            True if plugin was unregistered, False if not found
        """
        if language_name not in self._plugins:
            return False

        plugin = self._plugins[language_name]

        # Remove extension mappings
        for ext in plugin.file_extensions:
            if self._extension_map.get(ext) == language_name:
                del self._extension_map[ext]

        del self._plugins[language_name]

        logger.info(f"Unregistered plugin for language '{language_name}'")
        return True


def create_default_manager() -> PluginManager:
    """Create a PluginManager with every bundled plugin registered."""
    from plugins.java import JavaPlugin

    manager = PluginManager()
    manager.register_plugin(JavaPlugin())
    return manager
