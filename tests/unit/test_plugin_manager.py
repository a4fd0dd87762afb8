"""Unit tests for PluginManager."""

import pytest
from typing import Dict, List

from modcheck.config import AnalysisConfig, CheckConfig
from modcheck.exceptions import ConfigurationError
from modcheck.models import ASTNode
from plugins import LanguagePlugin, PluginManager
from plugins.java import JavaPlugin
from plugins.manager import create_default_manager


class MockJavaPlugin(LanguagePlugin):
    """Mock Java plugin for testing."""

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extensions(self) -> List[str]:
        return [".java"]

    @property
    def messages(self) -> Dict[str, str]:
        return {"class.implied.modifier": "Implied modifier '{0}' should be explicit."}

    @property
    def available_checks(self) -> List[str]:
        return ["ClassMemberImpliedModifier"]

    async def parse_file(self, file_path: str, content: str) -> ASTNode:
        return ASTNode(
            node_type="program",
            start_line=1,
            end_line=10,
            start_column=0,
            end_column=0,
            children=(),
            text=content
        )

    def create_checks(self, config):
        return []


class MockKotlinPlugin(LanguagePlugin):
    """Mock Kotlin plugin for testing."""

    @property
    def language_name(self) -> str:
        return "kotlin"

    @property
    def file_extensions(self) -> List[str]:
        return [".kt", ".kts"]

    @property
    def messages(self) -> Dict[str, str]:
        return {"kotlin.key": "Kotlin {0}"}

    async def parse_file(self, file_path: str, content: str) -> ASTNode:
        return ASTNode(
            node_type="source_file",
            start_line=1,
            end_line=1,
            start_column=0,
            end_column=0,
        )

    def create_checks(self, config):
        return []


class TestPluginManager:
    """Test cases for PluginManager."""

    def test_register_plugin(self):
        """Test plugin registration."""
        manager = PluginManager()

        manager.register_plugin(MockJavaPlugin())

        assert "java" in manager.list_supported_languages()
        assert ".java" in manager.list_supported_extensions()

    def test_get_plugin_for_file(self):
        """Test getting plugin by file extension."""
        manager = PluginManager()
        manager.register_plugin(MockJavaPlugin())
        manager.register_plugin(MockKotlinPlugin())

        plugin = manager.get_plugin_for_file("src/Main.java")
        assert plugin is not None
        assert plugin.language_name == "java"

        plugin = manager.get_plugin_for_file("build.gradle.kts")
        assert plugin is not None
        assert plugin.language_name == "kotlin"

        assert manager.get_plugin_for_file("src/script.py") is None

    def test_get_plugin_by_name(self):
        """Test getting plugin by language name."""
        manager = PluginManager()
        manager.register_plugin(MockJavaPlugin())

        assert manager.get_plugin("java").language_name == "java"
        assert manager.get_plugin("python") is None

    def test_unregister_plugin(self):
        """Test plugin unregistration."""
        manager = PluginManager()
        manager.register_plugin(MockJavaPlugin())

        assert manager.unregister_plugin("java") is True
        assert "java" not in manager.list_supported_languages()
        assert ".java" not in manager.list_supported_extensions()

        assert manager.unregister_plugin("java") is False

    def test_plugin_override(self):
        """Test that registering a plugin twice keeps the second one."""
        manager = PluginManager()
        plugin1 = MockJavaPlugin()
        plugin2 = MockJavaPlugin()

        manager.register_plugin(plugin1)
        manager.register_plugin(plugin2)

        assert manager.get_plugin("java") is plugin2

    def test_get_messages_merges_plugins(self):
        manager = PluginManager()
        manager.register_plugin(MockJavaPlugin())
        manager.register_plugin(MockKotlinPlugin())

        bundle = manager.get_messages()

        assert bundle.format("class.implied.modifier", ["static"]) == (
            "Implied modifier 'static' should be explicit."
        )
        assert bundle.format("kotlin.key", ["x"]) == "Kotlin x"

    def test_validate_config_accepts_known_checks(self):
        manager = PluginManager()
        manager.register_plugin(MockJavaPlugin())

        manager.validate_config(AnalysisConfig(checks={"ClassMemberImpliedModifier": CheckConfig()}))

    def test_validate_config_rejects_unknown_checks(self):
        manager = PluginManager()
        manager.register_plugin(MockJavaPlugin())

        with pytest.raises(ConfigurationError, match="NoSuchCheck"):
            manager.validate_config(AnalysisConfig(checks={"NoSuchCheck": CheckConfig()}))

    def test_create_default_manager(self):
        manager = create_default_manager()

        assert isinstance(manager.get_plugin("java"), JavaPlugin)
        assert manager.list_supported_extensions() == [".java"]


class TestPluginConfigLoading:
    """Test plugin config.yaml loading and validation."""

    def test_load_plugin_config(self, tmp_path):
        """Test loading plugin configuration from YAML."""
        plugin_dir = tmp_path / "test_plugin"
        plugin_dir.mkdir()
        (plugin_dir / "config.yaml").write_text("""
name: test
version: 1.0.0
file_extensions:
  - .test
checks:
  - CheckOne
""")

        config = PluginManager.load_plugin_config(plugin_dir)

        assert config["name"] == "test"
        assert config["version"] == "1.0.0"
        assert ".test" in config["file_extensions"]
        assert config["checks"] == ["CheckOne"]

    def test_load_plugin_config_missing_file(self, tmp_path):
        plugin_dir = tmp_path / "no_config"
        plugin_dir.mkdir()

        with pytest.raises(ConfigurationError, match="not found"):
            PluginManager.load_plugin_config(plugin_dir)

    def test_load_plugin_config_invalid_yaml(self, tmp_path):
        plugin_dir = tmp_path / "bad_config"
        plugin_dir.mkdir()
        (plugin_dir / "config.yaml").write_text("invalid: yaml: content: [")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            PluginManager.load_plugin_config(plugin_dir)

    def test_load_plugin_config_not_a_mapping(self, tmp_path):
        plugin_dir = tmp_path / "list_config"
        plugin_dir.mkdir()
        (plugin_dir / "config.yaml").write_text("- name\n- version\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            PluginManager.load_plugin_config(plugin_dir)

    def test_load_plugin_config_missing_required_fields(self, tmp_path):
        plugin_dir = tmp_path / "incomplete_config"
        plugin_dir.mkdir()
        (plugin_dir / "config.yaml").write_text("name: test\n")

        with pytest.raises(ConfigurationError, match="version"):
            PluginManager.load_plugin_config(plugin_dir)

    def test_bundled_java_config_is_valid(self):
        from pathlib import Path

        import plugins.java

        config = PluginManager.load_plugin_config(Path(plugins.java.__file__).parent)

        assert config["name"] == "java"
        assert config["file_extensions"] == [".java"]

    def test_java_plugin_validates_its_config(self, tmp_path):
        (tmp_path / "config.yaml").write_text("name: java\nfile_extensions: [.java]\n")

        with pytest.raises(ConfigurationError, match="version"):
            JavaPlugin(plugin_dir=tmp_path)
