"""
Language plugin architecture for code analysis.

This package provides the plugin system for language-specific checks,
including the base plugin interface, the check interface and the
plugin manager.
"""

from plugins.check import AbstractCheck, CheckContext
from plugins.base import LanguagePlugin
from plugins.manager import PluginManager

__all__ = ['AbstractCheck', 'CheckContext', 'LanguagePlugin', 'PluginManager']
