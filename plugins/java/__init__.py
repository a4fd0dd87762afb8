"""
Java language plugin for code analysis.

This plugin provides Java-specific parsing, scope queries and checks.
"""

from plugins.java.plugin import JavaPlugin

__all__ = ['JavaPlugin']
