"""
modcheck - modifier checks for Java sources.

Parses Java files with tree-sitter and runs tree checks over them, such
as requiring nested enums and interfaces to spell out their implied
``static`` modifier.
"""

__version__ = "1.0.0"
