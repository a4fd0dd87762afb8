"""
Java grammar vocabulary used by the checks.

Values are the node type names produced by tree-sitter-java, so a
member compares equal to ``ASTNode.node_type``.
"""

from enum import Enum
from typing import Optional


class NodeType(str, Enum):
    """Grammar constructs the Java checks and scope queries refer to."""

    PROGRAM = "program"
    CLASS_DECL = "class_declaration"
    CLASS_BODY = "class_body"
    INTERFACE_DECL = "interface_declaration"
    INTERFACE_BODY = "interface_body"
    ENUM_DECL = "enum_declaration"
    ENUM_BODY = "enum_body"
    ENUM_BODY_DECLARATIONS = "enum_body_declarations"
    RECORD_DECL = "record_declaration"
    ANNOTATION_TYPE_DECL = "annotation_type_declaration"
    OBJECT_CREATION = "object_creation_expression"
    METHOD_DECL = "method_declaration"
    CONSTRUCTOR_DECL = "constructor_declaration"
    BLOCK = "block"
    MODIFIERS = "modifiers"
    IDENTIFIER = "identifier"
    ERROR = "ERROR"

    @classmethod
    def lookup(cls, node_type: str) -> Optional['NodeType']:
        """Return the member for a raw node type name, or None."""
        try:
            return cls(node_type)
        except ValueError:
            return None


class Modifier(str, Enum):
    """Keywords that may appear in a ``modifiers`` node."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ABSTRACT = "abstract"
    STATIC = "static"
    FINAL = "final"
    STRICTFP = "strictfp"
    DEFAULT = "default"
    SEALED = "sealed"
    NON_SEALED = "non-sealed"
