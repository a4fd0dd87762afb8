"""
Lexical scope queries over a Java source tree.

Both queries walk the parent chain of a node and stop at the first
enclosing type declaration. Bodies, blocks, methods and statements in
between do not change the enclosing type and are skipped.
"""

from typing import Optional

from modcheck.models import ASTNode, SourceTree
from plugins.java.node_types import NodeType

TYPE_BOUNDARIES = frozenset({
    NodeType.CLASS_DECL.value,
    NodeType.ENUM_DECL.value,
    NodeType.INTERFACE_DECL.value,
    NodeType.ANNOTATION_TYPE_DECL.value,
    NodeType.RECORD_DECL.value,
})


def _is_anonymous_class(node: ASTNode) -> bool:
    return (
        node.node_type == NodeType.OBJECT_CREATION
        and node.find_first(NodeType.CLASS_BODY) is not None
    )


def enclosing_type(node: ASTNode, tree: SourceTree) -> Optional[ASTNode]:
    """
    Find the innermost type declaration that encloses ``node``.

    Anonymous class bodies count as a type boundary. Returns None when
    the root is reached first, i.e. for top-level declarations.
    """
    for ancestor in tree.ancestors(node):
        if ancestor.node_type in TYPE_BOUNDARIES or _is_anonymous_class(ancestor):
            return ancestor
    return None


def is_in_class_block(node: ASTNode, tree: SourceTree) -> bool:
    """Check whether ``node`` is declared inside a class body."""
    owner = enclosing_type(node, tree)
    return owner is not None and owner.node_type == NodeType.CLASS_DECL


def is_in_enum_block(node: ASTNode, tree: SourceTree) -> bool:
    """Check whether ``node`` is declared inside an enum body."""
    owner = enclosing_type(node, tree)
    return owner is not None and owner.node_type == NodeType.ENUM_DECL
