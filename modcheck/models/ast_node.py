"""AST node data models."""

from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class ASTNode(BaseModel):
    """Abstract Syntax Tree node representation."""

    model_config = ConfigDict(frozen=True)

    node_type: str
    start_line: int
    end_line: int
    start_column: int  # 0-based, in characters
    end_column: int  # 0-based, in characters
    children: Tuple['ASTNode', ...] = ()
    text: Optional[str] = None

    def find_first(self, node_type: str) -> Optional['ASTNode']:
        """Return the first direct child of the given type, if any."""
        for child in self.children:
            if child.node_type == node_type:
                return child
        return None

    def children_of_type(self, node_type: str) -> Iterator['ASTNode']:
        return (child for child in self.children if child.node_type == node_type)

    @property
    def modifiers(self) -> 'ModifierSet':
        """Modifier list of a declaration node."""
        return ModifierSet(self.find_first(ModifierSet.NODE_TYPE))


class ModifierSet:
    """
    Read-only view over the ``modifiers`` child of a declaration.

    A declaration written without any modifiers has no such child; the
    set is empty in that case.
    """

    NODE_TYPE = "modifiers"

    def __init__(self, node: Optional[ASTNode]):
        self._node = node

    @property
    def node(self) -> Optional[ASTNode]:
        return self._node

    def contains(self, modifier: str) -> bool:
        """Check whether ``modifier`` (e.g. ``"static"``) is written."""
        if self._node is None:
            return False
        return self._node.find_first(modifier) is not None

    def __contains__(self, modifier: str) -> bool:
        return self.contains(modifier)

    def __iter__(self) -> Iterator[str]:
        if self._node is None:
            return iter(())
        return (child.node_type for child in self._node.children)

    def __len__(self) -> int:
        return 0 if self._node is None else len(self._node.children)


# Enable forward references for recursive model
ASTNode.model_rebuild()
