"""
Navigable wrapper around a parsed AST.

Nodes do not point at their parents. ``SourceTree`` keeps an identity
index from every node to its parent instead, so upward traversal never
creates ownership cycles inside the node graph.
"""

from typing import Dict, Iterator, Optional

from modcheck.models.ast_node import ASTNode


class SourceTree:
    """A parsed file: the root node, its path and parent links."""

    def __init__(self, root: ASTNode, file_path: str = ""):
        self.root = root
        self.file_path = file_path
        self._parents: Dict[int, Optional[ASTNode]] = {id(root): None}

        stack = [root]
        while stack:
            node = stack.pop()
            for child in node.children:
                self._parents[id(child)] = node
                stack.append(child)

    def __contains__(self, node: ASTNode) -> bool:
        return id(node) in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def get_parent(self, node: ASTNode) -> Optional[ASTNode]:
        """
        Return the parent of ``node``, or None for the root.

        Raises:
            ValueError: If ``node`` does not belong to this tree
        """
        try:
            return self._parents[id(node)]
        except KeyError:
            raise ValueError(
                f"Node {node.node_type} at {node.start_line}:{node.start_column} "
                f"does not belong to {self.file_path or 'this tree'}"
            ) from None

    def ancestors(self, node: ASTNode) -> Iterator[ASTNode]:
        """Yield the parent chain of ``node``, nearest first."""
        parent = self.get_parent(node)
        while parent is not None:
            yield parent
            parent = self._parents[id(parent)]

    def walk(self) -> Iterator[ASTNode]:
        """Yield every node in pre-order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
