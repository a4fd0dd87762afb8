"""
Tree walker that dispatches nodes to checks.

The walker makes a single pass over a ``SourceTree`` and calls every
check registered for a node's type. It keeps no state between walks,
so one walker can process several trees at the same time.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from modcheck.exceptions import ConfigurationError
from modcheck.models import SourceTree
from modcheck.services.diagnostic_sink import DiagnosticSink
from plugins.check import AbstractCheck, CheckContext

logger = logging.getLogger(__name__)


class TreeWalker:
    """Dispatches tree nodes to the checks that asked for their type."""

    def __init__(self, checks: Sequence[AbstractCheck]):
        """
        Register checks by node type.

        Args:
            checks: Configured check instances

        Raises:
            ConfigurationError: If a check's token sets are inconsistent
        """
        self._checks: List[AbstractCheck] = list(checks)
        self._registry: Dict[str, List[AbstractCheck]] = defaultdict(list)

        for check in self._checks:
            tokens = self._validate_tokens(check)
            for token in sorted(tokens):
                self._registry[token].append(check)
            logger.debug(f"Registered check '{check.name}' for {sorted(tokens)}")

    @staticmethod
    def _validate_tokens(check: AbstractCheck) -> frozenset:
        tokens = frozenset(check.get_tokens())
        acceptable = frozenset(check.get_acceptable_tokens())
        required = frozenset(check.get_required_tokens())

        unsupported = tokens - acceptable
        if unsupported:
            raise ConfigurationError(
                f"Check '{check.name}' does not accept tokens: {sorted(unsupported)}"
            )

        missing = required - tokens
        if missing:
            raise ConfigurationError(
                f"Check '{check.name}' requires tokens: {sorted(missing)}"
            )

        return tokens

    @property
    def checks(self) -> List[AbstractCheck]:
        return list(self._checks)

    def checks_for(self, node_type: str) -> List[AbstractCheck]:
        return list(self._registry.get(node_type, ()))

    def walk(self, tree: SourceTree, sink: DiagnosticSink) -> None:
        """
        Walk ``tree`` once, visiting nodes in pre-order and leaving them
        in post-order.

        Args:
            tree: Tree to walk
            sink: Receives every diagnostic reported during the walk
        """
        contexts = {id(check): CheckContext(check, tree, sink) for check in self._checks}

        for check in self._checks:
            check.begin_tree(contexts[id(check)])

        # (node, leaving) pairs; iterative so deep trees do not hit the recursion limit
        stack = [(tree.root, False)]
        while stack:
            node, leaving = stack.pop()
            interested = self._registry.get(node.node_type, ())

            if leaving:
                for check in interested:
                    check.leave_node(node, contexts[id(check)])
                continue

            for check in interested:
                check.visit_node(node, contexts[id(check)])

            stack.append((node, True))
            for child in reversed(node.children):
                stack.append((child, False))

        for check in self._checks:
            check.finish_tree(contexts[id(check)])
