"""
Base interface for tree checks.

A check declares which node types it wants to see, and the tree walker
dispatches matching nodes to ``visit_node`` together with a
``CheckContext`` for the tree being walked. Checks report violations
through the context and keep no per-tree state of their own.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, FrozenSet, Iterable, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from modcheck.exceptions import ConfigurationError
from modcheck.models import ASTNode, Diagnostic, Severity, SourceTree
from modcheck.services.diagnostic_sink import DiagnosticSink


class CheckContext:
    """Per-tree handle a check uses to navigate and to report violations."""

    def __init__(self, check: 'AbstractCheck', tree: SourceTree, sink: DiagnosticSink):
        self.check = check
        self.tree = tree
        self.sink = sink

    @property
    def file_path(self) -> str:
        return self.tree.file_path

    def get_parent(self, node: ASTNode) -> Optional[ASTNode]:
        return self.tree.get_parent(node)

    def log(self, node: ASTNode, message_key: str, *args: Any) -> Diagnostic:
        """
        Report a violation located at ``node``.

        Args:
            node: Offending node, its start position locates the violation
            message_key: Key of the message in the message bundle
            *args: Message arguments

        Returns:
            The reported Diagnostic
        """
        diagnostic = Diagnostic(
            file_path=self.tree.file_path,
            line=node.start_line,
            column=node.start_column + 1,
            message_key=message_key,
            args=tuple(str(arg) for arg in args),
            check_name=self.check.name,
            severity=self.check.severity,
        )
        self.sink.report(diagnostic)
        return diagnostic


class AbstractCheck(ABC):
    """Base class for all checks run by the tree walker."""

    name: ClassVar[str] = ""
    options_model: ClassVar[Optional[Type[BaseModel]]] = None

    def __init__(self):
        self.severity = Severity.ERROR
        self._tokens: Optional[FrozenSet[str]] = None

    @abstractmethod
    def get_default_tokens(self) -> FrozenSet[str]:
        """Node types visited when no tokens are configured."""
        pass

    @abstractmethod
    def get_acceptable_tokens(self) -> FrozenSet[str]:
        """Every node type this check is able to handle."""
        pass

    @abstractmethod
    def get_required_tokens(self) -> FrozenSet[str]:
        """Node types that must be visited for the check to work."""
        pass

    @abstractmethod
    def visit_node(self, node: ASTNode, context: CheckContext) -> None:
        """Check a node whose type is one of ``get_tokens()``."""
        pass

    def leave_node(self, node: ASTNode, context: CheckContext) -> None:
        pass

    def begin_tree(self, context: CheckContext) -> None:
        pass

    def finish_tree(self, context: CheckContext) -> None:
        pass

    def get_tokens(self) -> FrozenSet[str]:
        """Configured node types, falling back to the defaults."""
        if self._tokens is not None:
            return self._tokens
        return self.get_default_tokens()

    def set_tokens(self, tokens: Iterable[str]) -> None:
        # Validated against the acceptable/required sets by the TreeWalker
        self._tokens = frozenset(str(getattr(token, "value", token)) for token in tokens)

    def set_severity(self, severity: Severity) -> None:
        self.severity = Severity(severity)

    def configure(self, options: Mapping[str, Any]) -> None:
        """
        Apply named options through the matching ``set_*`` methods.

        Options are validated with ``options_model``; each validated field
        ``foo_bar`` is handed to ``set_foo_bar``.

        Raises:
            ConfigurationError: If an option is unknown or has a bad value
        """
        if not options:
            return
        if self.options_model is None:
            raise ConfigurationError(f"Check '{self.name}' does not accept options")

        try:
            validated = self.options_model.model_validate(dict(options))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid options for check '{self.name}': {e}") from e

        for field_name in validated.model_fields_set:
            setter = getattr(self, f"set_{field_name}")
            setter(getattr(validated, field_name))
