"""
Check that nested enums and interfaces spell out their implied ``static``.

Enums and interfaces declared inside a class or an enum are always
static, whether or not the modifier is written. This check asks for the
modifier to be explicit, e.g.::

    public class Person {
        static interface Address {   // ok
        }
        enum Gender {                // violation: 'static' is implied
        }
    }
"""

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from modcheck.exceptions import CheckContractError
from modcheck.models import ASTNode
from plugins.check import AbstractCheck, CheckContext
from plugins.java.node_types import Modifier, NodeType
from plugins.java.scope import is_in_class_block, is_in_enum_block

MSG_KEY = "class.implied.modifier"

STATIC_KEYWORD = Modifier.STATIC.value

TOKENS = frozenset({
    NodeType.ENUM_DECL.value,
    NodeType.INTERFACE_DECL.value,
})


class ClassMemberImpliedModifierOptions(BaseModel):
    """Options accepted by ``ClassMemberImpliedModifierCheck.configure``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    enforce_static_on_nested_enum: StrictBool = Field(
        True, alias="enforceStaticOnNestedEnum"
    )
    enforce_static_on_nested_interface: StrictBool = Field(
        True, alias="enforceStaticOnNestedInterface"
    )


class ClassMemberImpliedModifierCheck(AbstractCheck):
    """Report nested enums/interfaces in class or enum bodies lacking ``static``."""

    name = "ClassMemberImpliedModifier"
    options_model = ClassMemberImpliedModifierOptions

    def __init__(self):
        super().__init__()
        self.enforce_static_on_nested_enum = True
        self.enforce_static_on_nested_interface = True

    def set_enforce_static_on_nested_enum(self, enforce: bool) -> None:
        self.enforce_static_on_nested_enum = enforce

    def set_enforce_static_on_nested_interface(self, enforce: bool) -> None:
        self.enforce_static_on_nested_interface = enforce

    def get_default_tokens(self) -> FrozenSet[str]:
        return self.get_acceptable_tokens()

    def get_required_tokens(self) -> FrozenSet[str]:
        return self.get_acceptable_tokens()

    def get_acceptable_tokens(self) -> FrozenSet[str]:
        return TOKENS

    def visit_node(self, node: ASTNode, context: CheckContext) -> None:
        if not (is_in_class_block(node, context.tree) or is_in_enum_block(node, context.tree)):
            return

        if node.node_type == NodeType.ENUM_DECL:
            enforce = self.enforce_static_on_nested_enum
        elif node.node_type == NodeType.INTERFACE_DECL:
            enforce = self.enforce_static_on_nested_interface
        else:
            raise CheckContractError(
                f"{self.name} was dispatched {node.node_type} "
                f"at {context.file_path}:{node.start_line}:{node.start_column + 1}"
            )

        if enforce and not node.modifiers.contains(STATIC_KEYWORD):
            context.log(node, MSG_KEY, STATIC_KEYWORD)
