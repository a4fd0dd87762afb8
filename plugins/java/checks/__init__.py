"""Checks shipped with the Java plugin."""

from plugins.java.checks.class_member_implied_modifier import (
    ClassMemberImpliedModifierCheck,
    ClassMemberImpliedModifierOptions,
)

JAVA_CHECKS = {
    ClassMemberImpliedModifierCheck.name: ClassMemberImpliedModifierCheck,
}

__all__ = [
    'ClassMemberImpliedModifierCheck',
    'ClassMemberImpliedModifierOptions',
    'JAVA_CHECKS',
]
