"""Unit tests for the Java scope queries."""

from plugins.java.scope import enclosing_type, is_in_class_block, is_in_enum_block
from tests.factories import (
    find_declaration,
    make_anonymous_class,
    make_class,
    make_enum,
    make_interface,
    make_method,
    make_record,
    make_tree,
)


class TestIsInClassBlock:
    """Classification of declarations enclosed by classes."""

    def test_member_of_class(self):
        tree = make_tree(make_class("Person", make_interface("Address")))

        assert is_in_class_block(find_declaration(tree, "Address"), tree)
        assert not is_in_enum_block(find_declaration(tree, "Address"), tree)

    def test_top_level_declaration(self):
        tree = make_tree(make_interface("Address"), make_enum("Color"))

        assert not is_in_class_block(find_declaration(tree, "Address"), tree)
        assert not is_in_class_block(find_declaration(tree, "Color"), tree)
        assert enclosing_type(find_declaration(tree, "Color"), tree) is None

    def test_class_itself_is_not_in_class_block(self):
        tree = make_tree(make_class("Person"))

        assert not is_in_class_block(find_declaration(tree, "Person"), tree)

    def test_transitive_through_nested_classes(self):
        tree = make_tree(make_class("Outer", make_class("Inner", make_enum("Deep"))))

        deep = find_declaration(tree, "Deep")
        assert is_in_class_block(deep, tree)
        assert enclosing_type(deep, tree) is find_declaration(tree, "Inner")

    def test_method_bodies_are_skipped(self):
        tree = make_tree(make_class("Person", make_method("run", make_enum("Local"))))

        assert is_in_class_block(find_declaration(tree, "Local"), tree)

    def test_interface_boundary_stops_the_walk(self):
        tree = make_tree(make_class("Outer", make_interface("Api", make_enum("Kind"))))

        kind = find_declaration(tree, "Kind")
        assert not is_in_class_block(kind, tree)
        assert not is_in_enum_block(kind, tree)

    def test_record_boundary_stops_the_walk(self):
        tree = make_tree(make_class("Outer", make_record("Point", make_enum("Axis"))))

        assert not is_in_class_block(find_declaration(tree, "Axis"), tree)

    def test_anonymous_class_stops_the_walk(self):
        tree = make_tree(
            make_class("Outer", make_method("run", make_anonymous_class(make_interface("Callback"))))
        )

        assert not is_in_class_block(find_declaration(tree, "Callback"), tree)


class TestIsInEnumBlock:
    """Classification of declarations enclosed by enums."""

    def test_member_of_enum(self):
        tree = make_tree(make_enum("Planet", make_interface("Orbit")))

        orbit = find_declaration(tree, "Orbit")
        assert is_in_enum_block(orbit, tree)
        assert not is_in_class_block(orbit, tree)

    def test_enum_in_enum(self):
        tree = make_tree(make_enum("Outer", make_enum("Inner")))

        assert is_in_enum_block(find_declaration(tree, "Inner"), tree)

    def test_innermost_type_wins(self):
        tree = make_tree(make_enum("Planet", make_class("Moon", make_enum("Phase"))))

        phase = find_declaration(tree, "Phase")
        assert is_in_class_block(phase, tree)
        assert not is_in_enum_block(phase, tree)
