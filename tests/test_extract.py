"""Tests for extracting declarations from comments."""

import json

import pytest

from getdocs_extractor import (
    ExtractError,
    MalformedNestingError,
    SourceSyntaxError,
    TypeSpecSyntaxError,
    UnknownLineSyntaxError,
    UnresolvableNameError,
    UnresolvableTypeError,
    UnsupportedParameterError,
    declarations_to_json,
    extract,
)


def name_type(name):
    return {"kind": "Name", "name": name}


def foo_declaration(name, **extra):
    return {"name": name, "typeSpec": "foo", "type": name_type("foo"), **extra}


def interface_declaration(name, **extra):
    return {"name": name, "typeSpec": "interface", "type": {"kind": "Interface"}, **extra}


CONTENT_MATCH_METHOD = {
    "name": "bar",
    "typeSpec": "(?Object) → ContentMatch",
    "type": {
        "kind": "Function",
        "parameters": [
            {
                "kind": "FunctionParameter",
                "name": "a",
                "type": {"kind": "Nullable", "type": name_type("Object")},
            }
        ],
        "returnType": name_type("ContentMatch"),
    },
}


class TestWithType:
    """Declarations with an explicit type."""

    def test_declaration(self, extract_dicts):
        assert extract_dicts("""
            // a:: foo
        """) == [foo_declaration("a")]

    def test_declaration_documentation(self, extract_dicts):
        assert extract_dicts("""
            // a:: foo
            // Some documentation
        """) == [foo_declaration("a")]

    def test_declaration_property(self, extract_dicts):
        """A blank comment line does not end the nesting relationship."""
        assert extract_dicts("""
            // a:: foo
            //
            //  b:: foo
        """) == [foo_declaration("a", properties=[foo_declaration("b")])]

    def test_declaration_two_properties(self, extract_dicts):
        assert extract_dicts("""
            // a:: foo
            //
            //  b:: foo
            //
            //  c:: foo
        """) == [foo_declaration("a", properties=[foo_declaration("b"), foo_declaration("c")])]

    def test_declaration_property_property(self, extract_dicts):
        assert extract_dicts("""
            // a:: foo
            //
            //  b:: foo
            //
            //   c:: foo
        """) == [foo_declaration("a", properties=[foo_declaration("b", properties=[foo_declaration("c")])])]

    def test_nesting_uses_relative_indentation(self, extract_dicts):
        """Children only need to be deeper than their parent, not by a fixed unit."""
        assert extract_dicts("""
            // a:: foo
            //
            //       b:: foo
            //
            //       c:: foo
            //
            // d:: foo
        """) == [
            foo_declaration("a", properties=[foo_declaration("b"), foo_declaration("c")]),
            foo_declaration("d"),
        ]

    def test_property_documentation_is_skipped(self, extract_dicts):
        assert extract_dicts("""
            // a:: foo
            // About a.
            //
            //   b:: foo
            //   About b,
            //   over two lines.
            //
            //   c:: foo
        """) == [foo_declaration("a", properties=[foo_declaration("b"), foo_declaration("c")])]


class TestInterfaces:
    """Interfaces declared in a comment."""

    def test_declaration(self, extract_dicts):
        assert extract_dicts("""
            // a:: interface
        """) == [interface_declaration("a")]

    def test_declaration_documentation(self, extract_dicts):
        assert extract_dicts("""
            // a:: interface
            // Some documentation
        """) == [interface_declaration("a")]

    def test_declaration_documentation_empty(self, extract_dicts):
        assert extract_dicts("""
            // a:: interface
            // Some documentation
            //
        """) == [interface_declaration("a")]

    def test_declaration_documentation_empty_documentation(self, extract_dicts):
        assert extract_dicts("""
            // a:: interface
            // Some documentation
            //
            // Some documentation
        """) == [interface_declaration("a")]

    def test_declaration_line_inside_documentation_paragraph(self, extract_dicts):
        """Everything up to the next blank line belongs to the documentation."""
        assert extract_dicts("""
            // a:: interface
            // Some documentation
            // a:: foo
        """) == [interface_declaration("a")]

    def test_declaration_empty_declaration(self, extract_dicts):
        """Same indentation means siblings, not nesting."""
        assert extract_dicts("""
            // a:: interface
            //
            // b:: interface
        """) == [interface_declaration("a"), interface_declaration("b")]

    def test_declaration_with_a_property(self, extract_dicts):
        assert extract_dicts("""
            // a:: interface
            //
            //  b:: interface
        """) == [interface_declaration("a", properties=[interface_declaration("b")])]


class TestErroneously:
    """Malformed input aborts the extraction."""

    def test_no_name_can_be_derived(self):
        with pytest.raises(UnresolvableNameError):
            extract("// ::")

    def test_no_type_can_be_derived(self):
        with pytest.raises(UnresolvableTypeError):
            extract("// foo::-")

    def test_errors_share_a_base_class(self):
        with pytest.raises(ExtractError):
            extract("// ::")

    def test_unknown_line_syntax(self):
        with pytest.raises(UnknownLineSyntaxError):
            extract("//foo")

    def test_malformed_type_spec(self):
        with pytest.raises(TypeSpecSyntaxError):
            extract("// a:: (foo")

    def test_source_syntax_error(self):
        with pytest.raises(SourceSyntaxError):
            extract("// a:: foo\nclass {")

    def test_multi_variable_declaration(self):
        with pytest.raises(UnresolvableNameError, match="multi-variable"):
            extract("// ::-\nlet a = 1, b = 2;")

    def test_method_needs_explicit_type(self):
        with pytest.raises(UnresolvableTypeError):
            extract("class Foo {\n  // ::-\n  bar() {}\n}")

    def test_inconsistent_sibling_indentation(self):
        with pytest.raises(MalformedNestingError):
            extract("""
                // a:: foo
                //
                //   b:: foo
                //
                //     c:: foo
                //
                //    e:: foo
            """)

    def test_destructured_parameter_name(self):
        with pytest.raises(UnsupportedParameterError):
            extract("class Foo {\n  // :: (Object)\n  bar({a}) {}\n}")


class TestDocumentationOnly:
    """Blocks that do not start with a declaration are ignored."""

    def test_plain_comment(self, extract_dicts):
        assert extract_dicts("""
            // Helpers for the editor.
            //
            // Note: nothing here is exported.
            function helper() {}
        """) == []

    def test_blank_line_separates_plain_comment(self, extract_dicts):
        assert extract_dicts("""
            // Helpers for the editor.

            // ::-
            function helper() {}
        """) == [{"name": "helper", "type": {"kind": "Function", "parameters": []}}]

    def test_same_line_remark_does_not_join_next_block(self, extract_dicts):
        assert extract_dicts("""
            const a = 1; // plain remark
            // ::-
            const b = 2;
        """) == [{"name": "b", "type": {"kind": "Any"}}]

    def test_jsdoc_is_ignored(self, extract_dicts):
        assert extract_dicts("""
            /** @returns {number} */
            function f() { return 1; }
        """) == []


class TestVariable:
    """Declarations attached to a variable."""

    def test_name(self, extract_dicts):
        assert extract_dicts("""
            // ::-
            const foo = {};
        """) == [{"name": "foo", "type": {"kind": "Any"}}]

    def test_name_and_interface(self, extract_dicts):
        assert extract_dicts("""
            // Bar:: interface
            //
            //   baz:: number

            // ::-
            const foo = {};
        """) == [
            interface_declaration("Bar", properties=[
                {"name": "baz", "typeSpec": "number", "type": name_type("number")},
            ]),
            {"name": "foo", "type": {"kind": "Any"}},
        ]

    def test_object_property_attaches_to_latest_declaration(self, extract_dicts):
        assert extract_dicts("""
            // Bar:: interface

            // ::-
            const foo = {
              // baz:: number
              baz: 1,
            };
        """) == [
            interface_declaration("Bar"),
            {
                "name": "foo",
                "type": {"kind": "Any"},
                "properties": [{"name": "baz", "typeSpec": "number", "type": name_type("number")}],
            },
        ]


class TestFunction:
    """Declarations attached to a function."""

    def test_name(self, extract_dicts):
        assert extract_dicts("""
            // ::-
            function foo() {}
        """) == [{"name": "foo", "type": {"kind": "Function", "parameters": []}}]

    def test_explicit_type(self, extract_dicts):
        """Function declarations do not backfill parameter names."""
        assert extract_dicts("""
            // :: (bar)
            function foo(x) {}
        """) == [
            {
                "name": "foo",
                "typeSpec": "(bar)",
                "type": {
                    "kind": "Function",
                    "parameters": [{"kind": "FunctionParameter", "type": name_type("bar")}],
                },
            }
        ]

    def test_exported_function(self, extract_dicts):
        assert extract_dicts("""
            // ::-
            export function foo() {}
        """) == [{"name": "foo", "type": {"kind": "Function", "parameters": []}}]


class TestClass:
    """Declarations attached to a class and its members."""

    def test_class_name(self, extract_dicts):
        assert extract_dicts("""
            // ::-
            class Foo {}
        """) == [{"name": "Foo", "type": {"kind": "Class"}}]

    def test_explicit_name_trumps_implied_name(self, extract_dicts):
        assert extract_dicts("""
            // a::-
            class Foo {}
        """) == [{"name": "a", "type": {"kind": "Class"}}]

    def test_method_of_declared_class(self, extract_dicts):
        assert extract_dicts("""
            // ::-
            class Foo {
              // :: (?Object) → ContentMatch
              bar(a, b = 1) {}
            }
        """) == [{"name": "Foo", "type": {"kind": "Class"}, "properties": [CONTENT_MATCH_METHOD]}]

    def test_method_of_undeclared_class(self, extract_dicts):
        """An undocumented class is synthesized to collect its members."""
        assert extract_dicts("""
            class Foo {
              // :: (?Object) → ContentMatch
              bar(a, b = 1) {}
            }
        """) == [{"name": "Foo", "type": {"kind": "Class"}, "properties": [CONTENT_MATCH_METHOD]}]

    def test_default_parameter_name_is_backfilled(self, extract_dicts):
        result = extract_dicts("""
            class Foo {
              // :: (number, ?string)
              bar(a, b = 1) {}
            }
        """)
        parameters = result[0]["properties"][0]["type"]["parameters"]
        assert [p["name"] for p in parameters] == ["a", "b"]

    def test_explicit_parameter_name_is_kept(self, extract_dicts):
        result = extract_dicts("""
            class Foo {
              // :: (pos: number)
              bar(a) {}
            }
        """)
        assert result[0]["properties"][0]["type"]["parameters"][0]["name"] == "pos"

    def test_property_of_declared_class(self, extract_dicts):
        assert extract_dicts("""
            // ::-
            class Foo {
              // bar:: foo
            }
        """) == [{"name": "Foo", "type": {"kind": "Class"}, "properties": [foo_declaration("bar")]}]

    def test_property_of_undeclared_class(self, extract_dicts):
        assert extract_dicts("""
            class Foo {
              // bar:: foo
            }
        """) == [{"name": "Foo", "type": {"kind": "Class"}, "properties": [foo_declaration("bar")]}]

    @pytest.mark.parametrize("separator", [":", "::"])
    def test_constructor_initialised_property_of_undeclared_class(self, extract_dicts, separator):
        assert extract_dicts(f"""
            class Foo {{
              constructor(foo) {{
                // {separator} Foo
                this.bar = foo
              }}
            }}
        """) == [
            {
                "name": "Foo",
                "type": {"kind": "Class"},
                "properties": [{"name": "bar", "typeSpec": "Foo", "type": name_type("Foo")}],
            }
        ]

    def test_constructor_initialised_property_of_declared_class(self, extract_dicts):
        assert extract_dicts("""
            // ::-
            class Foo {
              constructor(foo) {
                // :: Foo
                this.bar = foo
              }
            }
        """) == [
            {
                "name": "Foo",
                "type": {"kind": "Class"},
                "properties": [{"name": "bar", "typeSpec": "Foo", "type": name_type("Foo")}],
            }
        ]

    def test_constructor(self, extract_dicts):
        """Constructor parameters go to the class type, not its properties."""
        assert extract_dicts("""
            class Foo {
              // :: (number)
              constructor(num) {}
            }
        """) == [
            {
                "name": "Foo",
                "type": {
                    "kind": "Class",
                    "constructorParameters": [
                        {"kind": "FunctionParameter", "name": "num", "type": name_type("number")}
                    ],
                },
            }
        ]

    def test_documented_constructor_with_documented_field(self, extract_dicts):
        """Fields assigned in a documented constructor still belong to the class."""
        assert extract_dicts("""
            class Foo {
              // :: (Schema)
              constructor(schema) {
                // :: Schema
                this.schema = schema
              }
            }
        """) == [
            {
                "name": "Foo",
                "type": {
                    "kind": "Class",
                    "constructorParameters": [
                        {"kind": "FunctionParameter", "name": "schema", "type": name_type("Schema")}
                    ],
                },
                "properties": [{"name": "schema", "typeSpec": "Schema", "type": name_type("Schema")}],
            }
        ]

    def test_documented_method_with_documented_field(self, extract_dicts):
        """A this.<field> assignment in a documented method is a field of the class, not of the method."""
        result = extract_dicts("""
            // ::-
            class Foo {
              // :: ()
              init() {
                // :: number
                this.size = 0
              }
            }
        """)
        assert [p["name"] for p in result[0]["properties"]] == ["init", "size"]
        assert "properties" not in result[0]["properties"][0]

    def test_documented_method_with_field_in_undeclared_class(self, extract_dicts):
        result = extract_dicts("""
            class Foo {
              // :: ()
              init() {
                // :: number
                this.size = 0
              }
            }
        """)
        assert len(result) == 1
        assert [p["name"] for p in result[0]["properties"]] == ["init", "size"]

    def test_constructor_of_declared_class(self, extract_dicts):
        result = extract_dicts("""
            // ::-
            class Foo {
              // :: (number)
              constructor(num) {}

              // :: () → number
              size() { return 1; }
            }
        """)
        assert len(result) == 1
        assert result[0]["type"]["constructorParameters"][0]["name"] == "num"
        assert [p["name"] for p in result[0]["properties"]] == ["size"]

    def test_members_keep_source_order(self, extract_dicts):
        result = extract_dicts("""
            // ::-
            class Foo {
              constructor() {
                // :: number
                this.first = 1
                // :: number
                this.second = 2
              }

              // :: () → number
              third() { return 3; }
            }
        """)
        assert [p["name"] for p in result[0]["properties"]] == ["first", "second", "third"]

    def test_exported_class(self, extract_dicts):
        assert extract_dicts("""
            // ::-
            export class Foo {
              // bar:: foo
            }
        """) == [{"name": "Foo", "type": {"kind": "Class"}, "properties": [foo_declaration("bar")]}]


class TestDeclarationInvariants:
    """Properties of the extracted tree."""

    def test_properties_absent_without_children(self):
        declarations = extract("// a:: foo")
        assert declarations[0].properties is None
        assert "properties" not in declarations[0].to_dict()

    def test_extract_has_no_state_between_calls(self):
        source = "class Foo {\n  // bar:: foo\n}"
        assert [d.to_dict() for d in extract(source)] == [d.to_dict() for d in extract(source)]

    def test_declarations_to_json(self):
        text = declarations_to_json(extract("// a:: () → ?Foo"))
        assert json.loads(text) == [
            {
                "name": "a",
                "typeSpec": "() → ?Foo",
                "type": {
                    "kind": "Function",
                    "parameters": [],
                    "returnType": {"kind": "Nullable", "type": name_type("Foo")},
                },
            }
        ]
