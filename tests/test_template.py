"""Tests for glogkit.template.

Covers:
- Positional substitution (explicit and automatic numbering)
- Arity mismatches in both directions
- Format specs, conversions, nested fields, literal braces
- Rejected templates (named fields, mixed numbering, malformed)
"""

import pytest

from glogkit.errors import TemplateArityError, TemplateError
from glogkit.fields import Arg
from glogkit.template import format, placeholders


class TestSubstitution:
    def test_explicit_positions(self):
        assert format("{0} is the new {1}", [Arg("foo"), Arg("bar")]) == "foo is the new bar"

    def test_automatic_positions(self):
        assert format("{} is the new {}", Arg.of("foo", "bar")) == "foo is the new bar"

    def test_reordered_positions(self):
        assert format("{1} before {0}", Arg.of("a", "b")) == "b before a"

    def test_repeated_index(self):
        assert format("{0}-{0}", Arg.of("x")) == "x-x"

    def test_non_string_values_are_stringified(self):
        assert format("{} rows in {}s", Arg.of(42, 1.5)) == "42 rows in 1.5s"

    def test_no_placeholders_no_args(self):
        assert format("plain text", []) == "plain text"

    def test_format_spec(self):
        assert format("[{0:>5}]", Arg.of("ab")) == "[   ab]"

    def test_conversion(self):
        assert format("got {0!r}", Arg.of("x")) == "got 'x'"

    def test_nested_field_in_spec(self):
        assert format("{0:{1}}", Arg.of(3.14159, ".2f")) == "3.14"

    def test_literal_braces(self):
        assert format("{{}} {0}", Arg.of("x")) == "{} x"

    def test_index_access(self):
        assert format("{0[user]}", Arg.of({"user": "alice"})) == "alice"


class TestArity:
    def test_two_placeholders_one_argument(self):
        with pytest.raises(TemplateArityError) as exc_info:
            format("{0} is the new {1}", [Arg("foo")])

        assert exc_info.value.placeholders == [0, 1]
        assert exc_info.value.arguments == 1

    def test_automatic_too_few(self):
        with pytest.raises(TemplateArityError):
            format("{} and {}", Arg.of("only"))

    def test_one_placeholder_two_arguments(self):
        with pytest.raises(TemplateArityError):
            format("{0}", Arg.of("a", "b"))

    def test_unreferenced_middle_argument(self):
        with pytest.raises(TemplateArityError):
            format("{0} {2}", Arg.of("a", "b", "c"))

    def test_argument_without_placeholders(self):
        with pytest.raises(TemplateArityError):
            format("plain text", Arg.of("extra"))

    def test_arity_error_is_value_error(self):
        with pytest.raises(ValueError):
            format("{}", [])


class TestRejectedTemplates:
    def test_named_placeholder(self):
        with pytest.raises(TemplateError, match="Named placeholder") as exc_info:
            format("{user} failed", Arg.of("alice"))
        assert not isinstance(exc_info.value, TemplateArityError)

    def test_non_ascii_digit_is_not_an_index(self):
        with pytest.raises(TemplateError, match="Named placeholder"):
            format("{\u00b2}", [])

    def test_mixed_numbering(self):
        with pytest.raises(TemplateError, match="mix"):
            format("{} {1}", Arg.of("a", "b"))

    def test_unbalanced_brace(self):
        with pytest.raises(TemplateError, match="Malformed"):
            format("{0", Arg.of("a"))

    def test_stray_closing_brace(self):
        with pytest.raises(TemplateError, match="Malformed"):
            format("oops }", [])

    def test_render_failure_is_chained(self):
        with pytest.raises(TemplateError) as exc_info:
            format("{0.missing}", Arg.of(1))
        assert isinstance(exc_info.value.__cause__, AttributeError)
        assert exc_info.value.template == "{0.missing}"

    def test_bad_format_spec(self):
        with pytest.raises(TemplateError):
            format("{0:d}", Arg.of("not a number"))


class TestPlaceholders:
    def test_reference_order(self):
        assert placeholders("{1} {0} {1}") == [1, 0, 1]

    def test_automatic_with_nested(self):
        assert placeholders("{} {:{}}") == [0, 1, 2]

    def test_attribute_access_uses_head(self):
        assert placeholders("{0.name} {1[0]}") == [0, 1]
