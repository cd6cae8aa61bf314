"""Unit tests for placeholder tokenizing and substitution."""

import time

import pytest

from snipforge.domain.service.variables import (
    Literal,
    Placeholder,
    extract_variables,
    has_variables,
    substitute,
    tokenize,
)


class TestTokenize:
    """Tests for the placeholder tokenizer."""

    @pytest.mark.parametrize(
        "body",
        [
            "",
            "plain text",
            "ssh {{user}}@{{host}}",
            "{{unterminated",
            "{{a}b}}",
            "{{{a}}",
            "}}{{",
            "{{}}",
            "a {{ x }} b {{y}}c",
        ],
    )
    def test_tokens_reproduce_body(self, body):
        assert "".join(token.raw for token in tokenize(body)) == body

    def test_splits_literals_and_placeholders(self):
        assert tokenize("ssh {{user}}@host") == [
            Literal("ssh "),
            Placeholder(raw="{{user}}", content="user"),
            Literal("@host"),
        ]

    def test_no_nesting(self):
        tokens = tokenize("{{{a}}")
        assert tokens == [Placeholder(raw="{{{a}}", content="{a")]

    def test_single_closing_brace_ends_the_span(self):
        assert tokenize("{{a}b}}") == [Literal("{{a}b}}")]

    def test_empty_span_is_literal(self):
        assert tokenize("{{}}") == [Literal("{{}}")]

    def test_failed_span_resumes_after_its_closing_brace(self):
        assert tokenize("{{a}{{b}}") == [
            Literal("{{a}"),
            Placeholder(raw="{{b}}", content="b"),
        ]

    def test_long_run_of_open_braces_is_scanned_once(self):
        body = "{" * 200_000 + "}"
        started = time.perf_counter()

        tokens = tokenize(body)

        assert tokens == [Literal(body)]
        assert time.perf_counter() - started < 1.0


class TestExtractVariables:
    """Tests for extract_variables."""

    def test_distinct_names_in_first_occurrence_order(self):
        body = "docker exec -it {{container name}} {{command}} # {{ container name }}"
        assert extract_variables(body) == ["container name", "command"]

    def test_unterminated_placeholder_yields_nothing(self):
        assert extract_variables("echo {{name") == []

    def test_blank_names_are_skipped(self):
        assert extract_variables("{{   }} {{x}}") == ["x"]

    def test_no_placeholders(self):
        assert extract_variables("ls -la") == []


class TestSubstitute:
    """Tests for substitute."""

    def test_unresolved_placeholder_is_preserved(self):
        result = substitute("ssh {{username}}@{{server address}}", {"username": "al"})
        assert result == "ssh al@{{server address}}"

    def test_names_are_trimmed(self):
        assert substitute("cd {{ dir }}", {"dir": "/tmp"}) == "cd /tmp"

    def test_empty_value_counts_as_provided(self):
        assert substitute("a{{x}}b", {"x": ""}) == "ab"

    def test_repeated_placeholder_replaced_everywhere(self):
        assert substitute("{{n}}-{{n}}", {"n": "1"}) == "1-1"

    def test_values_are_not_rescanned(self):
        assert substitute("{{a}}", {"a": "{{b}}", "b": "no"}) == "{{b}}"

    def test_no_values_returns_body(self):
        body = "echo {{x}}"
        assert substitute(body, {}) == body


class TestHasVariables:
    """Tests for has_variables."""

    @pytest.mark.parametrize(
        "body, expected",
        [
            ("echo {{x}}", True),
            ("echo {x}", False),
            ("echo {{x", False),
            ("", False),
        ],
    )
    def test_has_variables(self, body, expected):
        assert has_variables(body) is expected
