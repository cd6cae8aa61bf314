"""Unit tests for structured filtering."""

from snipforge.domain.service.filter_engine import apply_filters, matches_filter
from snipforge.domain.service.query_parser import parse_search_query
from snipforge.domain.value import FilterKind, SearchFilter
from tests.conftest import make_snippet


class TestApplyFilters:
    """Tests for apply_filters."""

    def test_no_filters_returns_input_unchanged(self):
        snippets = [make_snippet("a"), make_snippet("b")]
        assert apply_filters(snippets, parse_search_query("  ")) is snippets

    def test_tag_and_title_must_both_match(self):
        ssh = make_snippet("SSH connect", tags=["ssh", "remote"])
        git = make_snippet("Git status", tags=["git"])
        assert apply_filters([ssh, git], parse_search_query("tag:git|title:ssh")) == []

    def test_multi_value_tag_clause_is_intersection(self):
        both = make_snippet("both", tags=["git", "docker"])
        git = make_snippet("git", tags=["git"])
        docker = make_snippet("docker", tags=["docker"])
        result = apply_filters([both, git, docker], parse_search_query("tag:git,docker"))
        assert result == [both]

    def test_tag_values_match_by_substring(self):
        digital = make_snippet("digital", tags=["digital"])
        assert apply_filters([digital], parse_search_query("tag:git")) == [digital]

    def test_preserves_input_order(self):
        first = make_snippet("deploy api", body="x")
        second = make_snippet("other", body="deploy db")
        third = make_snippet("deploy web", body="y")
        result = apply_filters([first, second, third], parse_search_query("deploy"))
        assert result == [first, second, third]

    def test_free_text_matches_title_or_body(self):
        title_hit = make_snippet("Docker prune", body="x")
        body_hit = make_snippet("cleanup", body="docker system prune")
        miss = make_snippet("ls", body="ls -la", description="docker")
        result = apply_filters(
            [title_hit, body_hit, miss], parse_search_query("DOCKER")
        )
        assert result == [title_hit, body_hit]


class TestMatchesFilter:
    """Tests for matches_filter."""

    def test_body_filter_is_case_insensitive(self):
        snippet = make_snippet("x", body="Git Push --Force")
        assert matches_filter(snippet, SearchFilter(kind=FilterKind.BODY, value="push --force"))

    def test_title_filter_ignores_body(self):
        snippet = make_snippet("list", body="ssh host")
        assert not matches_filter(snippet, SearchFilter(kind=FilterKind.TITLE, value="ssh"))

    def test_tag_filter_without_tags(self):
        snippet = make_snippet("x")
        assert not matches_filter(snippet, SearchFilter(kind=FilterKind.TAG, value="git"))
