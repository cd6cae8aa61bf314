"""Unit tests for fuzzy ranking."""

import pytest

from snipforge.config import SearchSettings
from snipforge.domain.service.fuzzy_ranker import FuzzyRanker, RankingOptions, RankingSession
from tests.conftest import make_snippet


@pytest.fixture
def snippets():
    return (
        make_snippet("Git commit amend", body="git commit --amend", tags=["git"]),
        make_snippet("Docker compose up", body="docker compose up -d", tags=["docker"]),
        make_snippet("List files", body="ls -la", tags=["shell"]),
    )


class TestRankingSession:
    """Tests for RankingSession.search."""

    def test_blank_query_returns_snapshot_itself(self, snippets):
        session = RankingSession(snippets)
        assert session.search("   ") is snippets

    def test_query_below_minimum_length_matches_nothing(self, snippets):
        assert RankingSession(snippets).search("d") == []

    def test_exact_title_match_ranks_first(self, snippets):
        result = RankingSession(snippets).search("docker")
        assert result[0] is snippets[1]
        assert snippets[0] not in result

    def test_tolerates_transposition(self, snippets):
        result = RankingSession(snippets).search("dokcer")
        assert result[0] is snippets[1]

    def test_match_anywhere_in_field(self, snippets):
        result = RankingSession(snippets).search("amend")
        assert result[0] is snippets[0]

    def test_title_outweighs_body(self):
        in_title = make_snippet("Restart nginx", body="systemctl restart nginx")
        in_body = make_snippet("Reload config", body="nginx -s reload")
        result = RankingSession((in_body, in_title)).search("nginx")
        assert result == [in_title, in_body]

    def test_ties_keep_input_order(self):
        first = make_snippet("deploy", body="x1")
        second = make_snippet("deploy", body="x2")
        assert RankingSession((first, second)).search("deploy") == [first, second]
        assert RankingSession((second, first)).search("deploy") == [second, first]

    def test_unrelated_query_matches_nothing(self, snippets):
        assert RankingSession(snippets).search("kubernetes") == []


class TestFuzzyRanker:
    """Tests for FuzzyRanker session reuse."""

    def test_empty_query_returns_same_object(self, snippets):
        ranker = FuzzyRanker()
        assert ranker.rank(snippets, "") is snippets

    def test_reuses_session_for_same_collection(self, snippets):
        ranker = FuzzyRanker()
        session = ranker.session_for(snippets)
        ranker.rank(snippets, "git")
        assert ranker.session_for(snippets) is session

    def test_reuses_session_for_equal_collection(self, snippets):
        ranker = FuzzyRanker()
        session = ranker.session_for(snippets)
        reread = tuple(snippet.model_copy() for snippet in snippets)

        assert ranker.session_for(reread) is session
        assert ranker.rank(reread, "docker")[0] is reread[1]

    def test_rebuilds_when_contents_differ(self, snippets):
        ranker = FuzzyRanker()
        session = ranker.session_for(snippets)
        edited = (
            snippets[0].model_copy(update={"title": "Git log graph"}),
            *snippets[1:],
        )

        assert ranker.session_for(edited) is not session
        assert ranker.rank(edited, "git log graph")[0] is edited[0]

    def test_rebuilds_for_new_collection(self, snippets):
        ranker = FuzzyRanker()
        session = ranker.session_for(snippets)
        changed = snippets + (make_snippet("Git log graph", tags=["git"]),)
        assert ranker.session_for(changed) is not session
        assert ranker.rank(changed, "git log graph")[0] is changed[-1]

    def test_options_from_settings(self):
        settings = SearchSettings(fuzzy_threshold=0.2, title_weight=3.0)
        options = RankingOptions.from_settings(settings)
        assert options.threshold == 0.2
        assert options.total_weight == 3.0 + 1.5 + 1.0 + 0.5
