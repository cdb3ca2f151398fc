import requests

from shipnote.core.schema.commit import Commit
from shipnote.core.services.commits import CommitRangeExpander
from shipnote.infra.github.source_host import GitHubSourceHost
from tests.fakes import FakeGitHubClient, FakeLogger, FakeRepository, FakeSourceHost


class TestCommitRangeExpander:
    def test_excludes_merge_commits(self) -> None:
        source = FakeSourceHost(
            comparisons={
                ("base", "head"): [
                    Commit(sha="a", parent_count=1),
                    Commit(sha="b", parent_count=2),
                ]
            }
        )
        expander = CommitRangeExpander(source, FakeLogger())

        lookup = expander.expand("base", "head")

        assert lookup.value == [Commit(sha="a", parent_count=1)]

    def test_keeps_order_of_comparison(self) -> None:
        commits = [Commit(sha=sha, parent_count=1) for sha in ("c1", "c2", "c3")]
        source = FakeSourceHost(comparisons={("base", "head"): commits})
        expander = CommitRangeExpander(source, FakeLogger())

        lookup = expander.expand("base", "head")

        assert [commit.sha for commit in lookup.value] == ["c1", "c2", "c3"]

    def test_without_base_uses_head_commit(self) -> None:
        source = FakeSourceHost(commits={"head": Commit(sha="head", parent_count=1)})
        expander = CommitRangeExpander(source, FakeLogger())

        lookup = expander.expand(None, "head")

        assert lookup.value == [Commit(sha="head", parent_count=1)]
        assert source.calls_to("compare_commits") == []

    def test_without_base_merge_head_is_excluded(self) -> None:
        source = FakeSourceHost(commits={"head": Commit(sha="head", parent_count=2)})
        expander = CommitRangeExpander(source, FakeLogger())

        assert expander.expand(None, "head").value == []

    def test_comparison_failure_yields_empty_list(self) -> None:
        source = FakeSourceHost(failing=["compare_commits"])
        logger = FakeLogger()
        expander = CommitRangeExpander(source, logger)

        lookup = expander.expand("base", "head")

        assert lookup.value == []
        assert lookup.failed
        assert "Failed to expand commit range" in logger.messages("warning")

    def test_missing_head_commit_yields_empty_list(self) -> None:
        expander = CommitRangeExpander(FakeSourceHost(), FakeLogger())

        lookup = expander.expand(None, "unknown")

        assert lookup.value == []
        assert lookup.failed

    def test_network_error_yields_empty_list(self) -> None:
        repo = FakeRepository(error=requests.ReadTimeout("read timed out"))
        source = GitHubSourceHost(FakeGitHubClient(repo), "owner", "repo")

        lookup = CommitRangeExpander(source, FakeLogger()).expand("base", "head")

        assert lookup.value == []
        assert lookup.failed
