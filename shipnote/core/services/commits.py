from typing import List, Optional

from shipnote.core.exceptions import SourceError
from shipnote.core.ports.logger import Logger
from shipnote.core.ports.source_host import SourceHost
from shipnote.core.schema.commit import Commit
from shipnote.core.schema.lookup import Lookup


class CommitRangeExpander:
    def __init__(self, source: SourceHost, logger: Logger) -> None:
        self._source = source
        self._logger = logger

    def expand(self, base: Optional[str], head: str) -> Lookup[List[Commit]]:
        """List the non-merge commits in ``base...head``.

        Without a base the range is just ``head``.
        """
        try:
            if base is None:
                commits = [self._source.get_commit(head)]
            else:
                commits = self._source.compare_commits(base, head)
        except SourceError as error:
            self._logger.warning(
                "Failed to expand commit range",
                base=base,
                head=head,
                error=str(error),
            )
            return Lookup.failure(str(error), fallback=[])

        kept = [commit for commit in commits if not commit.is_merge]
        self._logger.info(
            "Expanded commit range",
            base=base,
            head=head,
            total=len(commits),
            kept=len(kept),
        )
        return Lookup.found(kept)
