from shipnote.infra.github.client import GitHubClient
from shipnote.infra.github.source_host import GitHubSourceHost

__all__ = ["GitHubClient", "GitHubSourceHost"]
