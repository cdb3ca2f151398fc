from shipnote.infra.linear.client import LINEAR_GRAPHQL_URL, LinearIssueTracker

__all__ = ["LINEAR_GRAPHQL_URL", "LinearIssueTracker"]
