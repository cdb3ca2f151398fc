from typing import Any, Dict, Optional

import requests

from shipnote.core.exceptions import TicketLookupError
from shipnote.core.ports.issue_tracker import IssueTracker
from shipnote.core.schema.pr import Ticket
from shipnote.infra.http import DEFAULT_TIMEOUT, build_session

LINEAR_GRAPHQL_URL = "https://api.linear.app/graphql"

ISSUE_QUERY = """
query Issue($id: String!) {
  issue(id: $id) {
    identifier
    url
    title
  }
}
""".strip()


class LinearIssueTracker(IssueTracker):
    def __init__(
        self,
        api_key: str,
        *,
        url: str = LINEAR_GRAPHQL_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._session = session or build_session({"Authorization": api_key})

    def get_ticket(self, identifier: str) -> Optional[Ticket]:
        data = self._query(identifier, ISSUE_QUERY, {"id": identifier})
        issue = data.get("issue")
        if not issue:
            return None
        return Ticket(
            identifier=issue.get("identifier") or identifier,
            url=issue.get("url") or "",
            title=issue.get("title") or "",
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "LinearIssueTracker":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()

    def _query(
        self, identifier: str, query: str, variables: Dict[str, Any]
    ) -> Dict[str, Any]:
        try:
            response = self._session.post(
                self._url,
                json={"query": query, "variables": variables},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as error:
            raise TicketLookupError(
                f"Linear request failed: {error}", identifier
            ) from error
        except ValueError as error:
            raise TicketLookupError(
                "Linear returned a non-JSON response", identifier
            ) from error

        errors = payload.get("errors") or []
        if errors:
            messages = [str(item.get("message", "")) for item in errors]
            if all("not found" in message.lower() for message in messages):
                return {}
            raise TicketLookupError(
                f"Linear query failed: {'; '.join(messages)}", identifier
            )
        return payload.get("data") or {}
