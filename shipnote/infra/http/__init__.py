from shipnote.infra.http.session import DEFAULT_TIMEOUT, build_session

__all__ = ["DEFAULT_TIMEOUT", "build_session"]
