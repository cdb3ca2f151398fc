from typing import Mapping

import requests

DEFAULT_TIMEOUT = 30.0


def build_session(headers: Mapping[str, str]) -> requests.Session:
    session = requests.Session()
    session.headers.update({"Accept": "application/json", **headers})
    return session
