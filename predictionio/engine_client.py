# predictionio/engine_client.py - query client for a deployed PredictionIO engine
"""
Client for PredictionIO engine instances.

    client = EngineClient()
    try:
        result = client.send_query({"user": "foobar", "num": 4})
    except NotFoundError:
        ...
    except BadRequestError:
        ...
    except ServerError:
        ...

Every call is a single blocking HTTP round trip. Nothing is retried.
"""
import json
from typing import Any, Callable, Optional

import requests

from predictionio.api_client import Connection, RawBody, Request, fetch_status, response_text
from predictionio.errors import error_for_status
from predictionio.utils.logger import get_logger
from predictionio.utils.settings import DEFAULT_ENGINE_URL, Settings

logger = get_logger()


class EngineClient:
    def __init__(
        self,
        api_url: str = DEFAULT_ENGINE_URL,
        session: Optional[requests.Session] = None,
        configure: Optional[Callable[[requests.Session], None]] = None,
    ):
        self.connection = Connection(api_url, session=session, configure=configure)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "EngineClient":
        get_logger(level=settings.log_level)
        return cls(settings.engine_url, **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> "EngineClient":
        return cls.from_settings(Settings.from_env(), **kwargs)

    def get_status(self):
        """Returns the engine's status page, or the raw response if its body is unreadable."""
        return fetch_status(self.connection)

    def send_query(self, query: Any) -> Any:
        """
        POST the query to /queries.json and return the decoded JSON result.

        The query can be any structure json.dumps accepts. A non-2xx
        response raises BadRequestError (400), NotFoundError (404),
        ServerError (500) or QueryError for any other status.
        """
        response = self.connection.post(Request("/queries.json", body=RawBody(json.dumps(query))))
        if 200 <= response.status_code < 300:
            return response.json()

        msg = response_text(response)
        if msg is None:
            msg = repr(response)
        error_cls = error_for_status(response.status_code)
        logger.warning("Query failed with status %s: %s", response.status_code, msg)
        raise error_cls(msg, response=response)

    def close(self):
        self.connection.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
