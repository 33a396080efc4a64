# predictionio/api_client.py - connection wrapper around requests.Session
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union
from urllib.parse import urlencode

import requests

from predictionio.utils.logger import get_logger

logger = get_logger()

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True)
class FormBody:
    """Mapping sent form-encoded by the transport."""

    fields: Mapping[str, Any]


@dataclass(frozen=True)
class RawBody:
    """Pre-serialized payload (normally JSON) sent as-is."""

    data: str


Body = Union[FormBody, RawBody]


@dataclass(frozen=True)
class Request:
    path: str
    query: Optional[Mapping[str, Any]] = None
    body: Optional[Body] = None

    @property
    def qpath(self) -> str:
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query)}"


class Connection:
    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        configure: Optional[Callable[[requests.Session], None]] = None,
    ):
        self.base_url = base_url.rstrip('/')
        # a caller-supplied session stays open on close()
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers["Content-Type"] = JSON_CONTENT_TYPE
        hooks = self.session.hooks["response"]
        if self._log_response not in hooks:
            hooks.append(self._log_response)
        if configure is not None:
            configure(self.session)

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _log_response(response, *args, **kwargs):
        logger.info("%s %s -> %s", response.request.method, response.url, response.status_code)

    def _body_kwargs(self, request: Request) -> dict:
        body = request.body
        if body is None:
            return {}
        if isinstance(body, FormBody):
            return {"data": dict(body.fields)}
        if isinstance(body, RawBody):
            return {"data": body.data}
        raise TypeError(f"unsupported request body: {type(body).__name__}")

    def get(self, request: Request) -> requests.Response:
        url = self._url(request.path)
        logger.debug("GET %s params=%s", url, request.query)
        return self.session.get(url, params=request.query)

    def post(self, request: Request) -> requests.Response:
        url = self._url(request.path)
        kwargs = self._body_kwargs(request)
        logger.debug("POST %s params=%s body=%s", url, request.query, kwargs.get("data"))
        return self.session.post(url, params=request.query, **kwargs)

    def delete(self, request: Request) -> requests.Response:
        url = self._url(request.path)
        kwargs = self._body_kwargs(request)
        logger.debug("DELETE %s params=%s body=%s", url, request.query, kwargs.get("data"))
        return self.session.delete(url, params=request.query, **kwargs)

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def response_text(response):
    """Body text of a response, or None when it cannot be read."""
    try:
        return response.text
    except (AttributeError, ValueError):
        return None


def fetch_status(connection: Connection):
    status = connection.get(Request("/"))
    text = response_text(status)
    return status if text is None else text
