# predictionio/event_client.py - Event API client (POST/GET/DELETE /events.json)
"""
Client for the PredictionIO Event Server.

    client = EventClient(access_key)
    client.set_user("foouser", {"properties": {"gender": "f"}})
    client.record_user_action_on_item("rate", "foouser", "baritem", {"properties": {"rating": 4}})

Unlike EngineClient.send_query, these methods never raise on an HTTP error
status: they return the raw requests.Response and leave the status to the
caller. Transport errors from requests still propagate.
"""
import json
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

import requests

from predictionio.api_client import Connection, RawBody, Request, fetch_status
from predictionio.utils.logger import get_logger
from predictionio.utils.settings import DEFAULT_EVENT_URL, Settings

logger = get_logger()

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def check_unset_properties(optional: Optional[Mapping[str, Any]]):
    if not optional or "properties" not in optional:
        raise ValueError("properties must be present when event is $unset")
    if not optional["properties"]:
        raise ValueError("properties cannot be empty when event is $unset")


class EventClient:
    def __init__(
        self,
        access_key: str,
        api_url: str = DEFAULT_EVENT_URL,
        session: Optional[requests.Session] = None,
        configure: Optional[Callable[[requests.Session], None]] = None,
        clock: Optional[Clock] = None,
    ):
        self.access_key = access_key
        self.clock = clock or utc_now
        self.connection = Connection(api_url, session=session, configure=configure)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "EventClient":
        if not settings.access_key:
            raise ValueError("access key is required (set PIO_ACCESS_KEY)")
        get_logger(level=settings.log_level)
        return cls(settings.access_key, settings.event_url, **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> "EventClient":
        return cls.from_settings(Settings.from_env(), **kwargs)

    def _auth(self) -> Dict[str, str]:
        return {"accessKey": self.access_key}

    def get_status(self):
        """Returns the event server's status page, or the raw response if its body is unreadable."""
        return fetch_status(self.connection)

    def create_event(
        self,
        event: str,
        entity_type: str,
        entity_id: str,
        optional: Optional[Mapping[str, Any]] = None,
        clock: Optional[Clock] = None,
    ) -> requests.Response:
        """
        POST /events.json and return the response.

        `optional` holds the other event fields (properties, targetEntityType,
        targetEntityId, eventTime, ...). It is copied, not modified. eventTime
        defaults to the clock's current time.
        """
        payload = dict(optional or {})
        if "eventTime" not in payload:
            payload["eventTime"] = (clock or self.clock)().isoformat(timespec="milliseconds")
        payload["event"] = event
        payload["entityType"] = entity_type
        payload["entityId"] = entity_id
        logger.debug("Creating %s event for %s %s", event, entity_type, entity_id)
        return self.connection.post(
            Request("/events.json", query=self._auth(), body=RawBody(json.dumps(payload)))
        )

    def delete_event(self, event_id: str) -> requests.Response:
        # DELETE /events/<event_id>.json
        return self.connection.delete(
            Request(f"/events/{event_id}.json", query=self._auth(), body=RawBody(json.dumps({})))
        )

    def find_events(self, params: Optional[Mapping[str, Any]] = None) -> requests.Response:
        # GET /events.json
        query = dict(params or {})
        query.update(self._auth())
        return self.connection.get(Request("/events.json", query=query))

    def set_user(self, uid: str, optional: Optional[Mapping[str, Any]] = None):
        return self.create_event("$set", "user", uid, optional)

    def unset_user(self, uid: str, optional: Mapping[str, Any]):
        """optional["properties"] must be a non-empty mapping."""
        check_unset_properties(optional)
        return self.create_event("$unset", "user", uid, optional)

    def delete_user(self, uid: str, optional: Optional[Mapping[str, Any]] = None):
        return self.create_event("$delete", "user", uid, optional)

    def set_item(self, iid: str, optional: Optional[Mapping[str, Any]] = None):
        return self.create_event("$set", "item", iid, optional)

    def unset_item(self, iid: str, optional: Mapping[str, Any]):
        """optional["properties"] must be a non-empty mapping."""
        check_unset_properties(optional)
        return self.create_event("$unset", "item", iid, optional)

    def delete_item(self, iid: str, optional: Optional[Mapping[str, Any]] = None):
        return self.create_event("$delete", "item", iid, optional)

    def record_user_action_on_item(
        self,
        action: str,
        uid: str,
        iid: str,
        optional: Optional[Mapping[str, Any]] = None,
    ):
        payload = dict(optional or {})
        payload["targetEntityType"] = "item"
        payload["targetEntityId"] = iid
        return self.create_event(action, "user", uid, payload)

    def close(self):
        self.connection.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
