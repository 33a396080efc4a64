from predictionio.engine_client import EngineClient
from predictionio.errors import BadRequestError, NotFoundError, PredictionIOError, QueryError, ServerError
from predictionio.event_client import EventClient

__all__ = [
    "BadRequestError",
    "EngineClient",
    "EventClient",
    "NotFoundError",
    "PredictionIOError",
    "QueryError",
    "ServerError",
]
