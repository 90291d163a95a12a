import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"
REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdFilter(logging.Filter):
    """Stamp records with the current request id.

    An id passed explicitly via ``extra={"request_id": ...}`` wins over the
    context variable, which is already reset when the 500 handler logs.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if not getattr(record, "request_id", None):
            record.request_id = request_id_ctx.get() or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def init_logging(debug: bool = False, json_format: bool = True) -> None:
    level = logging.DEBUG if debug else logging.INFO
    formatter = JsonFormatter() if json_format else logging.Formatter(PLAIN_FORMAT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


async def request_context_middleware(request, call_next):  # type: ignore
    """Bind a request id for the duration of the request.

    The id is taken from the incoming header when present, otherwise
    generated. It lives in the logging context for handlers and on
    ``request.state`` for the 500 handler, and is echoed on the response.
    """
    rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = rid
    token = request_id_ctx.set(rid)
    logger = logging.getLogger("idr_converter.request")
    logger.debug("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    finally:
        request_id_ctx.reset(token)
    response.headers[REQUEST_ID_HEADER] = rid
    logger.debug("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response
