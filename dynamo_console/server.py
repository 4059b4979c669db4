"""Local HTTP server for the API.

A Flask app with a single catch-all route converts each request into an API
Gateway HTTP API (v2) event, runs it through the same middleware-wrapped
handler a Lambda deployment would use, and returns the proxy response.
"""

import base64
import queue
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, Optional

from aws_lambda_powertools.logging import Logger
from flask import Flask, Request, Response, request

from .clients.dynamodb import DynamoDBClient
from .config.app import AppConfig
from .config.catalog import Catalog
from .handlers.api_handler import create_app, create_lambda_handler

logger = Logger()

LambdaHandler = Callable[[dict, Any], dict]

HTTP_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def build_event(req: Request) -> Dict[str, Any]:
    """Build an API Gateway HTTP API (v2) event from a Flask request.

    Args:
        req: Incoming request

    Returns:
        Event dictionary accepted by ``APIGatewayHttpResolver``
    """
    headers = {name.lower(): value for name, value in req.headers.items()}
    body = req.get_data(cache=False)
    now = datetime.now(timezone.utc)

    try:
        text_body: Optional[str] = body.decode("utf-8") if body else None
        is_base64 = False
    except UnicodeDecodeError:
        text_body = base64.b64encode(body).decode("ascii")
        is_base64 = True

    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": req.path,
        "rawQueryString": req.query_string.decode("latin-1"),
        "headers": headers,
        "queryStringParameters": req.args.to_dict() or None,
        "requestContext": {
            "http": {
                # Flask answers HEAD through GET routes and drops the body
                "method": "GET" if req.method == "HEAD" else req.method,
                "path": req.path,
                "protocol": req.environ.get("SERVER_PROTOCOL", "HTTP/1.1"),
                "sourceIp": req.remote_addr or "",
                "userAgent": headers.get("user-agent", ""),
            },
            "routeKey": "$default",
            "stage": "$default",
            "time": now.strftime("%d/%b/%Y:%H:%M:%S +0000"),
            "timeEpoch": int(now.timestamp() * 1000),
        },
        "body": text_body,
        "isBase64Encoded": is_base64,
    }


def to_flask_response(proxy: Dict[str, Any]) -> Response:
    """Turn an API Gateway proxy response into a Flask response."""
    headers = {name: str(value) for name, value in (proxy.get("headers") or {}).items()}
    for name, values in (proxy.get("multiValueHeaders") or {}).items():
        headers[name] = ", ".join(str(value) for value in values)
    headers.pop("Content-Length", None)

    body = proxy.get("body") or ""
    if proxy.get("isBase64Encoded"):
        payload = base64.b64decode(body)
    else:
        payload = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    return Response(payload, status=int(proxy.get("statusCode", 200)), headers=headers)


class HandlerPool:
    """Bounded pool of resolver-backed handlers.

    A resolver keeps the current event on itself and a boto3 resource must
    not be shared between threads, so each handler serves one request at a
    time. At most ``size`` requests are handled concurrently; the rest wait
    for a free handler. The catalog and configuration are shared.
    """

    def __init__(self, app_config: AppConfig, catalog: Catalog, size: int) -> None:
        self.app_config = app_config
        self.catalog = catalog
        self._slots = threading.BoundedSemaphore(size)
        self._idle: "queue.LifoQueue[LambdaHandler]" = queue.LifoQueue()
        # Built eagerly so an unusable AWS profile fails at startup
        self._idle.put(self._build())

    def _build(self) -> LambdaHandler:
        client = DynamoDBClient(self.app_config)
        return create_lambda_handler(create_app(self.app_config, self.catalog, client))

    @contextmanager
    def acquire(self) -> Iterator[LambdaHandler]:
        with self._slots:
            try:
                handler = self._idle.get_nowait()
            except queue.Empty:
                handler = self._build()
            try:
                yield handler
            finally:
                self._idle.put(handler)


def create_web_app(app_config: AppConfig, catalog: Catalog) -> Flask:
    """Create the Flask app forwarding every request to the API handler.

    Raises:
        botocore.exceptions.ProfileNotFound: If the AWS profile does not exist
    """
    pool = HandlerPool(app_config, catalog, app_config.worker_threads)
    # The bundle is served by the resolver, not by Flask
    web = Flask(__name__, static_folder=None)

    @web.route("/", defaults={"path": ""}, methods=HTTP_METHODS, provide_automatic_options=False)
    @web.route("/<path:path>", methods=HTTP_METHODS, provide_automatic_options=False)
    def gateway(path: str) -> Response:
        event = build_event(request)
        with pool.acquire() as handler:
            proxy = handler(event, None)
        return to_flask_response(proxy)

    return web


def load_catalog(app_config: AppConfig) -> Catalog:
    if app_config.catalog_file:
        return Catalog.from_file(app_config.catalog_file)
    return Catalog.default()


def main() -> None:
    try:
        app_config = AppConfig.from_env()
        catalog = load_catalog(app_config)
        web = create_web_app(app_config, catalog)
    except Exception as e:
        logger.exception("CRITICAL: Failed to load configuration or initialize services.")
        raise SystemExit(f"Initialization error: {e}") from e

    logger.info(
        f"DynamoDB console starting on http://localhost:{app_config.port}",
        extra={
            "app_env": app_config.app_env,
            "version": app_config.version,
            "aws_profile": app_config.aws_profile,
            "aws_region": app_config.aws_region,
            "tables": catalog.table_count(),
        },
    )
    web.run(host=app_config.host, port=app_config.port, threaded=True)


if __name__ == "__main__":
    main()
