import os
import threading

import psutil
from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator

logger = Logger()


def _request_line(event: dict) -> dict:
    http = (event.get("requestContext") or {}).get("http") or {}
    return {
        "method": http.get("method"),
        "path": event.get("rawPath"),
        "source_ip": http.get("sourceIp"),
    }


@lambda_handler_decorator
def logging_middleware(handler, event, context):
    """Middleware to automatically handle structured logging."""
    # Keys are passed per call: the logger is shared by every worker thread
    request = _request_line(event)

    process = psutil.Process(os.getpid())
    system_info = {
        "cpu_cores": os.cpu_count(),
        "rss_mb": process.memory_info().rss // (1024 * 1024),
        "memory_percent_used": psutil.virtual_memory().percent,
        "active_threads": threading.active_count(),
    }
    logger.info("Received request", extra={"request": request, "system_info": system_info})

    try:
        response = handler(event, context)
        logger.info(
            "Request handled",
            extra={"request": request, "status_code": (response or {}).get("statusCode")},
        )
        return response
    except Exception:
        logger.exception("Error processing request", extra={"request": request})
        # Re-raise the exception to be handled by the error handler middleware
        raise
