import json
import logging
import os
import time
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

RED = "\033[91m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
RESET = "\033[0m"
WHITE = "\033[97m"

CONSOLE_LOGGER = "petstore"
EXCHANGE_LOGGER = "petstore.exchange"
REQUEST_ID_HEADER = "X-Request-Id"


def configure_logging(level="INFO", log_path="logs/api_test.log"):
    """
    Console lines for humans, JSON lines on disk for tooling.

    Console records propagate to the root logger, where pytest's log capture
    owns them (shown for failing tests, or live with --log-cli-level). Safe
    to call more than once; handlers are replaced, not stacked.
    """
    console = logging.getLogger(CONSOLE_LOGGER)
    console.setLevel(level)
    console.propagate = True
    for h in list(console.handlers):
        console.removeHandler(h)

    exchange = logging.getLogger(EXCHANGE_LOGGER)
    exchange.setLevel(logging.INFO)
    exchange.propagate = False
    for h in list(exchange.handlers):
        exchange.removeHandler(h)
        h.close()
    log_dir = os.path.dirname(log_path)
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=2, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter("%(message)s"))  # JSON lines only
    exchange.addHandler(file_handler)

    return console


def worker_log_path(log_path, worker=None):
    """
    One log file per pytest-xdist worker; RotatingFileHandler cannot share a
    file across processes.
    """
    worker = worker if worker is not None else os.environ.get("PYTEST_XDIST_WORKER", "")
    if not worker:
        return log_path
    root, ext = os.path.splitext(log_path)
    return f"{root}.{worker}{ext}"


def log_status(status, message, extra=""):
    status = status.lower()
    color = WHITE  # default

    if status == "error":
        color = RED
    elif status == "warning":
        color = YELLOW
    elif status == "good":
        color = GREEN

    logger = logging.getLogger(CONSOLE_LOGGER)
    if not extra:
        logger.info(f"{color}{message}{RESET}")
    else:
        logger.info(f"{color}{message}{extra}{RESET}")


def log_event(event, **fields):
    record = {"event": event, "ts": round(time.time(), 3)}
    record.update(fields)
    logging.getLogger(EXCHANGE_LOGGER).info(json.dumps(record, default=str))


# -----------------------------
# httpx event hooks
# -----------------------------
def log_request(request):
    request_id = request.headers.get(REQUEST_ID_HEADER)
    if not request_id:
        request_id = str(uuid.uuid4())
        request.headers[REQUEST_ID_HEADER] = request_id
    log_event(
        "api_request",
        request_id=request_id,
        method=request.method,
        url=str(request.url),
    )
    logging.getLogger(CONSOLE_LOGGER).debug(f"[API Request] {request.method} {request.url}")


def log_response(response):
    request = response.request
    log_event(
        "api_response",
        request_id=request.headers.get(REQUEST_ID_HEADER),
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
    )
    status = "good" if response.status_code < 400 else "warning"
    if response.status_code >= 500:
        status = "error"
    log_status(status, f"[API Response] {response.status_code} {request.method} {request.url}")


def exchange_hooks():
    return {"request": [log_request], "response": [log_response]}
