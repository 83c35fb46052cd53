"""
Runner boundary for the suite: configuration, logging, services and cleanup.

Live scenarios (marker `live`) talk to the real Petstore and are skipped
unless `--run-live` is passed or PETSTORE_LIVE=1 is set.
"""
import functools

import httpx
import pytest

from api_helpers import RequestExecutor
from assertions import KnownDeviationWarning, known_deviation
from config import describe, load_config
from logging_helper import configure_logging, exchange_hooks, log_event, log_status, worker_log_path
from services import PetService, StoreService, UserService


def pytest_addoption(parser):
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="run scenarios against the live Petstore API",
    )


def pytest_configure(config):
    api_config = load_config()
    config._api_config = api_config
    configure_logging(api_config.log_level, worker_log_path(api_config.log_path))


def pytest_report_header(config):
    api_config = config._api_config
    return describe(api_config, run_live=config.getoption("--run-live") or api_config.run_live)


def pytest_collection_modifyitems(config, items):
    api_config = config._api_config
    run_live = config.getoption("--run-live") or api_config.run_live
    skip_live = pytest.mark.skip(reason="live API scenario; use --run-live or PETSTORE_LIVE=1")
    reruns = api_config.retries if config.pluginmanager.hasplugin("rerunfailures") else 0

    for item in items:
        if "live" not in item.keywords:
            continue
        if not run_live:
            item.add_marker(skip_live)
        elif reruns:
            item.add_marker(pytest.mark.flaky(reruns=reruns))


def pytest_warning_recorded(warning_message, when, nodeid, location):
    if issubclass(warning_message.category, KnownDeviationWarning):
        log_event("known_deviation", nodeid=nodeid, message=str(warning_message.message))
        log_status("warning", f"[Known deviation] {nodeid}: ", str(warning_message.message))


def pytest_runtest_logreport(report):
    if report.when != "call" and not report.failed:
        return
    log_event("test_result", nodeid=report.nodeid, phase=report.when, outcome=report.outcome,
              duration_s=round(report.duration, 3))
    if report.failed:
        log_status("error", f"FAILED {report.nodeid} ({report.when})")
    elif report.passed:
        log_status("good", f"PASSED {report.nodeid}")


# -----------------------------
# Fixtures
# -----------------------------
@pytest.fixture(scope="session")
def api_config(pytestconfig):
    return pytestconfig._api_config


@pytest.fixture(scope="session")
def deviation(api_config):
    return functools.partial(known_deviation, strict=api_config.strict_contract)


@pytest.fixture(scope="session")
def executor(api_config):
    with RequestExecutor(api_config, event_hooks=exchange_hooks()) as ex:
        yield ex


@pytest.fixture
def pet_service(executor):
    return PetService(executor)


@pytest.fixture
def store_service(executor):
    return StoreService(executor)


@pytest.fixture
def user_service(executor):
    return UserService(executor)


class Cleanup:
    """
    Deferred, best-effort deletes. Registered steps run in reverse order after
    the test body, whether or not its assertions passed. A delete that fails
    is logged and the remaining steps still run.
    """

    def __init__(self):
        self._steps = []

    def add(self, label, func, *args):
        if args and args[0] is None:
            # creation never produced a persisted identifier
            return
        self._steps.append((label, func, args))

    def run(self):
        while self._steps:
            label, func, args = self._steps.pop()
            try:
                response = func(*args)
            except httpx.HTTPError as exc:
                log_event("cleanup_failed", step=label, args=args, error=str(exc))
                log_status("warning", f"[Cleanup] {label}{args} failed: ", str(exc))
                continue
            log_event("cleanup", step=label, args=args, status_code=response.status_code)


@pytest.fixture
def cleanup():
    steps = Cleanup()
    yield steps
    steps.run()


@pytest.fixture
def track_pet(pet_service, cleanup):
    def _track(pet_id):
        cleanup.add("delete_pet", pet_service.delete_pet, pet_id)
        return pet_id
    return _track


@pytest.fixture
def track_order(store_service, cleanup):
    def _track(order_id):
        cleanup.add("delete_order", store_service.delete_order, order_id)
        return order_id
    return _track


@pytest.fixture
def track_user(user_service, cleanup):
    def _track(username):
        cleanup.add("delete_user", user_service.delete_user, username)
        return username
    return _track
