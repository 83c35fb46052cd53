"""
Assertion helpers shared by the scenario modules.

Known deviations
----------------
The live Petstore does not always follow REST conventions (200 for a missing
pet, 200 when deleting something that was never there, bulk creates that
acknowledge but never persist). Scenarios that hit one of these call
`known_deviation` with both the documented status and the observed one:

- documented status    -> pass, the backend conforms
- observed status      -> pass, and a `KnownDeviationWarning` is raised so the
                          discrepancy shows up in pytest's warnings summary
- anything else        -> fail

With PETSTORE_STRICT_CONTRACT=1 the `deviation` fixture passes strict=True,
turning the observed branch into a failure. That is how the same suite is
pointed at a backend that should conform.
"""
import warnings
from typing import Any, Iterable, Optional, Union

import jsonschema
import pytest
from jsonschema.exceptions import ValidationError

Statuses = Union[int, Iterable[int]]


class KnownDeviationWarning(UserWarning):
    """The API answered with a status it is known to return instead of the documented one."""


def _as_tuple(statuses: Statuses) -> tuple:
    return (statuses,) if isinstance(statuses, int) else tuple(statuses)


def _describe(response) -> str:
    request = response.request
    return f"{request.method} {request.url}"


def is_success(response) -> bool:
    return 200 <= response.status_code < 300


def assert_status(response, expected: int):
    assert response.status_code == expected, (
        f"Expected {expected} from {_describe(response)}, got {response.status_code}. "
        f"Body: {response.text}"
    )


def assert_status_in(response, allowed: Statuses):
    allowed = _as_tuple(allowed)
    assert response.status_code in allowed, (
        f"Expected one of {list(allowed)} from {_describe(response)}, got {response.status_code}. "
        f"Body: {response.text}"
    )


def assert_not_server_error(response):
    assert response.status_code < 500, (
        f"Server error from {_describe(response)}: {response.status_code}. Body: {response.text}"
    )


def parse_json(response) -> Any:
    """Decode the body, failing the test with the raw body when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        pytest.fail(
            f"Response from {_describe(response)} is not valid JSON.\n"
            f"Status: {response.status_code}\n"
            f"Content-Type: {response.headers.get('Content-Type', '')}\n"
            f"Body: {response.text!r}"
        )


def json_field(response, name: str) -> Any:
    """One field of a JSON object body, failing the test with the raw body when it is absent."""
    body = parse_json(response)
    if not isinstance(body, dict) or name not in body:
        pytest.fail(
            f"Response from {_describe(response)} has no '{name}' field.\n"
            f"Status: {response.status_code}\n"
            f"Body: {response.text!r}"
        )
    return body[name]


def json_id(response) -> Optional[Any]:
    """`id` of a JSON object body, or None when the create did not persist one."""
    if not is_success(response):
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    return body.get("id") if isinstance(body, dict) else None


def error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or "Unknown error"
    return response.text


def assert_matches_schema(data, schema: dict, label: str):
    try:
        jsonschema.validate(instance=data, schema=schema)
    except ValidationError as e:
        pytest.fail(
            f"Response JSON does not match '{label}' schema:\n"
            f"Validation message: {e.message}\n"
            f"Validator: {e.validator}\n"
            f"Validator path: {list(e.schema_path)}\n"
            f"Instance path: {list(e.path)}\n"
            f"Offending instance: {e.instance}\n"
            f"Full response: {data}"
        )


def known_deviation(response, expected: Statuses, observed: Statuses, reason: str, strict: bool = False) -> bool:
    """
    Check a status that the live API is known to get wrong.

    Returns True when the observed (deviating) status was seen.
    """
    expected = _as_tuple(expected)
    observed = _as_tuple(observed)
    status = response.status_code

    if status in expected:
        return False

    if status in observed:
        message = (
            f"Known API deviation on {_describe(response)}: expected {list(expected)}, "
            f"got {status}. {reason}"
        )
        if strict:
            pytest.fail(f"{message}\nBody: {response.text}")
        warnings.warn(KnownDeviationWarning(message), stacklevel=2)
        return True

    pytest.fail(
        f"Expected {list(expected)} (or known deviation {list(observed)}) from {_describe(response)}, "
        f"got {status}. Body: {response.text}"
    )
