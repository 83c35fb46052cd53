import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://petstore.swagger.io/v2/"

TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ApiConfig:
    """
    Everything the suite needs to know about where and how to talk to the API.
    Built once per test session and handed to the request executor.
    """
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    retries: int = 0
    run_live: bool = False
    strict_contract: bool = False
    log_level: str = "INFO"
    log_path: str = "logs/api_test.log"
    environment: str = "default"
    is_ci: bool = False


def _flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "").strip().lower() in TRUTHY


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a {cast.__name__}, got {raw!r}") from None


def normalize_base_url(url: str) -> str:
    # relative endpoint paths are joined onto the base, so it has to end with a slash
    url = url.strip()
    return url if url.endswith("/") else url + "/"


def load_config(env: Optional[Mapping[str, str]] = None) -> ApiConfig:
    env = os.environ if env is None else env

    is_ci = _flag(env, "CI")
    base_url = env.get("API_BASE_URL") or env.get("BASE_URL") or DEFAULT_BASE_URL
    retries = _number(env, "RETRY_COUNT", 2 if is_ci else 0, int)
    if retries < 0:
        raise ValueError(f"RETRY_COUNT must not be negative, got {retries}")

    return ApiConfig(
        base_url=normalize_base_url(base_url),
        timeout=_number(env, "REQUEST_TIMEOUT", 30.0, float),
        retries=retries,
        run_live=_flag(env, "PETSTORE_LIVE"),
        strict_contract=_flag(env, "PETSTORE_STRICT_CONTRACT"),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        log_path=env.get("API_LOG_PATH", "logs/api_test.log"),
        environment=env.get("TEST_ENV", "default"),
        is_ci=is_ci,
    )


def describe(config: ApiConfig, run_live: Optional[bool] = None) -> str:
    """One-line summary for the pytest report header."""
    live = config.run_live if run_live is None else run_live
    mode = "live" if live else "offline"
    contract = "strict" if config.strict_contract else "lenient"
    return f"petstore: {config.base_url} [env={config.environment}, {mode}, {contract} contract, retries={config.retries}]"
