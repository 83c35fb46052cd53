import httpx  # type: ignore

from config import ApiConfig

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}
ACCEPT_JSON = {"Accept": "application/json"}


class RequestExecutor:
    """
    The one HTTP capability every service is given.

    One call to `request` is one request on the wire. Whatever status the API
    answers with comes back as a plain `httpx.Response` so the tests can
    assert on it; only transport failures (timeouts, refused connections)
    raise, and they are left to propagate.
    """

    def __init__(self, config: ApiConfig, transport=None, event_hooks=None):
        self.config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
            event_hooks=event_hooks,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def request(self, method, path, headers=None, params=None, json=None, data=None, files=None, content=None):
        # Do NOT raise on 4xx/5xx, tests assert status codes themselves
        return self._client.request(
            method,
            path,
            headers=headers,
            params=params,
            json=json,
            data=data,
            files=files,
            content=content,
        )

    def get(self, path, **kwargs):
        return self.request("GET", path, **kwargs)

    def post(self, path, **kwargs):
        return self.request("POST", path, **kwargs)

    def put(self, path, **kwargs):
        return self.request("PUT", path, **kwargs)

    def delete(self, path, **kwargs):
        return self.request("DELETE", path, **kwargs)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
