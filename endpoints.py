"""
Relative request targets for every Petstore action.

All paths are relative to the configured base URL (no leading slash).
Nothing here validates its input: a negative id or a junk username is
forwarded exactly as given so the tests can see how the API reacts.
"""
from typing import Iterable, Union
from urllib.parse import quote, urlencode

Identifier = Union[int, str]


def _segment(value: Identifier) -> str:
    return quote(str(value), safe="")


def _csv(values: Union[str, Iterable[str]]) -> str:
    if isinstance(values, str):
        return quote(values, safe=",")
    return ",".join(quote(str(v), safe="") for v in values)


# -----------------------------
# Pet
# -----------------------------
PET = "pet"


def pet_by_id(pet_id: Identifier) -> str:
    return f"{PET}/{_segment(pet_id)}"


def pets_by_status(status: Union[str, Iterable[str]]) -> str:
    return f"{PET}/findByStatus?status={_csv(status)}"


def pets_by_tags(tags: Union[str, Iterable[str]]) -> str:
    return f"{PET}/findByTags?tags={_csv(tags)}"


def pet_upload_image(pet_id: Identifier) -> str:
    return f"{pet_by_id(pet_id)}/uploadImage"


# -----------------------------
# Store
# -----------------------------
STORE = "store"
STORE_INVENTORY = f"{STORE}/inventory"
STORE_ORDER = f"{STORE}/order"


def order_by_id(order_id: Identifier) -> str:
    return f"{STORE_ORDER}/{_segment(order_id)}"


# -----------------------------
# User
# -----------------------------
USER = "user"
USER_CREATE_WITH_ARRAY = f"{USER}/createWithArray"
USER_CREATE_WITH_LIST = f"{USER}/createWithList"
USER_LOGIN = f"{USER}/login"
USER_LOGOUT = f"{USER}/logout"


def user_by_username(username: str) -> str:
    return f"{USER}/{_segment(username)}"


def user_login(username: str, password: str) -> str:
    return f"{USER_LOGIN}?{urlencode({'username': username, 'password': password})}"
