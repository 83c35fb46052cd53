"""
Factories that build fresh Pet, Order and User payloads for each test.

Identifying fields (id, name, username) come from a millisecond clock so
parallel tests do not trip over each other's data. Keyword overrides are
applied last and always win. Nothing here touches the network.
"""
import copy
import random
import string
import threading
import time
from datetime import datetime, timezone
from typing import List, Optional

from models import ORDER_STATUS, PET_STATUS, Category, Order, Pet, Tag, User

DEFAULT_CATEGORIES: List[Category] = [
    {"id": 1, "name": "Dogs"},
    {"id": 2, "name": "Cats"},
    {"id": 3, "name": "Birds"},
    {"id": 4, "name": "Fish"},
]

DEFAULT_TAGS: List[Tag] = [
    {"id": 1, "name": "friendly"},
    {"id": 2, "name": "energetic"},
    {"id": 3, "name": "calm"},
    {"id": 4, "name": "playful"},
]

DEFAULT_PASSWORD = "Test@123"

_id_lock = threading.Lock()
_last_id = 0


# -----------------------------
# Shared generators
# -----------------------------
def generate_unique_id() -> int:
    """
    Current time in milliseconds, bumped by one when called twice within the
    same millisecond so two calls in one process never return the same value.
    """
    global _last_id
    with _id_lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return candidate


def generate_random_string(length: int = 8) -> str:
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def generate_unique_name(prefix: str) -> str:
    return f"{prefix}_{generate_unique_id()}"


def format_timestamp(moment: Optional[datetime] = None) -> str:
    moment = moment or datetime.now(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# -----------------------------
# Pet
# -----------------------------
def create_pet_data(**overrides) -> Pet:
    unique = generate_unique_id()
    pet: Pet = {
        "id": unique,
        "name": f"TestPet_{unique}",
        "photoUrls": [f"https://example.com/photo_{unique}.jpg"],
        "status": "available",
        "category": dict(random.choice(DEFAULT_CATEGORIES)),
        "tags": [dict(random.choice(DEFAULT_TAGS))],
    }
    pet.update(overrides)
    return pet


def create_pet_with_status(status: str, **overrides) -> Pet:
    return create_pet_data(status=status, **overrides)


def create_multiple_pets(count: int, **base_overrides) -> List[Pet]:
    pets = []
    for index in range(count):
        fields = {"name": f"Pet_{index + 1}_{generate_unique_id()}"}
        fields.update(base_overrides)
        pets.append(create_pet_data(**fields))
    return pets


def create_random_pet() -> Pet:
    return create_pet_data(
        status=random.choice(PET_STATUS),
        category=dict(random.choice(DEFAULT_CATEGORIES)),
        tags=[dict(random.choice(DEFAULT_TAGS))],
    )


def update_pet_data(existing: Pet, **updates) -> Pet:
    updated = copy.deepcopy(existing)
    updated.update(updates)
    return updated


# -----------------------------
# Order
# -----------------------------
def create_order_data(**overrides) -> Order:
    order: Order = {
        "id": generate_unique_id(),
        "petId": random.randint(1, 1000),
        "quantity": random.randint(1, 5),
        "shipDate": format_timestamp(),
        "status": "placed",
        "complete": False,
    }
    order.update(overrides)
    return order


def create_order_with_status(status: str, **overrides) -> Order:
    return create_order_data(status=status, **overrides)


def create_multiple_orders(count: int, **base_overrides) -> List[Order]:
    return [create_order_data(**base_overrides) for _ in range(count)]


def create_random_order() -> Order:
    return create_order_data(
        status=random.choice(ORDER_STATUS),
        quantity=random.randint(1, 10),
        complete=random.random() > 0.5,
    )


def update_order_data(existing: Order, **updates) -> Order:
    updated = copy.deepcopy(existing)
    updated.update(updates)
    return updated


# -----------------------------
# User
# -----------------------------
def generate_unique_username(prefix: str = "user") -> str:
    return generate_unique_name(prefix)


def generate_email(username: Optional[str] = None) -> str:
    user = username or generate_random_string(8).lower()
    return f"{user}@example.com"


def create_user_data(**overrides) -> User:
    username = generate_unique_username("testuser")
    user: User = {
        "id": generate_unique_id(),
        "username": username,
        "firstName": "Test",
        "lastName": "User",
        "email": generate_email(username),
        "password": DEFAULT_PASSWORD,
        "phone": "+1234567890",
        "userStatus": 1,
    }
    user.update(overrides)
    return user


def create_multiple_users(count: int, **base_overrides) -> List[User]:
    users = []
    for _ in range(count):
        username = generate_unique_username()
        fields = {"username": username, "email": generate_email(username)}
        fields.update(base_overrides)
        users.append(create_user_data(**fields))
    return users


def create_minimal_user() -> User:
    username = generate_unique_username()
    return {
        "username": username,
        "email": generate_email(username),
        "password": "Pass@123",
    }


def create_user_with_status(status: int, **overrides) -> User:
    return create_user_data(userStatus=status, **overrides)


def create_user_with_credentials(username: str, password: str, **overrides) -> User:
    fields = {"username": username, "password": password, "email": generate_email(username)}
    fields.update(overrides)
    return create_user_data(**fields)


def update_user_data(existing: User, **updates) -> User:
    updated = copy.deepcopy(existing)
    updated.update(updates)
    return updated
