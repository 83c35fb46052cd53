from typing import Dict, List, Literal, TypedDict

# Enums
PET_STATUS = ["available", "pending", "sold"]
ORDER_STATUS = ["placed", "approved", "delivered"]

PetStatus = Literal["available", "pending", "sold"]
OrderStatus = Literal["placed", "approved", "delivered"]


class Category(TypedDict):
    id: int
    name: str


class Tag(TypedDict):
    id: int
    name: str


class _PetRequired(TypedDict):
    name: str
    photoUrls: List[str]
    status: PetStatus


class Pet(_PetRequired, total=False):
    """A pet payload. `id`, `category` and `tags` are only present when sent."""
    id: int
    category: Category
    tags: List[Tag]


class Order(TypedDict, total=False):
    id: int
    petId: int
    quantity: int
    shipDate: str  # ISO-8601
    status: OrderStatus
    complete: bool


class User(TypedDict, total=False):
    id: int
    username: str
    firstName: str
    lastName: str
    email: str
    password: str
    phone: str
    userStatus: int  # 0 = inactive, 1 = active


class ApiResponse(TypedDict, total=False):
    """Envelope returned by login, logout, delete, upload and form updates."""
    code: int
    type: str
    message: str


Inventory = Dict[str, int]
