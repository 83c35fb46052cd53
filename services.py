"""
Thin adapters, one per Petstore resource.

Each method maps to exactly one API action and returns the raw
`httpx.Response`. Inputs are not validated and status codes are not
interpreted; both are the test's job.
"""
from pathlib import Path
from typing import List, Optional, Union

import endpoints
from api_helpers import ACCEPT_JSON, JSON_HEADERS, RequestExecutor
from models import Order, Pet, User

PLACEHOLDER_IMAGE = b"dummy image content"


def _mime_type(file_name: str) -> str:
    return "application/pdf" if file_name.lower().endswith(".pdf") else "image/jpeg"


class PetService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    def create_pet(self, pet: Pet):
        return self.executor.post(endpoints.PET, json=pet, headers=JSON_HEADERS)

    def get_pet(self, pet_id):
        return self.executor.get(endpoints.pet_by_id(pet_id), headers=ACCEPT_JSON)

    def update_pet(self, pet: Pet):
        return self.executor.put(endpoints.PET, json=pet, headers=JSON_HEADERS)

    def delete_pet(self, pet_id):
        return self.executor.delete(endpoints.pet_by_id(pet_id), headers=ACCEPT_JSON)

    def find_pets_by_status(self, status: Union[str, List[str]]):
        return self.executor.get(endpoints.pets_by_status(status), headers=ACCEPT_JSON)

    def find_pets_by_tags(self, tags: Union[str, List[str]]):
        return self.executor.get(endpoints.pets_by_tags(tags), headers=ACCEPT_JSON)

    def upload_image(self, pet_id, file_path: str, additional_metadata: Optional[str] = None):
        """
        Multipart upload of `file_path` for a pet.

        A path that is not on disk is replaced by an in-memory placeholder
        under the same file name, so negative tests (unknown pet, wrong file
        type) run without fixture files. The metadata part is only sent when
        given.
        """
        path = Path(file_path)
        file_name = path.name or "test.jpg"
        blob = path.read_bytes() if path.is_file() else PLACEHOLDER_IMAGE

        data = {}
        if additional_metadata is not None:
            data["additionalMetadata"] = additional_metadata

        return self.executor.post(
            endpoints.pet_upload_image(pet_id),
            files={"file": (file_name, blob, _mime_type(file_name))},
            data=data or None,
            headers=ACCEPT_JSON,
        )

    def update_pet_with_form(self, pet_id, name: Optional[str] = None, status: Optional[str] = None):
        # Absent fields are left out of the body entirely, not sent as ""
        form = {}
        if name is not None:
            form["name"] = name
        if status is not None:
            form["status"] = status

        return self.executor.post(
            endpoints.pet_by_id(pet_id),
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded", **ACCEPT_JSON},
        )


class StoreService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    def get_inventory(self):
        """Map of pet status to count."""
        return self.executor.get(endpoints.STORE_INVENTORY, headers=ACCEPT_JSON)

    def place_order(self, order: Order):
        return self.executor.post(endpoints.STORE_ORDER, json=order, headers=JSON_HEADERS)

    def get_order_by_id(self, order_id):
        # Documented valid range is 1-10; the live API does not enforce it
        return self.executor.get(endpoints.order_by_id(order_id), headers=ACCEPT_JSON)

    def delete_order(self, order_id):
        return self.executor.delete(endpoints.order_by_id(order_id), headers=ACCEPT_JSON)


class UserService:
    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    def create_user(self, user: User):
        return self.executor.post(endpoints.USER, json=user, headers=JSON_HEADERS)

    def create_users_with_array(self, users: List[User]):
        return self.executor.post(endpoints.USER_CREATE_WITH_ARRAY, json=users, headers=JSON_HEADERS)

    def create_users_with_list(self, users: List[User]):
        return self.executor.post(endpoints.USER_CREATE_WITH_LIST, json=users, headers=JSON_HEADERS)

    def get_user_by_username(self, username: str):
        return self.executor.get(endpoints.user_by_username(username), headers=ACCEPT_JSON)

    def update_user(self, username: str, user: User):
        return self.executor.put(endpoints.user_by_username(username), json=user, headers=JSON_HEADERS)

    def delete_user(self, username: str):
        return self.executor.delete(endpoints.user_by_username(username), headers=ACCEPT_JSON)

    def login(self, username: str, password: str):
        return self.executor.get(endpoints.user_login(username, password), headers=ACCEPT_JSON)

    def logout(self):
        return self.executor.get(endpoints.USER_LOGOUT, headers=ACCEPT_JSON)
