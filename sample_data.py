"""Static payloads for parametrized scenarios. Copy before sending if you mutate."""

VALID_PET_NAMES = [
    "Buddy", "Max", "Charlie", "Luna", "Bella",
    "Rocky", "Daisy", "Cooper", "Bailey", "Rex",
]

NON_EXISTENT_ID = 999999999

MINIMAL_PET = {
    "name": "MinimalPet",
    "photoUrls": ["https://example.com/minimal.jpg"],
    "status": "available",
}

PETS_BY_STATUS = {
    "available": {"name": "AvailablePet", "photoUrls": ["https://example.com/available.jpg"], "status": "available"},
    "pending": {"name": "PendingPet", "photoUrls": ["https://example.com/pending.jpg"], "status": "pending"},
    "sold": {"name": "SoldPet", "photoUrls": ["https://example.com/sold.jpg"], "status": "sold"},
}

EDGE_CASE_PETS = {
    "long_name": {"name": "A" * 1000, "photoUrls": ["https://example.com/long-name.jpg"], "status": "available"},
    "special_characters": {"name": "Pet-@#$%^&*()_+=[]{}|;:,.<>?/~`", "photoUrls": ["https://example.com/special.jpg"], "status": "available"},
    "negative_id": {"id": -1, "name": "NegativeIdPet", "photoUrls": ["https://example.com/photo.jpg"], "status": "available"},
}

MINIMAL_ORDER = {"petId": 1, "quantity": 1}

ORDERS_BY_STATUS = {
    "placed": {"petId": 100, "quantity": 1, "status": "placed", "complete": False},
    "approved": {"petId": 200, "quantity": 2, "status": "approved", "complete": False},
    "delivered": {"petId": 300, "quantity": 3, "status": "delivered", "complete": True},
}

EDGE_CASE_ORDERS = {
    "large_quantity": {"petId": 1, "quantity": 999999, "status": "placed"},
    "zero_quantity": {"petId": 1, "quantity": 0, "status": "placed"},
    "negative_quantity": {"petId": 1, "quantity": -5, "status": "placed"},
    # status and completion flag are independent on this API
    "completed_but_placed": {"petId": 1, "quantity": 1, "status": "placed", "complete": True},
}

INVALID_CREDENTIALS = {
    "wrong_username": {"username": "nonexistentuser", "password": "Test@123"},
    "wrong_password": {"username": "testuser", "password": "WrongPassword"},
    "empty_username": {"username": "", "password": "Test@123"},
    "empty_password": {"username": "testuser", "password": ""},
}

EDGE_CASE_USERS = {
    "long_username": {"username": "A" * 500, "email": "long@example.com", "password": "Pass@123"},
    "invalid_email": {"email": "not-a-valid-email", "password": "Pass@123"},
    "short_password": {"email": "short@example.com", "password": "123"},
}

XSS_PAYLOAD = '<script>alert("xss")</script>'
SQL_INJECTION_ID = "999999 OR 1=1"
LARGE_NAME = "A" * 10000
