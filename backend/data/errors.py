"""Domain errors raised by the data layer and mapped to HTTP responses in main.py."""


class StoreError(Exception):
    """Base class for expected, client-facing failures."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    status_code = 404

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class InvalidCredentials(StoreError):
    status_code = 401

    def __init__(self):
        super().__init__("Invalid credentials")


class DuplicateUsername(StoreError):
    status_code = 400

    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already taken")
