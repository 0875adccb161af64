# errors.py
"""
Error kinds raised across the answer pipeline and dispatched once by the route.

- UserError: the caller's input tripped a validation or content-policy rule (400).
- ApplicationError: a collaborator call failed or returned something unusable (500).
"""
from typing import Any, List, Optional


class UserError(Exception):
    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.data = data


class ApplicationError(Exception):
    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.data = data


class MissingEnvironmentError(RuntimeError):
    def __init__(self, names: List[str]):
        self.names = list(names)
        super().__init__("Missing environment variable(s): " + ", ".join(self.names))
