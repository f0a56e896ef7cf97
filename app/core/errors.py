"""
Application error types that carry an HTTP-facing shape.

Handlers raise these; app/api/error_handlers.py renders them.
"""

from typing import Dict, List

VALIDATION_TITLE = "One or more validation errors occurred."


class ValidationProblem(Exception):
    """
    Field-level validation failure detected inside a handler (for example a
    job pointing at a location that does not exist).

    Rendered as a 400 with the same body as request validation errors.
    """

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(VALIDATION_TITLE)
        self.errors = errors

    def to_response(self) -> dict:
        return {
            "title": VALIDATION_TITLE,
            "status": 400,
            "errors": self.errors,
        }
