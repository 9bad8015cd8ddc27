"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- envelope: Uniform {success, data, message, errors, count} response body
- exercises: Exercise request documentation models
"""

from api.schemas.envelope import ApiResponse, api_response, error_response
from api.schemas.exercises import ExerciseFieldsDoc

__all__ = [
    "ApiResponse",
    "api_response",
    "error_response",
    "ExerciseFieldsDoc",
]
