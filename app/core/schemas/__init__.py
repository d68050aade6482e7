from app.core.schemas.base import BaseSchema
from app.core.schemas.api_response import ApiResponse

__all__ = ["BaseSchema", "ApiResponse"]
