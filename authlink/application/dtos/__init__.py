"""Data Transfer Objects returned by the auth service.

DTOs carry data from the application layer to the presentation layer. They
are not the API schemas (pydantic models in presentation).
"""

from authlink.application.dtos.auth_dtos import UserView

__all__ = ["UserView"]
