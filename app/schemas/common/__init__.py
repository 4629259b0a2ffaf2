from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema

__all__ = ["BaseSchema", "BaseCreateSchema", "BaseResponseSchema"]
