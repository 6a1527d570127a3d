# app/shared/schemas/common.py
from pydantic import BaseModel, Field
from typing import Optional

class InsertResponse(BaseModel):
    acknowledged: bool
    insertedId: str

class UpdateResponse(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedId: Optional[str] = None

class DeleteResponse(BaseModel):
    acknowledged: bool
    deletedCount: int

class ErrorResponse(BaseModel):
    message: str = Field("Internal Server Error", description="Mensaje de error")
