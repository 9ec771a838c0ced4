"""
Data Transfer Objects for Medication API.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


class MedicationResponse(BaseModel):
    """Response schema for medication retrieval."""
    model_config = ConfigDict(from_attributes=True)
    
    id: int
    name: str
    weight: float
    code: str
    image: Optional[str] = None


class MedicationLoadRequest(BaseModel):
    """
    Medication fields submitted with a load request.
    
    Built from the multipart form; presence and format are checked by the
    validation layer.
    """
    name: Optional[str] = None
    weight: Any = None
    code: Optional[str] = None
