"""
Data Transfer Objects for Drone API.
Defines request and response schemas for drone endpoints.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from src.models.drone_model import DroneModel, DroneState


class DroneRegisterRequest(BaseModel):
    """
    Request schema for drone registration.
    
    Fields are optional at the schema level so that missing values reach the
    validation layer and are reported as a 400 with a readable reason. Numeric
    fields are left untyped so booleans and strings are not coerced before
    validation.
    """
    serial_number: Optional[str] = Field(None, description="Unique drone serial number (max 100 chars)")
    model: Optional[str] = Field(None, description="Lightweight, Middleweight, Cruiserweight or Heavyweight")
    weight_limit: Any = Field(None, description="Maximum payload weight in grams (max 500)")
    battery_capacity: Any = Field(None, description="Battery level in percent (0-100)")
    state: Optional[str] = Field(None, description="Initial drone state")


class DroneStateUpdateRequest(BaseModel):
    """Request schema for moving a drone to another state."""
    state: Optional[str] = Field(None, description="Target drone state")


class DroneResponse(BaseModel):
    """Response schema for drone retrieval."""
    model_config = ConfigDict(from_attributes=True)
    
    serial_number: str
    model: DroneModel
    weight_limit: float
    battery_capacity: float
    state: DroneState


class BatteryLevelResponse(BaseModel):
    """Response schema for a drone's battery level."""
    battery_capacity: float = Field(..., serialization_alias="batteryCapacity")


class MessageResponse(BaseModel):
    """Generic confirmation response."""
    message: str = Field(..., description="Status message")
