"""
Drone API routes.
Handles HTTP endpoints for registration, fleet queries and state changes.
Handlers are plain functions so FastAPI runs them in its threadpool.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from src.services.drone_service import DroneService
from src.core.dependencies import get_drone_service
from src.models.dto.drone_dto import (
    BatteryLevelResponse,
    DroneRegisterRequest,
    DroneResponse,
    DroneStateUpdateRequest,
    MessageResponse
)

router = APIRouter(prefix="/drones", tags=["Drones"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_200_OK)
def register_drone(
    request: DroneRegisterRequest,
    drone_service: DroneService = Depends(get_drone_service)
):
    """
    Register a new drone.
    
    - **serial_number**: Unique serial number (max 100 characters)
    - **model**: Lightweight, Middleweight, Cruiserweight or Heavyweight
    - **weight_limit**: Maximum payload in grams (max 500)
    - **battery_capacity**: Battery level in percent (0-100)
    - **state**: Initial state; LOADING requires a battery level of at least 25%
    """
    return drone_service.register_drone(request)


@router.get("", response_model=List[DroneResponse])
def get_all_drones(drone_service: DroneService = Depends(get_drone_service)):
    """Retrieve every registered drone."""
    return drone_service.get_all_drones()


@router.get("/available", response_model=List[DroneResponse])
def get_available_drones(drone_service: DroneService = Depends(get_drone_service)):
    """
    Retrieve drones available for loading.
    
    Returns IDLE drones whose battery level is above the availability threshold.
    """
    return drone_service.get_available_drones()


@router.get("/{serial_number}", response_model=DroneResponse)
def get_drone(
    serial_number: str,
    drone_service: DroneService = Depends(get_drone_service)
):
    """Retrieve a single drone by serial number."""
    return drone_service.get_drone(serial_number)


@router.get("/{serial_number}/battery-level", response_model=BatteryLevelResponse)
def get_battery_level(
    serial_number: str,
    drone_service: DroneService = Depends(get_drone_service)
):
    """Retrieve the battery level of a drone."""
    return drone_service.get_battery_level(serial_number)


@router.patch("/{serial_number}/state", response_model=DroneResponse)
def change_drone_state(
    serial_number: str,
    request: DroneStateUpdateRequest,
    drone_service: DroneService = Depends(get_drone_service)
):
    """
    Move a drone to another state.
    
    Entering LOADING requires a battery level of at least 25%.
    """
    return drone_service.change_state(serial_number, request.state)
