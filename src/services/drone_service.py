"""
Drone Service for business logic.
Orchestrates registration, fleet queries and state changes.
"""
import logging
from typing import List
from src.core import config
from src.core.locks import DroneLockRegistry
from src.models.drone_model import Drone
from src.models.dto.drone_dto import (
    BatteryLevelResponse,
    DroneRegisterRequest,
    DroneResponse,
    MessageResponse
)
from src.repositories.db_repository import DBRepository
from src.services.drone_state_machine import DroneStateMachine
from src.services.validation_service import ValidationService

logger = logging.getLogger(__name__)


class DroneService:
    """Service for drone-related business operations."""
    
    def __init__(
        self,
        db_repository: DBRepository,
        lock_registry: DroneLockRegistry,
        validation_service: ValidationService = None,
        state_machine: DroneStateMachine = None
    ):
        self.db_repository = db_repository
        self.lock_registry = lock_registry
        self.validation_service = validation_service or ValidationService()
        self.state_machine = state_machine or DroneStateMachine()
    
    def register_drone(self, request: DroneRegisterRequest) -> MessageResponse:
        """
        Register a new drone.
        
        Args:
            request: Registration request
            
        Returns:
            MessageResponse confirming the registration
            
        Raises:
            ValidationException: If a field is missing or invalid
            PreconditionFailedException: If registering as LOADING with a low battery
            DuplicateDroneException: If the serial number already exists
        """
        drone = self.validation_service.validate_drone_registration(request)
        self.state_machine.check_transition(drone, drone.state)
        self.db_repository.register_drone(drone)
        
        logger.info("Registered drone %s (%s, state %s)", drone.serial_number, drone.model.value, drone.state.value)
        return MessageResponse(message=f"Drone '{drone.serial_number}' registered successfully")
    
    def get_drone(self, serial_number: str) -> DroneResponse:
        """
        Retrieve a single drone.
        
        Raises:
            DroneNotFoundException: If the drone does not exist
        """
        return self._to_response(self.db_repository.get_drone(serial_number))
    
    def get_all_drones(self) -> List[DroneResponse]:
        return [self._to_response(drone) for drone in self.db_repository.list_drones()]
    
    def get_available_drones(self) -> List[DroneResponse]:
        """
        Retrieve drones that can take a load right now.
        
        A drone is available when it is IDLE and its battery is above the
        configured threshold.
        """
        threshold = config.settings.available_battery_threshold
        drones = self.db_repository.list_drones(
            lambda drone: self.state_machine.is_loadable(drone) and drone.battery_capacity > threshold
        )
        return [self._to_response(drone) for drone in drones]
    
    def get_battery_level(self, serial_number: str) -> BatteryLevelResponse:
        """
        Retrieve a drone's battery level.
        
        Raises:
            DroneNotFoundException: If the drone does not exist
        """
        drone = self.db_repository.get_drone(serial_number)
        return BatteryLevelResponse(battery_capacity=drone.battery_capacity)
    
    def change_state(self, serial_number: str, state: str) -> DroneResponse:
        """
        Move a drone to another state.
        
        Args:
            serial_number: Drone serial number
            state: Target state label
            
        Returns:
            DroneResponse with the updated drone
            
        Raises:
            ValidationException: If the state label is invalid
            DroneNotFoundException: If the drone does not exist
            PreconditionFailedException: If entering LOADING with a low battery
        """
        target = self.validation_service.parse_state(state)
        
        with self.lock_registry.hold(serial_number):
            drone = self.db_repository.get_drone(serial_number)
            self.state_machine.check_transition(drone, target)
            updated = self.db_repository.update_drone_state(serial_number, target)
        
        logger.info("Drone %s moved from %s to %s", serial_number, drone.state.value, target.value)
        return self._to_response(updated)
    
    @staticmethod
    def _to_response(drone: Drone) -> DroneResponse:
        return DroneResponse(
            serial_number=drone.serial_number,
            model=drone.model,
            weight_limit=drone.weight_limit,
            battery_capacity=drone.battery_capacity,
            state=drone.state
        )
