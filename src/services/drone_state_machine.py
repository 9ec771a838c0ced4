"""
Drone state machine.
Owns the rules for entering drone states and for loadability.
"""
from typing import Optional
from src.core import config
from src.core.exceptions import PreconditionFailedException
from src.models.drone_model import Drone, DroneState


class DroneStateMachine:
    """
    Guards drone state transitions.
    
    Transitions are free-form apart from LOADING, which needs a battery level
    of at least ``min_loading_battery`` percent.
    """
    
    def __init__(self, min_loading_battery: Optional[float] = None):
        self.min_loading_battery = (
            min_loading_battery if min_loading_battery is not None
            else config.settings.min_loading_battery
        )
    
    def check_transition(self, drone: Drone, target: DroneState) -> None:
        """
        Verify that a drone may enter the target state.
        
        Raises:
            PreconditionFailedException: If entering LOADING with a low battery
        """
        if target == DroneState.LOADING and drone.battery_capacity < self.min_loading_battery:
            raise PreconditionFailedException(
                f"Drone '{drone.serial_number}' battery level below {self.min_loading_battery:g}%"
            )
    
    @staticmethod
    def is_loadable(drone: Drone) -> bool:
        """A drone can receive medication only while IDLE."""
        return drone.state == DroneState.IDLE
