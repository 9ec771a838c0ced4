"""
Domain model for Drone entity.
Storage-agnostic representation of a registered delivery drone.
"""
from enum import Enum


MAX_SERIAL_NUMBER_LENGTH = 100
MAX_WEIGHT_LIMIT = 500
MIN_BATTERY_CAPACITY = 0
MAX_BATTERY_CAPACITY = 100


class DroneModel(str, Enum):
    """Weight classes a drone can be registered under."""
    LIGHTWEIGHT = "Lightweight"
    MIDDLEWEIGHT = "Middleweight"
    CRUISERWEIGHT = "Cruiserweight"
    HEAVYWEIGHT = "Heavyweight"


class DroneState(str, Enum):
    """Operational states of a drone."""
    IDLE = "IDLE"
    LOADING = "LOADING"
    LOADED = "LOADED"
    DELIVERING = "DELIVERING"
    DELIVERED = "DELIVERED"
    RETURNING = "RETURNING"


class Drone:
    """Domain model representing a registered drone."""
    
    def __init__(
        self,
        serial_number: str,
        model: DroneModel,
        weight_limit: float,
        battery_capacity: float,
        state: DroneState,
        load_cycle: int = 0
    ):
        self.serial_number = serial_number
        self.model = model
        self.weight_limit = weight_limit
        self.battery_capacity = battery_capacity
        self.state = state
        # Advances each time the drone reaches DELIVERED
        self.load_cycle = load_cycle
    
    def copy(self) -> "Drone":
        return Drone(
            serial_number=self.serial_number,
            model=self.model,
            weight_limit=self.weight_limit,
            battery_capacity=self.battery_capacity,
            state=self.state,
            load_cycle=self.load_cycle
        )
    
    def __eq__(self, other):
        if not isinstance(other, Drone):
            return NotImplemented
        return vars(self) == vars(other)
    
    def __repr__(self):
        return (
            f"Drone(serial_number={self.serial_number}, model={self.model.value}, "
            f"weight_limit={self.weight_limit}, battery_capacity={self.battery_capacity}, "
            f"state={self.state.value})"
        )
