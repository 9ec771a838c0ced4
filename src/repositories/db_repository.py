"""
Abstract base class for the entity store.
Defines the contract for drone, medication and association storage.
"""
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Callable, List, Optional
from src.models.drone_model import Drone, DroneState
from src.models.medication_model import Medication


class DBRepository(ABC):
    """Abstract repository interface for the drone fleet records."""
    
    @abstractmethod
    def register_drone(self, drone: Drone) -> None:
        """Insert a new drone, rejecting duplicate serial numbers."""
        pass
    
    @abstractmethod
    def get_drone(self, serial_number: str) -> Drone:
        """Return a drone or raise DroneNotFoundException."""
        pass
    
    @abstractmethod
    def list_drones(self, predicate: Optional[Callable[[Drone], bool]] = None) -> List[Drone]:
        """Return all drones, optionally filtered by a predicate."""
        pass
    
    @abstractmethod
    def update_drone_state(self, serial_number: str, state: DroneState) -> Drone:
        """Set a drone's state and return the updated drone."""
        pass
    
    @abstractmethod
    def insert_medication(self, medication: Medication) -> int:
        """Insert a medication and return its assigned id."""
        pass
    
    @abstractmethod
    def associate(self, drone_serial_number: str, medication_id: int) -> int:
        """Link a medication to a drone and return the association id."""
        pass
    
    @abstractmethod
    def list_medications_for_drone(self, serial_number: str, on_board_only: bool = False) -> List[Medication]:
        """Return the medications associated with a drone, optionally only those not yet delivered."""
        pass
    
    @abstractmethod
    def list_medications(self) -> List[Medication]:
        """Return every medication record."""
        pass
    
    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """Scope in which all writes commit together or not at all."""
        pass
