"""
In-memory entity store.
Holds drones, medications and their associations for the lifetime of the process.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional
from src.core.exceptions import (
    DroneNotFoundException,
    DuplicateDroneException,
    StoreException,
    ValidationException
)
from src.models.drone_model import (
    Drone,
    DroneModel,
    DroneState,
    MAX_BATTERY_CAPACITY,
    MAX_SERIAL_NUMBER_LENGTH,
    MAX_WEIGHT_LIMIT,
    MIN_BATTERY_CAPACITY
)
from src.models.medication_model import DroneMedication, Medication
from src.repositories.db_repository import DBRepository

logger = logging.getLogger(__name__)


class InMemoryRepository(DBRepository):
    """
    Thread-safe entity store backed by dictionaries.

    Records are copied on the way in and out so callers never hold a
    reference into the store.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._drones: Dict[str, Drone] = {}
        self._medications: Dict[int, Medication] = {}
        self._associations: Dict[int, DroneMedication] = {}
        self._next_medication_id = 1
        self._next_association_id = 1

    def register_drone(self, drone: Drone) -> None:
        """
        Insert a new drone.

        Raises:
            DuplicateDroneException: If the serial number is already registered
            ValidationException: If a field violates its domain constraint
        """
        self._check_drone_constraints(drone)
        with self._lock:
            if drone.serial_number in self._drones:
                raise DuplicateDroneException(
                    f"Drone with serial number '{drone.serial_number}' already exists"
                )
            self._drones[drone.serial_number] = drone.copy()

    def get_drone(self, serial_number: str) -> Drone:
        with self._lock:
            drone = self._drones.get(serial_number)
            if drone is None:
                raise DroneNotFoundException(f"Drone '{serial_number}' not found")
            return drone.copy()

    def list_drones(self, predicate: Optional[Callable[[Drone], bool]] = None) -> List[Drone]:
        with self._lock:
            drones = [drone.copy() for drone in self._drones.values()]
        if predicate is None:
            return drones
        return [drone for drone in drones if predicate(drone)]

    def update_drone_state(self, serial_number: str, state: DroneState) -> Drone:
        if not isinstance(state, DroneState):
            raise ValidationException(f"Invalid drone state: {state}")
        with self._lock:
            current = self._drones.get(serial_number)
            if current is None:
                raise DroneNotFoundException(f"Drone '{serial_number}' not found")
            # Replace rather than mutate so transaction snapshots stay intact
            updated = current.copy()
            updated.state = state
            if state == DroneState.DELIVERED and current.state != DroneState.DELIVERED:
                # Everything loaded in the closing cycle has left the drone
                updated.load_cycle += 1
            self._drones[serial_number] = updated
            return updated.copy()

    def insert_medication(self, medication: Medication) -> int:
        with self._lock:
            medication_id = self._next_medication_id
            self._next_medication_id += 1
            stored = medication.copy()
            stored.id = medication_id
            self._medications[medication_id] = stored
            return medication_id

    def associate(self, drone_serial_number: str, medication_id: int) -> int:
        """
        Link a medication to a drone.

        Raises:
            DroneNotFoundException: If the drone does not exist
            StoreException: If the medication does not exist
        """
        with self._lock:
            drone = self._drones.get(drone_serial_number)
            if drone is None:
                raise DroneNotFoundException(f"Drone '{drone_serial_number}' not found")
            if medication_id not in self._medications:
                raise StoreException(f"Medication {medication_id} does not exist")
            association_id = self._next_association_id
            self._next_association_id += 1
            self._associations[association_id] = DroneMedication(
                drone_serial_number=drone_serial_number,
                medication_id=medication_id,
                load_cycle=drone.load_cycle,
                id=association_id
            )
            return association_id

    def list_medications_for_drone(self, serial_number: str, on_board_only: bool = False) -> List[Medication]:
        """
        Return medications associated with a drone.

        With ``on_board_only`` only the current load cycle is returned, i.e.
        medications not yet delivered.
        """
        with self._lock:
            drone = self._drones.get(serial_number)
            if drone is None:
                raise DroneNotFoundException(f"Drone '{serial_number}' not found")
            return [
                self._medications[association.medication_id].copy()
                for association in self._associations.values()
                if association.drone_serial_number == serial_number
                and (not on_board_only or association.load_cycle == drone.load_cycle)
            ]

    def list_medications(self) -> List[Medication]:
        with self._lock:
            return [medication.copy() for medication in self._medications.values()]

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """
        All-or-nothing write scope.

        The store lock is held for the whole block; on any exception every
        record set and id counter is restored to its state at entry.
        """
        with self._lock:
            snapshot = (
                dict(self._drones),
                dict(self._medications),
                dict(self._associations),
                self._next_medication_id,
                self._next_association_id
            )
            try:
                yield
            except BaseException:
                (
                    self._drones,
                    self._medications,
                    self._associations,
                    self._next_medication_id,
                    self._next_association_id
                ) = snapshot
                logger.debug("Transaction rolled back")
                raise

    def _check_drone_constraints(self, drone: Drone) -> None:
        """Enforce the column-level constraints of the drone record."""
        if not isinstance(drone.model, DroneModel):
            raise ValidationException(f"Invalid drone model: {drone.model}")
        if not isinstance(drone.state, DroneState):
            raise ValidationException(f"Invalid drone state: {drone.state}")
        if not drone.serial_number or len(drone.serial_number) > MAX_SERIAL_NUMBER_LENGTH:
            raise ValidationException(
                f"serial_number must be 1-{MAX_SERIAL_NUMBER_LENGTH} characters"
            )
        if drone.weight_limit > MAX_WEIGHT_LIMIT:
            raise ValidationException(f"weight_limit must not exceed {MAX_WEIGHT_LIMIT}")
        if not MIN_BATTERY_CAPACITY <= drone.battery_capacity <= MAX_BATTERY_CAPACITY:
            raise ValidationException(
                f"battery_capacity must be between {MIN_BATTERY_CAPACITY} and {MAX_BATTERY_CAPACITY}"
            )
