"""
Medication Service for the loading workflow.
Loads medication onto drones and answers medication queries.
"""
import logging
from typing import List, Optional
from src.core import config
from src.core.exceptions import CapacityExceededException, InvalidDroneStateException
from src.core.locks import DroneLockRegistry
from src.models.drone_model import Drone, DroneState
from src.models.medication_model import Medication
from src.models.dto.drone_dto import MessageResponse
from src.models.dto.medication_dto import MedicationLoadRequest, MedicationResponse
from src.repositories.db_repository import DBRepository
from src.repositories.image_repository import ImageRepository
from src.services.drone_state_machine import DroneStateMachine
from src.services.validation_service import ValidationService

logger = logging.getLogger(__name__)


class MedicationService:
    """Service for medication loading and retrieval."""
    
    def __init__(
        self,
        db_repository: DBRepository,
        image_repository: ImageRepository,
        lock_registry: DroneLockRegistry,
        validation_service: ValidationService = None,
        state_machine: DroneStateMachine = None
    ):
        self.db_repository = db_repository
        self.image_repository = image_repository
        self.lock_registry = lock_registry
        self.validation_service = validation_service or ValidationService()
        self.state_machine = state_machine or DroneStateMachine()
    
    def load_medication(
        self,
        serial_number: str,
        request: MedicationLoadRequest,
        image: Optional[bytes] = None,
        image_filename: Optional[str] = None,
        image_content_type: Optional[str] = None
    ) -> MessageResponse:
        """
        Load a medication onto a drone.
        
        The drone lookup, the IDLE and weight checks and the writes all run
        while holding the drone's lock, and the writes share one store
        transaction. On success the drone goes straight from IDLE to LOADED
        without passing through LOADING, so the LOADING battery precondition
        is not applied here: an IDLE drone is loadable at any battery level.
        
        Args:
            serial_number: Target drone
            request: Medication fields
            image: Optional image bytes
            image_filename: Original image filename
            image_content_type: Image MIME type
            
        Returns:
            MessageResponse confirming the load
            
        Raises:
            ValidationException: If medication fields are invalid
            DroneNotFoundException: If the drone does not exist
            InvalidDroneStateException: If the drone is not IDLE
            CapacityExceededException: If the medication is too heavy
            StoreException: If the image store or record store fails
        """
        medication = self.validation_service.validate_medication(request)
        
        with self.lock_registry.hold(serial_number):
            drone = self.db_repository.get_drone(serial_number)
            
            if not self.state_machine.is_loadable(drone):
                logger.warning("Load rejected: drone %s is %s", serial_number, drone.state.value)
                raise InvalidDroneStateException(
                    f"Drone '{serial_number}' is not IDLE (current state: {drone.state.value})"
                )
            
            self._check_weight(drone, medication)
            
            if image:
                medication.image = self.image_repository.save_image(
                    image, image_filename or "image", image_content_type
                )
            
            try:
                with self.db_repository.transaction():
                    medication_id = self.db_repository.insert_medication(medication)
                    self.db_repository.associate(serial_number, medication_id)
                    self.db_repository.update_drone_state(serial_number, DroneState.LOADED)
            except Exception:
                if medication.image:
                    self.image_repository.delete_image(medication.image)
                raise
        
        logger.info(
            "Loaded medication %s (id %s, %sg) onto drone %s",
            medication.name, medication_id, medication.weight, serial_number
        )
        return MessageResponse(
            message=f"Medication '{medication.name}' loaded onto drone '{serial_number}' successfully"
        )
    
    def get_loaded_medications(self, serial_number: str) -> List[MedicationResponse]:
        """
        Retrieve medications loaded onto a drone.
        
        Raises:
            DroneNotFoundException: If the drone does not exist
        """
        medications = self.db_repository.list_medications_for_drone(serial_number)
        return [MedicationResponse.model_validate(medication) for medication in medications]
    
    def get_all_medications(self) -> List[MedicationResponse]:
        return [
            MedicationResponse.model_validate(medication)
            for medication in self.db_repository.list_medications()
        ]
    
    def _check_weight(self, drone: Drone, medication: Medication) -> None:
        """
        Compare the load against the drone's weight limit.
        
        Only the incoming medication is counted unless cumulative checking
        is enabled, in which case medications still on board (loaded since
        the drone last reached DELIVERED) are added.
        """
        total = medication.weight
        if config.settings.enforce_cumulative_weight:
            total += sum(
                loaded.weight
                for loaded in self.db_repository.list_medications_for_drone(
                    drone.serial_number, on_board_only=True
                )
            )
        
        if total > drone.weight_limit:
            logger.warning(
                "Load rejected: %sg exceeds drone %s limit of %sg",
                total, drone.serial_number, drone.weight_limit
            )
            raise CapacityExceededException(
                f"Medication weight {total:g}g exceeds drone '{drone.serial_number}' "
                f"weight limit of {drone.weight_limit:g}g"
            )
