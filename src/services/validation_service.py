"""
Validation Service for request data.
Rejects missing or malformed fields before they reach the entity store.
"""
import re
from typing import Any, List, Optional
from src.core.exceptions import ValidationException
from src.models.drone_model import (
    Drone,
    DroneModel,
    DroneState,
    MAX_BATTERY_CAPACITY,
    MAX_SERIAL_NUMBER_LENGTH,
    MAX_WEIGHT_LIMIT,
    MIN_BATTERY_CAPACITY
)
from src.models.medication_model import Medication
from src.models.dto.drone_dto import DroneRegisterRequest
from src.models.dto.medication_dto import MedicationLoadRequest


class ValidationService:
    """Service for field-level validation of incoming records."""
    
    REQUIRED_DRONE_FIELDS = ('serial_number', 'model', 'weight_limit', 'battery_capacity', 'state')
    REQUIRED_MEDICATION_FIELDS = ('name', 'weight', 'code')
    
    MEDICATION_NAME_PATTERN = re.compile(r'[A-Za-z0-9_-]+')
    MEDICATION_CODE_PATTERN = re.compile(r'[A-Z0-9_]+')
    
    def validate_drone_registration(self, request: DroneRegisterRequest) -> Drone:
        """
        Validate a registration request and build the Drone domain model.
        
        Presence is checked explicitly, so a zero battery or weight limit is
        a value rather than a missing field.
        
        Args:
            request: Registration request
            
        Returns:
            Drone built from the request
            
        Raises:
            ValidationException: If any field is missing or out of range
        """
        self._check_required(request, self.REQUIRED_DRONE_FIELDS)
        
        serial_number = self._check_untrimmed(request.serial_number, 'serial_number')
        if '/' in serial_number:
            # Serial numbers are used as a single URL path segment
            raise ValidationException(f"serial_number must not contain '/', got: {serial_number}")
        if len(serial_number) > MAX_SERIAL_NUMBER_LENGTH:
            raise ValidationException(
                f"serial_number must be at most {MAX_SERIAL_NUMBER_LENGTH} characters, got: {len(serial_number)}"
            )
        
        model = self._parse_enum(DroneModel, request.model, 'model')
        
        weight_limit = self._parse_number(request.weight_limit, 'weight_limit')
        if not 0 <= weight_limit <= MAX_WEIGHT_LIMIT:
            raise ValidationException(
                f"weight_limit must be between 0 and {MAX_WEIGHT_LIMIT}, got: {weight_limit}"
            )
        
        battery_capacity = self._parse_number(request.battery_capacity, 'battery_capacity')
        if not MIN_BATTERY_CAPACITY <= battery_capacity <= MAX_BATTERY_CAPACITY:
            raise ValidationException(
                f"battery_capacity must be between {MIN_BATTERY_CAPACITY} and {MAX_BATTERY_CAPACITY}, got: {battery_capacity}"
            )
        
        state = self.parse_state(request.state)
        
        return Drone(
            serial_number=serial_number,
            model=model,
            weight_limit=weight_limit,
            battery_capacity=battery_capacity,
            state=state
        )
    
    def validate_medication(self, request: MedicationLoadRequest) -> Medication:
        """
        Validate medication fields and build an unsaved Medication.
        
        Raises:
            ValidationException: If name, weight or code is missing or malformed
        """
        self._check_required(request, self.REQUIRED_MEDICATION_FIELDS)
        
        name = self._check_untrimmed(request.name, 'name')
        if not self.MEDICATION_NAME_PATTERN.fullmatch(name):
            raise ValidationException(
                f"name may only contain letters, numbers, '-' and '_', got: {name}"
            )
        
        code = self._check_untrimmed(request.code, 'code')
        if not self.MEDICATION_CODE_PATTERN.fullmatch(code):
            raise ValidationException(
                f"code may only contain upper case letters, numbers and '_', got: {code}"
            )
        
        weight = self._parse_number(request.weight, 'weight')
        if not weight >= 0:
            raise ValidationException(f"weight must not be negative, got: {weight}")
        
        return Medication(name=name, weight=weight, code=code)
    
    def parse_state(self, value: Optional[str]) -> DroneState:
        """
        Parse a drone state label.
        
        Raises:
            ValidationException: If the value is missing or not a known state
        """
        if self._is_missing(value):
            raise ValidationException("Missing required field(s): state")
        return self._parse_enum(DroneState, value, 'state')
    
    def _check_required(self, request: Any, fields: tuple) -> None:
        missing: List[str] = [
            field for field in fields
            if self._is_missing(getattr(request, field, None))
        ]
        if missing:
            raise ValidationException(f"Missing required field(s): {', '.join(missing)}")
    
    @staticmethod
    def _is_missing(value: Any) -> bool:
        if value is None:
            return True
        return isinstance(value, str) and value.strip() == ""
    
    @staticmethod
    def _check_untrimmed(value: Any, field: str) -> str:
        """Reject surrounding whitespace so the stored value equals the input."""
        if not isinstance(value, str):
            raise ValidationException(f"{field} must be a string, got: {value}")
        if value != value.strip():
            raise ValidationException(f"{field} must not have leading or trailing whitespace")
        return value
    
    @staticmethod
    def _parse_enum(enum_cls, value: Any, field: str):
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_cls)
            raise ValidationException(f"{field} must be one of {allowed}, got: {value}")
    
    @staticmethod
    def _parse_number(value: Any, field: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationException(f"{field} must be a number, got: {value}")
        return float(value)
