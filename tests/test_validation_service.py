"""
Unit tests for ValidationService.
"""
import pytest
from src.core.exceptions import ValidationException
from src.models.drone_model import DroneModel, DroneState
from src.models.dto.drone_dto import DroneRegisterRequest
from src.models.dto.medication_dto import MedicationLoadRequest
from src.services.validation_service import ValidationService


class TestDroneRegistrationValidation:
    """Test suite for drone registration validation."""
    
    @pytest.fixture
    def service(self):
        return ValidationService()
    
    def _request(self, **overrides):
        fields = {
            "serial_number": "D1",
            "model": "Lightweight",
            "weight_limit": 250,
            "battery_capacity": 80,
            "state": "IDLE"
        }
        fields.update(overrides)
        return DroneRegisterRequest(**fields)
    
    def test_valid_request_builds_drone(self, service):
        """Test a valid request produces a matching Drone."""
        drone = service.validate_drone_registration(self._request())
        
        assert drone.serial_number == "D1"
        assert drone.model == DroneModel.LIGHTWEIGHT
        assert drone.weight_limit == 250
        assert drone.battery_capacity == 80
        assert drone.state == DroneState.IDLE
    
    def test_missing_fields_are_listed(self, service):
        """Test every missing field is reported."""
        with pytest.raises(ValidationException) as exc_info:
            service.validate_drone_registration(DroneRegisterRequest(serial_number="D1"))
        
        message = exc_info.value.message
        for field in ("model", "weight_limit", "battery_capacity", "state"):
            assert field in message
        assert "serial_number" not in message
    
    def test_blank_serial_number_is_missing(self, service):
        """Test whitespace-only serial number counts as missing."""
        with pytest.raises(ValidationException, match="serial_number"):
            service.validate_drone_registration(self._request(serial_number="   "))
    
    def test_zero_battery_is_not_missing(self, service):
        """Test zero values are accepted rather than treated as absent."""
        drone = service.validate_drone_registration(self._request(battery_capacity=0, weight_limit=0))
        
        assert drone.battery_capacity == 0
        assert drone.weight_limit == 0
    
    def test_serial_number_too_long(self, service):
        """Test serial numbers over 100 characters are rejected."""
        with pytest.raises(ValidationException, match="at most 100"):
            service.validate_drone_registration(self._request(serial_number="X" * 101))
    
    def test_serial_number_at_limit(self, service):
        """Test a 100 character serial number is accepted."""
        drone = service.validate_drone_registration(self._request(serial_number="X" * 100))
        assert len(drone.serial_number) == 100
    
    def test_unknown_model(self, service):
        """Test model outside the enum is rejected."""
        with pytest.raises(ValidationException, match="model must be one of"):
            service.validate_drone_registration(self._request(model="Featherweight"))
    
    def test_weight_limit_over_500(self, service):
        """Test weight limit above 500 is rejected."""
        with pytest.raises(ValidationException, match="weight_limit"):
            service.validate_drone_registration(self._request(weight_limit=500.5))
    
    @pytest.mark.parametrize("battery", [-1, 100.1])
    def test_battery_out_of_range(self, service, battery):
        """Test battery capacity outside 0-100 is rejected."""
        with pytest.raises(ValidationException, match="battery_capacity"):
            service.validate_drone_registration(self._request(battery_capacity=battery))
    
    def test_unknown_state(self, service):
        """Test state outside the enum is rejected."""
        with pytest.raises(ValidationException, match="state must be one of"):
            service.validate_drone_registration(self._request(state="FLYING"))


class TestMedicationValidation:
    """Test suite for medication validation."""
    
    @pytest.fixture
    def service(self):
        return ValidationService()
    
    def test_valid_medication(self, service):
        """Test a valid medication is built."""
        medication = service.validate_medication(
            MedicationLoadRequest(name="Med-1_a", weight=5.2, code="ABC_123")
        )
        
        assert medication.name == "Med-1_a"
        assert medication.weight == 5.2
        assert medication.code == "ABC_123"
        assert medication.id is None
    
    @pytest.mark.parametrize("name", ["Med 1", "Med.1", "Méd"])
    def test_invalid_name(self, service, name):
        """Test names with characters outside the allowed set."""
        with pytest.raises(ValidationException, match="name may only contain"):
            service.validate_medication(MedicationLoadRequest(name=name, weight=1, code="ABC"))
    
    @pytest.mark.parametrize("code", ["abc", "AB-C", "AB C"])
    def test_invalid_code(self, service, code):
        """Test codes with lower case letters or punctuation."""
        with pytest.raises(ValidationException, match="code may only contain"):
            service.validate_medication(MedicationLoadRequest(name="Med1", weight=1, code=code))
    
    def test_missing_weight(self, service):
        """Test weight is required."""
        with pytest.raises(ValidationException, match="weight"):
            service.validate_medication(MedicationLoadRequest(name="Med1", code="ABC"))
    
    def test_negative_weight(self, service):
        """Test negative weight is rejected."""
        with pytest.raises(ValidationException, match="must not be negative"):
            service.validate_medication(MedicationLoadRequest(name="Med1", weight=-1, code="ABC"))


class TestStateParsing:
    """Test suite for state label parsing."""
    
    def test_parse_known_state(self):
        assert ValidationService().parse_state("RETURNING") == DroneState.RETURNING
    
    def test_parse_missing_state(self):
        with pytest.raises(ValidationException, match="Missing required field"):
            ValidationService().parse_state(None)
    
    def test_parse_lower_case_state_rejected(self):
        with pytest.raises(ValidationException):
            ValidationService().parse_state("idle")


class TestRawValueValidation:
    """Test suite for values that must be rejected rather than normalized."""
    
    @pytest.fixture
    def service(self):
        return ValidationService()
    
    def _request(self, **overrides):
        fields = {
            "serial_number": "D1",
            "model": "Lightweight",
            "weight_limit": 250,
            "battery_capacity": 80,
            "state": "IDLE"
        }
        fields.update(overrides)
        return DroneRegisterRequest(**fields)
    
    @pytest.mark.parametrize("field", ["weight_limit", "battery_capacity"])
    def test_boolean_numbers_rejected(self, service, field):
        """Test booleans are not accepted as numbers."""
        with pytest.raises(ValidationException, match=f"{field} must be a number"):
            service.validate_drone_registration(self._request(**{field: True}))
    
    def test_numeric_string_rejected(self, service):
        """Test JSON strings are not coerced to numbers."""
        with pytest.raises(ValidationException, match="weight_limit must be a number"):
            service.validate_drone_registration(self._request(weight_limit="250"))
    
    def test_boolean_medication_weight_rejected(self, service):
        with pytest.raises(ValidationException, match="weight must be a number"):
            service.validate_medication(MedicationLoadRequest(name="Med1", weight=True, code="ABC"))
    
    @pytest.mark.parametrize("serial_number", [" D1", "D1 ", " D1 "])
    def test_serial_number_with_surrounding_whitespace(self, service, serial_number):
        """Test padded serial numbers are rejected instead of trimmed."""
        with pytest.raises(ValidationException, match="leading or trailing whitespace"):
            service.validate_drone_registration(self._request(serial_number=serial_number))
    
    def test_serial_number_with_slash(self, service):
        """Test serial numbers must fit in one URL path segment."""
        with pytest.raises(ValidationException, match="must not contain '/'"):
            service.validate_drone_registration(self._request(serial_number="A/B"))
    
    def test_inner_space_in_serial_number_kept(self, service):
        drone = service.validate_drone_registration(self._request(serial_number="D 1"))
        assert drone.serial_number == "D 1"
    
    def test_padded_enum_rejected(self, service):
        with pytest.raises(ValidationException, match="state must be one of"):
            service.validate_drone_registration(self._request(state=" IDLE"))
    
    @pytest.mark.parametrize("field", ["name", "code"])
    def test_padded_medication_fields(self, service, field):
        """Test padded name or code is rejected instead of trimmed."""
        fields = {"name": "Med1", "weight": 1, "code": "ABC"}
        fields[field] = f" {fields[field]} "
        
        with pytest.raises(ValidationException, match=f"{field} must not have leading or trailing whitespace"):
            service.validate_medication(MedicationLoadRequest(**fields))
