"""
Domain models for Medication and its drone association.
"""
from typing import Optional


class Medication:
    """Domain model representing a medication payload."""
    
    def __init__(
        self,
        name: str,
        weight: float,
        code: str,
        image: Optional[str] = None,
        id: Optional[int] = None
    ):
        self.id = id
        self.name = name
        self.weight = weight
        self.code = code
        # Opaque key into the image store, never the bytes themselves
        self.image = image
    
    def copy(self) -> "Medication":
        return Medication(
            name=self.name,
            weight=self.weight,
            code=self.code,
            image=self.image,
            id=self.id
        )
    
    def __repr__(self):
        return f"Medication(id={self.id}, name={self.name}, weight={self.weight}, code={self.code})"


class DroneMedication:
    """Association linking a loaded medication to the drone carrying it."""
    
    def __init__(
        self,
        drone_serial_number: str,
        medication_id: int,
        load_cycle: int = 0,
        id: Optional[int] = None
    ):
        self.id = id
        self.drone_serial_number = drone_serial_number
        self.medication_id = medication_id
        # Drone load cycle the medication was loaded in
        self.load_cycle = load_cycle
    
    def __repr__(self):
        return (
            f"DroneMedication(id={self.id}, drone_serial_number={self.drone_serial_number}, "
            f"medication_id={self.medication_id}, load_cycle={self.load_cycle})"
        )
