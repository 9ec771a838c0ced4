"""
Medication API routes.
Handles loading medication onto drones and medication queries.
Handlers are plain functions so FastAPI runs them in its threadpool.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from src.services.medication_service import MedicationService
from src.core.dependencies import get_medication_service
from src.models.dto.drone_dto import MessageResponse
from src.models.dto.medication_dto import MedicationLoadRequest, MedicationResponse
from src.core import config

router = APIRouter()


@router.get("/medication/all", tags=["Medications"], response_model=List[MedicationResponse])
def get_all_medications(
    medication_service: MedicationService = Depends(get_medication_service)
):
    """Retrieve every medication that has been loaded."""
    return medication_service.get_all_medications()


@router.post("/drones/{serial_number}/load", tags=["Drones"], response_model=MessageResponse)
def load_medication(
    serial_number: str,
    name: Optional[str] = Form(None, description="Letters, numbers, '-' and '_' only"),
    weight: Optional[float] = Form(None, description="Weight in grams"),
    code: Optional[str] = Form(None, description="Upper case letters, numbers and '_' only"),
    image: Optional[UploadFile] = File(None, description="Medication image"),
    medication_service: MedicationService = Depends(get_medication_service)
):
    """
    Load a medication onto an IDLE drone.
    
    The medication must not be heavier than the drone's weight limit.
    """
    content = None
    filename = None
    content_type = None
    
    if image is not None:
        # Validate file size
        content = image.file.read()
        max_size_bytes = config.settings.max_image_size_mb * 1024 * 1024
        
        if len(content) > max_size_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"Image size ({len(content) / (1024 * 1024):.2f}MB) exceeds maximum allowed size of {config.settings.max_image_size_mb}MB"
            )
        
        filename = image.filename
        content_type = image.content_type
    
    return medication_service.load_medication(
        serial_number,
        MedicationLoadRequest(name=name, weight=weight, code=code),
        image=content,
        image_filename=filename,
        image_content_type=content_type
    )


@router.get("/drones/{serial_number}/loaded-medications", tags=["Drones"], response_model=List[MedicationResponse])
def get_loaded_medications(
    serial_number: str,
    medication_service: MedicationService = Depends(get_medication_service)
):
    """Retrieve the medications loaded onto a drone."""
    return medication_service.get_loaded_medications(serial_number)
