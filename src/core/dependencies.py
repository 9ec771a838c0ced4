"""
Dependency injection for FastAPI.
Resolves the stores attached to the running app and builds services around them.
"""
from fastapi import Depends, Request
from src.core.locks import DroneLockRegistry
from src.repositories.db_repository import DBRepository
from src.repositories.image_repository import ImageRepository
from src.services.drone_service import DroneService
from src.services.medication_service import MedicationService


def get_db_repository(request: Request) -> DBRepository:
    """Get the entity store owned by the app."""
    return request.app.state.db_repository


def get_image_repository(request: Request) -> ImageRepository:
    """Get the image store owned by the app."""
    return request.app.state.image_repository


def get_lock_registry(request: Request) -> DroneLockRegistry:
    """Get the per-drone lock registry owned by the app."""
    return request.app.state.lock_registry


def get_drone_service(
    db_repository: DBRepository = Depends(get_db_repository),
    lock_registry: DroneLockRegistry = Depends(get_lock_registry)
) -> DroneService:
    """Get DroneService with injected dependencies."""
    return DroneService(db_repository=db_repository, lock_registry=lock_registry)


def get_medication_service(
    db_repository: DBRepository = Depends(get_db_repository),
    image_repository: ImageRepository = Depends(get_image_repository),
    lock_registry: DroneLockRegistry = Depends(get_lock_registry)
) -> MedicationService:
    """Get MedicationService with injected dependencies."""
    return MedicationService(
        db_repository=db_repository,
        image_repository=image_repository,
        lock_registry=lock_registry
    )
