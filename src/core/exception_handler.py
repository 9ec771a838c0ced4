"""
Global exception handler for the Drone Delivery API.
Provides centralized error handling for all API exceptions.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .exceptions import (
    CapacityExceededException,
    DroneNotFoundException,
    DuplicateDroneException,
    InvalidDroneStateException,
    PreconditionFailedException,
    StoreException,
    ValidationException
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    
    @app.exception_handler(DroneNotFoundException)
    async def handle_not_found(request: Request, exc: DroneNotFoundException):
        return JSONResponse(
            status_code=404,
            content={"error": "Not Found", "message": exc.message}
        )
    
    @app.exception_handler(ValidationException)
    async def handle_validation_error(request: Request, exc: ValidationException):
        return JSONResponse(
            status_code=400,
            content={"error": "Validation Error", "message": exc.message}
        )
    
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        reasons = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(
            status_code=400,
            content={"error": "Validation Error", "message": reasons or "Invalid request"}
        )
    
    @app.exception_handler(DuplicateDroneException)
    async def handle_duplicate(request: Request, exc: DuplicateDroneException):
        return JSONResponse(
            status_code=409,
            content={"error": "Duplicate Drone", "message": exc.message}
        )
    
    @app.exception_handler(InvalidDroneStateException)
    async def handle_invalid_state(request: Request, exc: InvalidDroneStateException):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid Drone State", "message": exc.message}
        )
    
    @app.exception_handler(PreconditionFailedException)
    async def handle_precondition_failed(request: Request, exc: PreconditionFailedException):
        return JSONResponse(
            status_code=400,
            content={"error": "Precondition Failed", "message": exc.message}
        )
    
    @app.exception_handler(CapacityExceededException)
    async def handle_capacity_exceeded(request: Request, exc: CapacityExceededException):
        return JSONResponse(
            status_code=400,
            content={"error": "Capacity Exceeded", "message": exc.message}
        )
    
    @app.exception_handler(StoreException)
    async def handle_store_error(request: Request, exc: StoreException):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=500,
            content={"error": "Storage Error", "message": "The request could not be stored"}
        )
    
    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "message": "An unexpected error occurred"}
        )
