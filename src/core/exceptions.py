"""
Custom exceptions for the Drone Delivery API.
Provides specific error types for different failure scenarios.
"""


class DroneDeliveryException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(DroneDeliveryException):
    """Raised when request data is missing or malformed."""
    pass


class DuplicateDroneException(DroneDeliveryException):
    """Raised when a serial number is already registered."""
    pass


class DroneNotFoundException(DroneDeliveryException):
    """Raised when a drone is not found in the store."""
    pass


class InvalidDroneStateException(DroneDeliveryException):
    """Raised when a drone is not in a state that allows the operation."""
    pass


class PreconditionFailedException(DroneDeliveryException):
    """Raised when a state transition precondition does not hold."""
    pass


class CapacityExceededException(DroneDeliveryException):
    """Raised when a load would exceed the drone's weight limit."""
    pass


class StoreException(DroneDeliveryException):
    """Raised when the underlying record store fails."""
    pass


class ImageStorageException(StoreException):
    """Raised when the medication image store fails."""
    pass
