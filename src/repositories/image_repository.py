"""
Image store contract for medication images.
The core keeps only the opaque key returned by the store.
"""
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Dict, Optional
from src.core.exceptions import ImageStorageException


class ImageRepository(ABC):
    """Abstract object store for medication image payloads."""
    
    @abstractmethod
    def save_image(self, content: bytes, filename: str, content_type: Optional[str] = None) -> str:
        """Store image bytes and return an opaque key."""
        pass
    
    @abstractmethod
    def get_image(self, key: str) -> bytes:
        """Retrieve image bytes by key."""
        pass
    
    @abstractmethod
    def delete_image(self, key: str) -> None:
        """Remove an image; used to compensate a failed load."""
        pass
    
    @staticmethod
    def generate_key(filename: str) -> str:
        """
        Generate a unique image key.
        
        Format: medications/{uuid}_{filename}
        """
        return f"medications/{uuid.uuid4().hex[:12]}_{filename}"


class InMemoryImageRepository(ImageRepository):
    """Image store kept in process memory, used when no bucket is configured."""
    
    def __init__(self):
        self._images: Dict[str, bytes] = {}
        self._lock = threading.Lock()
    
    def save_image(self, content: bytes, filename: str, content_type: Optional[str] = None) -> str:
        key = self.generate_key(filename)
        with self._lock:
            self._images[key] = content
        return key
    
    def get_image(self, key: str) -> bytes:
        with self._lock:
            if key not in self._images:
                raise ImageStorageException(f"Image '{key}' not found")
            return self._images[key]
    
    def delete_image(self, key: str) -> None:
        with self._lock:
            self._images.pop(key, None)
