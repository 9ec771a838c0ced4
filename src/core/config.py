"""
Core configuration for the Drone Delivery API.
Manages environment variables, fleet rules and image storage settings.
"""
import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""
    
    # API Configuration
    api_title: str = os.getenv("API_TITLE", "Drone Delivery API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    
    # AWS Configuration (medication images)
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    s3_bucket_name: str = os.getenv("S3_BUCKET_NAME", "")
    
    # Image Upload Limits
    max_image_size_mb: int = int(os.getenv("MAX_IMAGE_SIZE_MB", "5"))
    
    # Fleet Rules
    min_loading_battery: float = float(os.getenv("MIN_LOADING_BATTERY", "25"))
    available_battery_threshold: float = float(os.getenv("AVAILABLE_BATTERY_THRESHOLD", "25"))
    enforce_cumulative_weight: bool = os.getenv("ENFORCE_CUMULATIVE_WEIGHT", "false").lower() in ("1", "true", "yes")
    
    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
