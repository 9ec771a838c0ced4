"""
S3 Repository for medication image storage.
Keeps image bytes in Amazon S3 and hands back the object key.
"""
import io
from typing import Optional
import boto3
from botocore.exceptions import ClientError
from src.core import config
from src.core.exceptions import ImageStorageException
from src.repositories.image_repository import ImageRepository


class S3ImageRepository(ImageRepository):
    """Repository for S3 image operations."""
    
    def __init__(self):
        self.s3_client = boto3.client('s3', region_name=config.settings.aws_region)
        self.bucket_name = config.settings.s3_bucket_name
    
    def save_image(self, content: bytes, filename: str, content_type: Optional[str] = None) -> str:
        """
        Upload an image to S3.
        
        Args:
            content: Image bytes
            filename: Original filename
            content_type: MIME type reported by the client
            
        Returns:
            str: S3 object key
            
        Raises:
            ImageStorageException: If upload fails
        """
        try:
            s3_key = self.generate_key(filename)
            
            self.s3_client.upload_fileobj(
                io.BytesIO(content),
                self.bucket_name,
                s3_key,
                ExtraArgs={'ContentType': content_type or 'application/octet-stream'}
            )
            
            return s3_key
            
        except ClientError as e:
            raise ImageStorageException(f"Failed to upload image to S3: {str(e)}") from e
        except Exception as e:
            raise ImageStorageException(f"Unexpected error during S3 upload: {str(e)}") from e
    
    def get_image(self, key: str) -> bytes:
        """
        Retrieve an image from S3.
        
        Raises:
            ImageStorageException: If retrieval fails
        """
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=key)
            return response['Body'].read()
        except ClientError as e:
            raise ImageStorageException(f"Failed to retrieve image from S3: {str(e)}") from e
    
    def delete_image(self, key: str) -> None:
        """Delete an image from S3."""
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            raise ImageStorageException(f"Failed to delete image from S3: {str(e)}") from e
