"""
Unit tests for S3ImageRepository.
Uses moto to mock AWS S3 service.
"""
import os
import pytest
from moto import mock_aws
import boto3
from src.core import config
from src.core.exceptions import ImageStorageException
from src.repositories.s3_repository import S3ImageRepository


class TestS3ImageRepository:
    """Test suite for S3ImageRepository."""
    
    @pytest.fixture(autouse=True)
    def setup_aws(self):
        """Setup mock AWS credentials."""
        original_settings = config.settings
        os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
        os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'
        os.environ['AWS_SECURITY_TOKEN'] = 'testing'
        os.environ['AWS_SESSION_TOKEN'] = 'testing'
        os.environ['S3_BUCKET_NAME'] = 'test-bucket'
        
        yield
        
        # Cleanup
        if 'S3_BUCKET_NAME' in os.environ:
            del os.environ['S3_BUCKET_NAME']
        config.settings = original_settings
    
    @mock_aws
    def test_save_and_get_image(self):
        """Test image round trip through S3."""
        # Reload settings inside mock context
        config.settings = config.Settings()
        
        s3 = boto3.client('s3', region_name='us-east-1')
        s3.create_bucket(Bucket='test-bucket')
        
        repo = S3ImageRepository()
        key = repo.save_image(b"image-bytes", "med.png", "image/png")
        
        assert key.startswith("medications/")
        assert key.endswith("_med.png")
        assert repo.get_image(key) == b"image-bytes"
        head = s3.head_object(Bucket='test-bucket', Key=key)
        assert head['ContentType'] == 'image/png'
    
    @mock_aws
    def test_save_generates_unique_keys(self):
        """Test that uploads of the same filename get distinct keys."""
        config.settings = config.Settings()
        
        s3 = boto3.client('s3', region_name='us-east-1')
        s3.create_bucket(Bucket='test-bucket')
        
        repo = S3ImageRepository()
        
        assert repo.save_image(b"a", "med.png") != repo.save_image(b"b", "med.png")
    
    @mock_aws
    def test_delete_image(self):
        """Test deleted images can no longer be retrieved."""
        config.settings = config.Settings()
        
        s3 = boto3.client('s3', region_name='us-east-1')
        s3.create_bucket(Bucket='test-bucket')
        
        repo = S3ImageRepository()
        key = repo.save_image(b"a", "med.png")
        repo.delete_image(key)
        
        with pytest.raises(ImageStorageException):
            repo.get_image(key)
    
    @mock_aws
    def test_save_to_missing_bucket(self):
        """Test upload failure is wrapped in ImageStorageException."""
        config.settings = config.Settings()
        
        repo = S3ImageRepository()
        
        with pytest.raises(ImageStorageException):
            repo.save_image(b"a", "med.png")
    
    @mock_aws
    def test_get_missing_image(self):
        config.settings = config.Settings()
        
        s3 = boto3.client('s3', region_name='us-east-1')
        s3.create_bucket(Bucket='test-bucket')
        
        with pytest.raises(ImageStorageException):
            S3ImageRepository().get_image("medications/nope.png")
