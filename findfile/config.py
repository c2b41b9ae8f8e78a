"""Configuration and environment variables"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # MongoDB (document store)
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "findfile"
    documents_collection: str = "documents"
    mongodb_timeout_ms: int = 5000
    
    # AWS Textract (OCR)
    aws_region: str = "us-east-1"
    textract_feature_types: List[str] = ["TABLES", "FORMS"]
    
    # Indexing
    supported_extensions: List[str] = [".jpg", ".jpeg", ".png"]
    
    # Request admission (shared secret header)
    http_security_header: str = "X-Findfile-Security-Key"
    http_security_key: Optional[str] = None
    
    # Query Configuration
    query_result_limit: int = 1000
    
    # CORS Settings
    cors_origins: list = ["http://localhost:3000", "http://127.0.0.1:3000"]
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
