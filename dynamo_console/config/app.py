import os
from pathlib import Path
from typing import Optional

from aws_lambda_powertools.logging import Logger
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = Logger()


class AppConfig(BaseModel):
    """Application configuration."""

    app_env: str = Field(description="Application environment (local, dev or prod)")
    version: str = Field(default="unknown", description="Application version")
    aws_profile: str = Field(
        default="default", description="AWS shared credentials profile"
    )
    aws_region: str = Field(default="ap-southeast-1", description="AWS region")
    dynamodb_endpoint_url: Optional[str] = Field(
        default=None, description="DynamoDB endpoint override (e.g. DynamoDB Local)"
    )
    catalog_file: Optional[str] = Field(
        default=None, description="JSON file replacing the built-in table catalog"
    )
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=8080, ge=1, le=65535, description="Listen port")
    worker_threads: int = Field(
        default=8, ge=1, description="Maximum number of requests handled concurrently"
    )
    cors_allow_origin: str = Field(default="*", description="Allowed CORS origin")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables.

        In 'local' mode (default), it first loads variables from a .env file.
        In 'dev' and 'prod' modes, it reads directly from environment variables.
        """

        app_env = os.getenv("APP_ENV", "local").lower()
        logger.debug("App environment", extra={"app_env": app_env})
        if app_env == "local":
            dotenv_path = Path(".env")
            load_dotenv(dotenv_path=dotenv_path, override=True)
            logger.debug("Loaded .env file", extra={"dotenv_path": str(dotenv_path)})
        elif app_env not in ["dev", "prod"]:
            raise ValueError(f"Invalid app environment: {app_env}")

        return cls(
            app_env=app_env,
            version=os.getenv("VERSION", "unknown"),
            aws_profile=os.getenv("AWS_PROFILE") or "default",
            aws_region=os.getenv("AWS_REGION") or "ap-southeast-1",
            dynamodb_endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL") or None,
            catalog_file=os.getenv("CATALOG_FILE") or None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=os.getenv("PORT") or 8080,
            worker_threads=os.getenv("WORKER_THREADS") or 8,
            cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", "*"),
        )
