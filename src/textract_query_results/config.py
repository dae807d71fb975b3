"""Configuration management for the query results Lambda."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if exists (local dev only, no-op in Lambda)
load_dotenv()


@dataclass
class Config:
    """Query results configuration loaded from environment variables."""

    aws_region: str = os.getenv("AWS_REGION", "us-east-1")

    # DynamoDB
    process_table_name: str = os.getenv("PROCESS_TABLE_NAME", "")
    process_table_key: str = os.getenv("PROCESS_TABLE_KEY", "id")

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.process_table_name:
            raise ValueError("PROCESS_TABLE_NAME environment variable is required")


config = Config()
