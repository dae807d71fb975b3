"""Dependency injection container for the application."""

import os

import boto3
from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from textract_query_results.config import config
from textract_query_results.infrastructure.dynamodb_client import DynamoDBClient
from textract_query_results.infrastructure.s3_client import S3Client
from textract_query_results.services.data_service import DataService
from textract_query_results.services.textract_service import TextractService


def _create_session() -> boto3.Session:
    """Create boto3 session.

    In Lambda: Uses execution role automatically.
    Locally: Uses AWS_PROFILE_QUERY_RESULTS from environment.
    """
    region = os.getenv("AWS_REGION", "us-east-1")

    if os.getenv("AWS_LAMBDA_FUNCTION_NAME"):
        return boto3.Session(region_name=region)

    profile = os.getenv("AWS_PROFILE_QUERY_RESULTS", "default")
    return boto3.Session(profile_name=profile, region_name=region)


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    session = providers.Singleton(_create_session)

    # S3 dependency chain
    s3_boto_client = providers.Singleton(
        lambda session: session.client("s3"),
        session=session,
    )

    s3_client = providers.Singleton(
        S3Client,
        client=s3_boto_client,
    )

    textract_service = providers.Singleton(
        TextractService,
        s3_client=s3_client,
    )

    # DynamoDB dependency chain
    dynamodb_boto_client = providers.Singleton(
        lambda session: session.client("dynamodb"),
        session=session,
    )

    dynamodb_client = providers.Singleton(
        DynamoDBClient,
        client=dynamodb_boto_client,
    )

    data_service = providers.Singleton(
        DataService,
        dynamodb_client=dynamodb_client,
        table_name=providers.Callable(lambda: config.process_table_name),
        key_name=providers.Callable(lambda: config.process_table_key),
    )
