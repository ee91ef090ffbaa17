"""Shared fixtures for S3 integration tests."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws


LOG_BUCKET = "test-bucket"


@pytest.fixture
def s3_client():
    """Mocked S3 client with an empty log bucket for producers to write into."""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=LOG_BUCKET)
        yield client
