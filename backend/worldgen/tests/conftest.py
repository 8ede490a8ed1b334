"""Pytest configuration for worldgen tests."""

import os

# Set AWS region for moto/boto3
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-southeast-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

# Set default table names for testing
os.environ.setdefault("ROOM_TABLE", "test-room-table")
os.environ.setdefault("DEFINITION_TABLE", "test-definition-table")
