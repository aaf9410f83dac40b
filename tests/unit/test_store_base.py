"""
Base test fixtures and helpers for article store tests.

Provides common test patterns for both local disk and Tigris stores.
"""
import json
import os
import shutil
import tempfile
from unittest.mock import Mock, MagicMock

import pytest


class BaseLocalDiskStoreTests:
    """Base test class for local disk stores."""

    @pytest.fixture
    def temp_articles_dir(self):
        """Create a temporary articles directory."""
        temp_dir = tempfile.mkdtemp()
        articles_dir = os.path.join(temp_dir, "articles")
        os.makedirs(articles_dir, exist_ok=True)
        yield articles_dir
        shutil.rmtree(temp_dir)

    def write_raw(self, articles_dir, name, content):
        """
        Helper to drop a raw file into the articles directory.

        Args:
            articles_dir: Directory to write into
            name: File name
            content: Text content (dicts are JSON encoded)
        """
        if not isinstance(content, str):
            content = json.dumps(content)
        path = os.path.join(articles_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path


class BaseTigrisStoreTests:
    """Base test class for Tigris stores."""

    @pytest.fixture
    def mock_s3_client(self):
        """Create a mock boto3 S3 client."""
        mock_client = MagicMock()
        return mock_client

    def setup_mock_get_object(self, mock_s3_client, data):
        """
        Helper to setup mock get_object response.

        Args:
            mock_s3_client: Mock S3 client
            data: Data to return from get_object (a dict or raw bytes)
        """
        mock_body = Mock()
        if isinstance(data, bytes):
            mock_body.read.return_value = data
        else:
            mock_body.read.return_value = json.dumps(data).encode('utf-8')
        mock_s3_client.get_object.return_value = {"Body": mock_body}

    def setup_mock_objects(self, mock_s3_client, objects):
        """
        Helper to serve several objects keyed by S3 key.

        Args:
            mock_s3_client: Mock S3 client
            objects: Dict of object key to JSON data
        """
        def get_object(Bucket, Key):  # pylint: disable=invalid-name,unused-argument
            if Key not in objects:
                self.raise_no_such_key()
            mock_body = Mock()
            mock_body.read.return_value = json.dumps(objects[Key]).encode('utf-8')
            return {"Body": mock_body}
        mock_s3_client.get_object.side_effect = get_object

    def setup_mock_listing(self, mock_s3_client, pages):
        """
        Helper to setup a paginated list_objects_v2 response.

        Args:
            mock_s3_client: Mock S3 client
            pages: List of lists of {"Key": ..., "LastModified": ...} dicts
        """
        paginator = MagicMock()
        paginator.paginate.return_value = [{"Contents": page} for page in pages]
        mock_s3_client.get_paginator.return_value = paginator
        return paginator

    def raise_no_such_key(self):
        from botocore.exceptions import ClientError
        raise ClientError({'Error': {'Code': 'NoSuchKey'}}, 'GetObject')

    def setup_mock_no_such_key(self, mock_s3_client):
        """
        Helper to setup mock NoSuchKey error.

        Args:
            mock_s3_client: Mock S3 client
        """
        from botocore.exceptions import ClientError
        error_response = {'Error': {'Code': 'NoSuchKey'}}
        mock_s3_client.get_object.side_effect = ClientError(error_response, 'GetObject')
