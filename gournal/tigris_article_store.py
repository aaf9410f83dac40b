"""
Tigris/S3-compatible storage implementation of article storage.

Stores each article as its own JSON object in an S3-compatible object storage
service, so several app instances can share the same articles.
Default object key: articles/<slug>.json
"""
import json
import os
from typing import List, Optional

import boto3
from botocore.exceptions import ClientError

from gournal.article import Article
from gournal.article_store import ArticleStore
from gournal.errors import ArticleNotFoundError, ArticleParseError, ArticleStoreError

ARTICLE_SUFFIX = ".json"


class TigrisArticleStore(ArticleStore):
    """
    Tigris/S3-compatible storage implementation of article storage.

    Objects are keyed <prefix><slug>.json; LastModified gives the listing order.
    """

    def __init__(
        self,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        bucket_name: Optional[str] = None,
        region: Optional[str] = None,
        prefix: str = "articles/"
    ):
        """
        Initialize Tigris article store.

        Args:
            access_key_id: AWS access key ID (defaults to AWS_ACCESS_KEY_ID env var)
            secret_access_key: AWS secret access key (defaults to AWS_SECRET_ACCESS_KEY env var)
            endpoint_url: S3 endpoint URL (defaults to AWS_ENDPOINT_URL_S3 or
                         https://fly.storage.tigris.dev)
            bucket_name: S3 bucket name (defaults to TIGRIS_BUCKET_NAME env var)
            region: AWS region (defaults to AWS_REGION or 'auto')
            prefix: Key prefix for article objects (default: "articles/")
        """
        self.access_key_id = access_key_id or os.getenv('AWS_ACCESS_KEY_ID')
        self.secret_access_key = secret_access_key or os.getenv('AWS_SECRET_ACCESS_KEY')
        self.endpoint_url = (
            endpoint_url or
            os.getenv('AWS_ENDPOINT_URL_S3', 'https://fly.storage.tigris.dev')
        )
        self.bucket_name = bucket_name or os.getenv('TIGRIS_BUCKET_NAME')
        self.region = region or os.getenv('AWS_REGION', 'auto')
        self.prefix = prefix

        if not self.access_key_id or not self.secret_access_key:
            raise ValueError(
                "AWS credentials are required. Set AWS_ACCESS_KEY_ID and "
                "AWS_SECRET_ACCESS_KEY environment variables or pass them as parameters."
            )
        if not self.bucket_name:
            raise ValueError(
                "Bucket name is required. Set TIGRIS_BUCKET_NAME environment variable "
                "or pass it as a parameter."
            )

        self.s3_client = boto3.client(
            's3',
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            endpoint_url=self.endpoint_url,
            region_name=self.region
        )

    def _get_object_key(self, slug: str) -> str:
        """Get the S3 object key for an article."""
        return f"{self.prefix}{slug}{ARTICLE_SUFFIX}"

    def save(self, article: Article) -> None:
        """
        Save an article to S3, replacing any object with the same key.

        Args:
            article: Article to store
        """
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=self._get_object_key(article.slug),
                Body=json.dumps(article.to_dict(), indent=2),
                ContentType='application/json',
                CacheControl='no-cache, no-store, must-revalidate'
            )
        except ClientError as exc:
            raise ArticleStoreError(str(exc)) from exc

    def load(self, slug: str) -> Article:
        """
        Load an article from S3.

        Args:
            slug: The article's slug

        Returns:
            The stored Article
        """
        key = self._get_object_key(slug)
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=key)
            content = response['Body'].read()
        except ClientError as exc:
            if exc.response['Error']['Code'] == 'NoSuchKey':
                raise ArticleNotFoundError(slug, f"{key}: no such key") from exc
            raise ArticleStoreError(str(exc)) from exc

        try:
            data = json.loads(content.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ArticleParseError(f"{key}: {exc}") from exc
        return Article.from_dict(data)

    def list_all(self) -> List[Article]:
        """
        Load every article under the prefix, newest modification first.

        Returns:
            List of Articles
        """
        entries = []
        try:
            paginator = self.s3_client.get_paginator('list_objects_v2')
            for page in paginator.paginate(Bucket=self.bucket_name, Prefix=self.prefix):
                for obj in page.get('Contents', []):
                    key = obj['Key']
                    name = key[len(self.prefix):]
                    if not name.endswith(ARTICLE_SUFFIX) or '/' in name:
                        continue
                    entries.append((obj['LastModified'], name[:-len(ARTICLE_SUFFIX)]))
        except ClientError as exc:
            raise ArticleStoreError(str(exc)) from exc

        entries.sort(key=lambda entry: entry[0], reverse=True)
        return [self.load(slug) for _, slug in entries]
