"""S3 object storage for the encoded hotel text."""

from datetime import datetime, timezone
from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError
from structlog import get_logger

from hotelstate.exceptions import StorageError
from hotelstate.storage.base import TextStorage
from hotelstate.storage.client_factory import get_boto3_client_kwargs

logger = get_logger(__name__)


class S3TextStorage(TextStorage):
    """Keeps the encoded text in one S3 object."""

    def __init__(
        self,
        bucket: str,
        key: str,
        encoding: str = "utf-8",
        s3_client: Optional[Any] = None,
    ):
        """Initialize S3 storage.

        Args:
            bucket: Bucket name
            key: Object key
            encoding: Text encoding of the object body
            s3_client: Preconfigured client; built from settings when omitted
        """
        self.bucket = bucket
        self.key = key
        self.encoding = encoding
        self.s3_client = s3_client or boto3.client("s3", **get_boto3_client_kwargs("s3"))

    @property
    def url(self) -> str:
        return f"s3://{self.bucket}/{self.key}"

    def read_text(self) -> str:
        logger.info("Retrieving hotel data from S3", url=self.url)
        try:
            response = self.s3_client.get_object(Bucket=self.bucket, Key=self.key)
            body = response["Body"].read()
        except ClientError as e:
            logger.error("Failed to retrieve hotel data from S3", url=self.url, error=str(e))
            raise StorageError(f"Failed to retrieve {self.url}: {e}") from e

        try:
            return body.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.error("Hotel data is not valid text", url=self.url, encoding=self.encoding, error=str(e))
            raise StorageError(f"Failed to decode {self.url} as {self.encoding}: {e}") from e

    def write_text(self, text: str) -> str:
        logger.info("Uploading hotel data to S3", url=self.url, length=len(text))
        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=self.key,
                Body=text.encode(self.encoding),
                ContentType="application/xml",
                Metadata={
                    "data-type": "hotel-rooms",
                    "upload-timestamp": datetime.now(timezone.utc).isoformat(),
                },
            )
        except ClientError as e:
            logger.error("Failed to upload hotel data to S3", url=self.url, error=str(e))
            raise StorageError(f"Failed to upload {self.url}: {e}") from e

        logger.info("Successfully uploaded hotel data", url=self.url)
        return self.url
