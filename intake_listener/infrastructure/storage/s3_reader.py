"""AWS S3 object reader for storage notifications."""
import logging
from typing import Optional

import boto3
from botocore.exceptions import ClientError, BotoCoreError

logger = logging.getLogger(__name__)


class S3ObjectReader:
    """Read uploaded objects from S3."""

    def __init__(self, client=None, region: Optional[str] = None):
        self._client = client or boto3.client('s3', region_name=region)

    def read(self, bucket: str, key: str) -> bytes:
        """
        Read an object's full content.

        Raises:
            RuntimeError: If the object cannot be fetched
        """
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
            return response['Body'].read()
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            error_message = e.response.get('Error', {}).get('Message', str(e))
            raise RuntimeError(f"Failed to read s3://{bucket}/{key}: {error_code} - {error_message}") from e
        except BotoCoreError as e:
            raise RuntimeError(f"AWS service error while reading s3://{bucket}/{key}: {str(e)}") from e
