"""S3-backed object store for saved resume and cover-letter HTML."""

import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .errors import ObjectNotFoundError, StorageAccessError

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR_CODES = {'NoSuchKey', 'NotFound', '404'}

# botocore "standard" mode retries throttling (SlowDown, 503) and transient
# connection errors with jittered exponential backoff.
MAX_ATTEMPTS = 4


class ObjectStore:
    """Reads stored documents from an S3 bucket.

    Attributes:
        bucket: Bucket holding user documents
        client: boto3 S3 client (created from the default session with
            standard retries if omitted)
    """

    def __init__(self, bucket: str, client=None, region: Optional[str] = None):
        self.bucket = bucket
        self.client = client or boto3.client(
            's3',
            region_name=region,
            config=Config(retries={'mode': 'standard', 'total_max_attempts': MAX_ATTEMPTS}),
        )

    def get_text(self, key: str, encoding: str = 'utf-8') -> str:
        """Fetch an object and decode it as text.

        Args:
            key: Object key, e.g. users/<user_id>/resumes/<name>.html
            encoding: Text encoding of the stored object

        Returns:
            Decoded object content

        Raises:
            ObjectNotFoundError: If the key does not exist
            StorageAccessError: If the request fails or the body cannot be decoded
        """
        logger.debug(f"Fetching s3://{self.bucket}/{key}")
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=key)
            body = response['Body'].read()
        except ClientError as e:
            code = e.response.get('Error', {}).get('Code')
            if code in NOT_FOUND_ERROR_CODES:
                raise ObjectNotFoundError(self.bucket, key) from e
            raise StorageAccessError(key, str(e)) from e
        except BotoCoreError as e:
            raise StorageAccessError(key, str(e)) from e

        try:
            return body.decode(encoding)
        except UnicodeDecodeError as e:
            raise StorageAccessError(key, f"content is not valid {encoding}") from e
