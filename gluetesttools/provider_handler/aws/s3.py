import logging
from typing import List, Tuple

from mypy_boto3_s3 import S3Client

from gluetesttools.interfaces.catalog import ObjectVersionTypeDef

logger = logging.getLogger(__name__)

# S3 accepts at most this many keys per DeleteObjects request
MAX_DELETE_BATCH_SIZE = 1000

class S3:
    def __init__(self, s3_cli: S3Client) -> None:
        """
        Initialize S3 with an S3 client.

        Args:
            s3_cli: Boto3 S3 client instance.
        """
        self.s3_cli = s3_cli

    @staticmethod
    def parse_uri(s3_uri: str) -> Tuple[str, str]:
        """
        Get the bucket and key from an S3 URI.

        Args:
            s3_uri: URI in the form s3://bucket/key.

        Returns:
            Tuple with the bucket and the key, the key may be empty.
        """
        if not s3_uri.startswith('s3://'):
            raise ValueError(f"{s3_uri} is not an s3:// URI")

        bucket, _, key = s3_uri.replace('s3://', '', 1).partition('/')
        return bucket, key

    @staticmethod
    def _check_batch_size(batch_size: int) -> None:
        if not 0 < batch_size <= MAX_DELETE_BATCH_SIZE:
            raise ValueError(f"Batch size must be between 1 and {MAX_DELETE_BATCH_SIZE}, got {batch_size}")

    def get_keys(self, bucket: str, prefix: str) -> List[str]:
        """
        List every key stored under a prefix, going through all result pages.

        Args:
            bucket: S3 bucket name.
            prefix: Raw key prefix, matched character by character.

        Returns:
            Keys in listing order.
        """
        pages = self.s3_cli.get_paginator('list_objects_v2').paginate(Bucket=bucket, Prefix=prefix)
        return [obj['Key'] for page in pages for obj in page.get('Contents', [])]

    def get_location_keys(self, location: str) -> List[str]:
        """
        List the keys stored under an s3:// location treated as a directory, so
        s3://bucket/t never matches the keys of a sibling s3://bucket/t_2.

        Args:
            location: Directory-like S3 URI, with or without a trailing slash.

        Returns:
            Keys relative to the location's bucket.
        """
        bucket, prefix = self.parse_uri(location)
        if prefix:
            prefix = prefix.rstrip('/') + '/'

        return self.get_keys(bucket, prefix)

    def get_object_versions(self, bucket: str, prefix: str) -> List[ObjectVersionTypeDef]:
        """
        Retrieve every version and delete marker stored under a prefix.

        Args:
            bucket: S3 bucket name.
            prefix: Prefix for the keys.

        Returns:
            A list of key and version id pairs.
        """
        paginator = self.s3_cli.get_paginator('list_object_versions')
        iterator = paginator.paginate(Bucket=bucket, Prefix=prefix)

        versions = [
            ObjectVersionTypeDef(key=version['Key'], version_id=version.get('VersionId'))
            for page in iterator
            for section in ('Versions', 'DeleteMarkers')
            for version in page.get(section, [])
        ]

        return versions

    def delete_object_versions(self, bucket: str, versions: List[ObjectVersionTypeDef], batch_size: int = MAX_DELETE_BATCH_SIZE) -> None:
        """
        Permanently delete object versions from an S3 bucket.

        Args:
            bucket: S3 bucket name.
            versions: List of key and version id pairs to delete.
            batch_size: Number of versions sent in each delete request.
        """
        self._check_batch_size(batch_size)

        for i in range(0, len(versions), batch_size):
            delete_versions = []
            for version in versions[i:i+batch_size]:
                identifier = {'Key': version['key']}
                if version['version_id'] is not None:
                    identifier['VersionId'] = version['version_id']
                delete_versions.append(identifier)

            self.s3_cli.delete_objects(Bucket=bucket, Delete={'Objects': delete_versions})

    def clean_bucket(self, bucket: str, prefix: str, batch_size: int = MAX_DELETE_BATCH_SIZE) -> None:
        """
        Delete every version of every object under a prefix, leaving nothing behind
        in versioned buckets either.

        Args:
            bucket: S3 bucket name.
            prefix: Prefix for the keys, must not be empty.
            batch_size: Number of versions sent in each delete request.
        """
        if not prefix:
            raise ValueError(f"Refusing to clean the whole bucket {bucket}, a prefix is required")

        versions = self.get_object_versions(bucket, prefix)
        logger.info("Deleting %d object versions under s3://%s/%s", len(versions), bucket, prefix)
        self.delete_object_versions(bucket, versions, batch_size)
