from os import environ
from typing import Mapping, Optional
from uuid import uuid4

TEST_BUCKET_ENV = 'AWS_TEST_BUCKET'
TEST_CROSS_REGION_BUCKET_ENV = 'AWS_TEST_CROSS_REGION_BUCKET'
TEST_ACCOUNT_ID_ENV = 'AWS_TEST_ACCOUNT_ID'

def test_bucket_name(env_vars: Mapping[str, str] = environ) -> Optional[str]:
    """Bucket holding every artifact written by the integration tests."""
    return env_vars.get(TEST_BUCKET_ENV)

def test_cross_region_bucket_name(env_vars: Mapping[str, str] = environ) -> Optional[str]:
    """Bucket living in a region other than the test region."""
    return env_vars.get(TEST_CROSS_REGION_BUCKET_ENV)

def test_account_id(env_vars: Mapping[str, str] = environ) -> Optional[str]:
    """Account that owns the Glue catalog under test."""
    return env_vars.get(TEST_ACCOUNT_ID_ENV)

def test_region(env_vars: Mapping[str, str] = environ) -> Optional[str]:
    """
    Region the AWS clients are bound to.

    Args:
        env_vars: Dictionary containing environment variables.

    Returns:
        The value of AWS_REGION, falling back to AWS_DEFAULT_REGION.
    """
    regions = [env_vars.get('AWS_REGION'), env_vars.get('AWS_DEFAULT_REGION')]
    return next((item for item in regions if item is not None), None)

def get_random_name() -> str:
    """Random 32 character lowercase hex name, valid for both Glue databases and tables."""
    return uuid4().hex

