import re

from gluetesttools.engine.python import environment

def test_environment_variables():
    env_vars = {
        'AWS_TEST_BUCKET': 'bucket',
        'AWS_TEST_CROSS_REGION_BUCKET': 'cross-region-bucket',
        'AWS_TEST_ACCOUNT_ID': '123456789012',
    }

    assert environment.test_bucket_name(env_vars) == 'bucket'
    assert environment.test_cross_region_bucket_name(env_vars) == 'cross-region-bucket'
    assert environment.test_account_id(env_vars) == '123456789012'

def test_missing_environment_variables():
    assert environment.test_bucket_name({}) is None
    assert environment.test_cross_region_bucket_name({}) is None
    assert environment.test_account_id({}) is None
    assert environment.test_region({}) is None

def test_region_prefers_aws_region():
    assert environment.test_region({'AWS_REGION': 'eu-west-1', 'AWS_DEFAULT_REGION': 'us-east-1'}) == 'eu-west-1'
    assert environment.test_region({'AWS_DEFAULT_REGION': 'us-east-1'}) == 'us-east-1'

def test_get_random_name():
    names = {environment.get_random_name() for _ in range(100)}

    assert len(names) == 100
    assert all(re.fullmatch(r'[0-9a-f]{32}', name) for name in names)
