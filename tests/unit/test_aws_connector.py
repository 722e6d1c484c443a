from unittest.mock import MagicMock, patch

import pytest

from gluetesttools.connector.aws_connector import AwsConnector

def test_region_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv('AWS_REGION', raising=False)
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'eu-west-1')

    assert AwsConnector().region == 'eu-west-1'
    assert AwsConnector(region='us-east-1').region == 'us-east-1'

def test_prebuilt_clients_are_returned():
    glue_cli, s3_cli = MagicMock(), MagicMock()
    connector = AwsConnector(region='us-east-1', glue_cli=glue_cli, s3_cli=s3_cli)

    assert connector.get_glue() is glue_cli
    assert connector.get_s3() is s3_cli

@patch('gluetesttools.connector.aws_connector.boto3')
def test_clients_are_built_once(boto3: MagicMock):
    boto3.client.side_effect = lambda service, region_name: MagicMock(name=f'{service}-{region_name}')
    connector = AwsConnector(region='us-east-1')

    glue_cli = connector.get_glue()
    s3_cli = connector.get_s3()

    assert connector.get_glue() is glue_cli
    assert connector.get_s3() is s3_cli
    assert [c.args for c in boto3.client.call_args_list] == [('glue',), ('s3',)]
    assert all(c.kwargs == {'region_name': 'us-east-1'} for c in boto3.client.call_args_list)
