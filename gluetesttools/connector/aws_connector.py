from typing import Optional

import boto3
from mypy_boto3_glue import GlueClient
from mypy_boto3_s3 import S3Client

from gluetesttools.engine.python.environment import test_region
from gluetesttools.interfaces.connector import ClientFactory

class AwsConnector(ClientFactory):
    """
    AwsConnector is the default ClientFactory.
    It builds boto3 clients on first use and hands out the same client afterwards.
    """

    def __init__(self, region: Optional[str] = None, glue_cli: Optional[GlueClient] = None, s3_cli: Optional[S3Client] = None):
        """
        Initializes AwsConnector.

        :param region: region the clients are bound to, defaults to the test region from the environment
        :param glue_cli: a pre-built Glue client, built on demand when missing
        :param s3_cli: a pre-built S3 client, built on demand when missing
        """
        self.region = region or test_region()
        self.glue_cli = glue_cli
        self.s3_cli = s3_cli

    def get_glue(self) -> GlueClient:
        """
        Returns the Glue client associated with this connector.

        :return: a boto3 Glue client
        """
        if self.glue_cli is None:
            self.glue_cli = boto3.client('glue', region_name=self.region)
        return self.glue_cli

    def get_s3(self) -> S3Client:
        """
        Returns the S3 client associated with this connector.

        :return: a boto3 S3 client
        """
        if self.s3_cli is None:
            self.s3_cli = boto3.client('s3', region_name=self.region)
        return self.s3_cli
