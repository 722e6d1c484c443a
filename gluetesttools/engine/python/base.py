import logging
from typing import Dict, List, Optional

from mypy_boto3_glue import GlueClient
from mypy_boto3_s3 import S3Client
from pyiceberg.partitioning import UNPARTITIONED_PARTITION_SPEC, PartitionSpec
from pyiceberg.schema import Schema
from pyiceberg.types import NestedField, StringType

from gluetesttools.connector.aws_connector import AwsConnector
from gluetesttools.engine.python import environment
from gluetesttools.engine.python.catalog import GlueCatalog, load_glue_catalog
from gluetesttools.interfaces.catalog import CatalogTestFixture, ColumnUpdater, TableLocationPropertiesTypeDef
from gluetesttools.interfaces.connector import ClientFactory
from gluetesttools.provider_handler.aws.glue import Glue
from gluetesttools.provider_handler.aws.s3 import S3

logger = logging.getLogger(__name__)

class GlueTestBase(CatalogTestFixture):
    """
    Shared fixtures for integration tests of the Glue catalog.

    Test classes subclass it and pytest runs setup_class once before the first test
    of the class and teardown_class once after the last one, whatever their outcome.
    Every namespace created through create_namespace and every object written under
    test_bucket_path is removed on teardown.
    """

    catalog_name = 'glue'
    delete_batch_size = 10

    schema = Schema(NestedField(field_id=1, name='c1', field_type=StringType(), required=True, doc='c1'))
    partition_spec: PartitionSpec = UNPARTITIONED_PARTITION_SPEC

    # populated by setup_class
    test_bucket_name: str
    test_path_prefix: str
    test_bucket_path: str
    table_location_properties: TableLocationPropertiesTypeDef
    namespaces: List[str]

    connector: ClientFactory
    glue: GlueClient
    s3: S3Client
    glue_handler: Glue
    s3_handler: S3

    glue_catalog: GlueCatalog
    glue_catalog_with_skip_name_validation: GlueCatalog

    @classmethod
    def get_connector(cls) -> ClientFactory:
        """Client factory used by setup_class, override to point the tests somewhere else."""
        return AwsConnector()

    @classmethod
    def get_catalog_properties(cls) -> Dict[str, str]:
        """Extra properties for both catalogs, such as an s3.endpoint for a local S3."""
        return {}

    @classmethod
    def setup_class(cls) -> None:
        test_bucket_name = environment.test_bucket_name()
        assert test_bucket_name, f"{cls.__name__} needs {environment.TEST_BUCKET_ENV!r} environment variable to be defined!"

        cls.test_bucket_name = test_bucket_name
        cls.test_path_prefix = cls.get_random_name()
        cls.test_bucket_path = f's3://{cls.test_bucket_name}/{cls.test_path_prefix}'
        cls.namespaces = []

        cls.table_location_properties = TableLocationPropertiesTypeDef({
            'write.data.path': f'{cls.test_bucket_path}/writeDataLoc',
            'write.metadata.path': f'{cls.test_bucket_path}/writeMetaDataLoc',
            'write.folder-storage.path': f'{cls.test_bucket_path}/writeFolderStorageLoc',
        })

        cls.connector = cls.get_connector()
        cls.glue = cls.connector.get_glue()
        cls.s3 = cls.connector.get_s3()
        cls.glue_handler = Glue(cls.glue)
        cls.s3_handler = S3(cls.s3)

        catalog_properties = cls.get_catalog_properties()
        cls.glue_catalog = load_glue_catalog(cls.catalog_name, cls.test_bucket_path, cls.glue, properties=catalog_properties)
        cls.glue_catalog_with_skip_name_validation = load_glue_catalog(
            cls.catalog_name, cls.test_bucket_path, cls.glue, skip_name_validation=True, properties=catalog_properties
        )

        logger.info("%s writes its artifacts under %s", cls.__name__, cls.test_bucket_path)

    @classmethod
    def teardown_class(cls) -> None:
        cls.glue_handler.clean_catalog(cls.namespaces)
        cls.s3_handler.clean_bucket(cls.test_bucket_name, f'{cls.test_path_prefix}/', cls.delete_batch_size)

    @staticmethod
    def get_random_name() -> str:
        return environment.get_random_name()

    @classmethod
    def create_namespace(cls) -> str:
        namespace = cls.get_random_name()
        # registered first so a half-done create still gets cleaned up
        cls.namespaces.append(namespace)
        cls.glue_catalog.create_namespace(namespace)
        return namespace

    @classmethod
    def create_table(cls, namespace: str, table_name: Optional[str] = None) -> str:
        table_name = table_name or cls.get_random_name()
        cls.glue_catalog.create_table((namespace, table_name), cls.schema, partition_spec=cls.partition_spec)
        return table_name

    # The helpers below go straight to the Glue API, the catalog never sees these changes

    @classmethod
    def update_table_description(cls, namespace: str, table_name: str, description: str) -> None:
        cls.glue_handler.update_table_description(namespace, table_name, description)

    @classmethod
    def update_table_columns(cls, namespace: str, table_name: str, column_updater: ColumnUpdater) -> None:
        cls.glue_handler.update_table_columns(namespace, table_name, column_updater)

    @classmethod
    def get_table_location_keys(cls, namespace: str, table_name: str) -> List[str]:
        """
        List the S3 keys stored under the location Glue holds for a table.

        Args:
            namespace: Glue database name.
            table_name: Glue table name.

        Returns:
            Keys relative to the table's bucket.
        """
        location = cls.glue_handler.get_table_location(namespace, table_name)
        if not location:
            return []

        return cls.s3_handler.get_location_keys(location)
