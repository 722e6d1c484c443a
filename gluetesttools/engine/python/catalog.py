import re
from typing import Any, Dict, Optional, Tuple, Type, Union

from mypy_boto3_glue import GlueClient
from pyiceberg.catalog import WAREHOUSE_LOCATION
from pyiceberg.catalog.glue import GlueCatalog as IcebergGlueCatalog
from pyiceberg.io import FSSPEC_FILE_IO, PY_IO_IMPL
from pyiceberg.typedef import Identifier
from pyiceberg.utils.properties import property_as_bool

GLUE_SKIP_NAME_VALIDATION = 'glue.skip-name-validation'
GLUE_SKIP_NAME_VALIDATION_DEFAULT = False

GLUE_DATABASE_PATTERN = re.compile(r'^[a-z0-9_]{1,252}$')
GLUE_TABLE_PATTERN = re.compile(r'^[a-z0-9_]{1,255}$')

class GlueCatalog(IcebergGlueCatalog):
    """
    Glue catalog refusing namespace and table names that Glue would silently
    lowercase or reject, unless glue.skip-name-validation is set.
    """

    def __init__(self, name: str, client: Optional[GlueClient] = None, **properties: Any):
        """
        Initialize GlueCatalog.

        Args:
            name: Name to identify the catalog.
            client: An optional boto3 Glue client.
            properties: Catalog properties, see pyiceberg's GlueCatalog.
        """
        super().__init__(name, client, **properties)
        self.skip_name_validation = property_as_bool(self.properties, GLUE_SKIP_NAME_VALIDATION, GLUE_SKIP_NAME_VALIDATION_DEFAULT)

    def identifier_to_database(self, identifier: Union[str, Identifier], err: Type[Exception] = ValueError) -> str:
        database_name = super().identifier_to_database(identifier, err)

        if not self.skip_name_validation and not GLUE_DATABASE_PATTERN.match(database_name):
            raise err(f"Invalid Glue database name {database_name}: it must be 1-252 chars of lowercase letters, numbers and underscores")

        return database_name

    def identifier_to_database_and_table(self, identifier: Union[str, Identifier], err: Type[Exception] = ValueError) -> Tuple[str, str]:
        database_name, table_name = super().identifier_to_database_and_table(identifier, err)

        if not self.skip_name_validation:
            if not GLUE_DATABASE_PATTERN.match(database_name):
                raise err(f"Invalid Glue database name {database_name}: it must be 1-252 chars of lowercase letters, numbers and underscores")

            if not GLUE_TABLE_PATTERN.match(table_name):
                raise err(f"Invalid Glue table name {table_name}: it must be 1-255 chars of lowercase letters, numbers and underscores")

        return database_name, table_name

def load_glue_catalog(name: str,
                      warehouse: str,
                      glue_cli: GlueClient,
                      skip_name_validation: bool = False,
                      properties: Optional[Dict[str, str]] = None) -> GlueCatalog:
    """
    Build a Glue catalog bound to an existing Glue client, storing its files through s3fs.

    Args:
        name: Catalog name.
        warehouse: S3 path new namespaces and tables are placed under.
        glue_cli: Boto3 Glue client.
        skip_name_validation: Accept names that do not follow Glue's naming rules.
        properties: Extra catalog properties, they win over the ones set here.

    Returns:
        The catalog.
    """
    catalog_properties = {
        WAREHOUSE_LOCATION: warehouse,
        PY_IO_IMPL: FSSPEC_FILE_IO,
        GLUE_SKIP_NAME_VALIDATION: str(skip_name_validation).lower(),
        **(properties or {})
    }

    return GlueCatalog(name, client=glue_cli, **catalog_properties)
