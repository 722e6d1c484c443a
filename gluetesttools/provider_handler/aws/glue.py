import logging
from typing import List, Optional, cast

from mypy_boto3_glue import GlueClient
from mypy_boto3_glue.type_defs import ColumnTypeDef, StorageDescriptorTypeDef, TableInputTypeDef, TableTypeDef

from gluetesttools.interfaces.catalog import ColumnUpdater

logger = logging.getLogger(__name__)

# Glue replaces the whole table on update, so everything we want to keep has to be sent back
TABLE_INPUT_FIELDS = ('Name', 'Description', 'PartitionKeys', 'TableType', 'Owner', 'Parameters', 'StorageDescriptor')

class Glue:
    """Direct access to the Glue API, bypassing any catalog built on top of it."""

    def __init__(self, glue_cli: GlueClient) -> None:
        """
        Initialize Glue with a Glue client.

        Args:
            glue_cli: Boto3 Glue client instance.
        """
        self.glue_cli = glue_cli

    ############################
    # Private methods: Helpers #
    ############################

    def _to_table_input(self, table: TableTypeDef, **overrides) -> TableInputTypeDef:
        """
        Clone the updatable fields of a table into a table input.

        Args:
            table: Table as returned by get_table.
            overrides: Fields replacing the ones cloned from the table.

        Returns:
            Table input carrying the table's current state plus the overrides.
        """
        table_input = {field: table[field] for field in TABLE_INPUT_FIELDS if field in table}
        table_input.update(overrides)

        return cast(TableInputTypeDef, table_input)

    def _update_table(self, table: TableTypeDef, table_input: TableInputTypeDef) -> None:
        """
        Submit a table input for an existing table.

        Args:
            table: Table as returned by get_table.
            table_input: New definition of the table.
        """
        kwargs = {
            'DatabaseName': table['DatabaseName'],
            'TableInput': table_input
        }

        if 'CatalogId' in table:
            kwargs['CatalogId'] = table['CatalogId']

        self.glue_cli.update_table(**kwargs)

    ##################
    # Public methods #
    ##################

    def get_table(self, namespace: str, table_name: str) -> TableTypeDef:
        """
        Retrieve a table straight from Glue.

        Args:
            namespace: Glue database name.
            table_name: Glue table name.

        Returns:
            The raw Glue table.
        """
        response = self.glue_cli.get_table(
            DatabaseName=namespace,
            Name=table_name
        )

        return response['Table']

    def table_exists(self, namespace: str, table_name: str) -> bool:
        """
        Check if a table exists in Glue.

        Args:
            namespace: Glue database name.
            table_name: Glue table name.

        Returns:
            True if table exists, False otherwise.
        """
        try:
            self.get_table(namespace, table_name)
            return True

        except self.glue_cli.exceptions.EntityNotFoundException:
            return False

    def update_table_description(self, namespace: str, table_name: str, description: str) -> None:
        """
        Replace the description of a table.

        Args:
            namespace: Glue database name.
            table_name: Glue table name.
            description: New table description.
        """
        table = self.get_table(namespace, table_name)
        table_input = self._to_table_input(table, Description=description)

        self._update_table(table, table_input)

    def update_table_columns(self, namespace: str, table_name: str, column_updater: ColumnUpdater) -> None:
        """
        Rewrite every column of the table's storage descriptor.

        Args:
            namespace: Glue database name.
            table_name: Glue table name.
            column_updater: Function mapping an existing column to its replacement.
        """
        table = self.get_table(namespace, table_name)
        storage_descriptor = table['StorageDescriptor']

        updated_columns: List[ColumnTypeDef] = [column_updater(column) for column in storage_descriptor.get('Columns', [])]
        updated_storage_descriptor = cast(StorageDescriptorTypeDef, {**storage_descriptor, 'Columns': updated_columns})

        table_input = self._to_table_input(table, StorageDescriptor=updated_storage_descriptor)

        self._update_table(table, table_input)

    def get_table_location(self, namespace: str, table_name: str) -> Optional[str]:
        """
        Get the storage location Glue holds for a table.

        Args:
            namespace: Glue database name.
            table_name: Glue table name.

        Returns:
            The storage descriptor location, None when the table has none.
        """
        return self.get_table(namespace, table_name).get('StorageDescriptor', {}).get('Location')

    def clean_catalog(self, namespaces: List[str]) -> None:
        """
        Delete the given databases and every table in them. Failures are logged
        and do not stop the remaining namespaces from being deleted.

        Args:
            namespaces: Glue database names.
        """
        for namespace in namespaces:
            try:
                logger.info("Deleting namespace %s", namespace)
                self.glue_cli.delete_database(Name=namespace)

            except Exception:
                logger.error("Cannot delete namespace %s", namespace, exc_info=True)
