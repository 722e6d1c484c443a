from abc import ABC, abstractmethod
from typing import Callable, List, Optional, TypedDict

from mypy_boto3_glue.type_defs import ColumnOutputTypeDef, ColumnTypeDef

ColumnUpdater = Callable[[ColumnOutputTypeDef], ColumnTypeDef]

class ObjectVersionTypeDef(TypedDict):
    """A dictionary type for a single version of an S3 object."""
    key: str
    version_id: Optional[str]

TableLocationPropertiesTypeDef = TypedDict(
    'TableLocationPropertiesTypeDef',
    {
        'write.data.path': str,
        'write.metadata.path': str,
        'write.folder-storage.path': str,
    }
)
"""Table properties relocating where a table writes its data and metadata files."""

class CatalogTestFixture(ABC):
    """An abstract base class for the fixtures shared by catalog integration tests."""

    @classmethod
    @abstractmethod
    def create_namespace(cls) -> str:
        """Create a namespace with a random name and register it for cleanup."""
        raise NotImplementedError("This method must be implemented by a subclass")

    @classmethod
    @abstractmethod
    def create_table(cls, namespace: str, table_name: Optional[str] = None) -> str:
        """Create a table with the shared schema and partition spec."""
        raise NotImplementedError("This method must be implemented by a subclass")

    @classmethod
    @abstractmethod
    def update_table_description(cls, namespace: str, table_name: str, description: str) -> None:
        """Change a table's description behind the catalog's back."""
        raise NotImplementedError("This method must be implemented by a subclass")

    @classmethod
    @abstractmethod
    def update_table_columns(cls, namespace: str, table_name: str, column_updater: ColumnUpdater) -> None:
        """Rewrite a table's storage descriptor columns behind the catalog's back."""
        raise NotImplementedError("This method must be implemented by a subclass")

    @classmethod
    @abstractmethod
    def get_table_location_keys(cls, namespace: str, table_name: str) -> List[str]:
        """List the object keys stored under a table's location."""
        raise NotImplementedError("This method must be implemented by a subclass")
