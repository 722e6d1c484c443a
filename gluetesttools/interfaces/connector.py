from abc import ABC, abstractmethod

class ClientFactory(ABC):
    """Abstract class for the factories handing out service clients to the test fixtures."""

    @abstractmethod
    def get_glue(self):
        """Return the client used to talk to the metadata service."""
        raise NotImplementedError('Method get_glue must be implemented in subclass.')

    @abstractmethod
    def get_s3(self):
        """Return the client used to talk to the object store."""
        raise NotImplementedError('Method get_s3 must be implemented in subclass.')
