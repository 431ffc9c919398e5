"""Infrastructure component providers.

Importing the production implementation here registers it as a subclass
of its component base, which is how ``get_provider`` finds it.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
