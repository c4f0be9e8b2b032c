from events.stores.django_store import DjangoEventLookupProvider
from events.stores.interfaces import EventLookupProvider

__all__ = ["EventLookupProvider", "DjangoEventLookupProvider"]
