from .address_cache import AddressCache as AddressCache
from .read_write_lock import ReadWriteLock as ReadWriteLock
