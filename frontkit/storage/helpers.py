"""
Fail-safe wrappers around a KeyValueStore.

**Conceptual**: Storage can fail for reasons the caller cannot fix: a full
disk, a read-only home directory, a corrupt file, a backend that is simply
unavailable. These helpers catch every such error at the boundary and turn it
into a no-op (writes) or a sentinel (reads), so application code never needs
a try/except around "remember the theme".

**Three flavours**:
  - SafeLocalStorage: any key, no clear. Built with safe_local_storage().
  - SafeTypedLocalStorage: a declared key set, adds clear_all() that only
    touches those keys.
  - LocalStorageHelper: a declared key set, get() returns "" for missing keys.

The two keyed flavours are created at most once per process through the
module-level create_local_storage_helper() or create_safe_typed_local_storage().
A second call raises StorageAlreadyInitializedError, so a conflicting key
set surfaces at start-up. Code that injects its own store (tests, alternative backends)
uses a StorageHelperFactory directly; each factory is one-shot in the same way.

**Threading**: The one-shot flag is not locked. Create the helper from a
single thread during start-up; concurrent first calls are not guaranteed to
detect each other.
"""

import logging
from typing import Any, Generic, Optional, Sequence, Tuple, TypeVar

from frontkit.errors import StorageAlreadyInitializedError
from frontkit.utils.text import number_to_text
from frontkit.storage.safe_json import safe_json_parse, safe_json_stringify
from frontkit.storage.stores import KeyValueStore, default_store

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=str)


class SafeLocalStorage(Generic[K]):
    """
    Never-raising access to a KeyValueStore.

    Args:
        store: Backend to wrap.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def set(self, key: K, data: Any, stringify: bool = False) -> None:
        """
        Store data under key.

        Args:
            key: Storage key.
            data: Value to store. Without stringify, non-strings are stored
                  as their text form (True -> "true", 1.0 -> "1").
            stringify: Store json-serialized data instead. Values that cannot
                       be serialized are not written.
        """
        if stringify:
            text = safe_json_stringify(data)
            if text is None:
                logger.debug("Skipping write of %r: value is not JSON-serializable", key)
                return
        else:
            text = data if isinstance(data, str) else number_to_text(data)

        try:
            self._store.set_item(key, text)
        except Exception as e:
            logger.debug("Storage write failed for %r: %s", key, e)

    def get(self, key: K) -> Optional[str]:
        """Return the stored string, or None if missing or the store failed."""
        try:
            return self._store.get_item(key)
        except Exception as e:
            logger.debug("Storage read failed for %r: %s", key, e)
            return None

    def get_parsed(self, key: K) -> Any:
        """Return the stored value decoded from JSON, or None if missing or invalid."""
        return safe_json_parse(self.get(key))

    def remove(self, key: K) -> None:
        """Delete key. Errors are ignored."""
        try:
            self._store.remove_item(key)
        except Exception as e:
            logger.debug("Storage remove failed for %r: %s", key, e)


class SafeTypedLocalStorage(SafeLocalStorage[K]):
    """
    SafeLocalStorage bound to a declared set of keys.

    The key set documents (and, through type hints, restricts) which keys
    the application uses. It is not checked at runtime.
    """

    def __init__(self, store: KeyValueStore, keys: Sequence[K]):
        super().__init__(store)
        self.keys: Tuple[K, ...] = tuple(keys)

    def clear_all(self) -> None:
        """Remove every declared key. Other keys in the store are left alone."""
        for key in self.keys:
            self.remove(key)


class LocalStorageHelper(SafeTypedLocalStorage[K]):
    """Keyed helper whose get() returns "" instead of None for missing keys."""

    def get(self, key: K) -> str:  # type: ignore[override]
        return super().get(key) or ""


class StorageHelperFactory:
    """
    One-shot factory for keyed storage helpers.

    **Conceptual**: Owning the factory is owning the right to configure the
    application's key set. The first create_* call consumes it; any later call
    on the same factory raises StorageAlreadyInitializedError, which surfaces a
    second, conflicting key set at start-up instead of letting it silently
    coexist.

    Application code normally goes through the module-level
    create_safe_typed_local_storage(), which shares one process-wide factory.
    Build a factory directly to inject a store.

    **Usage**:
        factory = StorageHelperFactory(MemoryStore())
        LS = factory.create_safe_typed_local_storage(["theme", "user", "token"])
        LS.set("theme", "dark")
        user = LS.get_parsed("user")

    Args:
        store: Backend for the helper. Defaults to default_store().
    """

    def __init__(self, store: Optional[KeyValueStore] = None):
        self._store = store
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _claim(self) -> KeyValueStore:
        if self._initialized:
            raise StorageAlreadyInitializedError("[LS] LocalStorageHelper already initialized!")
        self._initialized = True
        return self._store if self._store is not None else default_store()

    def create_safe_typed_local_storage(self, keys: Sequence[K]) -> SafeTypedLocalStorage[K]:
        """
        Create the keyed helper with clear_all().

        Raises:
            StorageAlreadyInitializedError: If this factory already created a helper.
        """
        return SafeTypedLocalStorage(self._claim(), keys)

    def create_local_storage_helper(self, keys: Sequence[K]) -> LocalStorageHelper[K]:
        """
        Create the keyed helper whose get() returns "" for missing keys.

        Raises:
            StorageAlreadyInitializedError: If this factory already created a helper.
        """
        return LocalStorageHelper(self._claim(), keys)


def safe_local_storage(store: Optional[KeyValueStore] = None) -> SafeLocalStorage[str]:
    """Return an unrestricted SafeLocalStorage over store (default: default_store())."""
    return SafeLocalStorage(store if store is not None else default_store())


# Process-wide factory behind the module-level create functions. Created
# lazily so the default store is resolved from settings at first use.
_default_factory: Optional[StorageHelperFactory] = None


def _get_default_factory() -> StorageHelperFactory:
    global _default_factory

    if _default_factory is None:
        _default_factory = StorageHelperFactory()

    return _default_factory


def create_safe_typed_local_storage(keys: Sequence[K]) -> SafeTypedLocalStorage[K]:
    """
    Create the application's keyed helper with clear_all(), over default_store().

    **Usage**:
        LS = create_safe_typed_local_storage(["theme", "user", "token"])

    Raises:
        StorageAlreadyInitializedError: If a keyed helper was already created
            in this process (by either module-level create function).
    """
    return _get_default_factory().create_safe_typed_local_storage(keys)


def create_local_storage_helper(keys: Sequence[K]) -> LocalStorageHelper[K]:
    """
    Create the application's keyed helper whose get() returns "" for missing keys.

    Raises:
        StorageAlreadyInitializedError: If a keyed helper was already created
            in this process (by either module-level create function).
    """
    return _get_default_factory().create_local_storage_helper(keys)


def reset_storage_helpers():
    """
    Forget the process-wide keyed helper (for testing).

    The next module-level create call succeeds again.
    """
    global _default_factory
    _default_factory = None
