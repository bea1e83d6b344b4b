"""
Exception types raised by frontkit.

**Conceptual**: Almost every helper in this package reports failure by
returning None or a sentinel string ("N/A", "") rather than raising, so
callers never need a try/except around formatting, parsing or storage calls.
The exceptions below are reserved for programmer mistakes that should fail
fast at startup.
"""


class FrontkitError(Exception):
    """
    Base exception for frontkit errors.

    Callers can catch FrontkitError to handle every error this package raises.
    """
    pass


class StorageAlreadyInitializedError(FrontkitError):
    """
    Raised when a storage helper factory is asked to create a second helper.

    **Conceptual**: A StorageHelperFactory hands out exactly one configured
    helper. A second call means two independently configured key sets would
    coexist, which hides typos in key names.

    **Recovery**: Create the helper once at application start and pass the
    instance around.
    """
    pass
