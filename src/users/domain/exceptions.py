class InvalidUserError(ValueError):
    """Raised when something other than a User is handed to a repository."""
    pass

class UnknownRepositoryBackendError(ValueError):
    """Raised when a repository backend name cannot be resolved."""
    pass
