class ResourceError(Exception):
    """Base exception for record operations"""
    pass


class RecordNotFoundError(ResourceError):
    """Raised when no row matches the requested key"""
    pass


class InvalidFieldError(ResourceError):
    """Raised when a request body names an unknown column or carries an unusable value"""
    pass
