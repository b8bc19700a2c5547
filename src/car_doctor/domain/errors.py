"""Error taxonomy shared by services and the HTTP layer."""


class CarDoctorError(Exception):
    """Base class for application errors."""


class UnauthenticatedError(CarDoctorError):
    """Raised when a credential is missing, invalid or expired."""


class ForbiddenError(CarDoctorError):
    """Raised when an authenticated caller does not own the resource."""


class NotFoundError(CarDoctorError):
    """Raised when no record matches the requested id."""


class InvalidClaimsError(CarDoctorError):
    """Raised when an identity claim cannot be signed."""


class StorageUnavailableError(CarDoctorError):
    """Raised when the storage backend fails or cannot be reached."""
