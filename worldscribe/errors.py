"""Exception hierarchy shared by the repositories and the API layer."""


class WorldScribeError(Exception):
    """Base exception for all repository errors."""

    status_code = 500


class ValidationError(WorldScribeError):
    """Malformed input (bad World name, missing description source, bad image)."""

    status_code = 400


class NotFoundError(WorldScribeError):
    """Missing World folder, entity id or image."""

    status_code = 404


class ConflictError(WorldScribeError):
    """Duplicate Category name or World folder."""

    status_code = 409


class NotConnectedError(WorldScribeError):
    """An entity operation was attempted while no World is open."""

    status_code = 400

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Server is not connected to a World. Please configure the World connection "
            "using the POST /world-accesses endpoint."
        )


class ImageStoreError(WorldScribeError):
    """Writing a new image file to the uploads folder failed."""
