from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """Missing, empty or malformed request fields."""

    def __init__(self, detail: str = "Invalid request payload"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class AuthError(HTTPException):
    """Bad credentials or a missing/unknown bearer token."""

    def __init__(self, detail: str = "Unauthorized: Missing or invalid token"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "API endpoint not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StorageError(HTTPException):
    """A read or write against the store failed; nothing was confirmed."""

    def __init__(self, detail: str = "Storage failure, the request was not saved"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )
