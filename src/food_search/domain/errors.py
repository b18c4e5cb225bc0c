"""Error kinds raised at the search and record store boundaries."""


class FoodSearchError(Exception):
    """Base error for search and save failures."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NetworkError(FoodSearchError):
    """The nutrition API could not be reached or answered with an error status."""


class DecodeError(FoodSearchError):
    """The nutrition API answered with a payload that could not be decoded."""


class QueryError(FoodSearchError):
    """The existence check against the record store failed."""


class ConflictError(FoodSearchError):
    """A matching record is already present in the record store."""

    def __init__(self, fdc_id: int) -> None:
        super().__init__(f"Food {fdc_id} is already saved")
        self.fdc_id = fdc_id


class SaveError(FoodSearchError):
    """The record store rejected or failed the insert."""
