"""Hotel domain specific exceptions."""


class HotelError(Exception):
    """Base class for hotel domain errors."""


class HotelNotFoundError(HotelError):
    """Raised when the requested hotel cannot be found."""


class HotelAlreadyExistsError(HotelError):
    """Raised when another hotel already uses the e-mail address."""
