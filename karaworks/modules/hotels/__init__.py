"""Hotel domain exports"""

from .exceptions import HotelAlreadyExistsError, HotelError, HotelNotFoundError
from .models import Hotel, HotelCreateInput

__all__ = [
    "Hotel",
    "HotelCreateInput",
    "HotelError",
    "HotelAlreadyExistsError",
    "HotelNotFoundError",
]
