from .create_driver import CreateDriverUseCase
from .get_driver import GetDriverUseCase
from .get_all_drivers import GetAllDriversUseCase
from .update_driver import UpdateDriverUseCase
from .delete_driver import DeleteDriverUseCase

__all__ = [
    "CreateDriverUseCase",
    "GetDriverUseCase",
    "GetAllDriversUseCase",
    "UpdateDriverUseCase",
    "DeleteDriverUseCase",
]
