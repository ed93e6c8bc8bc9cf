from .driver_fields import DriverFields

__all__ = ["DriverFields"]
