"""Constants for Driver model field names"""


class DriverFields:
    """Field name constants for Driver documents and API payloads"""
    ID = "id"
    NOMBRE = "nombre"
    APELLIDO = "apellido"
    LICENCIA = "licencia"
    TELEFONO = "telefono"
    EMAIL = "email"
    FECHA_NACIMIENTO = "fechaNacimiento"
    ACTIVO = "activo"
    FECHA_CREACION = "fechaCreacion"
    FECHA_ACTUALIZACION = "fechaActualizacion"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields a client must send when creating a driver
    REQUIRED_ON_CREATE = (
        NOMBRE,
        APELLIDO,
        LICENCIA,
        TELEFONO,
        EMAIL,
        FECHA_NACIMIENTO,
    )
