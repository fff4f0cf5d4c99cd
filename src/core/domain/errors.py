"""Errores del dominio.

Cada etapa del chequeo falla con su propio tipo para que el llamador pueda
distinguir configuración rota de fallos de red. Los casos negativos
legítimos (sin statefile, sin backend remoto, sin entitlement) no son
errores: devuelven `False`.
"""

from __future__ import annotations


class RemoteOpsError(Exception):
    """Base de todos los errores del chequeo de remote ops."""


class StateParseError(RemoteOpsError):
    """El statefile existe pero no es JSON válido o no tiene la forma esperada."""


class BackendConfigError(RemoteOpsError):
    """Backend "remote" incompleto (sin config, organización o workspaces)."""


class CredentialsFileError(RemoteOpsError):
    """No se pudo leer el fichero de credenciales (`__cause__` es el OSError)."""


class CredentialsParseError(RemoteOpsError):
    """El fichero de credenciales no es HCL válido o `credentials` está mal formado."""


class CredentialsNotFoundError(RemoteOpsError):
    """Falta la entrada del hostname o su clave `token`."""

    def __init__(self, message: str, *, hostname: str, path: str) -> None:
        super().__init__(message)
        self.hostname = hostname
        self.path = path


class InvalidTokenError(RemoteOpsError, TypeError):
    """El token existe pero no es texto."""


class ClientError(RemoteOpsError):
    """No se pudo construir el cliente de la API de TFE."""


class RemoteAPIError(RemoteOpsError):
    """Fallo de red/transporte o respuesta HTTP no exitosa."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedResponseError(RemoteOpsError):
    """Respuesta bien formada pero vacía (sin `data`)."""
