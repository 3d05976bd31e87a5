"""API error type and message normalization."""

from typing import Any

import httpx

from boardadmin.models.enums import ApiErrorType

NETWORK_ERROR_MESSAGE = "Impossible de joindre le serveur. Vérifiez votre connexion."
CONFIG_ERROR_MESSAGE = "Erreur de configuration de la requête"

_STATUS_ERROR_TYPES = {
    400: ApiErrorType.VALIDATION,
    401: ApiErrorType.UNAUTHORIZED,
    403: ApiErrorType.FORBIDDEN,
    404: ApiErrorType.NOT_FOUND,
    422: ApiErrorType.VALIDATION,
}


class ApiError(Exception):
    """Failure raised at the API client boundary."""

    def __init__(
        self,
        message: str,
        error_type: ApiErrorType = ApiErrorType.UNKNOWN,
        status_code: int | None = None,
        data: Any = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.status_code = status_code
        self.data = data
        self.details = details or {}

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build an error from a non-2xx response."""
        try:
            data = response.json()
        except ValueError:
            data = response.text or None

        status = response.status_code
        if status >= 500:
            error_type = ApiErrorType.SERVER
        else:
            error_type = _STATUS_ERROR_TYPES.get(status, ApiErrorType.HTTP)

        return cls(
            f"{response.request.method} {response.request.url.path} returned {status}",
            error_type=error_type,
            status_code=status,
            data=data,
        )

    @property
    def has_response(self) -> bool:
        return self.status_code is not None


def _data_message(data: Any) -> str | None:
    if isinstance(data, dict):
        message = data.get("message")
        if message:
            return str(message)
    return None


def handle_api_error(error: BaseException) -> str:
    """
    Turn any client failure into a single human-readable message.

    Args:
        error: An ApiError, an httpx exception or anything else raised
            while building or sending a request.

    Returns:
        Message suitable for a page-level banner.
    """
    if isinstance(error, httpx.HTTPStatusError):
        error = ApiError.from_response(error.response)

    if isinstance(error, ApiError) and error.has_response:
        status = error.status_code
        message = _data_message(error.data)
        if status == 400:
            return message or "Données invalides"
        if status == 401:
            return "Non autorisé. Veuillez vous reconnecter."
        if status == 403:
            return "Accès refusé. Permissions insuffisantes."
        if status == 404:
            return "Ressource non trouvée"
        if status == 422:
            return message or "Données de validation invalides"
        if status == 500:
            return "Erreur interne du serveur"
        return message or f"Erreur {status}"

    if isinstance(error, ApiError) and error.error_type in (
        ApiErrorType.TRANSPORT,
        ApiErrorType.TIMEOUT,
    ):
        return NETWORK_ERROR_MESSAGE

    if isinstance(error, httpx.TransportError):
        return NETWORK_ERROR_MESSAGE

    return CONFIG_ERROR_MESSAGE
