"""
Error taxonomy for the Game Release skill.

Everything raised here aborts the current invocation. An unknown console is
not an error: the dispatcher answers it with the NotFound reply.
"""
from typing import Optional


class GameReleaseError(Exception):
    """Base exception for the skill"""
    code = "GAME_RELEASE_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self):
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
        }


class ConfigurationError(GameReleaseError):
    """Settings missing or invalid at startup"""
    code = "CONFIG_ERROR"


class TransportError(GameReleaseError):
    """Catalog request could not be built or sent"""
    code = "TRANSPORT_ERROR"


class CatalogStatusError(TransportError):
    """Catalog answered with a non-2xx status"""
    code = "CATALOG_STATUS_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self):
        out = super().to_dict()
        out["status_code"] = self.status_code
        return out


class DecodeError(GameReleaseError):
    """Catalog response body or headers malformed"""
    code = "DECODE_ERROR"


class DomainError(GameReleaseError):
    """Week arithmetic failed"""
    code = "DOMAIN_ERROR"
