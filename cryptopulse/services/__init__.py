"""
CryptoPulse Services

Service layer containing all business logic.
Each service has a defined interface (contract) and implementation.
"""

from cryptopulse.services.base import BaseService, ServiceError, InsufficientDataError

__all__ = ["BaseService", "ServiceError", "InsufficientDataError"]
