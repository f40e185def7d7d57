"""Service layer: orchestrates validation passes and returns ServiceResult."""

from formguard.services.field_check import FieldCheckService
from formguard.services.result import ServiceError, ServiceResult

__all__ = ["FieldCheckService", "ServiceError", "ServiceResult"]
