"""Validation context and message resolution shared by convertors and validators."""

from formguard.validation.context import ValidationContext, ValidationMessage
from formguard.validation.messages import MessageCatalog, MessageResolver

__all__ = ["MessageCatalog", "MessageResolver", "ValidationContext", "ValidationMessage"]
