"""
Structured error types for docspine.

Provides a small hierarchy of typed errors that carry a category, structured
context and an optional chained cause, so callers can log and route failures
without parsing messages.

Manifesto:
    - **Typed Error Hierarchy:** One base class, one subclass per failure kind
    - **Rich Context:** Errors carry the failing operation and free metadata
    - **Error Chaining:** Preserve original exceptions as ``cause``
    - **Propagate, don't recover:** The store never swallows its own errors

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                    DocStoreError                      │
        │            (category, context, cause)                 │
        ├──────────────────────────────────────────────────────┤
        │                                                       │
        │  InvalidArgumentError          ConfigError            │
        │  (VALIDATION)                  (CONFIG)               │
        └──────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidArgumentError("Document cannot be None", argument="document")
    >>> error.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> error.with_context(operation="save").context.operation
    'save'

Tags:
    error-handling, exception-hierarchy, error-context, docspine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    VALIDATION = "VALIDATION"     # Bad arguments handed to the store
    CONFIG = "CONFIG"             # Invalid settings


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only fields that were set are emitted by :meth:`to_dict`, which keeps
    log records small.

    Attributes:
        operation: Store operation that failed (``save``, ``search``...)
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        if self.operation is not None:
            result["operation"] = self.operation
        if self.metadata:
            result.update(self.metadata)
        return result


class DocStoreError(Exception):
    """
    Base exception for all docspine errors.

    Subclasses set ``default_category`` so that raising sites only need a
    message; the base class reports VALIDATION.
    """

    default_category: ErrorCategory = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DocStoreError:
        """
        Add context to this error (fluent API).

        Usage:
            raise InvalidArgumentError("bad").with_context(operation="save")
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class InvalidArgumentError(DocStoreError):
    """
    An argument handed to the store is unusable.

    Raised by :meth:`DocumentStore.save` when the document is ``None``.
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.argument:
            result["argument"] = self.argument
        if self.value is not None:
            result["value"] = repr(self.value)
        return result


class ConfigError(DocStoreError):
    """Configuration value is missing or invalid."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "DocStoreError",
    "InvalidArgumentError",
    "ConfigError",
]
