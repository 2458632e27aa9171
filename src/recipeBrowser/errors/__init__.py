"""Custom exception hierarchy for recipeBrowser."""

from __future__ import annotations


class RecipeBrowserError(Exception):
    """Base class for all custom errors raised by recipeBrowser."""


# --- 3-layer hierarchy ---

class DomainError(RecipeBrowserError):
    """Base class for domain-level errors."""


class InfrastructureError(RecipeBrowserError):
    """Base class for infrastructure-level errors."""


class ApplicationError(RecipeBrowserError):
    """Base class for application-level errors."""


# --- Domain errors ---

class EmptyQueueError(DomainError):
    """Raised when removing the head of an empty message queue."""


# --- Infrastructure errors ---

class GatewayError(InfrastructureError):
    """Raised when the recipe source cannot answer a search."""


# --- Settings errors ---

class SettingsError(RecipeBrowserError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
