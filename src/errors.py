"""Exceptions raised while deriving a provider project configuration.

Every fatal error carries the raw input that caused it so a failed build can
be fixed without re-running with extra diagnostics.
"""

from typing import Optional


class ProviderProjectError(Exception):
    """Base class for all provider project errors."""


class InvalidReference(ProviderProjectError):
    """The provider reference does not yield a usable short name."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"{reference!r} doesn't seem to be a valid provider reference")


class ReservedSuffixConflict(ProviderProjectError):
    """The provider short name ends with the suffix reserved for Go repositories."""

    def __init__(self, reference: str, short_name: str, suffix: str = "-go"):
        self.reference = reference
        self.short_name = short_name
        self.suffix = suffix
        super().__init__(
            f"provider name {short_name!r} (from {reference!r}) may not end with "
            f"'{suffix}' as this can conflict with repos for go packages"
        )


class MissingConfiguration(ProviderProjectError):
    """A required project setting was not supplied."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"required setting {setting!r} is missing")


class SettingsError(ProviderProjectError):
    """A settings file exists but cannot be used."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot load settings from {path}: {reason}")


class RegistryQueryFailed(ProviderProjectError):
    """The release registry could not answer; never fatal to a build."""

    def __init__(self, repository: str, reason: Optional[str] = None):
        self.repository = repository
        self.reason = reason
        message = f"release query for {repository} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
