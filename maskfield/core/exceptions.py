"""maskfield exception hierarchy.

The text transforms themselves never raise: they clamp, truncate or fall back
to a best-effort result. Exceptions only appear at the configuration boundary
(building a config, loading profiles, resolving presets) and for callers that
opt into strict extraction.
"""

from typing import Any, Dict, List, Optional


class MaskFieldError(Exception):
    """Base exception for all maskfield errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        context: Additional error context and metadata
        recovery_suggestions: List of suggested recovery actions
        component: Component where the error originated
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recovery_suggestions: Optional[List[str]] = None,
        component: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._default_error_code()
        self.context = context or {}
        self.recovery_suggestions = recovery_suggestions or []
        self.component = component or self._infer_component()

    def _default_error_code(self) -> str:
        """Generate default error code based on exception class name."""
        return self.__class__.__name__.upper().replace("ERROR", "_ERROR")

    def _infer_component(self) -> str:
        """Infer component name from exception class."""
        name = self.__class__.__name__.lower()
        if "profile" in name:
            return "profiles"
        elif "configuration" in name or "validation" in name:
            return "config"
        elif "mismatch" in name:
            return "unmasking"
        else:
            return "core"

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context to the error."""
        self.context[key] = value

    def add_recovery_suggestion(self, suggestion: str) -> None:
        """Add a recovery suggestion to help users resolve the error."""
        if suggestion not in self.recovery_suggestions:
            self.recovery_suggestions.append(suggestion)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to structured dictionary for logging/reporting."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "component": self.component,
            "context": self.context,
            "recovery_suggestions": self.recovery_suggestions,
        }


class ValidationError(MaskFieldError):
    """Raised when a configuration value has the wrong shape or type."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        expected_type: Optional[str] = None,
        actual_value: Optional[Any] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if field_name:
            self.add_context("field_name", field_name)
        if expected_type:
            self.add_context("expected_type", expected_type)
        if actual_value is not None:
            self.add_context("actual_value", str(actual_value))


class ConfigurationError(ValidationError):
    """Raised when a mask configuration is invalid or cannot be resolved."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        config_section: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if config_file:
            self.add_context("config_file", config_file)
        if config_section:
            self.add_context("config_section", config_section)


class ProfileError(ConfigurationError):
    """Raised when a profile file cannot be read or a profile is invalid."""

    def __init__(
        self,
        message: str,
        profile_name: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if profile_name:
            self.add_context("profile_name", profile_name)


class TemplateMismatchError(MaskFieldError):
    """Raised when strict extraction is unwrapped on text that does not fit the template."""

    def __init__(
        self,
        message: str,
        template: Optional[str] = None,
        text: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if template is not None:
            self.add_context("template", template)
        if text is not None:
            self.add_context("text", text)


def create_validation_error(
    message: str,
    field_name: str,
    expected: Any,
    actual: Any,
) -> ConfigurationError:
    """Create a configuration error with standard field context."""
    expected_str = expected.__name__ if isinstance(expected, type) else str(expected)

    error = ConfigurationError(
        message=message,
        field_name=field_name,
        expected_type=expected_str,
        actual_value=actual,
    )

    error.add_recovery_suggestion(f"Ensure {field_name} is {expected_str}")
    return error
