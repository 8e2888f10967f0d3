"""Custom exceptions for the TypeTune typography system."""

from typing import Any


class TypeTuneError(Exception):
    """Base exception for all TypeTune errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ValidationError(TypeTuneError):
    """Exception raised for input validation errors."""


class ConfigurationError(TypeTuneError):
    """Exception raised for configuration errors."""


class ExportError(TypeTuneError):
    """Exception raised while rendering code snippets."""


class HostError(TypeTuneError):
    """Exception raised by the host document layer."""


class FontLoadError(HostError):
    """Exception raised when a font cannot be loaded before mutating text."""

    def __init__(self, family: str, style: str):
        super().__init__(f"Font not available: {family} {style}")
        self.family = family
        self.style = style


class NodeMutationError(HostError):
    """Exception raised when writing properties onto a node fails."""

    def __init__(self, node_id: str, error: str):
        super().__init__(f"Failed to update node {node_id}: {error}")
        self.node_id = node_id


class NodeNotFoundError(HostError):
    """Exception raised when a node id does not exist in the document."""

    def __init__(self, node_id: str):
        super().__init__(f"Node not found: {node_id}")


class NotATextNodeError(HostError):
    """Exception raised when a text operation targets a non-text node."""

    def __init__(self, node_id: str, node_type: str):
        super().__init__(f"Node {node_id} is not a text node (type: {node_type})")


class MixedTextPropertiesError(HostError):
    """Exception raised when a text node has mixed fonts or sizes."""

    def __init__(self, node_id: str):
        super().__init__(f"Node {node_id} has mixed font properties")


class DocumentLoadError(HostError):
    """Exception raised when a document file cannot be parsed."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to load document {path}: {error}")


class UnknownStyleReferenceError(HostError):
    """Exception raised when a node references a missing text style."""

    def __init__(self, node_id: str, style_id: str):
        super().__init__(f"Node {node_id} references unknown text style: {style_id}")


# Specific exception classes for TRY003 compliance
class UnsupportedExportFormatError(ExportError):
    """Exception raised for unknown export formats."""

    def __init__(self, format_name: str, valid_formats: tuple[str, ...]):
        super().__init__(f"Unsupported export format '{format_name}'. Valid: {list(valid_formats)}")


class InvalidGridStepError(ValueError):
    """Exception raised for grid steps outside the supported set."""

    def __init__(self, valid_steps: tuple[int, ...]):
        super().__init__(f"grid_step must be one of {list(valid_steps)}")


class MissingBaselineWeightError(ValueError):
    """Exception raised when a weight table lacks the 400 baseline."""

    def __init__(self, family: str):
        super().__init__(f"Profile {family} defines weights but no 400 baseline")


class NonZeroBaselineWeightError(ValueError):
    """Exception raised when the 400 baseline carries adjustments."""

    def __init__(self, family: str):
        super().__init__(f"Profile {family} weight 400 must have zero adjustments")


class WeightOutOfRangeError(ValueError):
    """Exception raised for weight table keys outside 100-900."""

    def __init__(self, family: str, weight: int):
        super().__init__(f"Profile {family} has weight {weight} outside 100-900")


class InvalidSettingAssignmentError(ValidationError):
    """Exception raised for malformed KEY=VALUE settings arguments."""

    def __init__(self, assignment: str):
        super().__init__(f"Expected KEY=VALUE, got: {assignment}")


class UnknownSettingError(ValidationError):
    """Exception raised when updating a setting that does not exist."""

    def __init__(self, name: str, valid_names: list[str]):
        super().__init__(f"Unknown setting '{name}'. Valid: {valid_names}")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class SettingsSaveError(ConfigurationError):
    """Exception raised when persisting settings fails."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to save settings to {path}: {error}")
