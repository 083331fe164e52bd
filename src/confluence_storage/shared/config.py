"""Configuration classes for Confluence storage document building.

Block builders are pure and take no configuration; these objects control how
page documents are rendered to and parsed from storage format markup, and how
the package logs.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

_VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_COMPONENT_FIELDS = ["rendering", "parsing", "global_"]


@dataclass
class RenderConfig:
    """Configuration for serializing a page document to storage format."""

    pretty_print: bool = False
    keep_cdata: bool = True  # False re-escapes CDATA sections as plain text

    def __post_init__(self) -> None:
        """Validate render configuration."""
        if not isinstance(self.pretty_print, bool):
            raise ValueError("pretty_print must be a boolean")
        if not isinstance(self.keep_cdata, bool):
            raise ValueError("keep_cdata must be a boolean")


@dataclass
class ParsingConfig:
    """Configuration for reading existing storage format markup."""

    recover: bool = False
    remove_blank_text: bool = False
    resolve_entities: bool = False
    huge_tree: bool = False

    def __post_init__(self) -> None:
        """Validate parsing configuration."""
        for name in ("recover", "remove_blank_text", "resolve_entities", "huge_tree"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")


@dataclass
class GlobalConfig:
    """Settings shared by every component."""

    logging_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate global configuration."""
        if self.logging_level not in _VALID_LOGGING_LEVELS:
            raise ValueError(f"logging_level must be one of {_VALID_LOGGING_LEVELS}")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class DocumentConfig:
    """Immutable configuration for page documents.

    Thread-safe due to frozen dataclass implementation.
    """

    rendering: RenderConfig = field(default_factory=RenderConfig)
    parsing: ParsingConfig = field(default_factory=ParsingConfig)
    global_: GlobalConfig = field(default_factory=GlobalConfig)

    # Metadata
    version: str = "1.0.0"
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete document configuration."""
        try:
            self.rendering.__post_init__()
            self.parsing.__post_init__()
            self.global_.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def override(self, **kwargs: Any) -> "DocumentConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New DocumentConfig instance with overrides applied

        Example:
            >>> config = DocumentConfig()
            >>> new_config = config.override(
            ...     rendering__pretty_print=True,
            ...     global___logging_level="DEBUG"
            ... )
        """
        # Convert nested field notation (e.g., "rendering__pretty_print") to nested dict
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if key.startswith("global___"):
                component, field_name = "global_", key[len("global___"):]
            elif "__" in key:
                component, field_name = key.split("__", 1)
            else:
                nested_overrides[key] = value
                continue
            nested_overrides.setdefault(component, {})[field_name] = value

        new_fields = {}
        try:
            for field_name in _COMPONENT_FIELDS:
                current_config = getattr(self, field_name)
                if field_name in nested_overrides:
                    new_fields[field_name] = replace(
                        current_config, **nested_overrides[field_name]
                    )
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        for key, value in nested_overrides.items():
            if key not in _COMPONENT_FIELDS:
                new_fields[key] = value

        try:
            return replace(self, **new_fields)
        except TypeError as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            """Recursively convert dataclass to dict."""
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            return obj

        return _dataclass_to_dict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos do not silently fall back to
        defaults.

        Args:
            data: Dictionary containing configuration data

        Returns:
            DocumentConfig instance created from dictionary
        """
        def _dict_to_dataclass(data_dict: Dict[str, Any], target_class: type) -> Any:
            """Convert dict to dataclass instance."""
            known_fields = target_class.__dataclass_fields__
            unknown = sorted(set(data_dict) - set(known_fields))
            if unknown:
                raise ConfigValidationError(
                    f"Unknown {target_class.__name__} fields: {unknown}",
                    field_name=unknown[0],
                )

            field_values: Dict[str, Any] = {}
            for field_name, field_info in known_fields.items():
                if field_name not in data_dict:
                    continue
                value = data_dict[field_name]
                if hasattr(field_info.type, "__dataclass_fields__"):
                    value = _dict_to_dataclass(value, field_info.type)
                field_values[field_name] = value
            return target_class(**field_values)

        try:
            return _dict_to_dataclass(data, cls)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(
                f"Failed to deserialize to {cls.__name__}: {e}"
            ) from e

    @classmethod
    def from_json(cls, json_str: str) -> "DocumentConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    @classmethod
    def compact(cls) -> "DocumentConfig":
        """Single-line output, as stored by Confluence."""
        return cls(name="compact")

    @classmethod
    def readable(cls) -> "DocumentConfig":
        """Indented output for inspecting generated pages."""
        return cls(rendering=RenderConfig(pretty_print=True), name="readable")

    @classmethod
    def lenient(cls) -> "DocumentConfig":
        """Parser that recovers from malformed markup in existing pages."""
        return cls(
            parsing=ParsingConfig(recover=True, remove_blank_text=True),
            global_=GlobalConfig(logging_level="WARNING"),
            name="lenient",
        )
