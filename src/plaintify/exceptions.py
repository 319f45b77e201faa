#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the plaintify library.

This module defines specialized exception classes for the error conditions
that can occur while building renderers, parsing Markdown and rendering
node trees to plain text.

Exception Hierarchy
-------------------
- PlaintifyError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)
    - InvalidHandlerError (bad custom handler registration)

  - ParsingError (Markdown input parsing failures)

  - RenderingError (output generation failures)
    - MalformedNodeError (structural node missing a required field)
    - OutputWriteError (file write failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class PlaintifyError(Exception):
    """Base exception class for all plaintify-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(PlaintifyError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    For example, passing ``MarkdownParserOptions`` to the plain text renderer.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidHandlerError(ValidationError):
    """Exception raised when a custom render handler cannot be registered.

    Raised for handler keys that do not name a known node kind and for
    handler values that are not callable.

    Parameters
    ----------
    kind : Any
        The key the handler was registered under
    message : str, optional
        Custom error message

    """

    def __init__(self, kind: Any, message: str | None = None, original_error: Exception | None = None):
        """Initialize the invalid handler error."""
        if message is None:
            message = f"Cannot register a render handler for unknown node kind {kind!r}"
        super().__init__(message, parameter_name="custom_handlers", parameter_value=kind, original_error=original_error)
        self.kind = kind


class ParsingError(PlaintifyError):
    """Exception raised when Markdown input cannot be turned into a node tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(PlaintifyError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class MalformedNodeError(RenderingError):
    """Exception raised when a structural node is missing part of its shape.

    Tables need ``header`` and ``rows``, lists need ``items``, and links and
    images need ``href``. Rendering such a node fails fast instead of
    emitting partial output.

    Parameters
    ----------
    node_kind : str
        Kind of the offending node
    missing_field : str
        Name of the missing or invalid field
    message : str, optional
        Custom error message

    """

    def __init__(self, node_kind: str, missing_field: str, message: str | None = None):
        """Initialize the malformed node error."""
        if message is None:
            message = f"Malformed '{node_kind}' node: missing required field '{missing_field}'"
        super().__init__(message, rendering_stage=node_kind)
        self.node_kind = node_kind
        self.missing_field = missing_field


class OutputWriteError(RenderingError):
    """Exception raised when writing rendered output fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path


class DependencyError(PlaintifyError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        packages = [f"{name}{spec}" for name, spec in missing_packages]
        packages.extend(f"{name}{required}" for name, required, _installed in version_mismatches)
        self.install_command = f"pip install {' '.join(repr(p) for p in packages)}" if packages else ""

        if message is None:
            message_parts = []
            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name.upper()} format requires the following packages: {pkg_list}")
            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name.upper()} format has version mismatches: {mismatch_str}")
            if self.install_command:
                message_parts.append(f"Install with: {self.install_command}")
            message = ". ".join(message_parts)

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches


__all__ = [
    "PlaintifyError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidHandlerError",
    "ParsingError",
    "RenderingError",
    "MalformedNodeError",
    "OutputWriteError",
    "DependencyError",
]
