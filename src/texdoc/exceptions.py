#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the texdoc library.

Rendering a document tree is a pure traversal, so the only runtime failures
come from the output sink. Structural misuse of the builder API (an
out-of-range table row or column, a value that cannot be converted into a
node) is a caller bug and raises the built-in ``IndexError`` or
``TypeError`` instead of one of these classes.

Exception Hierarchy
-------------------
- TexDocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - RenderingError (output generation failures)
    - OutputWriteError (the sink rejected a write)
    - OutputEncodingError (text could not be encoded for a binary sink)

"""

from typing import Any


class TexDocError(Exception):
    """Base exception class for all texdoc-specific errors.

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


class ValidationError(TexDocError):
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
    """Exception raised when a renderer receives the wrong options class.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(TexDocError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when the output sink rejects a write.

    Output written before the failure is left in place.

    Parameters
    ----------
    destination : str
        Description of the sink (a file path or the stream's repr)
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, destination: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output to {destination}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, rendering_stage="write", original_error=original_error)
        self.destination = destination


class OutputEncodingError(RenderingError):
    """Exception raised when rendered text cannot be encoded for a binary sink.

    Parameters
    ----------
    encoding : str
        The encoding that failed
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, encoding: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output encoding error."""
        if message is None:
            message = f"Rendered output cannot be encoded as {encoding}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, rendering_stage="encode", original_error=original_error)
        self.encoding = encoding
