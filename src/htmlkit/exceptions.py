#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the htmlkit library.

Building and rendering a tree is total over already-validated values, so
the only errors htmlkit raises are construction-time ones: a value that
cannot take part in the tree, or an option of the wrong kind. Rendering
itself never raises.

Exception Hierarchy
-------------------
- HtmlKitError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class)
    - InvalidChildError (value that cannot be attached as a child)

"""

from typing import Any


class HtmlKitError(Exception):
    """Base exception class for all htmlkit-specific errors.

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


class ValidationError(HtmlKitError):
    """Exception raised for invalid input parameters.

    This covers values rejected while a node is constructed, such as a
    heading level outside 1-6 or an unknown dialect name.

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
    """Exception raised when an options object of the wrong class is supplied.

    Parameters
    ----------
    owner_name : str
        Name of the component that received the options
    expected_type : type
        The expected options class
    received_type : type
        The class that was actually received
    message : str, optional
        Custom error message. If not provided, a message is generated

    """

    def __init__(
        self,
        owner_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{owner_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.owner_name = owner_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidChildError(ValidationError):
    """Exception raised when a value cannot be attached to a parent node.

    Children must be nodes or strings, and void elements accept no
    children at all.

    Parameters
    ----------
    parent : str
        Description of the parent (usually its tag name)
    child : any
        The rejected value
    message : str, optional
        Custom error message. If not provided, a message is generated

    """

    def __init__(self, parent: str, child: Any, message: str | None = None):
        """Initialize the invalid child error."""
        if message is None:
            message = f"<{parent}> cannot accept a child of type '{type(child).__name__}'"
        super().__init__(message, parameter_name="child", parameter_value=child)
        self.parent = parent
        self.child = child
