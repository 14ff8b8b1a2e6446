#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyMUCAL package

Invalid user input (unknown element, negative energy, ...) is never an
exception: it is reported through :class:`~pymucal.models.records.ErrorKind`
on the returned result.  The exceptions below cover the data layer
(loading, validating and writing a McMaster dataset) and internal logic
errors.

Exception Hierarchy
-------------------
::

    PyMucalError
    ├── FileFormatError     # Missing file or not an HDF5 dataset file
    ├── ParseError          # Malformed dataset content
    ├── ValidationError     # Dataset violates physical constraints
    ├── ConversionError     # HDF5 write failures
    └── InternalError       # Unreachable branch reached (a bug)
"""

from __future__ import annotations


class PyMucalError(Exception):
    """Base exception for all PyMUCAL errors

    Catching ``PyMucalError`` catches any library-specific failure while
    still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class FileFormatError(PyMucalError):
    """Raised when a dataset file is missing or cannot be opened as HDF5

    Parameters
    ----------
    message : str
        Description of the problem, including the file path.
    """


class ParseError(PyMucalError):
    """Raised when a dataset file opens but its content is malformed

    This includes missing groups or attributes, arrays of the wrong
    length, and non-numeric values where numbers are expected.

    Parameters
    ----------
    message : str
        Description of the failure, including the HDF5 object path.
    """


class ValidationError(PyMucalError):
    """Raised when an element record fails physical consistency checks

    Checks include the atomic-number range, edge ordering, jump ratios
    of at least one, positive densities and weights, and the presence of
    a fit for every shell whose edge exists.

    Parameters
    ----------
    message : str
        Description of the failed check, including Z and the field name.
    """


class ConversionError(PyMucalError):
    """Raised when writing a dataset to HDF5 fails

    Parameters
    ----------
    message : str
        Description of the failure and the target HDF5 path.
    """


class InternalError(PyMucalError):
    """Raised when the cross-section engine reaches an impossible branch

    Validated input can never trigger this; it signals a logic bug.  The
    matching :class:`~pymucal.models.records.ErrorKind` is exposed as
    :attr:`kind` for callers that map exceptions onto legacy codes.
    """

    def __init__(self, message: str) -> None:
        from pymucal.models.records import ErrorKind

        super().__init__(message)
        self.kind = ErrorKind.INTERNAL_ERROR
