#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Validation routines for McMaster element data

Every validation function raises :class:`~pymucal.exceptions.ValidationError`
when a constraint is violated.  Datasets call these after loading so
that the cross-section engine only ever sees physically consistent
records.

Checked Constraints
-------------------
* Atomic number must be in the range 1 ≤ Z ≤ ZMAX and not excluded.
* The element symbol must match the periodic table for Z.
* Atomic weight, density and conversion factor must be positive.
* Edges must be non-negative and strictly decreasing K > L1 > L2 > L3 > M
  over the edges that are present.
* Jump ratios must be at least 1.
* Fit coefficients must be finite.

Design Note
-----------
Validation functions accept scalars and plain sequences, **not**
dataclass model instances, so ``utils`` never imports ``models``::

    utils ← models ← core / readers ← converters
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

import numpy as np

from pymucal.exceptions import ValidationError
from pymucal.utils.constants import (
    EDGE_LABELS,
    EXCLUDED_Z,
    JUMP_LABELS,
    PERIODIC_TABLE,
    ZMAX,
)

logger = logging.getLogger(__name__)

MIN_ATOMIC_NUMBER: int = 1
"""Smallest valid atomic number (hydrogen)."""


def validate_atomic_number(
    Z: int,
    zmax: int = ZMAX,
    excluded: Collection[int] = EXCLUDED_Z,
) -> None:
    """Verify that *Z* is an atomic number the McMaster tables cover

    Parameters
    ----------
    Z : int
        Atomic number to validate.
    zmax : int, optional
        Largest allowed atomic number.
    excluded : Collection[int], optional
        Atomic numbers without data, :data:`EXCLUDED_Z` by default.

    Raises
    ------
    ValidationError
        If *Z* is outside [1, *zmax*] or one of *excluded*.

    Examples
    --------
    >>> validate_atomic_number(26)  # Iron, OK
    >>> validate_atomic_number(84)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pymucal.exceptions.ValidationError: ...
    """
    if not (MIN_ATOMIC_NUMBER <= Z <= zmax):
        raise ValidationError(
            f"Atomic number Z={Z} is outside the valid range "
            f"[{MIN_ATOMIC_NUMBER}, {zmax}]."
        )
    if Z in excluded:
        raise ValidationError(f"No McMaster data exists for Z={Z}.")
    logger.debug("Atomic number Z=%d passed validation.", Z)


def validate_symbol(Z: int, symbol: str) -> None:
    """Verify that *symbol* is the periodic-table symbol of *Z*

    Raises
    ------
    ValidationError
        If the symbol does not match (case-sensitive).
    """
    expected = PERIODIC_TABLE.get(Z, {}).get("symbol")
    if symbol != expected:
        raise ValidationError(
            f"Symbol {symbol!r} does not match Z={Z} (expected {expected!r})."
        )


def validate_positive(value: float, label: str = "value") -> None:
    """Verify that a scalar is finite and strictly positive

    Raises
    ------
    ValidationError
        If *value* is not a finite number greater than zero.
    """
    if not np.isfinite(value) or value <= 0.0:
        raise ValidationError(f"'{label}' must be positive, got {value!r}.")


def validate_edges(edges: Sequence[float], label: str = "edges") -> None:
    """Verify that absorption edges are non-negative and properly ordered

    Parameters
    ----------
    edges : Sequence[float]
        Edge energies in :data:`EDGE_LABELS` order (K, L1, L2, L3, M).
        Zero marks an absent edge and is skipped by the ordering check.
    label : str, optional
        Human-readable name for error messages.

    Raises
    ------
    ValidationError
        If there are not five edges, any is negative or non-finite, or
        the present edges are not strictly decreasing.

    Examples
    --------
    >>> validate_edges([7112.0, 846.1, 721.1, 708.1, 91.3])
    >>> validate_edges([7112.0, 0.0, 0.0, 0.0, 0.0])
    >>> validate_edges([700.0, 846.1, 0.0, 0.0, 0.0])  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pymucal.exceptions.ValidationError: ...
    """
    arr = np.asarray(edges, dtype="f8")
    if arr.shape != (len(EDGE_LABELS),):
        raise ValidationError(
            f"'{label}' must hold {len(EDGE_LABELS)} values, got shape {arr.shape}."
        )
    if not np.all(np.isfinite(arr)) or np.any(arr < 0.0):
        raise ValidationError(f"'{label}' contains negative or non-finite values: {arr}.")

    present = [(name, e) for name, e in zip(EDGE_LABELS, arr) if e > 0.0]
    for (upper_name, upper), (lower_name, lower) in zip(present, present[1:]):
        if lower >= upper:
            raise ValidationError(
                f"'{label}': {lower_name} edge ({lower:.6g} eV) is not below "
                f"the {upper_name} edge ({upper:.6g} eV)."
            )
    logger.debug("'%s' (%d present) passed ordering check.", label, len(present))


def validate_jump_ratios(ratios: Sequence[float], label: str = "jump_ratios") -> None:
    """Verify that L sub-shell jump ratios are finite and at least 1

    Raises
    ------
    ValidationError
        If there are not three ratios or any is below 1.
    """
    arr = np.asarray(ratios, dtype="f8")
    if arr.shape != (len(JUMP_LABELS),):
        raise ValidationError(
            f"'{label}' must hold {len(JUMP_LABELS)} values, got shape {arr.shape}."
        )
    for name, ratio in zip(JUMP_LABELS, arr):
        if not np.isfinite(ratio) or ratio < 1.0:
            raise ValidationError(
                f"'{label}': {name} jump ratio must be >= 1, got {ratio:.6g}."
            )


def validate_coefficients(coefficients: Sequence[float], label: str = "fit") -> None:
    """Verify that fit coefficients are finite

    An empty sequence is allowed and means "no fit tabulated".

    Raises
    ------
    ValidationError
        If the coefficients are not a 1-D array of finite numbers.
    """
    arr = np.asarray(coefficients, dtype="f8")
    if arr.ndim != 1:
        raise ValidationError(f"'{label}' must be one-dimensional, got shape {arr.shape}.")
    if not np.all(np.isfinite(arr)):
        raise ValidationError(f"'{label}' contains non-finite coefficients: {arr}.")


def validate_fit_present(
    edge: float,
    coefficients: Sequence[float],
    label: str = "fit",
) -> None:
    """Verify that a shell whose edge exists also has a fit

    Raises
    ------
    ValidationError
        If *edge* is positive but *coefficients* is empty.
    """
    if edge > 0.0 and len(coefficients) == 0:
        raise ValidationError(
            f"'{label}' is empty although its edge is present ({edge:.6g} eV)."
        )
