#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Single-call entry point: element identifier + energy → cross sections

:func:`mucal` chains :class:`~pymucal.core.resolver.ElementResolver` and
:class:`~pymucal.core.engine.CrossSectionEngine` and turns their outcome
codes into human-readable diagnostics on request.
"""

from __future__ import annotations

import dataclasses
import logging

from pymucal.core.engine import CrossSectionEngine
from pymucal.core.resolver import ElementResolver
from pymucal.models.dataset import McMasterDataset
from pymucal.models.records import ComputationResult, ErrorKind
from pymucal.utils.constants import EDGE_PROXIMITY_EV, M_EDGE_MIN_Z

logger = logging.getLogger(__name__)


def describe(
    result: ComputationResult,
    symbol: str | None = None,
    z_hint: int | None = None,
) -> str | None:
    """Return the diagnostic text for *result*, or ``None`` if there is none

    Parameters
    ----------
    result : ComputationResult
        Result to describe.
    symbol, z_hint
        The identifiers the caller passed in, quoted in the message.
    """
    ident = (symbol or "").strip() or f"Z={z_hint}"
    kind = result.error

    if kind is ErrorKind.NO_INPUT:
        return "mucal: neither an element name nor Z was given"
    if kind is ErrorKind.BAD_Z:
        return f"mucal: Z must be non-negative, got {z_hint}"
    if kind is ErrorKind.NO_ZMATCH:
        return f"mucal: Z={z_hint} and element name {symbol!r} are not consistent"
    if kind is ErrorKind.NO_DATA:
        return f"mucal: no McMaster data is available for {ident}"
    if kind is ErrorKind.BAD_NAME:
        return f"mucal: invalid element name {symbol!r}"
    if kind is ErrorKind.BAD_ENERGY:
        if result.is_constants_only:
            return "mucal: photon energy is zero, returning element constants only"
        return f"mucal: photon energy must be positive, got {result.energy_eV!r} eV"

    notes = []
    if ErrorKind.WITHIN_EDGE in result.warnings:
        notes.append(
            f"mucal: {result.energy_eV:g} eV is within {EDGE_PROXIMITY_EV:g} eV "
            f"of an absorption edge of {result.symbol}"
        )
    if ErrorKind.M_EDGE_WARN in result.warnings:
        notes.append(
            f"mucal: M-edge fit for {result.symbol} (Z<{M_EDGE_MIN_Z}) is unreliable"
        )
    return "; ".join(notes) or None


def mucal(
    symbol: str | None = None,
    z_hint: int | None = None,
    photon_energy_eV: float = 0.0,
    verbose: bool = False,
    *,
    dataset: McMasterDataset,
) -> tuple[ComputationResult, ErrorKind]:
    """Resolve an element and compute its cross sections at one energy

    Parameters
    ----------
    symbol : str | None
        Element symbol, any case.
    z_hint : int | None
        Atomic number; must agree with *symbol* when both are given.
    photon_energy_eV : float
        Photon energy (eV).  ``0`` returns the element constants only,
        flagged as :attr:`ErrorKind.BAD_ENERGY`.
    verbose : bool
        If ``True``, attach the diagnostic text to the result's
        ``message`` and log it at WARNING level.
    dataset : McMasterDataset
        Element data to compute from.

    Returns
    -------
    tuple[ComputationResult, ErrorKind]
        The result and, for convenience, its ``error`` field.

    Examples
    --------
    >>> result, err = mucal("Fe", 0, 10000.0, dataset=dataset)
    >>> err
    <ErrorKind.NO_ERROR: 0>
    >>> result.absorption_coefficient  # doctest: +SKIP
    """
    resolution = ElementResolver(dataset).resolve(symbol, z_hint)
    if resolution.ok:
        result = CrossSectionEngine(dataset).compute(resolution.Z, photon_energy_eV)
    else:
        result = ComputationResult(error=resolution.error)

    message = describe(result, symbol, z_hint)
    if message is not None:
        if verbose:
            logger.warning(message)
            result = dataclasses.replace(result, message=message)
        else:
            logger.debug(message)

    return result, result.error
