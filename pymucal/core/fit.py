#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
McMaster empirical fit evaluator

McMaster et al. parametrise every cross section as a cubic in
log-log space::

    ln σ(E) = a0 + a1 ln E + a2 (ln E)² + a3 (ln E)³

with *E* in keV and σ in barns/atom.  The same kernel serves the
photo-absorption fits of each shell and the coherent and incoherent
scattering fits; only the coefficients differ.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.polynomial import polynomial as P

from pymucal.utils.constants import EV_PER_KEV


def evaluate_fit(
    energy_eV: float | np.ndarray,
    coefficients: Sequence[float],
) -> float | np.ndarray:
    """Evaluate a McMaster fit at one or more photon energies

    Parameters
    ----------
    energy_eV : float | numpy.ndarray
        Photon energy (eV).  Must be strictly positive.
    coefficients : Sequence[float]
        Fit coefficients ``a0, a1, …`` in increasing power of ``ln E``.
        An empty sequence means no fit is tabulated and evaluates to 0.

    Returns
    -------
    float | numpy.ndarray
        Cross section (barns/atom); a float for scalar input, an array
        of the input's shape otherwise.

    Raises
    ------
    ValueError
        If any energy is zero or negative.

    Examples
    --------
    >>> evaluate_fit(1000.0, [1.0, 2.0, 3.0, 4.0])  # ln(1 keV) = 0
    2.718281828459045
    >>> evaluate_fit(10000.0, [])
    0.0
    """
    energy = np.asarray(energy_eV, dtype="f8")
    if np.any(energy <= 0.0):
        raise ValueError(f"Photon energy must be positive, got {energy_eV!r}.")

    coeffs = np.asarray(coefficients, dtype="f8")
    if coeffs.size == 0:
        sigma = np.zeros_like(energy)
    else:
        log_e = np.log(energy / EV_PER_KEV)
        sigma = np.exp(P.polyval(log_e, coeffs))

    if sigma.ndim == 0:
        return float(sigma)
    return sigma
