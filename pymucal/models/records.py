#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for McMaster element data and calculation results

Every model is a frozen ``dataclass``.  Coefficient sequences are stored
as tuples of floats so that a loaded dataset can be shared freely
between callers (and threads) without anyone mutating it.

Hierarchy
---------
::

    EdgeEnergies       — K, L1, L2, L3, M absorption edges
    JumpRatios         — L1, L2, L3 edge jump ratios
    EmissionLines      — Kα1, Kβ1, Lα1, Lβ1 line energies
    ShellFits          — photo-absorption fits for K, L, M, N
    ScatteringFits     — coherent / incoherent scattering fits
    ElementRecord      — everything tabulated for one element
    Resolution         — outcome of element resolution
    ComputationResult  — outcome of one cross-section calculation

Units
-----
* Energies are in **eV**.
* Cross sections are in **barns/atom**.
* Densities are in **g/cm³**, atomic weights in **g/mol**.
* A value of ``0.0`` for an edge or line means "not present for this Z".
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ErrorKind(enum.IntEnum):
    """Outcome codes of element resolution and cross-section calculation

    The integer values are the classic ``mucal`` return codes, so
    ``int(kind)`` can be handed to code expecting them.
    """

    NO_ERROR = 0
    NO_INPUT = -1
    NO_ZMATCH = -2
    NO_DATA = -3
    BAD_Z = -4
    BAD_NAME = -5
    BAD_ENERGY = -6
    WITHIN_EDGE = -7
    M_EDGE_WARN = -8
    INTERNAL_ERROR = -9

    @property
    def is_warning(self) -> bool:
        """``True`` for informational codes attached to a valid result."""
        return self in (ErrorKind.WITHIN_EDGE, ErrorKind.M_EDGE_WARN)


class Shell(enum.Enum):
    """Shell group whose photo-absorption fit is used"""

    K = "K"
    L = "L"
    M1 = "M1"
    N = "N"


# ---------------------------------------------------------------------------
# Element building blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EdgeEnergies:
    """Absorption-edge energies of one element (eV, 0.0 = absent)"""

    k: float = 0.0
    l1: float = 0.0
    l2: float = 0.0
    l3: float = 0.0
    m: float = 0.0

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return (self.k, self.l1, self.l2, self.l3, self.m)


@dataclass(frozen=True)
class JumpRatios:
    """Absorption jump ratios at the L sub-shell edges"""

    l1: float = 1.0
    l2: float = 1.0
    l3: float = 1.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.l1, self.l2, self.l3)


@dataclass(frozen=True)
class EmissionLines:
    """Principal fluorescence line energies (eV, 0.0 = not tabulated)"""

    k_alpha1: float = 0.0
    k_beta1: float = 0.0
    l_alpha1: float = 0.0
    l_beta1: float = 0.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.k_alpha1, self.k_beta1, self.l_alpha1, self.l_beta1)


@dataclass(frozen=True)
class ShellFits:
    """McMaster photo-absorption fit coefficients per shell group

    Each field holds the coefficients ``a0, a1, …`` of
    ``ln σ = Σ aᵢ (ln E)ⁱ``.  An empty tuple means no fit is tabulated.
    """

    k: tuple[float, ...] = ()
    l: tuple[float, ...] = ()
    m: tuple[float, ...] = ()
    n: tuple[float, ...] = ()


@dataclass(frozen=True)
class ScatteringFits:
    """McMaster coherent and incoherent scattering fit coefficients"""

    coherent: tuple[float, ...] = ()
    incoherent: tuple[float, ...] = ()


@dataclass(frozen=True)
class ElementRecord:
    """Everything the McMaster tables give for one element

    Parameters
    ----------
    Z : int
        Atomic number.
    symbol : str
        Element symbol (e.g. ``"Fe"``).
    atomic_weight : float
        Atomic weight (g/mol).
    density : float
        Density of the elemental solid, liquid or gas (g/cm³).
    conversion_factor : float
        Barns/atom per cm²/g, i.e. ``atomic_weight / (N_A × 1e-24)``.
    edges : EdgeEnergies
        Absorption edges (eV).
    jump_ratios : JumpRatios
        L sub-shell jump ratios.
    fits : ShellFits
        Photo-absorption fit coefficients.
    scattering : ScatteringFits
        Coherent and incoherent scattering fit coefficients.
    lines : EmissionLines
        Principal emission lines (eV).
    k_yield, l_yield : float
        K and L fluorescence yields.
    """

    Z: int
    symbol: str
    atomic_weight: float
    density: float
    conversion_factor: float
    edges: EdgeEnergies = EdgeEnergies()
    jump_ratios: JumpRatios = JumpRatios()
    fits: ShellFits = ShellFits()
    scattering: ScatteringFits = ScatteringFits()
    lines: EmissionLines = EmissionLines()
    k_yield: float = 0.0
    l_yield: float = 0.0


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a symbol and/or Z hint to an atomic number

    ``Z`` is 0 and ``symbol`` empty unless ``error`` is
    :attr:`ErrorKind.NO_ERROR`.
    """

    Z: int = 0
    symbol: str = ""
    error: ErrorKind = ErrorKind.NO_ERROR

    @property
    def ok(self) -> bool:
        return self.error is ErrorKind.NO_ERROR


@dataclass(frozen=True)
class ComputationResult:
    """Outcome of one cross-section calculation

    Energy-independent fields (``atomic_number``, ``atomic_weight``,
    ``symbol``, ``density``, ``conversion_factor``, ``element``) are
    filled whenever the element was resolved, including under
    :attr:`ErrorKind.BAD_ENERGY`.  The cross sections and
    ``absorption_coefficient`` are only meaningful for a positive energy
    and stay ``0.0`` otherwise.  Resolution failures leave every field
    at its zero value.

    Parameters
    ----------
    atomic_number : int
        Atomic number Z.
    atomic_weight : float
        Atomic weight (g/mol).
    absorption_coefficient : float
        ``total × density / conversion_factor``.
    error : ErrorKind
        Outcome code.
    symbol : str
        Canonical element symbol.
    energy_eV : float
        Photon energy the result was computed for.
    density, conversion_factor : float
        Copied from the element record.
    shell : Shell | None
        Shell group whose fit supplied ``photo``.
    photo, coherent, incoherent, total : float
        Cross sections (barns/atom).
    element : ElementRecord | None
        The full record, for edges, lines and yields.
    warnings : tuple[ErrorKind, ...]
        Informational codes (:attr:`ErrorKind.WITHIN_EDGE`,
        :attr:`ErrorKind.M_EDGE_WARN`); they never change ``error``.
    message : str | None
        Human-readable diagnostic, attached on verbose calls.
    """

    atomic_number: int = 0
    atomic_weight: float = 0.0
    absorption_coefficient: float = 0.0
    error: ErrorKind = ErrorKind.NO_ERROR
    symbol: str = ""
    energy_eV: float = 0.0
    density: float = 0.0
    conversion_factor: float = 0.0
    shell: Shell | None = None
    photo: float = 0.0
    coherent: float = 0.0
    incoherent: float = 0.0
    total: float = 0.0
    element: ElementRecord | None = None
    warnings: tuple[ErrorKind, ...] = ()
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is ErrorKind.NO_ERROR

    @property
    def is_constants_only(self) -> bool:
        """``True`` for the energy = 0 request (constants, no cross sections)."""
        return (
            self.error is ErrorKind.BAD_ENERGY
            and self.energy_eV == 0.0
            and self.atomic_number > 0
        )

    @property
    def mass_absorption_coefficient(self) -> float:
        """Total cross section in cm²/g."""
        if self.conversion_factor <= 0.0:
            return 0.0
        return self.total / self.conversion_factor
