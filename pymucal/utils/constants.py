#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Physical constants and lookup tables used across PyMUCAL

The McMaster compilation [1]_ tabulates fits for Z = 1 … 94 with seven
elements missing.  Every energy handled by the public API is in **eV**;
the fit coefficients themselves are defined against energies in keV,
hence :data:`EV_PER_KEV`.

References
----------
.. [1] W. H. McMaster, N. Kerr Del Grande, J. H. Mallett and
   J. H. Hubbell, "Compilation of X-Ray Cross Sections", UCRL-50174
   Section II Revision 1 (1969).
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Physical constants
# ---------------------------------------------------------------------------

AVOGADRO: float = 6.02214076e23
"""Avogadro constant N_A (1/mol, exact by SI definition)."""

BARN_TO_CM2: float = 1e-24
"""Conversion factor from barns to cm²."""

EV_PER_KEV: float = 1000.0
"""Electron-volts per kilo-electron-volt."""


# ---------------------------------------------------------------------------
# Dataset coverage
# ---------------------------------------------------------------------------

ZMAX: int = 94
"""Largest atomic number covered by the McMaster tables (plutonium)."""

EXCLUDED_Z: frozenset[int] = frozenset({84, 85, 87, 88, 89, 91, 93})
"""Po, At, Fr, Ra, Ac, Pa, Np: McMaster gives no data for these."""


# ---------------------------------------------------------------------------
# Calculation thresholds
# ---------------------------------------------------------------------------

EDGE_PROXIMITY_EV: float = 1.0
"""Energies closer than this to an absorption edge raise a warning."""

M_EDGE_MIN_Z: int = 30
"""M1 fits below this Z are flagged as unreliable."""


# ---------------------------------------------------------------------------
# Shell labels
# ---------------------------------------------------------------------------

EDGE_LABELS: tuple[str, ...] = ("K", "L1", "L2", "L3", "M")
"""Order of the absorption edges in :class:`EdgeEnergies` and on disk."""

JUMP_LABELS: tuple[str, ...] = ("L1", "L2", "L3")
"""Order of the L sub-shell jump ratios."""

LINE_LABELS: tuple[str, ...] = ("Ka1", "Kb1", "La1", "Lb1")
"""Order of the tabulated emission lines."""

FIT_LABELS: tuple[str, ...] = ("K", "L", "M", "N")
"""Photo-absorption fits, one per shell group."""

SCATTERING_LABELS: tuple[str, ...] = ("coherent", "incoherent")
"""Scattering fits."""


# ---------------------------------------------------------------------------
# Periodic table  (Z = 1 … 94)
# ---------------------------------------------------------------------------

_ELEMENTS: tuple[tuple[str, str], ...] = (
    ("H", "Hydrogen"), ("He", "Helium"), ("Li", "Lithium"),
    ("Be", "Beryllium"), ("B", "Boron"), ("C", "Carbon"),
    ("N", "Nitrogen"), ("O", "Oxygen"), ("F", "Fluorine"),
    ("Ne", "Neon"), ("Na", "Sodium"), ("Mg", "Magnesium"),
    ("Al", "Aluminium"), ("Si", "Silicon"), ("P", "Phosphorus"),
    ("S", "Sulfur"), ("Cl", "Chlorine"), ("Ar", "Argon"),
    ("K", "Potassium"), ("Ca", "Calcium"), ("Sc", "Scandium"),
    ("Ti", "Titanium"), ("V", "Vanadium"), ("Cr", "Chromium"),
    ("Mn", "Manganese"), ("Fe", "Iron"), ("Co", "Cobalt"),
    ("Ni", "Nickel"), ("Cu", "Copper"), ("Zn", "Zinc"),
    ("Ga", "Gallium"), ("Ge", "Germanium"), ("As", "Arsenic"),
    ("Se", "Selenium"), ("Br", "Bromine"), ("Kr", "Krypton"),
    ("Rb", "Rubidium"), ("Sr", "Strontium"), ("Y", "Yttrium"),
    ("Zr", "Zirconium"), ("Nb", "Niobium"), ("Mo", "Molybdenum"),
    ("Tc", "Technetium"), ("Ru", "Ruthenium"), ("Rh", "Rhodium"),
    ("Pd", "Palladium"), ("Ag", "Silver"), ("Cd", "Cadmium"),
    ("In", "Indium"), ("Sn", "Tin"), ("Sb", "Antimony"),
    ("Te", "Tellurium"), ("I", "Iodine"), ("Xe", "Xenon"),
    ("Cs", "Caesium"), ("Ba", "Barium"), ("La", "Lanthanum"),
    ("Ce", "Cerium"), ("Pr", "Praseodymium"), ("Nd", "Neodymium"),
    ("Pm", "Promethium"), ("Sm", "Samarium"), ("Eu", "Europium"),
    ("Gd", "Gadolinium"), ("Tb", "Terbium"), ("Dy", "Dysprosium"),
    ("Ho", "Holmium"), ("Er", "Erbium"), ("Tm", "Thulium"),
    ("Yb", "Ytterbium"), ("Lu", "Lutetium"), ("Hf", "Hafnium"),
    ("Ta", "Tantalum"), ("W", "Tungsten"), ("Re", "Rhenium"),
    ("Os", "Osmium"), ("Ir", "Iridium"), ("Pt", "Platinum"),
    ("Au", "Gold"), ("Hg", "Mercury"), ("Tl", "Thallium"),
    ("Pb", "Lead"), ("Bi", "Bismuth"), ("Po", "Polonium"),
    ("At", "Astatine"), ("Rn", "Radon"), ("Fr", "Francium"),
    ("Ra", "Radium"), ("Ac", "Actinium"), ("Th", "Thorium"),
    ("Pa", "Protactinium"), ("U", "Uranium"), ("Np", "Neptunium"),
    ("Pu", "Plutonium"),
)

PERIODIC_TABLE: dict[int, dict[str, str]] = {
    Z: {"name": name, "symbol": symbol}
    for Z, (symbol, name) in enumerate(_ELEMENTS, start=1)
}
"""Element name and symbol keyed by atomic number, Z = 1 … :data:`ZMAX`."""

SYMBOL_TO_Z: dict[str, int] = {
    entry["symbol"].lower(): Z for Z, entry in PERIODIC_TABLE.items()
}
"""Lower-cased element symbol → atomic number."""
