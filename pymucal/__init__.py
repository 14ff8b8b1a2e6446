#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyMUCAL - X-ray cross sections from the McMaster tables

Computes photo-absorption, coherent and incoherent scattering cross
sections and absorption coefficients of the elements Z = 1 … 94 (except
Po, At, Fr, Ra, Ac, Pa, Np) from the empirical fits of McMaster et al.
(1969).

Workflow
--------
1. **Load** a dataset of per-element fit coefficients:
   ``dataset = load_dataset("mcmaster.h5")``

2. **Compute** at one energy (eV):
   ``result, err = mucal("Fe", 0, 10000.0, dataset=dataset)``

3. **Command line**:
   ``pymucal calc Fe 10000``

Modules
-------
core
    Element resolution, the McMaster fit kernel and the cross-section engine.
models
    Frozen dataclass records, result types and the dataset container.
readers
    HDF5 dataset reader.
converters
    HDF5 dataset writer.
utils
    Constants and validation logic.

Examples
--------
>>> from pymucal import load_dataset, mucal
>>> dataset = load_dataset("mcmaster.h5")
>>> result, err = mucal("Cu", photon_energy_eV=8047.8, dataset=dataset)
>>> result.shell
<Shell.K: 'K'>
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pymucal.api import describe, mucal
from pymucal.converters.hdf5 import write_dataset_hdf5
from pymucal.core.engine import CrossSectionEngine
from pymucal.core.fit import evaluate_fit
from pymucal.core.resolver import ElementResolver
from pymucal.exceptions import (
    ConversionError,
    FileFormatError,
    InternalError,
    ParseError,
    PyMucalError,
    ValidationError,
)
from pymucal.models.dataset import McMasterDataset
from pymucal.models.records import (
    ComputationResult,
    ElementRecord,
    ErrorKind,
    Resolution,
    Shell,
)
from pymucal.readers.hdf5 import HDF5Reader, load_dataset

__all__ = [
    # Version
    "__version__",
    # Entry point
    "mucal",
    "describe",
    # Core
    "CrossSectionEngine",
    "ElementResolver",
    "evaluate_fit",
    # Data
    "McMasterDataset",
    "ElementRecord",
    "ComputationResult",
    "Resolution",
    "ErrorKind",
    "Shell",
    "HDF5Reader",
    "load_dataset",
    "write_dataset_hdf5",
    # Exceptions
    "PyMucalError",
    "FileFormatError",
    "ParseError",
    "ValidationError",
    "ConversionError",
    "InternalError",
]
