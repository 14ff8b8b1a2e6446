#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed models for McMaster element data and results

Records are frozen dataclasses; :class:`McMasterDataset` wraps them in a
read-only mapping.  They are the output of the reader layer and the
input of both the core calculation and the converter layer.
"""

from __future__ import annotations

from pymucal.models.dataset import McMasterDataset, validate_record
from pymucal.models.records import (
    ComputationResult,
    EdgeEnergies,
    ElementRecord,
    EmissionLines,
    ErrorKind,
    JumpRatios,
    Resolution,
    ScatteringFits,
    Shell,
    ShellFits,
)

__all__ = [
    "ComputationResult",
    "EdgeEnergies",
    "ElementRecord",
    "EmissionLines",
    "ErrorKind",
    "JumpRatios",
    "McMasterDataset",
    "Resolution",
    "ScatteringFits",
    "Shell",
    "ShellFits",
    "validate_record",
]
