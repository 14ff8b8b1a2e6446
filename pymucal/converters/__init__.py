#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 converter for McMaster datasets

* :func:`~pymucal.converters.hdf5.write_dataset_hdf5`
    Writes a dataset in the layout read by
    :class:`~pymucal.readers.hdf5.HDF5Reader`.
"""

from __future__ import annotations

from pymucal.converters.hdf5 import write_dataset_hdf5

__all__ = ["write_dataset_hdf5"]
