#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Readers for McMaster datasets

* :class:`~pymucal.readers.hdf5.HDF5Reader` — HDF5 files written by
  :func:`~pymucal.converters.hdf5.write_dataset_hdf5`

All readers share the :class:`~pymucal.readers.base.BaseReader` interface.
"""

from __future__ import annotations

from pymucal.readers.hdf5 import HDF5Reader, load_dataset

__all__ = ["HDF5Reader", "load_dataset"]
