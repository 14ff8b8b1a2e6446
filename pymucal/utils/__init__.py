#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared constants and validation

This sub-package centralises the element tables, unit factors and the
post-load validation routines so that the models, readers and core
modules all check data the same way.
"""

from __future__ import annotations
