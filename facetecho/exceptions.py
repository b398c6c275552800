# -*- coding: utf-8 -*-
"""
Facet Echo Exception Hierarchy - Domain-specific exceptions.

Provides a small exception hierarchy that lets callers catch facet echo
model errors distinctly from Python built-in exceptions. All exceptions
subclass both ``FacetEchoError`` and the appropriate built-in exception
for backward compatibility.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""


class FacetEchoError(Exception):
    """Base exception for all facet echo model errors."""


class ValidationError(FacetEchoError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for shape mismatches, point-cloud/label length mismatches,
    empty meshes, out-of-range parameters, unknown presets, and other
    precondition failures detected before the per-beam loop starts.
    """


class SimulationError(FacetEchoError, RuntimeError):
    """Non-recoverable failure inside the per-beam simulation loop.

    Wraps the exception raised by a beam worker so that callers see a
    single error type regardless of how the beams were scheduled.
    """
