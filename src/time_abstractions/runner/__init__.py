# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule answering interval requests over stdin/stdout.

Usage:
    python -m time_abstractions.runner < request.json > response.json

Exports:
    Executor: Computes the interval for a request
    IntervalRequest: Input schema
    IntervalResponse: Output schema
"""

from .executor import Executor, TimeOfDayError
from .schema import IntervalRequest, IntervalResponse

__all__ = [
    "Executor",
    "IntervalRequest",
    "IntervalResponse",
    "TimeOfDayError",
]
