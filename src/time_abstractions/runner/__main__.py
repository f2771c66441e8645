# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the interval runner.

Usage:
    python -m time_abstractions.runner < request.json > response.json

The runner reads an IntervalRequest as JSON from stdin and writes an
IntervalResponse as JSON to stdout.  Logs go to stderr.

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import sys

from time_abstractions.logging_config import configure_logging

from .executor import Executor
from .schema import IntervalRequest, IntervalResponse


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    configure_logging()
    try:
        request = IntervalRequest.model_validate_json(sys.stdin.read())
        output = Executor().execute(request)
        print(output.model_dump_json())
        return 0 if output.success else 1

    except Exception as e:
        # Ensure we always output valid JSON, even on unexpected errors
        error_output = IntervalResponse(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )
        print(error_output.model_dump_json())
        return 1


if __name__ == "__main__":
    sys.exit(main())
