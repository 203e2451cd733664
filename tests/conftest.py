"""Pytest configuration for the sqlnumfmt test suite.

Hypothesis profiles:
- dev: 200 examples per property, 500 ms deadline
- ci: 100 derandomized examples, no deadline (shared runners stall)

Select with HYPOTHESIS_PROFILE=ci. CI=true also selects "ci".

The ``fuzz`` marker is registered in pyproject.toml and deselected by
default. Run the intensive tests with: pytest -m fuzz
"""

import os
from datetime import timedelta

from hypothesis import settings

settings.register_profile(
    "dev",
    max_examples=200,
    deadline=timedelta(milliseconds=500),
)

settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    derandomize=True,
    print_blob=True,
)

_profile = os.environ.get("HYPOTHESIS_PROFILE") or (
    "ci" if os.environ.get("CI") == "true" else "dev"
)
settings.load_profile(_profile)
