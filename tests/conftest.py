"""Pytest configuration for the parsecond test suite.

Hypothesis profiles:
- dev: local development, 200 examples
- ci: continuous integration, 50 examples, derandomized

Profile selection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true -> "ci"
- Otherwise -> "dev"
"""

import os

from hypothesis import Phase, settings

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())
