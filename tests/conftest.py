"""Pytest configuration for the msgbundle test suite.

Hypothesis profiles (select with HYPOTHESIS_PROFILE=<name>):
- dev: 500 examples, random seeds (default for local runs)
- ci: 50 examples, derandomized, failing blobs printed (chosen when CI=true)
- verbose: 100 examples with per-example output

The ordering and snapshot properties in test_message_bundle_hypothesis.py
are cheap to check, so even the dev profile finishes in seconds.
"""

import os

from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _select_profile() -> str:
    """Pick the Hypothesis profile for this run.

    An explicit HYPOTHESIS_PROFILE wins; otherwise CI=true selects "ci" and
    anything else falls back to "dev".
    """
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in {"dev", "ci", "verbose"}:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())
