"""Pytest configuration for the bizcalendar test suite.

Hypothesis profiles (the only place max_examples is set for the suite):
- dev: 500 examples, the default on a workstation
- ci: 50 derandomized examples, chosen when CI=true
- verbose: 100 examples with Hypothesis progress output

HYPOTHESIS_PROFILE=<name> selects a profile explicitly, e.g.
HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzz tests:
Every property of periods and their ordering runs in the normal suite.
Only the grammar fuzzing of the parser (tests/test_syntax_parser_fuzz.py,
thousands of generated strings per test) carries @pytest.mark.fuzz. It is
skipped unless requested with ``pytest -m fuzz`` or by naming the fuzz
module on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)

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
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """HYPOTHESIS_PROFILE if it names a profile, else ci under CI, else dev."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: Parser grammar fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz tests unless selected by marker or by file name."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    if any("_fuzz" in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="Parser fuzzing - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
