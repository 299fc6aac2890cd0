"""Pytest configuration for hurufengine."""

from __future__ import annotations

import os


def _register_hypothesis_profiles() -> None:
    try:
        from hypothesis import HealthCheck, settings
    except ImportError:  # pragma: no cover - hypothesis optional
        return

    # The autouse config-home fixture is function scoped but stateless for
    # property tests.
    suppressed = [HealthCheck.function_scoped_fixture]
    settings.register_profile("dev", deadline=None, suppress_health_check=suppressed)
    settings.register_profile(
        "ci",
        deadline=None,
        max_examples=300,
        suppress_health_check=suppressed + [HealthCheck.too_slow],
    )
    settings.load_profile(os.getenv("HURUFENGINE_HYPOTHESIS_PROFILE", "dev"))


_register_hypothesis_profiles()
