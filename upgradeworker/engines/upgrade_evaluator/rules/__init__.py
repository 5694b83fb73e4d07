"""Ecosystem manifest rules — auto-registered on import."""

from upgradeworker.engines.upgrade_evaluator.rules import (
    cargo_toml,  # noqa: F401
    go_mod,  # noqa: F401
    npm_package_json,  # noqa: F401
    pip_requirements,  # noqa: F401
)
