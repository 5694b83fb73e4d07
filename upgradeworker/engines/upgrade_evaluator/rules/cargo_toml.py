"""Rule for Rust Cargo.toml manifests."""

from __future__ import annotations

from upgradeworker.engines.upgrade_evaluator.registry import register_rule


class CargoTomlRule:
    ecosystem = "cargo"
    manifest_file = "Cargo.toml"

    def render(self, package_name: str, version: str) -> str:
        return f'[dependencies]\n{package_name} = "{version}"\n'


register_rule(CargoTomlRule())
