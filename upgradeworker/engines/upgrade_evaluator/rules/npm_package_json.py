"""Rule for npm package.json manifests."""

from __future__ import annotations

import json

from upgradeworker.engines.upgrade_evaluator.registry import register_rule


class NpmPackageJsonRule:
    ecosystem = "npm"
    manifest_file = "package.json"

    def render(self, package_name: str, version: str) -> str:
        return json.dumps({"dependencies": {package_name: version}})


register_rule(NpmPackageJsonRule())
