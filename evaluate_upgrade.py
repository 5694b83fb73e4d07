#!/usr/bin/env python3
"""Standalone upgrade evaluator — no server required.

Usage:
    python evaluate_upgrade.py test/repo npm lodash 1.0.0 2.0.0
    python evaluate_upgrade.py test/repo cargo serde 1.0.0 1.0.5 --json
    python evaluate_upgrade.py --request request.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from upgradeworker.core.logging import setup_logging
from upgradeworker.engines.upgrade_evaluator.evaluator import UpgradeEvaluator
from upgradeworker.engines.upgrade_evaluator.models import UpgradeRequest, UpgradeResponse
from upgradeworker.errors import UpgradeError, ValidationError


def _print_response(response: UpgradeResponse, as_json: bool) -> None:
    if as_json:
        print(json.dumps(response.to_dict(), indent=2))
        return

    risk = response.risk_assessment
    print(response.message)
    print(f"  compatibility score: {response.compatibility_score:.2f}")
    print(f"  risk level:          {risk.risk_level.value}")
    print(f"  breaking changes:    {'yes' if risk.breaking_changes else 'no'}")
    print(f"  performance impact:  {risk.performance_impact.value}")
    for issue in risk.security_issues:
        print(f"  security:            {issue}")

    if not response.changes:
        print("\nNo file changes for this ecosystem.")
        return
    print(f"\n{len(response.changes)} change(s):")
    for change in response.changes:
        print(f"  {change.change_type.value} {change.file_path}")
        for line in change.content.splitlines():
            print(f"    {line}")


def _load_request(args: argparse.Namespace) -> UpgradeRequest:
    if args.request:
        try:
            data = json.loads(Path(args.request).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"{args.request} is not valid JSON: {exc}") from exc
        return UpgradeRequest.from_dict(data)
    return UpgradeRequest(
        repository=args.repository,
        ecosystem=args.ecosystem,
        package_name=args.package_name,
        current_version=args.current_version,
        target_version=args.target_version,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate a dependency upgrade")
    parser.add_argument("repository", nargs="?", default="", help="Repository identifier, e.g. org/repo")
    parser.add_argument("ecosystem", nargs="?", default="", help="npm, cargo, pip, go, ...")
    parser.add_argument("package_name", nargs="?", default="")
    parser.add_argument("current_version", nargs="?", default="")
    parser.add_argument("target_version", nargs="?", default="")
    parser.add_argument("--request", default=None, help="Read the request from a JSON file")
    parser.add_argument("--json", action="store_true", dest="as_json", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline steps to stderr")
    args = parser.parse_args(argv)

    # Logs go to stderr so --json output stays machine-readable.
    setup_logging("info" if args.verbose else "error", stream="ext://sys.stderr")

    try:
        response = UpgradeEvaluator().evaluate(_load_request(args))
    except UpgradeError as exc:
        if args.as_json:
            print(json.dumps(exc.to_dict(), indent=2))
        else:
            print(f"Error ({exc.error_type.value}): {exc.message}", file=sys.stderr)
        return 1

    _print_response(response, args.as_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
