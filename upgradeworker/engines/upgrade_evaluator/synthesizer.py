"""Change synthesizer — the file mutations an upgrade implies."""

from __future__ import annotations

# Ensure rules are registered before any synthesis runs.
import upgradeworker.engines.upgrade_evaluator.rules  # noqa: F401
from upgradeworker.engines.upgrade_evaluator.models import Change, ChangeType, UpgradeRequest
from upgradeworker.engines.upgrade_evaluator.registry import get_rule


def synthesize(request: UpgradeRequest) -> list[Change]:
    """Return the ordered changes pinning the package to ``target_version``.

    Content is a minimal manifest fragment describing the intended state,
    not a patch against the repository's current file. Ecosystems without
    a registered rule yield no changes.
    """
    rule = get_rule(request.ecosystem)
    if rule is None:
        return []
    return [
        Change(
            file_path=rule.manifest_file,
            change_type=ChangeType.MODIFY,
            content=rule.render(request.package_name, request.target_version),
        )
    ]
