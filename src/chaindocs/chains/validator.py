"""Validate chain config entries before rendering."""

from dataclasses import dataclass, field

from chaindocs.chains import ENVIRONMENTS

VALID_CHAIN_TYPES = {"evm", "svm", "move", "cosmos", "other"}


@dataclass
class ValidationResult:
    """Result of a chain config validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_chains: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"Chain Validation: {self.total_chains} chains checked"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed:
            lines.append("PASS")
        return "\n".join(lines)


def validate_chains(chains: list[dict]) -> ValidationResult:
    """Validate chain entries.

    Checks:
    - Every chain has a name and a mainnet entry
    - chain_type is a known value
    - Wormhole chain ids are integers and unique per environment
    - Documented chains have a homepage
    """
    result = ValidationResult(total_chains=len(chains))
    seen_ids: dict[str, dict[int, str]] = {env: {} for env in ENVIRONMENTS}

    for i, chain in enumerate(chains):
        if not isinstance(chain, dict):
            result.errors.append(f"chains[{i}]: not a mapping")
            continue

        name = chain.get("name")
        if not name:
            result.errors.append(f"chains[{i}]: missing 'name'")
            name = f"chains[{i}]"

        chain_type = chain.get("chain_type")
        if chain_type not in VALID_CHAIN_TYPES:
            result.errors.append(f"{name}: invalid chain_type '{chain_type}'")

        if not chain.get("mainnet"):
            result.errors.append(f"{name}: missing 'mainnet'")

        for env in ENVIRONMENTS:
            network = chain.get(env)
            if not network:
                continue
            wh_id = network.get("id")
            if not isinstance(wh_id, int) or isinstance(wh_id, bool):
                result.errors.append(f"{name}: {env} id must be an integer, got {wh_id!r}")
                continue
            other = seen_ids[env].get(wh_id)
            if other:
                result.errors.append(f"{name}: {env} id {wh_id} already used by {other}")
            else:
                seen_ids[env][wh_id] = name

        extra = (chain.get("mainnet") or {}).get("extra_details")
        if extra is not None and not (isinstance(extra, dict) and extra.get("homepage")):
            result.warnings.append(f"{name}: documented chain has no homepage")

    return result
