"""Built-in tax policies, registered on import."""
from __future__ import annotations

from .bands import (
    BANDS_2025,
    BANDS_2026,
    LawVersion,
    TaxPolicy,
    get_policy,
    register_policy,
    registered_versions,
)
from .deductions import compute_consolidated_relief, compute_deductions

POLICY_2025 = register_policy(
    TaxPolicy(
        version=LawVersion.PAYE_2025,
        bands=BANDS_2025,
        deductions=compute_consolidated_relief,
        description="PAYE under PITA with Consolidated Relief Allowance",
    )
)

POLICY_2026 = register_policy(
    TaxPolicy(
        version=LawVersion.NTA_2026,
        bands=BANDS_2026,
        deductions=compute_deductions,
        description="PAYE under the Nigeria Tax Act (₦800k tax-free threshold)",
    )
)

__all__ = ["POLICY_2025", "POLICY_2026", "get_policy", "registered_versions"]
