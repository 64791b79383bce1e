"""Tax calculation engine.

Pure functions for Nigerian personal (PAYE) and company income tax. Nothing
in this package touches storage, the network or shared mutable state; every
call builds and returns fresh value objects.

Sub-modules:
- money: Money/Rate wrappers and input coercion
- bands: band tables, law versions and the policy registry
- deductions: pension, housing fund, rent relief and CRA
- policies: the built-in 2025 and 2026 policies
- progressive: marginal band evaluation
- personal: TaxBreakdown and the PAYE entry points
- comparison: old law vs new law
- corporate: CIT on turnover
- installments: monthly/quarterly/annual splits
- penalties: late payment penalty
"""
from .bands import (
    BANDS_2025,
    BANDS_2026,
    CURRENT_LAW,
    PREVIOUS_LAW,
    Deductions,
    LawVersion,
    TaxBand,
    TaxPolicy,
    register_policy,
    validate_bands,
)
from .comparison import TaxComparison, compare, compare_laws
from .corporate import CIT_RATE, EXEMPTION_THRESHOLD, CorporateTaxResult, evaluate_corporate_tax
from .deductions import (
    RENT_RELIEF_CAP,
    compute_consolidated_relief,
    compute_deductions,
    compute_rent_relief,
)
from .installments import PaymentPlan, monthly_installment, payment_plans, quarterly_installment
from .money import ZERO, Money, Rate, to_money, to_rate
from .penalties import ANNUAL_PENALTY_RATE, PenaltyResult, compute_penalty
from .personal import (
    TaxBreakdown,
    evaluate_new_law_tax,
    evaluate_old_law_tax,
    evaluate_tax,
    evaluate_with_policy,
)
from .policies import get_policy, registered_versions
from .progressive import BandEvaluation, BandResult, evaluate

__all__ = [
    # Types
    "Money",
    "Rate",
    "ZERO",
    "to_money",
    "to_rate",
    "LawVersion",
    "TaxBand",
    "TaxPolicy",
    "Deductions",
    "BandResult",
    "BandEvaluation",
    "TaxBreakdown",
    "TaxComparison",
    "CorporateTaxResult",
    "PaymentPlan",
    "PenaltyResult",
    # Constants
    "BANDS_2025",
    "BANDS_2026",
    "CURRENT_LAW",
    "PREVIOUS_LAW",
    "RENT_RELIEF_CAP",
    "CIT_RATE",
    "EXEMPTION_THRESHOLD",
    "ANNUAL_PENALTY_RATE",
    # Policy registry
    "get_policy",
    "register_policy",
    "registered_versions",
    "validate_bands",
    # Computation functions
    "compute_deductions",
    "compute_consolidated_relief",
    "compute_rent_relief",
    "evaluate",
    "evaluate_tax",
    "evaluate_with_policy",
    "evaluate_new_law_tax",
    "evaluate_old_law_tax",
    "compare",
    "compare_laws",
    "evaluate_corporate_tax",
    "monthly_installment",
    "quarterly_installment",
    "payment_plans",
    "compute_penalty",
]
