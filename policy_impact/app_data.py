"""
Application data for the policy impact engine.

Contains:
- POLICY_CATALOG: The six analysable policies with their current values,
  preset scenarios and the causal chain shown to users
- POLICY_CATEGORIES: Category names in display order
- CALCULATION_FORMULAS, DATA_SOURCES: Methodology shown at the expert level
"""

# =============================================================================
# POLICY CATALOG
# =============================================================================
# "change" is the scenario's rate_change, in the policy kind's unit:
# percentage points (taxes, pension), yen/hour (minimum wage),
# yen/month (child support).
POLICY_CATALOG = {
    "consumption-tax": {
        "id": "consumption-tax",
        "name": "Consumption tax change",
        "category": "tax",
        "description": "Household impact of a change in the consumption tax rate",
        "current_rate": 10,
        "status": "active",
        "scenarios": [
            {"rate": 8, "label": "8% (2pt cut)", "change": -2},
            {"rate": 12, "label": "12% (2pt increase)", "change": 2},
            {"rate": 15, "label": "15% (5pt increase)", "change": 5},
        ],
        "impact_flow": [
            "Government changes the consumption tax rate",
            "Shelf prices move by the rate difference",
            "Purchase volumes respond to the price change",
            "Business sales follow consumption",
            "Employment and wages follow business results",
            "Household disposable income changes",
        ],
    },
    "income-tax": {
        "id": "income-tax",
        "name": "Income tax change",
        "category": "tax",
        "description": "Impact of changes to income tax rates or deductions",
        "current_rate": "5-45%",
        "status": "active",
        "scenarios": [
            {"rate": "-2pt", "label": "All brackets 2pt cut", "change": -2},
            {"rate": "+2pt", "label": "All brackets 2pt increase", "change": 2},
            {"rate": "deduction", "label": "Basic deduction +1M yen", "change": 0},
        ],
        "impact_flow": [
            "Rates or deductions change",
            "Individual income tax burden changes directly",
            "Take-home pay changes immediately",
            "Consumption follows disposable income",
            "Consumption changes spread through the economy",
            "Economic activity feeds back into future income",
        ],
    },
    "pension": {
        "id": "pension",
        "name": "Pension reform",
        "category": "social-security",
        "description": "Impact of changes to pension premiums or benefits",
        "current_rate": "18.3%",
        "status": "active",
        "scenarios": [
            {"rate": "20.3%", "label": "Premium +2pt", "change": 2},
            {"rate": "16.3%", "label": "Premium -2pt", "change": -2},
            {"rate": "benefit cut", "label": "Benefits cut 10%", "change": -10},
        ],
        "impact_flow": [
            "Premium rate or benefit level changes",
            "Monthly premium payments change",
            "Current disposable income changes",
            "Expectations about retirement income change",
            "Saving and consumption adjust",
            "Combined present and future income effect",
        ],
    },
    "minimum-wage": {
        "id": "minimum-wage",
        "name": "Minimum wage change",
        "category": "labor",
        "description": "Labour market impact of a minimum wage revision",
        "current_rate": "902 yen",
        "status": "active",
        "scenarios": [
            {"rate": "1000 yen", "label": "1000 yen (+98)", "change": 98},
            {"rate": "1200 yen", "label": "1200 yen (+298)", "change": 298},
            {"rate": "850 yen", "label": "850 yen (-52)", "change": -52},
        ],
        "impact_flow": [
            "Government revises the minimum wage",
            "Labour costs change for employers",
            "Employers adjust headcount and hours",
            "Minimum-wage earners' pay changes",
            "Purchasing power follows wages",
            "Income distribution across workers shifts",
        ],
    },
    "child-support": {
        "id": "child-support",
        "name": "Child allowance expansion",
        "category": "childcare",
        "description": "Impact of a higher child allowance or wider eligibility",
        "current_rate": "15,000 yen/month",
        "status": "active",
        "scenarios": [
            {"rate": "20,000 yen/month", "label": "20,000 yen/month (+5,000)", "change": 5000},
            {"rate": "30,000 yen/month", "label": "30,000 yen/month (+15,000)", "change": 15000},
            {"rate": "to age 18", "label": "Extend to age 18", "change": 0},
        ],
        "impact_flow": [
            "Allowance amount or eligibility expands",
            "Household income rises directly",
            "Education and childcare costs are offset",
            "Room for other spending grows",
            "Higher consumption lifts activity",
            "Long-run income rises across the economy",
        ],
    },
    "corporate-tax": {
        "id": "corporate-tax",
        "name": "Corporate tax change",
        "category": "tax",
        "description": "Impact of a corporate tax rate change on firms and jobs",
        "current_rate": "23.2%",
        "status": "active",
        "scenarios": [
            {"rate": "20%", "label": "20% (3.2pt cut)", "change": -3.2},
            {"rate": "25%", "label": "25% (1.8pt increase)", "change": 1.8},
            {"rate": "30%", "label": "30% (6.8pt increase)", "change": 6.8},
        ],
        "impact_flow": [
            "Corporate tax rate changes",
            "After-tax profits change directly",
            "Investment and hiring plans adjust",
            "Wages and working conditions follow",
            "Growth rate responds to investment and hiring",
            "Worker incomes change",
        ],
    },
}

POLICY_CATEGORIES = ["tax", "social-security", "labor", "childcare"]

# Shown when a request does not name an implementation date
DEFAULT_IMPLEMENTATION_DATE = "2024-04"

# =============================================================================
# METHODOLOGY (expert analysis level)
# =============================================================================
CALCULATION_FORMULAS = {
    "consumption-tax": (
        "income × consumption_rate(income) × regional multiplier × family × age "
        "× consumption index × Δrate / 100 / 12, rippled through consumption"
    ),
    "income-tax": "−3,800 yen × Δrate, rippled through consumption",
    "pension": "−2,100 yen × Δrate, rippled through consumption",
    "minimum-wage": (
        "Δwage × 160 h × tertiary share × regional multiplier, rippled through services"
    ),
    "child-support": "Δallowance paid directly (no ripple)",
    "corporate-tax": "−1,200 yen × Δrate, rippled through consumption",
}

DATA_SOURCES = [
    "Prefectural minimum wages (FY2024)",
    "Prefectural average household income and consumption price index",
    "Prefectural industry composition (primary/secondary/tertiary)",
    "National input-output table ripple multipliers",
]
