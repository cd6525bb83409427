"""Financial ratio formulas and the registry that names them."""

from .financial_ratios import (
    debt_ratio,
    debt_to_equity,
    debt_to_equity_ratio,
    dividend_yield,
    enterprise_value,
    equity_ratio,
    gross_profit_margin,
    interest_coverage_ratio,
    quick_ratio,
    return_on_assets,
    return_on_equity,
    return_on_investment,
    roi,
    wacc,
    weighted_average_cost_of_capital,
    working_capital_ratio,
)
from .ratio_catalog import CATALOG, FORMULA_SPECS, RatioCatalog

__all__ = [
    "CATALOG",
    "FORMULA_SPECS",
    "RatioCatalog",
    "debt_ratio",
    "debt_to_equity",
    "debt_to_equity_ratio",
    "dividend_yield",
    "enterprise_value",
    "equity_ratio",
    "gross_profit_margin",
    "interest_coverage_ratio",
    "quick_ratio",
    "return_on_assets",
    "return_on_equity",
    "return_on_investment",
    "roi",
    "wacc",
    "weighted_average_cost_of_capital",
    "working_capital_ratio",
]
