"""Closed-form financial ratio formulas.

Every function is pure: it reads only its arguments and returns one float.
Arguments may also be numpy arrays or pandas Series of equal length, in which
case the result is a float64 array/Series computed element-wise.

A zero denominator always raises :class:`domain.errors.DivisionByZeroError`;
no formula returns inf or NaN because of one. Inputs are otherwise not
validated, so negative balances are computed through as given.
"""

from __future__ import annotations

from typing import Any

from constants import WACC_DEBT_WEIGHTING, WACC_WEIGHTINGS
from domain.errors import DivisionByZeroError
from utils.math_utils import as_float, is_array_like, zero_labels


def _divide(numerator: Any, denominator: Any, ratio: str):
    if is_array_like(denominator):
        labels = zero_labels(denominator)
        if labels:
            raise DivisionByZeroError(ratio, labels)
    elif denominator == 0:
        raise DivisionByZeroError(ratio)
    return numerator / denominator


def weighted_average_cost_of_capital(
    equity_value: float,
    debt_value: float,
    cost_of_equity: float,
    cost_of_debt: float,
    tax_rate: float,
    *,
    debt_weighting: str = WACC_DEBT_WEIGHTING,
) -> float:
    """Blend the cost of equity with the after-tax cost of debt.

    ``debt_weighting="debt"`` weights the debt term by ``D/(E+D)``.
    ``debt_weighting="equity"`` reproduces the legacy calculation, which
    weights both terms by the equity fraction ``E/(E+D)``.

    Raises:
        DivisionByZeroError: when ``equity_value + debt_value`` is zero.
        ValueError: for an unknown ``debt_weighting``.
    """
    if debt_weighting not in WACC_WEIGHTINGS:
        raise ValueError(
            f"debt_weighting must be one of {WACC_WEIGHTINGS}, got {debt_weighting!r}"
        )
    total_capital = equity_value + debt_value
    equity_weight = _divide(equity_value, total_capital, "wacc")
    if debt_weighting == "equity":
        debt_weight = equity_weight
    else:
        debt_weight = _divide(debt_value, total_capital, "wacc")
    after_tax_cost_of_debt = cost_of_debt * (1 - tax_rate)
    return as_float(equity_weight * cost_of_equity + debt_weight * after_tax_cost_of_debt)


def enterprise_value(market_cap: float, total_debt: float, cash: float) -> float:
    """Market capitalisation plus total debt, less cash and equivalents."""
    return as_float(market_cap + total_debt - cash)


def return_on_investment(current_value: float, cost: float) -> float:
    return as_float(_divide(current_value - cost, cost, "roi"))


def working_capital_ratio(
    total_current_assets: float,
    total_current_liabilities: float,
) -> float:
    """Current ratio: current assets over current liabilities."""
    return as_float(
        _divide(total_current_assets, total_current_liabilities, "working_capital_ratio")
    )


def quick_ratio(
    cash: float,
    marketable_securities: float,
    accounts_receivable: float,
    current_liabilities: float,
) -> float:
    """Most liquid assets (cash, securities, receivables) over current liabilities."""
    liquid_assets = cash + marketable_securities + accounts_receivable
    return as_float(_divide(liquid_assets, current_liabilities, "quick_ratio"))


def debt_ratio(total_debt: float, total_assets: float) -> float:
    return as_float(_divide(total_debt, total_assets, "debt_ratio"))


def equity_ratio(total_equity: float, total_assets: float) -> float:
    return as_float(_divide(total_equity, total_assets, "equity_ratio"))


def debt_to_equity_ratio(
    total_liabilities: float,
    total_shareholder_equity: float,
) -> float:
    return as_float(
        _divide(total_liabilities, total_shareholder_equity, "debt_to_equity")
    )


def interest_coverage_ratio(ebit: float, interest_expense: float) -> float:
    """How many times operating earnings (EBIT) cover the interest expense."""
    return as_float(_divide(ebit, interest_expense, "interest_coverage"))


def gross_profit_margin(net_sales: float, cost_of_goods_sold: float) -> float:
    return as_float(
        _divide(net_sales - cost_of_goods_sold, net_sales, "gross_profit_margin")
    )


def return_on_assets(net_income: float, total_assets: float) -> float:
    return as_float(_divide(net_income, total_assets, "return_on_assets"))


def return_on_equity(net_income: float, average_shareholders_equity: float) -> float:
    return as_float(
        _divide(net_income, average_shareholders_equity, "return_on_equity")
    )


def dividend_yield(annual_dividends_per_share: float, price_per_share: float) -> float:
    """Annual dividends per share relative to the share price."""
    return as_float(
        _divide(annual_dividends_per_share, price_per_share, "dividend_yield")
    )


wacc = weighted_average_cost_of_capital
roi = return_on_investment
debt_to_equity = debt_to_equity_ratio
