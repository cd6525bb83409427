"""Name-addressable registry over the financial ratio formulas."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, Mapping

import pandas as pd

from constants import FLOAT_DTYPE, WACC_DEBT_WEIGHTING, WACC_WEIGHTINGS
from domain import DivisionByZeroError, EvaluationResult, FormulaSpec, UnknownRatioError
from utils.logging_config import get_logger

from . import financial_ratios as fr

logger = get_logger(__name__)


FORMULA_SPECS: Dict[str, FormulaSpec] = {
    spec.name: spec
    for spec in (
        FormulaSpec(
            name="wacc",
            title="Weighted Average Cost of Capital",
            inputs=("equity_value", "debt_value", "cost_of_equity", "cost_of_debt", "tax_rate"),
            description="Blended cost of equity and after-tax cost of debt.",
            denominator="equity_value + debt_value",
        ),
        FormulaSpec(
            name="enterprise_value",
            title="Enterprise Value",
            inputs=("market_cap", "total_debt", "cash"),
            description="Market cap plus total debt minus cash.",
        ),
        FormulaSpec(
            name="roi",
            title="Return on Investment",
            inputs=("current_value", "cost"),
            description="Gain on an investment relative to its cost.",
            denominator="cost",
        ),
        FormulaSpec(
            name="working_capital_ratio",
            title="Working Capital (Current) Ratio",
            inputs=("total_current_assets", "total_current_liabilities"),
            description="Current assets over current liabilities.",
            denominator="total_current_liabilities",
        ),
        FormulaSpec(
            name="quick_ratio",
            title="Quick Ratio",
            inputs=("cash", "marketable_securities", "accounts_receivable", "current_liabilities"),
            description="Liquid assets over current liabilities.",
            denominator="current_liabilities",
        ),
        FormulaSpec(
            name="debt_ratio",
            title="Debt Ratio",
            inputs=("total_debt", "total_assets"),
            description="Share of assets financed by debt.",
            denominator="total_assets",
        ),
        FormulaSpec(
            name="equity_ratio",
            title="Equity Ratio",
            inputs=("total_equity", "total_assets"),
            description="Share of assets financed by equity.",
            denominator="total_assets",
        ),
        FormulaSpec(
            name="debt_to_equity",
            title="Debt-to-Equity Ratio",
            inputs=("total_liabilities", "total_shareholder_equity"),
            description="Total liabilities over shareholder equity.",
            denominator="total_shareholder_equity",
        ),
        FormulaSpec(
            name="interest_coverage",
            title="Interest Coverage Ratio",
            inputs=("ebit", "interest_expense"),
            description="EBIT over interest expense.",
            denominator="interest_expense",
        ),
        FormulaSpec(
            name="gross_profit_margin",
            title="Gross Profit Margin",
            inputs=("net_sales", "cost_of_goods_sold"),
            description="Sales left after cost of goods sold, as a fraction of sales.",
            denominator="net_sales",
        ),
        FormulaSpec(
            name="return_on_assets",
            title="Return on Assets",
            inputs=("net_income", "total_assets"),
            description="Net income over total assets.",
            denominator="total_assets",
        ),
        FormulaSpec(
            name="return_on_equity",
            title="Return on Equity",
            inputs=("net_income", "average_shareholders_equity"),
            description="Net income over average shareholders' equity.",
            denominator="average_shareholders_equity",
        ),
        FormulaSpec(
            name="dividend_yield",
            title="Dividend Yield",
            inputs=("annual_dividends_per_share", "price_per_share"),
            description="Annual dividends per share over price per share.",
            denominator="price_per_share",
        ),
    )
}

FORMULA_FUNCTIONS: Dict[str, Callable[..., float]] = {
    "wacc": fr.weighted_average_cost_of_capital,
    "enterprise_value": fr.enterprise_value,
    "roi": fr.return_on_investment,
    "working_capital_ratio": fr.working_capital_ratio,
    "quick_ratio": fr.quick_ratio,
    "debt_ratio": fr.debt_ratio,
    "equity_ratio": fr.equity_ratio,
    "debt_to_equity": fr.debt_to_equity_ratio,
    "interest_coverage": fr.interest_coverage_ratio,
    "gross_profit_margin": fr.gross_profit_margin,
    "return_on_assets": fr.return_on_assets,
    "return_on_equity": fr.return_on_equity,
    "dividend_yield": fr.dividend_yield,
}


class RatioCatalog:
    """Look up and evaluate ratio formulas by name."""

    def __init__(self, wacc_debt_weighting: str = WACC_DEBT_WEIGHTING) -> None:
        if wacc_debt_weighting not in WACC_WEIGHTINGS:
            raise ValueError(
                f"wacc_debt_weighting must be one of {WACC_WEIGHTINGS}, "
                f"got {wacc_debt_weighting!r}"
            )
        self._wacc_debt_weighting = wacc_debt_weighting
        self._functions = dict(FORMULA_FUNCTIONS)
        self._functions["wacc"] = partial(
            fr.weighted_average_cost_of_capital,
            debt_weighting=wacc_debt_weighting,
        )

    @property
    def wacc_debt_weighting(self) -> str:
        return self._wacc_debt_weighting

    def names(self) -> List[str]:
        return sorted(FORMULA_SPECS)

    def spec(self, name: str) -> FormulaSpec:
        try:
            return FORMULA_SPECS[name]
        except KeyError:
            raise UnknownRatioError(name) from None

    def function(self, name: str) -> Callable[..., float]:
        self.spec(name)
        return self._functions[name]

    def evaluate(self, name: str, **inputs: float) -> float:
        """Evaluate ``name`` with its declared inputs passed as keywords.

        Domain errors from the formula propagate unchanged.
        """
        spec = self.spec(name)
        self._check_inputs(spec, inputs)
        return self._functions[name](**inputs)

    def evaluate_many(
        self,
        name: str,
        input_sets: Mapping[str, Mapping[str, float]],
    ) -> EvaluationResult:
        """Evaluate ``name`` for each labelled input set.

        A zero denominator in one set is recorded as an error for that label;
        the remaining sets are still evaluated.
        """
        spec = self.spec(name)
        result = EvaluationResult(ratio=name)
        for label, inputs in input_sets.items():
            self._check_inputs(spec, inputs)
            try:
                value = self._functions[name](**inputs)
            except DivisionByZeroError as exc:
                logger.debug("Skipping %s for %s: %s", name, label, exc)
                result.add_error(str(label), str(exc))
                continue
            result.add_value(str(label), value)
        if result.errors:
            logger.warning(
                "%s undefined for %d of %d input sets",
                name,
                len(result.errors),
                len(input_sets),
            )
        return result

    def evaluate_frame(self, name: str, frame: pd.DataFrame) -> pd.Series:
        """Evaluate ``name`` row-wise over a frame whose columns are its inputs.

        Raises:
            DivisionByZeroError: listing the index labels of rows whose
                denominator is zero.
            KeyError: when the frame lacks one of the declared inputs.
        """
        spec = self.spec(name)
        missing = [column for column in spec.inputs if column not in frame.columns]
        if missing:
            raise KeyError(f"{name}: frame is missing columns {missing}")
        if frame.empty:
            return pd.Series(dtype=FLOAT_DTYPE, index=frame.index, name=name)
        columns = {column: frame[column].astype(FLOAT_DTYPE) for column in spec.inputs}
        values = self._functions[name](**columns)
        return values.rename(name)

    @staticmethod
    def _check_inputs(spec: FormulaSpec, inputs: Mapping[str, float]) -> None:
        missing = [key for key in spec.inputs if key not in inputs]
        unexpected = [key for key in inputs if key not in spec.inputs]
        if missing or unexpected:
            raise TypeError(
                f"{spec.name}: missing inputs {missing}, unexpected inputs {unexpected}"
            )


CATALOG = RatioCatalog()
