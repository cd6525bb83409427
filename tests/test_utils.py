import logging
import unittest

import numpy as np
import pandas as pd

from domain import EvaluationResult
from utils import (
    as_float,
    format_metric_value,
    get_logger,
    result_payload,
    result_table,
    sanitize_float,
    zero_labels,
)


class TestMathUtils(unittest.TestCase):
    def test_sanitize_float(self):
        self.assertEqual(sanitize_float(np.float32(1.5)), 1.5)
        self.assertEqual(sanitize_float(3), 3.0)
        self.assertIsNone(sanitize_float(float("inf")))
        self.assertIsNone(sanitize_float(float("nan")))
        self.assertIsNone(sanitize_float("1.0"))
        self.assertIsNone(sanitize_float(None))

    def test_as_float(self):
        self.assertIs(type(as_float(np.int64(7))), float)
        series = as_float(pd.Series([1, 2]))
        self.assertEqual(series.dtype, np.float64)

    def test_zero_labels(self):
        self.assertEqual(zero_labels(pd.Series([1.0, 0.0], index=["a", "b"])), ["b"])
        self.assertEqual(zero_labels(np.array([0.0, 2.0, -0.0])), [0, 2])
        self.assertEqual(zero_labels(np.array([1.0, np.nan])), [])


class TestEvaluationResult(unittest.TestCase):
    def test_values_are_sanitized(self):
        result = EvaluationResult(ratio="roi", values={"A": np.float64(0.5), "B": float("inf")})
        self.assertEqual(result.values, {"A": 0.5, "B": None})

    def test_add_error(self):
        result = EvaluationResult(ratio="roi")
        result.add_value("A", 0.25)
        result.add_error("B", "roi: denominator is zero")
        self.assertFalse(result.ok)
        self.assertEqual(result.values, {"A": 0.25, "B": None})
        self.assertEqual(result.errors[0].label, "B")


class TestFormatters(unittest.TestCase):
    def test_format_metric_value(self):
        self.assertEqual(format_metric_value(None), "None")
        self.assertEqual(format_metric_value(0.123456789), "0.123457")
        self.assertEqual(format_metric_value(650.0), "650")
        self.assertEqual(format_metric_value(3), "3")

    def test_result_payload(self):
        result = EvaluationResult(ratio="dividend_yield")
        result.add_value("AAA", 0.04)
        result.add_error("BBB", "dividend_yield: denominator is zero")
        payload = result_payload(result)
        self.assertEqual(payload["ratio"], "dividend_yield")
        self.assertEqual(payload["values"], {"AAA": 0.04, "BBB": None})
        self.assertEqual(payload["errors"][0]["kind"], "DivisionByZero")
        self.assertEqual(payload["errors"][0]["label"], "BBB")

    def test_result_table(self):
        result = EvaluationResult(ratio="dividend_yield")
        result.add_value("AAA", 0.04)
        result.add_error("BBB", "dividend_yield: denominator is zero")
        self.assertEqual(result_table(result), {"AAA": "0.04", "BBB": "DivisionByZero"})


class TestLogging(unittest.TestCase):
    def test_get_logger(self):
        logger = get_logger("services.ratio_catalog")
        self.assertIsInstance(logger, logging.Logger)
        self.assertEqual(logger.name, "services.ratio_catalog")


if __name__ == "__main__":
    unittest.main()
