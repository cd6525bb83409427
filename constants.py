"""Shared configuration values for the ratio catalog."""

FLOAT_DTYPE = "float64"

# "debt" weights the after-tax cost of debt by D/(E+D); "equity" reproduces
# the legacy E/(E+D) weighting.
WACC_DEBT_WEIGHTING = "debt"
WACC_WEIGHTINGS = ("debt", "equity")

DOMAIN_ERROR_KIND = "DivisionByZero"

METRIC_FORMAT = ".6g"

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
