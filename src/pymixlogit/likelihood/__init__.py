"""Simulated likelihood built on the DCM table."""

from pymixlogit.likelihood._simulated import (
    PROB_FLOOR,
    draw_betas,
    simulated_choice_probability,
    simulated_log_likelihood,
    standard_normal_draws,
)

__all__ = [
    "PROB_FLOOR",
    "draw_betas",
    "simulated_choice_probability",
    "simulated_log_likelihood",
    "standard_normal_draws",
]
