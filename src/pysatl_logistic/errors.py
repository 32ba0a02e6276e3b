"""
Exceptions raised by PySATL Logistic.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """
    Raised when parameter values violate a parametrization constraint.

    Parameters
    ----------
    parametrization : str
        Name of the parametrization being validated.
    constraint : str
        Human-readable description of the violated constraint.
    """

    def __init__(self, parametrization: str, constraint: str) -> None:
        self.parametrization = parametrization
        self.constraint = constraint
        super().__init__(
            f'Constraint "{constraint}" does not hold for parametrization "{parametrization}"'
        )


__all__ = ["InvalidParameterError"]
