"""
PySATL Logistic
===============

The Logistic probability distribution for the PySATL project: densities,
probabilities and quantiles in direct and log-space, moments, transforms
and inverse transform sampling, built on the PySATL distribution interfaces.

Numerically stable primitives live in :mod:`pysatl_logistic.special`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .configuration import *
from .configuration import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .logistic import *
from .logistic import __all__ as _logistic_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-logistic")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_errors_all,
    *_logistic_all,
    *_types_all,
]

del _config_all
del _distr_all
del _errors_all
del _logistic_all
del _types_all
