from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_logistic.configuration import reset_default_uniform_source


@pytest.fixture(autouse=True)
def _fresh_uniform_source() -> Generator[None, Any, None]:
    reset_default_uniform_source()
    yield
    reset_default_uniform_source()
