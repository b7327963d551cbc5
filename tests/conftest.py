from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest

from ratio import Rational, Rational32, Rational64


@pytest.fixture(params=[Rational32, Rational64, Rational], ids=["int32", "int64", "intp"])
def width(request):
    return request.param
