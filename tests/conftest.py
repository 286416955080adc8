import random

import numpy as np
import pytest

@pytest.fixture(params=['numpy', 'array_api_strict'])
def xp(request):
    if request.param == 'numpy':
        return np
    return pytest.importorskip('array_api_strict')

@pytest.fixture
def rng():
    return random.Random(0)
