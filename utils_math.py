# FILE: utils_math.py

import numpy as np


def scalar_product(a, b) -> float:
    # produs scalar simplu; lungimile sunt verificate de apelant
    return float(np.dot(np.asarray(a, dtype=float), np.asarray(b, dtype=float)))
