# FILE: utils_data.py
# Incarcare si impartire a stimulilor (CSV, pandas, MinMaxScaler).

import numpy as np
import pandas as pd
from sklearn.preprocessing import MinMaxScaler

from model_neuron import InvalidInput, LengthMismatch, Stimulus


def encode_labels(labels):
    """
    Transforma etichetele in 0.0/1.0.
    Etichetele numerice din {0, 1} raman neschimbate (chiar daca apare o singura clasa);
    celelalte (ex. "R"/"M") primesc 0.0/1.0 dupa ordinea sortata a valorilor unice.
    """
    series = pd.Series(labels)
    classes = sorted(pd.unique(series).tolist())
    if pd.api.types.is_numeric_dtype(series) and set(classes) <= {0, 1}:
        return series.values.astype(float), {c: float(c) for c in classes}
    if len(classes) > 2:
        raise InvalidInput(f"binary labels expected, got {len(classes)} classes: {classes}")
    mapping = {c: float(i) for i, c in enumerate(classes)}
    return np.array([mapping[v] for v in labels], dtype=float), mapping


def stimuli_from_arrays(X, y):
    X = np.asarray(X, dtype=float)
    y = np.asarray(y, dtype=float).reshape(-1)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if len(X) != len(y):
        raise LengthMismatch(f"{len(X)} feature rows but {len(y)} labels")
    return [Stimulus(xi, yi) for xi, yi in zip(X, y)]


def load_stimuli_csv(path, label_col=-1, header=None, normalize=False):
    df = pd.read_csv(path, header=header)
    if df.empty:
        raise InvalidInput(f"no rows in {path}")

    label_name = df.columns[label_col]
    y, _ = encode_labels(df[label_name].values)

    X = df.drop(columns=[label_name]).values.astype(float)
    if normalize:
        X = MinMaxScaler().fit_transform(X)

    return stimuli_from_arrays(X, y)


def expected_values(stimuli):
    return [s.expected for s in stimuli]


def shuffle_stimuli(stimuli, rng=None):
    gen = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    stimuli = list(stimuli)
    idx = gen.permutation(len(stimuli))
    return [stimuli[i] for i in idx]


def split_stimuli(stimuli, percentage, rng=None, shuffle=True):
    """
    Imparte stimulii in (train, test); percentage = procentul pentru train.
    """
    if not 0.0 < percentage < 100.0:
        raise InvalidInput(f"percentage must be in (0, 100), got {percentage}")

    stimuli = shuffle_stimuli(stimuli, rng) if shuffle else list(stimuli)
    cut = int(round(len(stimuli) * percentage / 100.0))
    train, test = stimuli[:cut], stimuli[cut:]
    if not train or not test:
        raise InvalidInput(
            f"split of {len(stimuli)} stimuli at {percentage}% leaves an empty part"
        )
    return train, test
