# FILE: model_neuron.py
# Perceptron cu un singur neuron (regula de invatare a perceptronului).
#
# Ideea generala:
# Neuronul calculeaza suma ponderata w·x + b si raspunde 1 daca suma e >= 0,
# altfel 0 (activare treapta). La antrenare, fiecare exemplu modifica imediat
# ponderile (invatare online), iar exemplul urmator vede ponderile deja
# actualizate.

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from utils_log import NULL_SINK
from utils_math import scalar_product

SCALING_FACTOR = 1e-13


class NeuronError(ValueError):
    pass


class LengthMismatch(NeuronError):
    pass


class InvalidInput(NeuronError):
    pass


class PreconditionViolation(NeuronError):
    pass


def _as_vector(values) -> np.ndarray:
    return np.asarray(values, dtype=float).reshape(-1)


@dataclass
class Neuron:
    weights: np.ndarray = field(default_factory=lambda: np.zeros(0))
    bias: float = 0.0
    lrate: float = 0.0

    # rezervate pentru retele cu mai multe straturi; nefolosite aici
    value: float = 0.0
    delta: float = 0.0

    def __post_init__(self):
        # copie proprie, mereu modificabila
        self.weights = np.array(self.weights, dtype=float).reshape(-1)


@dataclass(frozen=True, eq=False)
class Stimulus:
    dimensions: np.ndarray
    expected: float

    def __post_init__(self):
        dims = np.array(self.dimensions, dtype=float).reshape(-1)
        dims.setflags(write=False)
        object.__setattr__(self, "dimensions", dims)
        object.__setattr__(self, "expected", float(self.expected))


class Accuracy(NamedTuple):
    correct: int
    percentage: float


def _make_rng(rng):
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_neuron_init(neuron: Neuron, dim: int, rng=None, sink=NULL_SINK) -> Neuron:
    """
    Initializeaza ponderile, bias-ul si rata de invatare cu valori
    din distributia normala standard, scalate cu SCALING_FACTOR.

    rng poate fi un np.random.Generator sau un seed (int); None = fara seed.
    """
    if dim < 0:
        raise InvalidInput(f"dimension must be >= 0, got {dim}")

    gen = _make_rng(rng)

    neuron.weights = gen.standard_normal(dim) * SCALING_FACTOR
    neuron.bias = float(gen.standard_normal()) * SCALING_FACTOR
    neuron.lrate = float(gen.standard_normal()) * SCALING_FACTOR
    neuron.value = float(gen.standard_normal()) * SCALING_FACTOR
    neuron.delta = float(gen.standard_normal()) * SCALING_FACTOR

    sink.record("neuron_init", {"weights": neuron.weights, "bias": neuron.bias, "lrate": neuron.lrate})
    return neuron


def _check_dimensions(neuron: Neuron, stimulus: Stimulus):
    n_w = len(_as_vector(neuron.weights))
    n_x = len(stimulus.dimensions)
    if n_w != n_x:
        raise PreconditionViolation(
            f"neuron has {n_w} weights but stimulus has {n_x} dimensions"
        )


def predict(neuron: Neuron, stimulus: Stimulus) -> float:
    _check_dimensions(neuron, stimulus)
    if scalar_product(neuron.weights, stimulus.dimensions) + neuron.bias < 0.0:
        return 0.0
    return 1.0


def predict_all(neuron: Neuron, stimuli):
    return [predict(neuron, s) for s in stimuli]


def update_weights(neuron: Neuron, stimulus: Stimulus, sink=NULL_SINK):
    """
    Un singur pas al regulii perceptronului pentru un exemplu.
    Intoarce (eroare inainte, eroare dupa) actualizare.
    """
    # eroarea cu ponderile curente
    prev_error = stimulus.expected - predict(neuron, stimulus)

    # noile valori se calculeaza inainte de a modifica neuronul
    bias = neuron.bias + neuron.lrate * prev_error
    weights = _as_vector(neuron.weights) + neuron.lrate * prev_error * stimulus.dimensions
    neuron.bias, neuron.weights = bias, weights

    # eroarea cu ponderile actualizate
    post_error = stimulus.expected - predict(neuron, stimulus)

    sink.record("weights_update", {
        "weights": neuron.weights.copy(),
        "bias": neuron.bias,
        "prev_error": prev_error,
        "post_error": post_error,
    })
    return prev_error, post_error


def train_neuron(neuron: Neuron, stimuli, epochs: int, reset=False, sink=NULL_SINK):
    """
    Antreneaza neuronul pe stimuli, pentru exact `epochs` epoci (fara oprire timpurie).

    reset=True: ponderile devin zero (dimensiunea primului stimul) si bias-ul 0;
                rata de invatare ramane cea existenta.
    reset=False: se continua de la ponderile curente.
    """
    stimuli = list(stimuli)
    if not stimuli:
        raise InvalidInput("cannot train on an empty stimulus set")
    if epochs < 1:
        raise InvalidInput(f"epochs must be >= 1, got {epochs}")

    if reset:
        neuron.weights = np.zeros(len(stimuli[0].dimensions))
        neuron.bias = 0.0

    for epoch in range(epochs):
        squared_prev, squared_post = 0.0, 0.0

        # fiecare pas foloseste ponderile lasate de pasul anterior
        for stimulus in stimuli:
            prev_error, post_error = update_weights(neuron, stimulus, sink=sink)
            squared_prev += prev_error * prev_error
            squared_post += post_error * post_error

        sink.record("epoch_end", {
            "epoch": epoch + 1,
            "squared_error_prev": squared_prev,
            "squared_error_post": squared_post,
        })


def accuracy(actual, predicted, sink=NULL_SINK) -> Accuracy:
    actual = list(actual)
    predicted = list(predicted)

    if len(actual) != len(predicted):
        sink.record("accuracy_length_mismatch", {
            "actual_len": len(actual),
            "predicted_len": len(predicted),
        })
        raise LengthMismatch(
            f"cannot compare {len(actual)} actual values with {len(predicted)} predictions"
        )
    if not actual:
        raise InvalidInput("cannot compute accuracy of empty sequences")

    correct = sum(1 for a, p in zip(actual, predicted) if a == p)
    return Accuracy(correct, correct / len(actual) * 100.0)
