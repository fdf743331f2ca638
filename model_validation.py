# FILE: model_validation.py
# Validare pentru perceptron: k-fold si random subsampling.
# Fiecare fold antreneaza o copie a neuronului (reset=True), deci neuronul
# apelantului nu se modifica; se foloseste doar rata lui de invatare.

import copy

import numpy as np

from model_neuron import InvalidInput, accuracy, predict_all, train_neuron
from utils_data import expected_values, shuffle_stimuli, split_stimuli
from utils_log import NULL_SINK


def _train_and_score(neuron, train, test, epochs, sink):
    fold_neuron = copy.deepcopy(neuron)
    train_neuron(fold_neuron, train, epochs, reset=True, sink=sink)
    return accuracy(expected_values(test), predict_all(fold_neuron, test), sink=sink).percentage


def k_fold_validation(neuron, stimuli, epochs, k, shuffle=True, rng=None, sink=NULL_SINK):
    stimuli = list(stimuli)
    if not 2 <= k <= len(stimuli):
        raise InvalidInput(f"k must be between 2 and {len(stimuli)}, got {k}")

    if shuffle:
        stimuli = shuffle_stimuli(stimuli, rng)

    # folduri cat mai egale ca marime
    bounds = np.linspace(0, len(stimuli), k + 1).astype(int)

    scores = []
    for fold in range(k):
        lo, hi = bounds[fold], bounds[fold + 1]
        test = stimuli[lo:hi]
        train = stimuli[:lo] + stimuli[hi:]

        score = _train_and_score(neuron, train, test, epochs, sink)
        sink.record("fold_end", {"fold": fold + 1, "train_size": len(train), "test_size": len(test), "accuracy": score})
        scores.append(score)

    return scores


def random_subsampling_validation(neuron, stimuli, percentage, epochs, folds, rng=None, sink=NULL_SINK):
    stimuli = list(stimuli)
    if folds < 1:
        raise InvalidInput(f"folds must be >= 1, got {folds}")

    gen = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

    scores = []
    for fold in range(folds):
        train, test = split_stimuli(stimuli, percentage, rng=gen)

        score = _train_and_score(neuron, train, test, epochs, sink)
        sink.record("fold_end", {"fold": fold + 1, "train_size": len(train), "test_size": len(test), "accuracy": score})
        scores.append(score)

    return scores
