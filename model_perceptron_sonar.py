# FILE: model_perceptron_sonar.py
# Perceptron pe dataset-ul Sonar (60 de feature-uri, eticheta R/M pe ultima coloana).
# Validare: k-fold + random subsampling.
# Output: metrics_perceptron_sonar.csv

import os
import sys
import time

import numpy as np
import pandas as pd

from model_neuron import Neuron
from model_validation import k_fold_validation, random_subsampling_validation
from utils_data import load_stimuli_csv
from utils_log import LoggingSink, configure_logging

DATA_PATH = "sonar.csv"
METRICS_PATH = "metrics_perceptron_sonar.csv"

LRATE = 0.01
EPOCHS = 500
K_FOLDS = 10
TRAIN_PERCENTAGE = 67.0
SUBSAMPLING_FOLDS = 10
SEED = 42


def summarize(name, scores):
    print(f"{name} -> scoruri={[round(s, 2) for s in scores]}")
    print(f"{name} -> medie={np.mean(scores):.2f}% std={np.std(scores):.2f}")
    return {"validation": name, "mean_accuracy": float(np.mean(scores)), "std_accuracy": float(np.std(scores))}


def main():
    t0 = time.time()
    configure_logging("INFO")
    print("=== PERCEPTRON PE SONAR ===")

    if not os.path.exists(DATA_PATH):
        print("[MISS]", DATA_PATH, "- sar peste validare.")
        return 0

    # feature-urile sonar sunt deja in [0, 1], dar scalarea nu strica
    stimuli = load_stimuli_csv(DATA_PATH, normalize=True)
    print("Citit:", DATA_PATH)
    print("Stimuli:", len(stimuli), "Dimensiuni:", len(stimuli[0].dimensions))

    sink = LoggingSink()
    template = Neuron(lrate=LRATE)
    rng = np.random.default_rng(SEED)

    rows = [
        summarize("k-fold", k_fold_validation(template, stimuli, EPOCHS, K_FOLDS, rng=rng, sink=sink)),
        summarize(
            "random-subsampling",
            random_subsampling_validation(
                template, stimuli, TRAIN_PERCENTAGE, EPOCHS, SUBSAMPLING_FOLDS, rng=rng, sink=sink
            ),
        ),
    ]

    pd.DataFrame(rows).to_csv(METRICS_PATH, index=False)
    print("Saved:", METRICS_PATH)

    print("Runtime:", round(time.time() - t0, 3), "sec")
    return 0


if __name__ == "__main__":
    sys.exit(main())
