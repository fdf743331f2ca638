# FILE: model_perceptron.py
# Perceptron (un singur neuron) pe porti logice AND / OR / XOR.
# Output:
#  - metrics_perceptron.csv
#  - plot_perceptron_errors.png

import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from model_neuron import Neuron, accuracy, predict_all, train_neuron
from utils_data import expected_values, stimuli_from_arrays
from utils_log import HistorySink, configure_logging

LRATE = 0.1
EPOCHS = 50
METRICS_PATH = "metrics_perceptron.csv"
PLOT_PATH = "plot_perceptron_errors.png"

GATES_X = np.array([
    [0, 0],
    [0, 1],
    [1, 0],
    [1, 1],
], dtype=float)

GATES_Y = {
    "AND": [0, 0, 0, 1],
    "OR": [0, 1, 1, 1],
    "XOR (should fail)": [0, 1, 1, 0],
}


def run_gate(name, stimuli):
    history = HistorySink()
    neuron = Neuron(lrate=LRATE)
    train_neuron(neuron, stimuli, EPOCHS, reset=True, sink=history)

    pred = predict_all(neuron, stimuli)
    correct, pct = accuracy(expected_values(stimuli), pred)
    print(f"{name} -> pred={pred} acc={pct:.2f}% w={neuron.weights} b={neuron.bias:.3f}")

    return {"gate": name, "correct": correct, "accuracy": pct}, history.frame("epoch_end")


def plot_errors(curves, out_png):
    plt.figure(figsize=(8, 4))
    for name, df in curves.items():
        plt.plot(df["epoch"], df["squared_error_prev"], label=name)
    plt.title("Eroare patratica (inainte de update) pe epoca")
    plt.xlabel("Epoca")
    plt.ylabel("Suma erorilor patratice")
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    plt.close()
    print("Saved:", out_png)


def main():
    t0 = time.time()
    configure_logging("INFO")
    print("=== PERCEPTRON (UN NEURON) PE PORTI LOGICE ===")

    rows = []
    curves = {}
    for name, y in GATES_Y.items():
        row, curve = run_gate(name, stimuli_from_arrays(GATES_X, y))
        rows.append(row)
        curves[name] = curve

    pd.DataFrame(rows).to_csv(METRICS_PATH, index=False)
    print("Saved:", METRICS_PATH)

    plot_errors(curves, PLOT_PATH)

    print("Runtime:", round(time.time() - t0, 3), "sec")


if __name__ == "__main__":
    main()
