import numpy as np
import pytest

from model_neuron import InvalidInput, LengthMismatch, Stimulus
from utils_data import (
    encode_labels,
    expected_values,
    load_stimuli_csv,
    shuffle_stimuli,
    split_stimuli,
    stimuli_from_arrays,
)


@pytest.fixture
def sonar_like(tmp_path):
    path = tmp_path / "sonar.csv"
    path.write_text(
        "0.02,0.37,R\n"
        "0.45,0.10,M\n"
        "0.10,0.90,R\n"
        "0.80,0.55,M\n"
    )
    return path


def test_encode_labels_sorted():
    y, mapping = encode_labels(["R", "M", "R"])
    assert mapping == {"M": 0.0, "R": 1.0}
    np.testing.assert_array_equal(y, [1.0, 0.0, 1.0])


def test_encode_labels_keeps_binary_numeric_values():
    y, _ = encode_labels([1, 1, 1])
    np.testing.assert_array_equal(y, [1.0, 1.0, 1.0])
    y, _ = encode_labels(np.array([0.0, 0.0]))
    np.testing.assert_array_equal(y, [0.0, 0.0])
    y, _ = encode_labels([1, 0, 1])
    np.testing.assert_array_equal(y, [1.0, 0.0, 1.0])


def test_load_stimuli_csv_single_class(tmp_path):
    path = tmp_path / "ones.csv"
    path.write_text("0.1,0.2,1\n0.3,0.4,1\n")
    assert expected_values(load_stimuli_csv(path)) == [1.0, 1.0]


def test_encode_labels_rejects_multiclass():
    with pytest.raises(InvalidInput):
        encode_labels(["a", "b", "c"])


def test_load_stimuli_csv(sonar_like):
    stimuli = load_stimuli_csv(sonar_like)
    assert len(stimuli) == 4
    assert all(isinstance(s, Stimulus) for s in stimuli)
    np.testing.assert_array_equal(stimuli[0].dimensions, [0.02, 0.37])
    assert expected_values(stimuli) == [1.0, 0.0, 1.0, 0.0]


def test_load_stimuli_csv_normalized(sonar_like):
    stimuli = load_stimuli_csv(sonar_like, normalize=True)
    X = np.array([s.dimensions for s in stimuli])
    np.testing.assert_allclose(X.min(axis=0), [0.0, 0.0])
    np.testing.assert_allclose(X.max(axis=0), [1.0, 1.0])


def test_load_stimuli_csv_label_column(tmp_path):
    path = tmp_path / "first.csv"
    path.write_text("1,3.0,4.0\n0,5.0,6.0\n")
    stimuli = load_stimuli_csv(path, label_col=0)
    np.testing.assert_array_equal(stimuli[1].dimensions, [5.0, 6.0])
    assert expected_values(stimuli) == [1.0, 0.0]


def test_stimuli_from_arrays_length_mismatch():
    with pytest.raises(LengthMismatch):
        stimuli_from_arrays([[0, 1], [1, 0]], [1])


def test_stimuli_from_arrays_single_feature():
    stimuli = stimuli_from_arrays([1.0, 2.0, 3.0], [0, 0, 1])
    assert [len(s.dimensions) for s in stimuli] == [1, 1, 1]


def test_shuffle_keeps_all_stimuli():
    stimuli = stimuli_from_arrays(np.arange(10), np.arange(10) % 2)
    shuffled = shuffle_stimuli(stimuli, rng=3)
    assert len(shuffled) == 10
    assert {id(s) for s in shuffled} == {id(s) for s in stimuli}
    assert shuffle_stimuli(stimuli, rng=3) == shuffled


def test_split_stimuli_sizes():
    stimuli = stimuli_from_arrays(np.arange(10), np.arange(10) % 2)
    train, test = split_stimuli(stimuli, 70, rng=0)
    assert len(train) == 7
    assert len(test) == 3

    train, test = split_stimuli(stimuli, 70, shuffle=False)
    assert train == stimuli[:7]
    assert test == stimuli[7:]


@pytest.mark.parametrize("percentage", [0, 100, 1, 99])
def test_split_stimuli_rejects_empty_parts(percentage):
    stimuli = stimuli_from_arrays(np.arange(10), np.arange(10) % 2)
    with pytest.raises(InvalidInput):
        split_stimuli(stimuli, percentage)
