"""k-nearest-neighbour classification of the zoo dataset."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from itertools import islice
from os import PathLike

NUM_FEATURES = 16
NUM_SAMPLES = 100
NUM_CLASSES = 7
NUM_TEST_DATA = 20

# One record: name, NUM_FEATURES feature values, class label.
_COLUMNS = NUM_FEATURES + 2


class Metric(IntEnum):
    """Which measure decides how near two samples are."""

    EUCLIDEAN = 1
    HAMMING = 2
    JACCARD = 3

    @property
    def label(self) -> str:
        """Human-readable name of the measure."""
        return {
            Metric.EUCLIDEAN: "Euclidean distance",
            Metric.HAMMING: "Hamming distance",
            Metric.JACCARD: "Jaccard similarity",
        }[self]


@dataclass(frozen=True)
class Animal:
    """One row of the zoo dataset."""

    name: str
    features: tuple[int, ...]
    class_label: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))


@dataclass(frozen=True)
class Distances:
    """All three measures between two feature vectors."""

    euclidean: float
    hamming: int
    jaccard: float


def read_zoo(path: str | PathLike[str], count: int = NUM_SAMPLES) -> list[Animal]:
    """Read ``count`` whitespace-separated animal records from ``path``."""
    with open(path, encoding="utf-8") as handle:
        tokens = iter(handle.read().split())

    animals = []
    for row_number in range(1, count + 1):
        row = list(islice(tokens, _COLUMNS))
        if len(row) < _COLUMNS:
            raise ValueError(f"record {row_number} is incomplete: expected {_COLUMNS} fields")
        name, *numbers = row
        try:
            values = [int(token) for token in numbers]
        except ValueError as exc:
            raise ValueError(f"record {row_number} holds a non-integer value") from exc
        animals.append(Animal(name, tuple(values[:-1]), values[-1]))
    return animals


def format_animal(animal: Animal) -> str:
    """Render an animal as its name, features and class label, space separated."""
    return " ".join([animal.name, *map(str, animal.features), str(animal.class_label)])


def distance_functions(vector1: Sequence[int], vector2: Sequence[int]) -> Distances:
    """Compute Euclidean distance, Hamming distance and Jaccard similarity."""
    if len(vector1) != len(vector2):
        raise ValueError("vectors must have the same length")
    pairs = list(zip(vector1, vector2))

    hamming = sum(a != b for a, b in pairs)
    euclidean = math.sqrt(sum((a - b) ** 2 for a, b in pairs))

    both_one = sum(a == 1 and b == 1 for a, b in pairs)
    both_zero = sum(a == 0 and b == 0 for a, b in pairs)
    denominator = len(pairs) - both_zero
    jaccard = both_one / denominator if denominator else math.nan

    return Distances(euclidean=euclidean, hamming=hamming, jaccard=jaccard)


def _score(distances: Distances, metric: Metric) -> float:
    if metric is Metric.EUCLIDEAN:
        return distances.euclidean
    if metric is Metric.HAMMING:
        return float(distances.hamming)
    return distances.jaccard


def _quicksort_order(scores: Sequence[float], ascending: bool) -> list[int]:
    """Return positions of ``scores`` in sorted order, using Lomuto quicksort.

    The partition scheme fixes the order in which ties come out.
    """
    values = list(scores)
    order = list(range(len(values)))
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = values[high]
        boundary = low
        for j in range(low, high):
            value = values[j]
            if (value < pivot) if ascending else (value >= pivot):
                values[boundary], values[j] = values[j], values[boundary]
                order[boundary], order[j] = order[j], order[boundary]
                boundary += 1
        values[boundary], values[high] = values[high], values[boundary]
        order[boundary], order[high] = order[high], order[boundary]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))
    return order


def find_k_nearest_neighbors(
    data_zoo: Sequence[Animal],
    new_sample: Sequence[int],
    k: int,
    metric: Metric | int,
) -> list[int]:
    """Return the indices into ``data_zoo`` of the ``k`` samples nearest ``new_sample``."""
    metric = Metric(metric)
    if not 0 <= k <= len(data_zoo):
        raise ValueError(f"k must be between 0 and {len(data_zoo)}, got {k}")
    scores = [_score(distance_functions(new_sample, animal.features), metric) for animal in data_zoo]
    # Similarity grows with nearness, distances shrink with it.
    order = _quicksort_order(scores, ascending=metric is not Metric.JACCARD)
    return order[:k]


def predict_class(
    data_zoo: Sequence[Animal],
    new_sample: Sequence[int],
    metric: Metric | int,
    k: int,
) -> int:
    """Predict the most frequent class among the ``k`` nearest neighbours.

    Ties go to the smaller class label; with no neighbours the answer is 1.
    """
    neighbours = find_k_nearest_neighbors(data_zoo, new_sample, k, metric)
    counts = Counter(data_zoo[index].class_label for index in neighbours)
    invalid = sorted(label for label in counts if not 1 <= label <= NUM_CLASSES)
    if invalid:
        raise ValueError(f"class labels out of range 1..{NUM_CLASSES}: {invalid}")
    return max(range(1, NUM_CLASSES + 1), key=lambda label: counts[label])


def find_accuracy(
    data_zoo: Sequence[Animal],
    metric: Metric | int,
    test_data: Sequence[Animal],
    k: int,
) -> float:
    """Fraction of ``test_data`` whose class is predicted correctly."""
    if not test_data:
        raise ValueError("test data is empty")
    correct = sum(
        predict_class(data_zoo, sample.features, metric, k) == sample.class_label
        for sample in test_data
    )
    return correct / len(test_data)