"""Interactive menu over the zoo k-NN classifier."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from .knn import (
    Animal,
    Metric,
    distance_functions,
    find_accuracy,
    find_k_nearest_neighbors,
    format_animal,
    predict_class,
    read_zoo,
)

K = 5
PREDICT_K = 4

NEW_SAMPLE = (1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1)
VECTOR1 = (1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1)
VECTOR2 = (1, 0, 0, 1, 0, 0, 1, 1, 1, 1, 0, 0, 4, 0, 0, 1)

TEST_DATA = (
    Animal("calf", (1, 0, 0, 1, 0, 0, 0, 1, 1, 1, 0, 0, 4, 1, 1, 1), 1),
    Animal("cheetah", (1, 0, 0, 1, 0, 0, 1, 1, 1, 1, 0, 0, 4, 1, 0, 1), 1),
    Animal("crab", (0, 0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 4, 0, 0, 0), 7),
    Animal("dogfish", (0, 0, 1, 0, 0, 1, 1, 1, 1, 0, 0, 1, 0, 1, 0, 1), 4),
    Animal("elephant", (1, 0, 0, 1, 0, 0, 0, 1, 1, 1, 0, 0, 4, 1, 0, 1), 1),
    Animal("flamingo", (0, 1, 1, 0, 1, 0, 0, 0, 1, 1, 0, 0, 2, 1, 0, 1), 2),
    Animal("fruitbat", (1, 0, 0, 1, 1, 0, 0, 1, 1, 1, 0, 0, 2, 1, 0, 0), 1),
    Animal("gnat", (0, 0, 1, 0, 1, 0, 0, 0, 0, 1, 0, 0, 6, 0, 0, 0), 6),
    Animal("gorilla", (1, 0, 0, 1, 0, 0, 0, 1, 1, 1, 0, 0, 2, 0, 0, 1), 1),
    Animal("haddock", (0, 0, 1, 0, 0, 1, 0, 1, 1, 0, 0, 1, 0, 1, 0, 0), 4),
    Animal("sealion", (1, 0, 0, 1, 0, 1, 1, 1, 1, 1, 0, 1, 2, 1, 0, 1), 1),
    Animal("seasnake", (0, 0, 0, 0, 0, 1, 1, 1, 1, 0, 1, 0, 0, 1, 0, 0), 3),
    Animal("seawasp", (0, 0, 1, 0, 0, 1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0), 7),
    Animal("skimmer", (0, 1, 1, 0, 1, 1, 1, 0, 1, 1, 0, 0, 2, 1, 0, 0), 2),
    Animal("skua", (0, 1, 1, 0, 1, 1, 1, 0, 1, 1, 0, 0, 2, 1, 0, 0), 2),
    Animal("slowworm", (0, 0, 1, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 1, 0, 0), 3),
    Animal("slug", (0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0), 7),
    Animal("sole", (0, 0, 1, 0, 0, 1, 0, 1, 1, 0, 0, 1, 0, 1, 0, 0), 4),
    Animal("sparrow", (0, 1, 1, 0, 1, 0, 0, 0, 1, 1, 0, 0, 2, 1, 0, 0), 2),
    Animal("squirrel", (1, 0, 0, 1, 0, 0, 0, 1, 1, 1, 0, 0, 2, 1, 0, 0), 1),
)

MENU = (
    "\n=== Main Menu ===\n"
    "1) Read from file (MUST do first)\n"
    "2) Distance Functions\n"
    "3) Find K Nearest Neighbors\n"
    "4) Predict Class\n"
    "5) Find Accuracy\n"
    "Enter any other number to exit.\n"
    "Choice: "
)


def _choices(stream: Iterable[str]) -> Iterator[int | None]:
    """Yield integer menu choices; an unreadable token yields None and ends input."""
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                yield None
                return


def _show_distances() -> None:
    result = distance_functions(VECTOR1, VECTOR2)
    print(f"Hamming Distance: {result.hamming}")
    print(f"Euclidean Distance: {result.euclidean:.2f}")
    print(f"Jaccard Similarity: {result.jaccard:.2f}")


def _show_neighbours(data: Sequence[Animal]) -> None:
    for metric in Metric:
        neighbours = find_k_nearest_neighbors(data, NEW_SAMPLE, K, metric)
        listed = "".join(f"{index} " for index in neighbours)
        print(f"Nearest neighbors for new sample with {metric.label}: {listed}")


def _show_predictions(data: Sequence[Animal]) -> None:
    for metric in Metric:
        print(f"Prediction: {predict_class(data, NEW_SAMPLE, metric, PREDICT_K)}")


def _show_accuracy(data: Sequence[Animal]) -> None:
    for metric in Metric:
        accuracy = find_accuracy(data, metric, TEST_DATA, K)
        print(f"Accuracy for {metric.label}: {accuracy:.6f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu loop on the zoo file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: zooknn ZOO_FILE", file=sys.stderr)
        return 2
    path = args[0]

    data: list[Animal] = []
    loaded = False
    choices = _choices(sys.stdin)

    while True:
        print(MENU, end="", flush=True)
        choice = next(choices, None)

        if choice == 1:
            try:
                data = read_zoo(path)
            except OSError:
                print("Error opening file")
                continue
            except ValueError as exc:
                print(f"Error reading file: {exc}")
                continue
            loaded = True
            for animal in data:
                print(format_animal(animal))
        elif not loaded:
            print("Please choose 1 first, program is ending!")
            break
        elif choice == 2:
            _show_distances()
        elif choice == 3:
            _show_neighbours(data)
        elif choice == 4:
            _show_predictions(data)
        elif choice == 5:
            _show_accuracy(data)
        else:
            print("Program is ending!")
            break

    return 0


if __name__ == "__main__":
    raise SystemExit(main())