# zooknn

A small k-nearest-neighbour classifier for the zoo animal dataset. Each
animal has a name, 16 integer features and a class label from 1 to 7.
Neighbours can be ranked by Euclidean distance, Hamming distance or
Jaccard similarity.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
zooknn zoo.txt
```

The file holds animal records separated by whitespace: the name, then 16
integer features, then the class label. The first 100 records are read.
The program shows a menu and reads integer choices from standard input:

1. Read from file. This must come first. Every animal read is printed.
2. Show the Hamming distance, Euclidean distance and Jaccard similarity of
   two built-in example vectors.
3. Show the 5 nearest neighbours (as row indices) of a built-in example
   sample under each measure.
4. Predict the class of the example sample under each measure, with k = 4.
5. Report accuracy on a built-in set of 20 test animals under each
   measure, with k = 5.

Any other number exits. Choosing 2 to 5 before the file has been read
ends the program. If the file cannot be opened, "Error opening file" is
printed and the menu is shown again; a file with a missing or non-integer
value is reported the same way. Input that is not a number, or the end of
input, is treated as a choice to exit. Without a file argument the command
prints a usage line and returns status 2.

## Library use

The classifier lives in `zooknn.knn`:

```python
from zooknn.knn import (
    Metric, read_zoo, format_animal, distance_functions,
    find_k_nearest_neighbors, predict_class, find_accuracy,
)

zoo = read_zoo("zoo.txt", 100)
print(format_animal(zoo[0]))

sample = [1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1]

d = distance_functions(sample, zoo[0].features)
print(d.euclidean, d.hamming, d.jaccard)

print(find_k_nearest_neighbors(zoo, sample, 5, Metric.EUCLIDEAN))
print(predict_class(zoo, sample, Metric.JACCARD, 4))
print(find_accuracy(zoo, Metric.HAMMING, zoo[:20], 5))
```

- `Animal` is a frozen dataclass with `name`, `features` (a tuple) and
  `class_label`.
- `read_zoo(path, count=100)` reads `count` records and raises
  `ValueError` if a record is incomplete or holds a non-integer value.
- `distance_functions` returns a `Distances` with `euclidean`, `hamming`
  and `jaccard`. Jaccard similarity is the number of positions where both
  vectors are 1, divided by the number of positions where they are not both
  0; it is NaN when every position is 0 in both. Vectors of different
  length raise `ValueError`.
- `Metric` is an integer enum: `EUCLIDEAN` (1), `HAMMING` (2) and
  `JACCARD` (3). The functions accept either the enum or its integer value.
- `find_k_nearest_neighbors` returns row indices into the dataset. For
  Euclidean and Hamming the closest rows come first; for Jaccard the most
  similar rows come first. `k` must lie between 0 and the dataset size.
- `predict_class` takes the most frequent class among the `k` neighbours.
  When classes tie, the smallest class label wins; with `k = 0` the answer
  is 1. Neighbour class labels outside 1 to 7 raise `ValueError`.
- `find_accuracy` returns the fraction of test animals whose class is
  predicted correctly, and raises `ValueError` for empty test data.