import itertools
import math
import random
import typing

import clipgen.constants

T = typing.TypeVar("T")
SequenceT = typing.TypeVar("SequenceT", str, list, tuple)


def rand_int (rng: random.Random, low: int, high: int) -> int:

	"""
	Return a random integer with ``low <= result < high``.

	An empty range (``high <= low``) returns ``low``.
	"""

	if high <= low:
		return low

	return math.floor(low + rng.random() * (high - low))


def evenly_trim (sequence: SequenceT, desired_length: int, partition_count: int) -> SequenceT:

	"""Shrink a sequence by trimming the end of each of its equal partitions.

	The input is cut into ``partition_count`` contiguous partitions of
	``len(sequence) // partition_count`` items, the first
	``desired_length // partition_count`` items of each partition are kept, and
	the kept slices are joined in their original order. Items beyond the last
	whole partition are dropped. Trimming every partition equally keeps a
	sequence built from repeated blocks aligned to its block boundaries.

	Parameters:
		sequence: String, list or tuple to trim. The result has the same type.
		desired_length: Target length. Exact when both lengths divide evenly
			by ``partition_count``.
		partition_count: Number of partitions.

	Example:
		```python
		evenly_trim("abcdefgh", 4, 2)   # "abef"
		```
	"""

	if partition_count < 1:
		raise ValueError(f"partition_count must be at least 1, got {partition_count}")

	if desired_length < 0:
		raise ValueError(f"desired_length cannot be negative, got {desired_length}")

	partition_size = len(sequence) // partition_count
	keep = min(desired_length // partition_count, partition_size)

	trimmed = sequence[:0]

	for index in range(partition_count):
		start = index * partition_size
		trimmed = trimmed + sequence[start:start + keep]

	return trimmed


def trim_pattern (pattern: str, num_beats: int, repeat_count: int) -> str:

	"""Trim a pattern to ``num_beats`` slots, partitioned by its repeat count."""

	return evenly_trim(pattern, num_beats, repeat_count)


def trim_notes (notes: typing.List[T], pattern: str, repeat_count: int) -> typing.List[T]:

	"""Trim notes to the number of onsets in an already trimmed pattern."""

	return evenly_trim(list(notes), count_onsets(pattern), repeat_count)


def repeat_to_length (sequence: typing.Sequence[T], length: int) -> typing.List[T]:

	"""Cycle through a sequence until exactly ``length`` items are produced."""

	if not sequence:
		raise ValueError("Cannot repeat an empty sequence")

	return list(itertools.islice(itertools.cycle(sequence), length))


def count_onsets (pattern: str) -> int:

	"""Return how many notes a pattern needs."""

	return pattern.count(clipgen.constants.NOTE_ONSET)
