import dataclasses
import math
import random
import typing

import clipgen.errors


Matrix = typing.Sequence[typing.Sequence[float]]

ROW_SUM_TOLERANCE = 1e-6


@dataclasses.dataclass(frozen=True)
class Link:

	"""
	A transition from one node to the node at arena index ``target``.

	The link is taken when the chain's random draw falls in ``[lower, upper)``.
	"""

	target: int
	lower: float
	upper: float

	def contains (self, roll: float) -> bool:

		return self.lower <= roll < self.upper


@dataclasses.dataclass
class Node:

	"""
	A chain state. ``value`` is the rest count returned when the node is entered.
	"""

	value: int
	links: typing.List[Link] = dataclasses.field(default_factory=list)


def validate_matrix (matrix: Matrix) -> None:

	"""
	Check that a transition matrix is square and row-stochastic.

	Raises:
		ConfigurationError: If the matrix is empty or ragged, holds a value
			outside ``[0, 1]`` (including NaN), or a row does not sum to 1.
	"""

	if not matrix:
		raise clipgen.errors.ConfigurationError("Transition matrix cannot be empty")

	size = len(matrix)

	for row_index, row in enumerate(matrix):

		if len(row) != size:
			raise clipgen.errors.ConfigurationError(
				f"Transition matrix must be square: row {row_index} has {len(row)} entries, expected {size}"
			)

		for col_index, probability in enumerate(row):
			if not 0.0 <= probability <= 1.0:
				raise clipgen.errors.ConfigurationError(
					f"Invalid probability {probability!r} at row {row_index}, column {col_index}"
				)

		row_sum = math.fsum(row)

		if abs(row_sum - 1.0) > ROW_SUM_TOLERANCE:
			raise clipgen.errors.ConfigurationError(
				f"Transition matrix row {row_index} sums to {row_sum}, expected 1"
			)


def build_nodes (matrix: Matrix) -> typing.List[Node]:

	"""
	Build the node arena for a validated matrix.

	One node per row, valued by its row index. Each node gets one link per
	column, in column order, whose bounds are the row's running total divided
	by the row total. The last bound is therefore exactly ``1.0`` and the links
	cover ``[0, 1)`` with no gap or overlap.
	"""

	nodes = [Node(value=index) for index in range(len(matrix))]

	for row_index, row in enumerate(matrix):

		cumulative: typing.List[float] = []
		running = 0.0

		for probability in row:
			running += probability
			cumulative.append(running)

		total = cumulative[-1]
		lower = 0.0

		for col_index, bound in enumerate(cumulative):
			upper = bound / total
			nodes[row_index].links.append(Link(target=col_index, lower=lower, upper=upper))
			lower = upper

	return nodes


class TransitionChain:

	"""
	A weighted random walk over rest-count states defined by a transition matrix.
	"""

	def __init__ (
		self,
		matrix: Matrix,
		initial_state: int = 0,
		rng: typing.Optional[random.Random] = None
	) -> None:

		"""
		Validate the matrix, build the node arena and seed the chain.

		Parameters:
			matrix: Square, row-stochastic table. Row ``i`` column ``j`` is the
				probability of moving from ``i`` rests to ``j`` rests.
			initial_state: Row index the chain starts on (default 0 rests).
			rng: Random source for transitions.
		"""

		validate_matrix(matrix)

		if not 0 <= initial_state < len(matrix):
			raise clipgen.errors.ConfigurationError(
				f"Initial state {initial_state} is outside the {len(matrix)}-state matrix"
			)

		self.nodes = build_nodes(matrix)
		self.rng = rng or random.Random()
		self.state = initial_state


	def step (self) -> int:

		"""
		Advance to the next state and return its rest count.
		"""

		roll = self.rng.random()

		for link in self.nodes[self.state].links:
			if link.contains(roll):
				self.state = link.target
				return self.nodes[self.state].value

		raise clipgen.errors.ConfigurationError(
			f"Random draw {roll} matched no transition from state {self.state}"
		)


	def get_state (self) -> int:

		"""
		Return the current rest count.
		"""

		return self.nodes[self.state].value
