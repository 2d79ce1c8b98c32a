# Constraints: a name, an optional short id, a type (markedness or faithfulness), and optionally a function that counts violations.
# Constraints are compared and hashed by name only, so the same constraint object should be shared by every candidate, ERC and ERC list in a grammar.
from .errors import InvalidConstraintType, NoEvaluationFunction

MARK = 'markedness'
FAITH = 'faithfulness'
CONSTRAINT_TYPES = (MARK, FAITH)


class Constraint:

	def __init__(self, name, type=MARK, id=None, eval_function=None):
		if type not in CONSTRAINT_TYPES:
			raise InvalidConstraintType("Constraint %s has type '%s'; it must be one of %s" % (name, type, ', '.join(CONSTRAINT_TYPES)))
		self._name = name
		self._type = type
		# If no short id is given, the name does double duty
		if id is None:
			id = name
		self._id = str(id)
		self._eval_function = eval_function

	@property
	def name(self):
		return self._name

	@property
	def id(self):
		return self._id

	@property
	def type(self):
		return self._type

	def is_markedness(self):
		return self._type == MARK

	def is_faithfulness(self):
		return self._type == FAITH

	# Count the violations that a candidate incurs.
	def evaluate(self, candidate):
		if self._eval_function is None:
			raise NoEvaluationFunction('Constraint %s has no evaluation function' % self._name)
		violations = self._eval_function(candidate)
		if violations < 0:
			raise ValueError('Constraint %s assigned %s violations to %s' % (self._name, violations, candidate))
		return int(violations)

	def __eq__(self, other):
		if not isinstance(other, Constraint):
			return NotImplemented
		return self._name == other._name

	def __hash__(self):
		return hash(self._name)

	def __str__(self):
		return self._name

	def __repr__(self):
		return 'Constraint(%r, %r)' % (self._name, self._type)
