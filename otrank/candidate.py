# A candidate is an input, an output, and a list of violation counts (one for each constraint).
# Two candidates are the same candidate if they have the same input and output; the violations are derived from those and aren't compared.
import numpy


class Candidate:

	def __init__(self, input, output, constraints):
		self.input = input
		self.output = output
		# Keep our own list, so that the caller can't change the constraints out from under us
		self._constraints = list(constraints)
		self._violations = {}
		self.label = None
		self.remark = None
		self._frozen = False

	@property
	def constraint_list(self):
		return self._constraints

	def has_constraint(self, con):
		return con in self._constraints

	def set_viols(self, con, violation_count):
		if self._frozen:
			raise AttributeError('Cannot set violations of frozen candidate %s' % self)
		self._violations[con] = violation_count

	def get_viols(self, con):
		return self._violations.get(con)

	# Fill in the violations by asking each constraint to evaluate this candidate
	def evaluate(self):
		for con in self._constraints:
			self.set_viols(con, con.evaluate(self))
		return self

	# Once a candidate has been fully evaluated, it shouldn't change any more
	def freeze(self):
		self._frozen = True
		return self

	def is_frozen(self):
		return self._frozen

	def dup(self):
		copy = Candidate(self.input, self.output, self._constraints)
		copy._violations = dict(self._violations)
		copy.label = self.label
		copy.remark = self.remark
		return copy

	# The violations as a numpy vector, in the order of the constraint list (or of the constraints given)
	def violation_vector(self, constraints=None):
		if constraints is None:
			constraints = self._constraints
		violations = []
		for con in constraints:
			count = self._violations.get(con)
			if count is None:
				raise ValueError('Candidate %s has no violation count for constraint %s' % (self, con))
			violations.append(count)
		return numpy.array(violations, dtype=int)

	# Do the two candidates have exactly the same violation counts?
	def ident_viols(self, other):
		return all(self.get_viols(con) == other.get_viols(con) for con in self._constraints)

	# A candidate harmonically bounds another if it does no worse on any constraint, and better on at least one
	def harmonically_bounds(self, other):
		difference = other.violation_vector(self._constraints) - self.violation_vector()
		return bool(numpy.all(difference >= 0) and numpy.any(difference > 0))

	def __eq__(self, other):
		if not isinstance(other, Candidate):
			return NotImplemented
		return self.input == other.input and self.output == other.output

	def __hash__(self):
		return hash((self.input, self.output))

	def __str__(self):
		if self.label:
			label_string = '%s: ' % self.label
		else:
			label_string = ''
		# Violations that haven't been assigned yet are shown as '?'
		viol_strings = []
		for con in self._constraints:
			if con in self._violations:
				viol_strings.append('%s:%s' % (con, self._violations[con]))
			else:
				viol_strings.append('%s:?' % con)
		text = '%s%s --> %s  %s' % (label_string, self.input, self.output, ' '.join(viol_strings))
		if self.remark:
			text += '  %s' % self.remark
		return text

	def __repr__(self):
		return 'Candidate(%r, %r)' % (self.input, self.output)
