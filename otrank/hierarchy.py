# A constraint hierarchy: a list of strata, from the top (dominant) to the bottom.
# The constraints within a stratum are not ranked with respect to each other.


class Hierarchy:

	def __init__(self, strata=()):
		self._strata = []
		for stratum in strata:
			self.add_stratum(stratum)

	# Add a new stratum at the bottom. A constraint can only be in one stratum.
	def add_stratum(self, constraints):
		stratum = list(constraints)
		for con in stratum:
			if self.stratum_index(con) is not None or stratum.count(con) > 1:
				raise ValueError('Constraint %s is already in the hierarchy' % con)
		self._strata.append(stratum)
		return self

	# All of the constraints, from top to bottom
	def constraints(self):
		return [con for stratum in self._strata for con in stratum]

	# Which stratum (counting from 0 at the top) the constraint is in, or None
	def stratum_index(self, con):
		for index, stratum in enumerate(self._strata):
			if con in stratum:
				return index
		return None

	def dup(self):
		return Hierarchy(self._strata)

	def __iter__(self):
		return iter(self._strata)

	def __len__(self):
		return len(self._strata)

	def __getitem__(self, index):
		return self._strata[index]

	# Order within a stratum doesn't matter
	def __eq__(self, other):
		if not isinstance(other, Hierarchy):
			return NotImplemented
		if len(self) != len(other):
			return False
		return all(set(mine) == set(theirs) for mine, theirs in zip(self._strata, other._strata))

	def __str__(self):
		return ' '.join('[%s]' % ' '.join(str(con) for con in stratum) for stratum in self._strata)

	def __repr__(self):
		return 'Hierarchy(%s)' % self
