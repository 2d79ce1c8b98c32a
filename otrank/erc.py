# Elementary Ranking Conditions (ERCs), in the "comparative tableau" format of Prince (2000, 2002).
# For each constraint, an ERC records whether the constraint prefers the winner (W), the loser (L), or neither (e).
import numpy

from .errors import InputMismatch

W = 'W'
L = 'L'
E = 'e'


class Erc:

	def __init__(self, constraints, label=''):
		self._constraints = list(constraints)
		# Every constraint starts out with no preference
		self._prefs = dict((con, E) for con in self._constraints)
		self.label = label
		self._frozen = False

	@property
	def constraint_list(self):
		return self._constraints

	def _set(self, con, pref):
		if self._frozen:
			raise AttributeError('Cannot change the preferences of a frozen ERC')
		if con not in self._prefs:
			raise KeyError('Constraint %s is not in this ERC' % con)
		self._prefs[con] = pref

	def set_w(self, con):
		self._set(con, W)

	def set_l(self, con):
		self._set(con, L)

	def set_e(self, con):
		self._set(con, E)

	def is_w(self, con):
		return self._prefs[con] == W

	def is_l(self, con):
		return self._prefs[con] == L

	def is_e(self, con):
		return self._prefs[con] == E

	def preference(self, con):
		return self._prefs[con]

	# No constraint prefers the loser, so any ranking at all satisfies this ERC
	def trivially_valid(self):
		return not any(pref == L for pref in self._prefs.values())

	# Some constraint prefers the loser, and none prefers the winner, so no ranking can satisfy this ERC
	def trivially_invalid(self):
		prefs = self._prefs.values()
		return L in prefs and W not in prefs

	def freeze(self):
		self._frozen = True
		return self

	def __eq__(self, other):
		if not isinstance(other, Erc):
			return NotImplemented
		return self._prefs == other._prefs

	def __hash__(self):
		return hash(frozenset(self._prefs.items()))

	def __str__(self):
		return ' '.join('%s:%s' % (con, self._prefs[con]) for con in self._constraints)

	def __repr__(self):
		return '<%s %s>' % (self.__class__.__name__, self)


# An ERC built from a winner and a loser for the same input.
# A constraint prefers the winner if the winner has fewer violations, and the loser if the loser has fewer.
class WinLosePair(Erc):

	def __init__(self, winner, loser, label=''):
		if winner.input != loser.input:
			raise InputMismatch('The winner (%s) and loser (%s) do not have the same input.' % (winner, loser))
		super().__init__(winner.constraint_list, label)
		self.winner = winner
		self.loser = loser
		# Positive differences are W's, negative ones are L's, and zero is e
		differences = numpy.sign(loser.violation_vector(self._constraints) - winner.violation_vector(self._constraints))
		for con, difference in zip(self._constraints, differences):
			if difference > 0:
				self.set_w(con)
			elif difference < 0:
				self.set_l(con)
		# A pair is fixed by its candidates
		self.freeze()

	def __str__(self):
		text = '%s %s %s %s' % (self.winner.input, self.winner.output, self.loser.output, super().__str__())
		if self.label:
			return '%s %s' % (self.label, text)
		return text
