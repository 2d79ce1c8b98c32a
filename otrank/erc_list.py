# A list of ERCs, all defined over the same set of constraints.
# The list remembers whether its ERCs are consistent (that is, whether RCD can rank all of the constraints), and forgets it whenever an ERC is added.
import logging

from .erc import WinLosePair
from .errors import StructuralMismatch
from .rcd import Rcd

logger = logging.getLogger(__name__)


class ErcList:

	def __init__(self, constraints, label=''):
		self._constraints = list(constraints)
		self._constraint_set = set(self._constraints)
		self._list = []
		self.label = label
		# The RCD result, computed only when someone asks about consistency
		self._rcd_result = None

	# An ERC list with one winner-loser pair for each competitor of the winner
	@classmethod
	def new_from_competition(cls, winner, competition):
		erc_list = cls(winner.constraint_list)
		for loser in competition:
			if loser != winner:
				erc_list.add(WinLosePair(winner, loser))
		return erc_list

	@property
	def constraint_list(self):
		return self._constraints

	def add(self, erc):
		# Same number of constraints, and the same constraints
		if len(erc.constraint_list) != len(self._constraints):
			raise StructuralMismatch('Cannot add an ERC with %s constraints to a list with %s constraints' % (len(erc.constraint_list), len(self._constraints)))
		if set(erc.constraint_list) != self._constraint_set:
			raise StructuralMismatch('Cannot add an ERC with different constraints: %s' % erc)
		self._list.append(erc)
		self._rcd_result = None
		return self

	def add_all(self, ercs):
		for erc in ercs:
			self.add(erc)
		return self

	def find_all(self, predicate):
		return ErcList(self._constraints).add_all(erc for erc in self._list if predicate(erc))

	def reject(self, predicate):
		return ErcList(self._constraints).add_all(erc for erc in self._list if not predicate(erc))

	# Two new lists: the ERCs satisfying the predicate, and the rest
	def partition(self, predicate):
		true_list = ErcList(self._constraints)
		false_list = ErcList(self._constraints)
		for erc in self._list:
			if predicate(erc):
				true_list.add(erc)
			else:
				false_list.add(erc)
		return true_list, false_list

	# A new list with the same ERC objects; adding to the copy doesn't change the original
	def dup(self):
		copy = ErcList(self._constraints, self.label)
		copy._list = list(self._list)
		return copy

	def to_list(self):
		return list(self._list)

	def rcd(self):
		if self._rcd_result is None:
			self._rcd_result = Rcd(self)
			logger.debug('Checked consistency of %s ERCs: %s', len(self._list), self._rcd_result.consistent())
		return self._rcd_result

	def consistent(self):
		return self.rcd().consistent()

	def __iter__(self):
		return iter(self._list)

	def __len__(self):
		return len(self._list)

	def __str__(self):
		return '\n'.join(str(erc) for erc in self._list)
