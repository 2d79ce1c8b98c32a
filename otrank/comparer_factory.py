# Builds comparers (and loser selectors around them) from a named ranking bias and a named comparison strategy.
#	ranking biases: all_high, faith_low, mark_low
#	comparison strategies: pool, ctie, consistent
# The settings can be given one at a time, fluently:
#	comparer = ComparerFactory().pool().faith_low().build()
# or by name:
#	factory.set_compare_type('ctie'); factory.set_ranking_bias('all_high')
# pool and ctie rank the ERCs, so they need a ranking bias; consistent doesn't use one.
import logging

from .comparers import CompareConsistency, CompareCtie, ComparePool
from .errors import MissingConfiguration
from .loser_selector import LoserSelectorFromCompetition, LoserSelectorFromGen
from .ranker import Ranker
from .rcd import FaithLow, MarkLow, RankingBiasAllHigh

logger = logging.getLogger(__name__)

RANKING_BIASES = {
	'all_high': RankingBiasAllHigh,
	'faith_low': FaithLow,
	'mark_low': MarkLow,
}
COMPARE_TYPES = ('pool', 'ctie', 'consistent')


class ComparerFactory:

	def __init__(self):
		self._ranking_bias = None
		self._compare_type = None

	def set_ranking_bias(self, name):
		if name not in RANKING_BIASES:
			raise MissingConfiguration("Unknown ranking bias '%s'; expected one of %s" % (name, ', '.join(RANKING_BIASES)))
		self._ranking_bias = name
		return self

	def set_compare_type(self, name):
		if name not in COMPARE_TYPES:
			raise MissingConfiguration("Unknown comparison type '%s'; expected one of %s" % (name, ', '.join(COMPARE_TYPES)))
		self._compare_type = name
		return self

	def all_high(self):
		return self.set_ranking_bias('all_high')

	def faith_low(self):
		return self.set_ranking_bias('faith_low')

	def mark_low(self):
		return self.set_ranking_bias('mark_low')

	def pool(self):
		return self.set_compare_type('pool')

	def ctie(self):
		return self.set_compare_type('ctie')

	def consistent(self):
		return self.set_compare_type('consistent')

	def build_bias(self):
		if self._ranking_bias is None:
			raise MissingConfiguration('A ranking bias is needed, but none has been set.')
		return RANKING_BIASES[self._ranking_bias]()

	def build(self):
		if self._compare_type is None:
			raise MissingConfiguration('No comparison type has been set.')
		if self._compare_type == 'consistent':
			if self._ranking_bias is not None:
				logger.debug("Ranking bias '%s' is not used by the consistency comparer", self._ranking_bias)
			return CompareConsistency()
		ranker = Ranker(self.build_bias())
		if self._compare_type == 'pool':
			return ComparePool(ranker)
		return CompareCtie(ranker)

	# A loser selector using the comparer; given a system with gen(), the selector gets its competitions from GEN
	def build_selector(self, system=None):
		selector = LoserSelectorFromCompetition(self.build())
		if system is None:
			return selector
		return LoserSelectorFromGen(system, selector)
