# Loser selection: find an "informative loser" for a winner, a competitor that the current ranking information doesn't yet rule out.
import logging

from . import comparers

logger = logging.getLogger(__name__)


# Search a given competition, in order, for the first competitor that is more harmonic than the winner or tied with it.
# The order of the competition decides which loser is found, so it should be the same every time.
class LoserSelectorFromCompetition:

	def __init__(self, comparer):
		self._comparer = comparer

	@property
	def comparer(self):
		return self._comparer

	def select_loser(self, winner, competition, ranking_info):
		for candidate in competition:
			code = self._comparer.more_harmonic(winner, candidate, ranking_info)
			if code == comparers.SECOND or code == comparers.TIE:
				logger.debug('Informative loser for [%s]: [%s] (%s)', winner.output, candidate.output, code)
				return candidate
			# FIRST and IDENT_VIOLATIONS: this candidate can't teach us anything, keep looking
		return None


# Get the competition from GEN, and then search it.
# The system must have gen(input), which returns the candidates for that input.
class LoserSelectorFromGen:

	def __init__(self, system, selector):
		self._system = system
		self._selector = selector

	def select_loser(self, winner, ranking_info):
		competition = self._system.gen(winner.input)
		return self._selector.select_loser(winner, competition, ranking_info)
