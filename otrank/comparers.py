# Comparers judge whether a competitor could be more harmonic than the winner, given what we currently know about the ranking.
# more_harmonic(winner, competitor, ranking_info) returns one of:
#	FIRST: the winner is more harmonic
#	SECOND: the competitor is (or might be) more harmonic
#	TIE: the ranking information doesn't decide between them
#	IDENT_VIOLATIONS: the two have exactly the same violations, so comparing them can't tell us anything
#
# CompareConsistency is exact: it asks whether any ranking consistent with the ERCs would let the competitor win.
# The stratum comparers are faster: they use one hierarchy built from the ERCs, and compare the candidates stratum by stratum from the top.
import logging

from .erc import WinLosePair
from .erc_list import ErcList

logger = logging.getLogger(__name__)

FIRST = 'FIRST'
SECOND = 'SECOND'
TIE = 'TIE'
IDENT_VIOLATIONS = 'IDENT_VIOLATIONS'

# Stratum-level results, used by the CTie comparer
WINNER = 'WINNER'
LOSER = 'LOSER'
CONFLICT = 'CONFLICT'


class CompareConsistency:

	def more_harmonic(self, winner, competitor, ranking_info):
		if winner.ident_viols(competitor):
			return IDENT_VIOLATIONS
		# Turn the tables: could the competitor beat the winner, without contradicting what we already know?
		trial = ErcList(winner.constraint_list)
		trial.add_all(ranking_info)
		trial.add(WinLosePair(competitor, winner))
		if trial.consistent():
			return SECOND
		return FIRST


# Common part of the comparers that go through a hierarchy one stratum at a time
class StratumComparer:

	def __init__(self, ranker):
		self._ranker = ranker

	@property
	def ranker(self):
		return self._ranker

	def more_harmonic(self, winner, competitor, ranking_info):
		if winner.ident_viols(competitor):
			return IDENT_VIOLATIONS
		hierarchy = self._ranker.get_hierarchy(ranking_info)
		return self.compare_by_hierarchy(winner, competitor, hierarchy)

	# Go down the strata until one decides; if none does, the candidates tie
	def compare_by_hierarchy(self, winner, competitor, hierarchy):
		raise NotImplementedError


# Pool the violations within a stratum: the candidate with fewer total violations in the stratum wins
class ComparePool(StratumComparer):

	def compare_by_hierarchy(self, winner, competitor, hierarchy):
		for stratum in hierarchy:
			winner_total = winner.violation_vector(stratum).sum()
			competitor_total = competitor.violation_vector(stratum).sum()
			if winner_total < competitor_total:
				return FIRST
			if winner_total > competitor_total:
				return SECOND
		# Equal totals all the way down, but the violations aren't identical
		return TIE


# Compare one ERC on one stratum of constraints.
# If the stratum has both W's and L's, it's a conflict: the constraints aren't ranked with respect to each other, so neither side can be said to win.
class CompareStratumCtie:

	def more_harmonic(self, erc, stratum):
		prefers_winner = any(erc.is_w(con) for con in stratum)
		prefers_loser = any(erc.is_l(con) for con in stratum)
		if prefers_winner and prefers_loser:
			return CONFLICT
		if prefers_winner:
			return WINNER
		if prefers_loser:
			return LOSER
		return IDENT_VIOLATIONS


STRATUM_CTIE = CompareStratumCtie()


# Conflicting ties: a conflict in the highest stratum that has any preference is treated as a tie
class CompareCtie(StratumComparer):

	_CODES = {WINNER: FIRST, LOSER: SECOND, CONFLICT: TIE}

	def __init__(self, ranker, stratum_comparer=STRATUM_CTIE):
		super().__init__(ranker)
		self._stratum_comparer = stratum_comparer

	def compare_by_hierarchy(self, winner, competitor, hierarchy):
		erc = WinLosePair(winner, competitor)
		for stratum in hierarchy:
			code = self._stratum_comparer.more_harmonic(erc, stratum)
			if code != IDENT_VIOLATIONS:
				logger.debug('Stratum [%s] decides [%s] against [%s]: %s', ' '.join(str(con) for con in stratum), winner.output, competitor.output, code)
				return self._CODES[code]
		return TIE
