# Recursive Constraint Demotion: an implementation of Tesar & Smolensky's (1996) Constraint Demotion algorithm, over ERCs in the comparative tableau format.
# Starting with all constraints unranked and all ERCs unexplained, we repeatedly find the constraints that can be installed in the next stratum (no unexplained ERC gives them an L), install them, and set aside the ERCs that they explain (they give the ERC a W).
# If we run out of rankable constraints while some are still unranked, there is a ranking contradiction: the ERCs are not OT-consistent.
import logging

from .hierarchy import Hierarchy

logger = logging.getLogger(__name__)


# The ranking biases decide which of the rankable constraints actually get ranked in the next stratum.
# They are given the rankable constraints (always at least one) and the Rcd object that is asking, and must return a non-empty subset.

# Rank every constraint as high as possible
class RankingBiasAllHigh:

	def choose_cons_to_rank(self, rankable, rcd):
		return list(rankable)


# Keep one class of constraints (those satisfying the predicate) as low as possible, and rank everything else as high as possible.
# If there are rankable constraints outside of the low class, only those are ranked; the low class only gets ranked when nothing else can be.
class RankingBiasSomeLow:

	def __init__(self, low_class):
		self._low_class = low_class

	def choose_cons_to_rank(self, rankable, rcd):
		high = [con for con in rankable if not self._low_class(con)]
		if high:
			return high
		return list(rankable)


# Faithfulness low (M >> F)
class FaithLow(RankingBiasSomeLow):

	def __init__(self):
		super().__init__(lambda con: con.is_faithfulness())


# Markedness low
class MarkLow(RankingBiasSomeLow):

	def __init__(self):
		super().__init__(lambda con: con.is_markedness())


# The biases keep no state between calls, so one all-high bias can be shared
ALL_HIGH = RankingBiasAllHigh()


class Rcd:

	def __init__(self, erc_list, bias=ALL_HIGH):
		self._constraints = list(erc_list.constraint_list)
		self._ercs = list(erc_list)
		self._bias = bias
		# The hierarchy we're building, the constraints that aren't in it yet, and the ERCs explained by each stratum
		self.ranked = Hierarchy()
		self.unranked = list(self._constraints)
		self.explained = []
		self.unexplained = list(self._ercs)
		self._rank(self.unexplained, self.unranked)

	@property
	def constraint_list(self):
		return self._constraints

	@property
	def ercs(self):
		return self._ercs

	# The constraints that prefer the loser, and those that prefer the winner, for each ERC
	def _preferences(self, erc):
		l_cons = set(con for con in self._constraints if erc.is_l(con))
		w_cons = set(con for con in self._constraints if erc.is_w(con))
		return erc, l_cons, w_cons

	def _rank(self, unexplained, unranked):
		unexplained = [self._preferences(erc) for erc in unexplained]
		while True:
			# We divide the constraints in 'unranked' into those that must be demoted (have L's for some unexplained ERCs), and those that can be ranked (have only W's and e's)
			demanding_l = set()
			for erc, l_cons, w_cons in unexplained:
				demanding_l.update(l_cons)
			rankable = [con for con in unranked if con not in demanding_l]
			demoted = [con for con in unranked if con in demanding_l]
			if demoted:
				logger.debug('Demoting constraints %s', ', '.join(str(con) for con in demoted))

			# Nothing can be ranked: either we're done, or there's a ranking contradiction. Either way, stop.
			if not rankable:
				break

			# The bias gets to decide which of the rankable constraints go in this stratum; the rest wait for the next round
			stratum = self._bias.choose_cons_to_rank(rankable, self)
			if not stratum:
				raise ValueError('Ranking bias %s chose no constraints from %s' % (self._bias.__class__.__name__, rankable))
			self.ranked.add_stratum(stratum)
			stratum = set(stratum)
			logger.debug('Stratum %s: %s', len(self.ranked), ', '.join(str(con) for con in self.ranked[-1]))

			# An ERC is explained once some constraint that prefers the winner has been ranked; it can't block anything further down
			newly_explained = [entry for entry in unexplained if entry[2] & stratum]
			unexplained = [entry for entry in unexplained if not entry[2] & stratum]
			self.explained.append([erc for erc, l_cons, w_cons in newly_explained])
			logger.debug('%s ERCs explained by stratum %s, %s remaining', len(newly_explained), len(self.ranked), len(unexplained))
			unranked = [con for con in unranked if con not in stratum]

		self.unranked = unranked
		self.unexplained = [erc for erc, l_cons, w_cons in unexplained]
		if unranked:
			logger.debug('Ranking contradiction: cannot rank %s', ', '.join(str(con) for con in unranked))

	def consistent(self):
		return not self.unranked

	# The ranked strata, plus (if the ERCs were inconsistent) the unranked constraints as a final stratum
	def hierarchy(self):
		hierarchy = self.ranked.dup()
		if self.unranked:
			hierarchy.add_stratum(self.unranked)
		return hierarchy


# Runs RCD with a particular bias
class RcdRunner:

	def __init__(self, bias=ALL_HIGH):
		self._bias = bias

	@property
	def bias(self):
		return self._bias

	def run(self, erc_list):
		return Rcd(erc_list, self._bias)
