# Factorial typology: every language (one winner per competition) that some ranking of the constraints produces.
import logging

from .erc_list import ErcList

logger = logging.getLogger(__name__)


# A candidate that can't win under any ranking (it is harmonically bounded, possibly by a group of candidates together) has inconsistent winner-loser pairs against its competition.
def harmonically_bound_filter(competition):
	contenders = []
	for candidate in competition:
		if ErcList.new_from_competition(candidate, competition).consistent():
			contenders.append(candidate)
		else:
			logger.debug('Removing harmonically bounded candidate [%s]', candidate.output)
	return contenders


class FactorialTypology:

	def __init__(self, competition_list):
		self.original_competitions = list(competition_list)
		self.contender_competitions = [harmonically_bound_filter(competition) for competition in self.original_competitions]
		self._check_ident_viols()
		self.languages = []
		self.winner_lists = []
		self._compute_typology()

	# Two contenders with the same violations can't be told apart by any ranking
	def _check_ident_viols(self):
		for competition in self.contender_competitions:
			for i in range(0, len(competition)):
				for j in range(i + 1, len(competition)):
					if competition[i].ident_viols(competition[j]):
						raise ValueError('Competing contenders with identical violation profiles: %s and %s' % (competition[i], competition[j]))

	# Build the languages up one competition at a time: each language so far is extended with each possible winner for the next competition, and kept if its ERCs are still consistent
	def _compute_typology(self):
		if not self.contender_competitions:
			return
		constraints = self.contender_competitions[0][0].constraint_list
		languages = [([], ErcList(constraints))]
		for competition in self.contender_competitions:
			new_languages = []
			for winners, ercs in languages:
				for winner in competition:
					new_ercs = ercs.dup().add_all(ErcList.new_from_competition(winner, competition))
					if new_ercs.consistent():
						new_languages.append((winners + [winner], new_ercs))
			languages = new_languages
			logger.debug('%s languages after input /%s/', len(languages), competition[0].input)

		for number, (winners, ercs) in enumerate(languages, start=1):
			ercs.label = 'L%s' % number
			self.languages.append(ercs)
			self.winner_lists.append(winners)
