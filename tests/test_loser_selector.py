from otrank import comparers
from otrank.comparers import CompareConsistency
from otrank.erc import WinLosePair
from otrank.erc_list import ErcList
from otrank.hierarchy import Hierarchy
from otrank.loser_selector import LoserSelectorFromCompetition, LoserSelectorFromGen


# A comparer that gives a fixed answer for each competitor, and remembers what it was asked
class ScriptedComparer:

	def __init__(self, codes):
		self.codes = codes
		self.calls = []

	def more_harmonic(self, winner, competitor, ranking_info):
		self.calls.append(competitor)
		return self.codes[competitor]


class StubSystem:

	def __init__(self, competitions):
		self.competitions = competitions
		self.inputs = []

	def gen(self, input):
		self.inputs.append(input)
		return self.competitions[input]


class TestLoserSelectorFromCompetition:

	def test_only_the_winner(self):
		comparer = ScriptedComparer({'winner': comparers.IDENT_VIOLATIONS})
		assert LoserSelectorFromCompetition(comparer).select_loser('winner', ['winner'], None) is None

	def test_more_harmonic_competitor(self):
		comparer = ScriptedComparer({'winner': comparers.IDENT_VIOLATIONS, 'moreh': comparers.SECOND})
		assert LoserSelectorFromCompetition(comparer).select_loser('winner', ['winner', 'moreh'], None) == 'moreh'

	def test_tied_competitor(self):
		comparer = ScriptedComparer({'winner': comparers.IDENT_VIOLATIONS, 'tied': comparers.TIE})
		assert LoserSelectorFromCompetition(comparer).select_loser('winner', ['tied', 'winner'], None) == 'tied'

	def test_less_harmonic_competitor(self):
		comparer = ScriptedComparer({'winner': comparers.IDENT_VIOLATIONS, 'lessh': comparers.FIRST})
		assert LoserSelectorFromCompetition(comparer).select_loser('winner', ['lessh', 'winner'], None) is None

	def test_identical_violations(self):
		comparer = ScriptedComparer({'winner': comparers.IDENT_VIOLATIONS, 'twin': comparers.IDENT_VIOLATIONS})
		assert LoserSelectorFromCompetition(comparer).select_loser('winner', ['winner', 'twin'], None) is None

	def test_first_informative_loser_in_order(self):
		comparer = ScriptedComparer({
			'winner': comparers.IDENT_VIOLATIONS,
			'lessh': comparers.FIRST,
			'moreh1': comparers.SECOND,
			'moreh2': comparers.SECOND,
		})
		selector = LoserSelectorFromCompetition(comparer)
		assert selector.select_loser('winner', ['lessh', 'moreh1', 'winner', 'moreh2'], None) == 'moreh1'
		# The search stops at the first informative loser
		assert comparer.calls == ['lessh', 'moreh1']

	# Two constraints, a winner and one competitor, and nothing known about the ranking yet
	def test_end_to_end(self, constraints, make_candidate):
		c1, c2 = constraints[:2]
		winner = make_candidate('in', 'winner', [c1, c2], [0, 1])
		competitor = make_candidate('in', 'competitor', [c1, c2], [1, 0])
		ranking_info = ErcList([c1, c2])
		comparer = CompareConsistency()
		assert comparer.more_harmonic(winner, competitor, ranking_info) == comparers.SECOND
		loser = LoserSelectorFromCompetition(comparer).select_loser(winner, [winner, competitor], ranking_info)
		assert loser is competitor

		pair = WinLosePair(winner, loser)
		assert str(pair) == 'in winner competitor c1:W c2:L'
		ranking_info.add(pair)
		assert ranking_info.consistent()
		assert ranking_info.rcd().hierarchy() == Hierarchy([[c1], [c2]])
		# Now that c1 >> c2 is known, the competitor is no longer informative
		assert LoserSelectorFromCompetition(comparer).select_loser(winner, [winner, competitor], ranking_info) is None


class TestLoserSelectorFromGen:

	def test_searches_the_competition_from_gen(self, constraints, make_candidate):
		winner = make_candidate('in', 'winner', constraints, [0, 1, 0, 0])
		competitor = make_candidate('in', 'competitor', constraints, [1, 0, 0, 0])
		system = StubSystem({'in': [winner, competitor]})
		selector = LoserSelectorFromGen(system, LoserSelectorFromCompetition(CompareConsistency()))
		assert selector.select_loser(winner, ErcList(constraints)) is competitor
		assert system.inputs == ['in']

	def test_no_loser(self, constraints, make_candidate):
		winner = make_candidate('in', 'winner', constraints, [0, 0, 0, 0])
		bounded = make_candidate('in', 'bounded', constraints, [1, 0, 0, 0])
		system = StubSystem({'in': [bounded, winner]})
		selector = LoserSelectorFromGen(system, LoserSelectorFromCompetition(CompareConsistency()))
		assert selector.select_loser(winner, ErcList(constraints)) is None
