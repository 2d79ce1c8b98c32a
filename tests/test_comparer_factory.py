import pytest

from otrank.comparer_factory import ComparerFactory
from otrank.comparers import CompareConsistency, CompareCtie, ComparePool
from otrank.errors import MissingConfiguration
from otrank.loser_selector import LoserSelectorFromCompetition, LoserSelectorFromGen
from otrank.rcd import FaithLow, MarkLow, RankingBiasAllHigh


class TestComparerFactory:

	def test_pool(self):
		comparer = ComparerFactory().pool().all_high().build()
		assert isinstance(comparer, ComparePool)
		assert isinstance(comparer.ranker.bias, RankingBiasAllHigh)

	def test_ctie_faith_low(self):
		comparer = ComparerFactory().ctie().faith_low().build()
		assert isinstance(comparer, CompareCtie)
		assert isinstance(comparer.ranker.bias, FaithLow)

	def test_mark_low_by_name(self):
		comparer = ComparerFactory().set_compare_type('pool').set_ranking_bias('mark_low').build()
		assert isinstance(comparer.ranker.bias, MarkLow)

	def test_consistent_needs_no_bias(self):
		assert isinstance(ComparerFactory().consistent().build(), CompareConsistency)
		assert isinstance(ComparerFactory().consistent().mark_low().build(), CompareConsistency)

	def test_no_compare_type(self):
		with pytest.raises(MissingConfiguration):
			ComparerFactory().all_high().build()

	@pytest.mark.parametrize('compare_type', ['pool', 'ctie'])
	def test_no_bias(self, compare_type):
		factory = ComparerFactory().set_compare_type(compare_type)
		with pytest.raises(MissingConfiguration):
			factory.build()

	def test_unknown_names(self):
		with pytest.raises(MissingConfiguration):
			ComparerFactory().set_compare_type('maxent')
		with pytest.raises(MissingConfiguration):
			ComparerFactory().set_ranking_bias('random')

	def test_later_setting_wins(self):
		comparer = ComparerFactory().consistent().pool().all_high().build()
		assert isinstance(comparer, ComparePool)

	def test_selector_from_competition(self):
		selector = ComparerFactory().consistent().build_selector()
		assert isinstance(selector, LoserSelectorFromCompetition)
		assert isinstance(selector.comparer, CompareConsistency)

	def test_selector_from_gen(self):
		assert isinstance(ComparerFactory().pool().all_high().build_selector(system=object()), LoserSelectorFromGen)

	def test_selector_checks_settings(self):
		with pytest.raises(MissingConfiguration):
			ComparerFactory().ctie().build_selector()
