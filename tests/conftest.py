import pytest

from otrank.candidate import Candidate
from otrank.constraint import FAITH, MARK, Constraint
from otrank.erc import Erc
from otrank.erc_list import ErcList


@pytest.fixture
def constraints():
	return [Constraint('c1', MARK), Constraint('c2', MARK), Constraint('c3', MARK), Constraint('c4', MARK)]


@pytest.fixture
def mf_constraints():
	return [Constraint('M1', MARK), Constraint('F1', FAITH), Constraint('M2', MARK), Constraint('F2', FAITH)]


# Build a candidate with the given violations, one per constraint
@pytest.fixture
def make_candidate():
	def make(input, output, constraint_list, violations):
		candidate = Candidate(input, output, constraint_list)
		for con, count in zip(constraint_list, violations):
			candidate.set_viols(con, count)
		return candidate
	return make


# Build an ERC from a string of preferences, one character per constraint, e.g. 'WLee'
@pytest.fixture
def make_erc():
	def make(constraint_list, prefs, label=''):
		erc = Erc(constraint_list, label)
		for con, pref in zip(constraint_list, prefs):
			if pref == 'W':
				erc.set_w(con)
			elif pref == 'L':
				erc.set_l(con)
		return erc
	return make


@pytest.fixture
def make_erc_list(make_erc):
	def make(constraint_list, *prefs_list):
		return ErcList(constraint_list).add_all(make_erc(constraint_list, prefs) for prefs in prefs_list)
	return make
