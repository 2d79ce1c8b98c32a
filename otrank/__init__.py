# otrank: constraint ranking for Optimality Theory learners.
# ERCs, Recursive Constraint Demotion (RCD), and Multi-Recursive Constraint Demotion (MRCD) with pluggable comparers and loser selectors.
from .candidate import Candidate
from .comparer_factory import ComparerFactory
from .comparers import CompareConsistency, CompareCtie, ComparePool, CompareStratumCtie
from .constraint import FAITH, MARK, Constraint
from .erc import Erc, WinLosePair
from .erc_list import ErcList
from .errors import (Inconsistent, InputMismatch, InvalidConstraintType, MissingConfiguration, NoEvaluationFunction,
	OTRankError, StructuralMismatch, TableauFormatError)
from .hierarchy import Hierarchy
from .loser_selector import LoserSelectorFromCompetition, LoserSelectorFromGen
from .mrcd import Mrcd, MrcdSingle
from .ranker import Ranker
from .rcd import FaithLow, MarkLow, RankingBiasAllHigh, RankingBiasSomeLow, Rcd, RcdRunner
from .tableau import TableauSystem, read_tableau
from .typology import FactorialTypology

__version__ = '0.1.0'
