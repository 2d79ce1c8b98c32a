# Given consistent ERCs, return the hierarchy that RCD builds for them under a ranking bias.
from .errors import Inconsistent
from .rcd import RcdRunner


class Ranker:

	def __init__(self, bias):
		self._bias = bias

	@property
	def bias(self):
		return self._bias

	# A bias given here overrides the one the ranker was built with
	def get_hierarchy(self, erc_list, bias=None):
		if bias is None:
			bias = self._bias
		rcd = RcdRunner(bias).run(erc_list)
		if not rcd.consistent():
			raise Inconsistent('The ERCs are inconsistent; constraints %s cannot be ranked' % ', '.join(str(con) for con in rcd.unranked))
		return rcd.hierarchy()
