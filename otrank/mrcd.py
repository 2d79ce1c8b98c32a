# Multi-Recursive Constraint Demotion (Tesar 1997): learn ERCs from winners by repeatedly finding informative losers.
# For each winner, ask the loser selector for a competitor that the ERCs don't yet rule out; turn it into a winner-loser pair, add the pair to the ERCs, and ask again.
# Stop when there are no more informative losers, or when the ERCs become inconsistent.
# The ERC lists passed in are never changed; all of the work happens on copies.
import logging

from .erc import WinLosePair

logger = logging.getLogger(__name__)


# MRCD for a single winner
class MrcdSingle:

	def __init__(self, winner, erc_list, selector):
		self.winner = winner
		self.erc_list = erc_list.dup()
		self.added_pairs = []
		self._selector = selector
		self._run()

	def _run(self):
		# With inconsistent ERCs to begin with, there's no ranking to find losers against
		if not self.erc_list.consistent():
			logger.debug('ERCs already inconsistent; no losers sought for [%s]', self.winner.output)
			return
		loser = self._selector.select_loser(self.winner, self.erc_list)
		while loser is not None:
			new_pair = WinLosePair(self.winner, loser, label=self._pair_label())
			self.added_pairs.append(new_pair)
			self.erc_list.add(new_pair)
			logger.debug('Added pair: %s', new_pair)
			# Once the ERCs are inconsistent, there's no point in looking for more losers
			if not self.erc_list.consistent():
				logger.debug('ERCs became inconsistent with winner [%s]', self.winner.output)
				break
			loser = self._selector.select_loser(self.winner, self.erc_list)

	def _pair_label(self):
		if self.winner.label:
			return str(self.winner.label)
		return str(self.winner.input)

	def consistent(self):
		return self.erc_list.consistent()


# MRCD for a list of winners.
# Each pass goes through all of the winners in order, so that pairs found for one winner are used when looking for losers for the ones after it.
# Passes are repeated until one adds no new pairs, since later pairs can make earlier winners informative again.
class Mrcd:

	def __init__(self, word_list, erc_list, selector, single_mrcd_class=MrcdSingle):
		self.word_list = list(word_list)
		self.prior_ercs = erc_list.dup()
		self.erc_list = erc_list.dup()
		self.added_pairs = []
		self._selector = selector
		self._single_mrcd_class = single_mrcd_class
		self.passes = 0
		self._run()

	def _run(self):
		if not self.erc_list.consistent():
			logger.debug('Prior ERCs are inconsistent; MRCD has nothing to do')
			return
		while True:
			self.passes += 1
			change_on_pass = self._word_list_pass()
			logger.debug('MRCD pass %s: %s pairs added so far', self.passes, len(self.added_pairs))
			if not self.consistent() or not change_on_pass:
				break

	# Returns True if any winner added any pairs
	def _word_list_pass(self):
		change_on_pass = False
		for winner in self.word_list:
			if self._process_winner(winner):
				change_on_pass = True
			if not self.consistent():
				break
		return change_on_pass

	def _process_winner(self, winner):
		mrcd_single = self._single_mrcd_class(winner, self.erc_list, self._selector)
		for pair in mrcd_single.added_pairs:
			self.added_pairs.append(pair)
			self.erc_list.add(pair)
		return len(mrcd_single.added_pairs) > 0

	def consistent(self):
		return self.erc_list.consistent()

	def any_change(self):
		return len(self.added_pairs) > 0
