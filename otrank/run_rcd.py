# run_rcd.py: apply Recursive Constraint Demotion (Tesar & Smolensky 1996) and MRCD (Tesar 1997) to a file of tableaus in OTSoft format.
#	python -m otrank.run_rcd TABLEAU_FILE [BIAS [COMPARER]]
# BIAS is all_high (default), faith_low or mark_low; COMPARER is consistent (default), pool or ctie.
# The results go to the console and to TABLEAU_FILE.out, and a log of the work to TABLEAU_FILE.log
import logging
import os
import sys

from .comparer_factory import ComparerFactory
from .erc_list import ErcList
from .errors import OTRankError
from .mrcd import Mrcd
from .rcd import RcdRunner
from .tableau import read_tableau

logger = logging.getLogger('otrank')

PARADOX_MESSAGE = '****A ranking contradiction prevented RCD from arriving at a working ranking. The data is not OT-consistent.'


# Write a line to the console, and to the output file
def report(output_file, text=''):
	print(text)
	output_file.write(text + '\n')


def report_strata(output_file, rcd):
	for s, stratum in enumerate(rcd.ranked, start=1):
		report(output_file, '\nStratum %s:' % s)
		for con in stratum:
			report(output_file, '\t%s' % con)
	if not rcd.consistent():
		report(output_file, '\n***** Ranking paradox *****')
		for con in rcd.unranked:
			report(output_file, '\t%s' % con)


# The .out and .log files go next to the tableau file, with the same name
def filename_prefix(input_filename):
	return os.path.splitext(input_filename)[0]


def run(input_filename, bias_name='all_high', compare_name='consistent', tableau=None):
	# Check the settings before doing any work
	factory = ComparerFactory().set_ranking_bias(bias_name).set_compare_type(compare_name)
	bias = factory.build_bias()

	if tableau is None:
		tableau = read_tableau(input_filename)
	logger.debug('Inputs: %s', tableau.inputs)
	logger.debug('Winners: %s', [str(winner) for winner in tableau.winners])

	with open(filename_prefix(input_filename) + '.out', 'w', encoding='utf-8') as output_file:
		report(output_file, 'Results of applying RCD to the file %s (bias: %s)' % (input_filename, bias_name))

		# First, RCD on every winner against every one of its competitors
		system = tableau.system()
		erc_list = ErcList(tableau.constraints)
		for winner in tableau.winners:
			erc_list.add_all(ErcList.new_from_competition(winner, system.gen(winner.input)))
		logger.debug('Mark data pairs:\n%s', erc_list)
		rcd = RcdRunner(bias).run(erc_list)
		if not rcd.consistent():
			report(output_file, PARADOX_MESSAGE)
		report_strata(output_file, rcd)

		# Then MRCD, which only uses the competitors it needs
		report(output_file, '\nResults of applying MRCD (comparer: %s)' % compare_name)
		selector = factory.build_selector(system)
		mrcd = Mrcd(tableau.winners, ErcList(tableau.constraints), selector)
		report(output_file, '%s winner-loser pairs added in %s passes:' % (len(mrcd.added_pairs), mrcd.passes))
		for pair in mrcd.added_pairs:
			report(output_file, '\t%s' % pair)
		mrcd_rcd = RcdRunner(bias).run(mrcd.erc_list)
		if not mrcd_rcd.consistent():
			report(output_file, PARADOX_MESSAGE)
		report_strata(output_file, mrcd_rcd)
	return rcd, mrcd


def main(argv=None):
	if argv is None:
		argv = sys.argv[1:]
	if len(argv) < 1 or len(argv) > 3:
		print('Usage: python -m otrank.run_rcd TABLEAU_FILE [all_high|faith_low|mark_low [consistent|pool|ctie]]')
		return 1
	input_filename = argv[0]

	try:
		tableau = read_tableau(input_filename)
	except (OTRankError, OSError) as error:
		print("Can't read the tableau file %s: %s" % (input_filename, error))
		return 1

	# Now that there's something to work on, let's open a log file
	try:
		log_handler = logging.FileHandler(filename_prefix(input_filename) + '.log', mode='w', encoding='utf-8')
	except OSError as error:
		print("Can't open the log file: %s" % error)
		return 1
	log_handler.setFormatter(logging.Formatter('%(name)s: %(message)s'))
	old_level = logger.level
	logger.addHandler(log_handler)
	logger.setLevel(logging.DEBUG)
	try:
		run(*argv, tableau=tableau)
	except (OTRankError, OSError) as error:
		print("Can't apply RCD to %s: %s" % (input_filename, error))
		return 1
	finally:
		logger.removeHandler(log_handler)
		logger.setLevel(old_level)
		log_handler.close()
	return 0


if __name__ == '__main__':
	sys.exit(main())
