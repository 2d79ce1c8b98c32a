# Reading OT tableaus in the OTSoft tableau format.
#
# The first two lines are the constraint names, and the "short" constraint names. These lines start with three tabs.
# The rest of the file is the tableaus, tab delimited: input, candidate, frequency, and then one violation count per constraint.
# A new input is listed in the first column; a line with an empty first column is another candidate for the previous input.
# The winner for an input is the candidate with a frequency > 0.
#
# Constraint types can be given in a .constraints file with the same name: one line per constraint, name<tab>type, where the type starts with M (markedness) or F (faithfulness).
import logging
import os
import re

from .candidate import Candidate
from .constraint import FAITH, MARK, Constraint
from .errors import InvalidConstraintType, TableauFormatError

logger = logging.getLogger(__name__)


# Everything read from one tableau file
class Tableau:

	def __init__(self, constraints, competitions, winners):
		self.constraints = constraints
		# A list of lists of candidates: each element corresponds to an input, and is a list of the candidates for that input, in file order
		self.competitions = competitions
		# The winning candidate for each input that has one
		self.winners = winners

	@property
	def inputs(self):
		return [competition[0].input for competition in self.competitions]

	def system(self):
		return TableauSystem(self.competitions)


# GEN for a tableau file: the candidates for an input are the ones listed for it in the file
class TableauSystem:

	def __init__(self, competitions):
		self._competitions = {}
		for competition in competitions:
			input = competition[0].input
			if input in self._competitions:
				raise ValueError('More than one competition for input /%s/' % input)
			self._competitions[input] = competition
		if competitions:
			self.constraints = competitions[0][0].constraint_list
		else:
			self.constraints = []

	def gen(self, input):
		try:
			return self._competitions[input]
		except KeyError:
			raise KeyError('No candidates for input /%s/' % input) from None


# Turn a constraint type from a .constraints file into MARK or FAITH
def parse_constraint_type(type):
	if re.match('^[Mm]', type):
		return MARK
	elif re.match('^[Ff]', type):
		return FAITH
	raise InvalidConstraintType("Can't understand constraint type '%s'" % type)


# Read a .constraints file, and return a dict from constraint name to type
def read_constraint_types(constraints_filename):
	constraint_types = {}
	with open(constraints_filename, 'r', encoding='utf-8') as constraints_file:
		for line in constraints_file.read().splitlines():
			if not line.strip():
				continue
			name, type, *rest = line.split('\t') + ['']
			constraint_types[name.strip()] = parse_constraint_type(type.strip())
	return constraint_types


# The count in a tableau cell. We assume that an empty cell is 0; anything else has to be a non-negative integer.
def _cell_count(cell, what, line_number):
	cell = cell.strip()
	if cell == '':
		return 0
	if not re.match(r'^[0-9]+$', cell):
		raise TableauFormatError('Line %s: %s "%s" is not a non-negative integer' % (line_number, what, cell))
	return int(cell)


# Parse the lines of a tableau file. constraint_types (name -> MARK/FAITH) is optional; without it, every constraint is markedness.
def parse_tableau(lines, constraint_types=None):
	if len(lines) < 2:
		raise TableauFormatError('A tableau needs two lines of constraint names; found %s lines' % len(lines))
	if constraint_types is None:
		constraint_types = {}

	constraint_names = lines[0].strip().split('\t')
	short_constraint_names = lines[1].strip().split('\t')
	# Well-formedness check: same number of full and short constraint names?
	if len(constraint_names) != len(short_constraint_names):
		logger.warning('Unequal number of full and short constraint names (perhaps there is a formatting error in the file?)')
		short_constraint_names = constraint_names

	unknown = [name for name in constraint_types if name not in constraint_names]
	if unknown:
		raise TableauFormatError('Unknown constraints in constraints file: %s' % ', '.join(unknown))
	constraints = []
	for name, short_name in zip(constraint_names, short_constraint_names):
		constraints.append(Constraint(name, constraint_types.get(name, MARK), short_name))

	competitions = []
	# The winner for each competition (by index), or None if no candidate has a frequency > 0
	winner_indices = []
	# Each input gets one block of lines
	inputs_seen = set()

	# The tableaus are contained in lines[2:]
	for line_number, line in enumerate(lines[2:], start=3):
		if not line.strip():
			continue
		cells = line.split('\t')
		if len(cells) < 2:
			raise TableauFormatError('Line %s: expected an input and a candidate' % line_number)
		# Pad out missing trailing cells: an empty frequency or violation is 0
		cells = cells + [''] * (3 + len(constraints) - len(cells))
		if len(cells) > 3 + len(constraints):
			raise TableauFormatError('Line %s has %s violation counts, but there are %s constraints' % (line_number, len(cells) - 3, len(constraints)))

		# Check if this line contains a new input. New inputs are listed in the first column.
		if cells[0] != '':
			if cells[0] in inputs_seen:
				raise TableauFormatError('Line %s: input /%s/ was already listed; all of its candidates must be together' % (line_number, cells[0]))
			inputs_seen.add(cells[0])
			competitions.append([])
			winner_indices.append(None)
		elif not competitions:
			raise TableauFormatError('Line %s: the first candidate has no input' % line_number)
		input = competitions[-1][0].input if competitions[-1] else cells[0]

		candidate = Candidate(input, cells[1], constraints)
		for con, cell in zip(constraints, cells[3:]):
			candidate.set_viols(con, _cell_count(cell, 'violation count', line_number))
		candidate.freeze()

		# If we've already seen a winner for this input, and this candidate also has a frequency > 0, then we have multiple winners.
		# RCD cannot handle free variation, so that's an error.
		if _cell_count(cells[2], 'frequency', line_number) > 0:
			if winner_indices[-1] is not None:
				raise TableauFormatError('Multiple winners for input /%s/ (line %s)' % (input, line_number))
			winner_indices[-1] = len(competitions[-1])
		competitions[-1].append(candidate)

	winners = []
	for competition, winner_index in zip(competitions, winner_indices):
		if winner_index is None:
			logger.debug('No winner for input /%s/', competition[0].input)
		else:
			logger.debug('Winning form for input /%s/: %s', competition[0].input, competition[winner_index].output)
			winners.append(competition[winner_index])
	return Tableau(constraints, competitions, winners)


# Read a tableau file, and the .constraints file with the same name if there is one
def read_tableau(input_filename, constraints_filename=None):
	if constraints_filename is None:
		# We'll look for other files, with related names
		filename_prefix = os.path.splitext(input_filename)[0]
		constraints_filename = filename_prefix + '.constraints'
		if not os.path.isfile(constraints_filename):
			constraints_filename = None
	constraint_types = None
	if constraints_filename is not None:
		constraint_types = read_constraint_types(constraints_filename)
	with open(input_filename, 'r', encoding='utf-8') as input_file:
		lines = input_file.read().splitlines()
	return parse_tableau(lines, constraint_types)
