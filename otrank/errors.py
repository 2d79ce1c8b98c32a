# Exceptions raised by the ranking engine.
# These are all contract errors: malformed input to an algorithm with a documented precondition.
# An inconsistent ERC list is NOT an error; check ErcList.consistent() for that.


class OTRankError(Exception):
	pass


# An ERC was added to an ErcList defined over a different set of constraints
class StructuralMismatch(OTRankError):
	pass


# A winner/loser pair was built from candidates with different inputs
class InputMismatch(OTRankError):
	pass


# A constraint type other than markedness or faithfulness
class InvalidConstraintType(OTRankError, ValueError):
	pass


# A hierarchy was requested for ERCs that RCD shows to be inconsistent
class Inconsistent(OTRankError):
	pass


# A factory was asked to build something before all of its settings were given
class MissingConfiguration(OTRankError):
	pass


# A tableau file or .constraints file could not be understood
class TableauFormatError(OTRankError):
	pass


# A constraint with no evaluation function was asked to count violations
class NoEvaluationFunction(OTRankError):
	pass
