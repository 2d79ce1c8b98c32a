import pytest

from otrank.constraint import FAITH, MARK, Constraint
from otrank.errors import InvalidConstraintType, NoEvaluationFunction, OTRankError


class TestConstraint:

	def test_equal_by_name(self):
		assert Constraint('NoCoda', MARK) == Constraint('NoCoda', FAITH, id='NC')

	def test_different_names_not_equal(self):
		assert Constraint('NoCoda', MARK) != Constraint('Onset', MARK)

	def test_hash_by_name(self):
		assert len(set([Constraint('NoCoda', MARK), Constraint('NoCoda', MARK)])) == 1

	def test_id_defaults_to_name(self):
		assert Constraint('NoCoda', MARK).id == 'NoCoda'

	def test_short_id(self):
		assert Constraint('NoCoda', MARK, id=3).id == '3'

	def test_type_predicates(self):
		assert Constraint('NoCoda', MARK).is_markedness()
		assert not Constraint('NoCoda', MARK).is_faithfulness()
		assert Constraint('Max', FAITH).is_faithfulness()

	def test_invalid_type(self):
		with pytest.raises(InvalidConstraintType):
			Constraint('NoCoda', 'phonotactic')

	def test_invalid_type_is_value_error(self):
		with pytest.raises(ValueError):
			Constraint('NoCoda', None)

	def test_evaluate(self):
		# One violation per final consonant
		no_coda = Constraint('NoCoda', MARK, eval_function=lambda cand: 0 if cand.output[-1] in 'aeiou' else 1)

		class Form:
			output = 'pat'
		assert no_coda.evaluate(Form()) == 1

	def test_evaluate_negative(self):
		con = Constraint('Bad', MARK, eval_function=lambda cand: -1)
		with pytest.raises(ValueError):
			con.evaluate(object())

	def test_evaluate_without_function(self):
		with pytest.raises(NoEvaluationFunction):
			Constraint('NoCoda', MARK).evaluate(object())
		with pytest.raises(OTRankError):
			Constraint('Onset', FAITH).evaluate(object())

	def test_str(self):
		assert str(Constraint('NoCoda', MARK)) == 'NoCoda'
