import unittest
from petitlua import syntax, values
from petitlua.diagnostics import TypeMismatch
from petitlua.environment import null_frame

NAN = float("nan")
INF = float("inf")

class DisplayTests(unittest.TestCase):
	
	def test_tokens(self):
		self.assertEqual("nil", values.display(None))
		self.assertEqual("true", values.display(True))
		self.assertEqual("false", values.display(False))
	
	def test_numbers(self):
		for number, text in [
			(1.0, "1"),
			(-3.0, "-3"),
			(0.5, "0.5"),
			(0.0, "0"),
			(-0.0, "-0"),
			(1e-07, "0.0000001"),
			(-2.5e-10, "-0.00000000025"),
			(1e21, "1000000000000000000000"),
			(INF, "inf"),
			(-INF, "-inf"),
			(NAN, "nan"),
		]:
			with self.subTest(text):
				self.assertEqual(text, values.display(number))
	
	def test_strings_play_themselves(self):
		self.assertEqual("hello world", values.display("hello world"))
		self.assertEqual("", values.display(""))
	
	def test_functions_are_opaque(self):
		self.assertEqual("builtin: print", values.display(values.PRINT))
		closure = values.Closure((), syntax.Block((), syntax.Nop(), syntax.nil()), null_frame)
		self.assertTrue(values.display(closure).startswith("function: "))
		self.assertEqual(values.display(closure), values.display(closure))

class ArithmeticTests(unittest.TestCase):
	
	def test_happy_path(self):
		self.assertEqual(3.0, values.add(1.0, 2.0))
		self.assertEqual(-1.0, values.sub(1.0, 2.0))
		self.assertEqual(6.0, values.mul(2.0, 3.0))
		self.assertEqual(-2.0, values.neg(2.0))
	
	def test_only_numbers(self):
		for op in values.add, values.sub, values.mul:
			for a, b in [(1.0, None), ("1", 1.0), (True, 1.0), ("a", "b")]:
				with self.subTest(op=op.__name__, a=a, b=b):
					with self.assertRaises(TypeMismatch):
						op(a, b)
		with self.assertRaises(TypeMismatch):
			values.neg(True)
	
	def test_message_names_the_kinds(self):
		with self.assertRaises(TypeMismatch) as cm:
			values.add(1.0, None)
		self.assertEqual("Operation '+' does not apply to number and nil.", str(cm.exception))
		self.assertEqual((1.0, None), cm.exception.operands)

class ComparisonTests(unittest.TestCase):
	
	def test_equality_is_total(self):
		self.assertTrue(values.eq(None, None))
		self.assertTrue(values.eq(1.0, 1.0))
		self.assertTrue(values.eq("a", "a"))
		self.assertTrue(values.eq(False, False))
		self.assertFalse(values.eq(True, 1.0))
		self.assertFalse(values.eq(None, False))
		self.assertFalse(values.eq("1", 1.0))
		self.assertFalse(values.eq(NAN, NAN))
		self.assertTrue(values.ne(NAN, NAN))
		self.assertTrue(values.ne(0.0, False))
	
	def test_functions_equal_themselves(self):
		body = syntax.Block((), syntax.Nop(), syntax.nil())
		f = values.Closure((), body, null_frame)
		g = values.Closure((), body, null_frame)
		self.assertTrue(values.eq(f, f))
		self.assertFalse(values.eq(f, g))
		self.assertFalse(values.eq(f, values.PRINT))
	
	def test_ordering(self):
		self.assertTrue(values.lt(1.0, 2.0))
		self.assertFalse(values.lt(2.0, 2.0))
		self.assertTrue(values.le(2.0, 2.0))
		self.assertTrue(values.gt(3.0, 2.0))
		self.assertTrue(values.ge(2.0, 2.0))
		self.assertFalse(values.ge(1.0, 2.0))
	
	def test_greater_is_derived_by_negation(self):
		self.assertFalse(values.lt(1.0, NAN))
		self.assertFalse(values.le(1.0, NAN))
		self.assertTrue(values.gt(1.0, NAN))
		self.assertTrue(values.ge(1.0, NAN))
	
	def test_ordering_needs_numbers(self):
		for op in values.lt, values.le, values.gt, values.ge:
			for a, b in [("a", "b"), (1.0, "2"), (None, None), (True, False)]:
				with self.subTest(op=op.__name__, a=a, b=b):
					with self.assertRaises(TypeMismatch):
						op(a, b)

class TruthTests(unittest.TestCase):
	
	def test_strict(self):
		self.assertIs(True, values.as_bool(True))
		self.assertIs(False, values.as_bool(False))
		for bogon in (None, 0.0, 1.0, "", "true"):
			with self.subTest(bogon=bogon):
				with self.assertRaises(TypeMismatch):
					values.as_bool(bogon)

	def test_type_names(self):
		self.assertEqual(
			["nil", "boolean", "number", "string", "function"],
			[values.type_name(v) for v in (None, True, 1.0, "x", values.PRINT)],
		)


if __name__ == '__main__':
	unittest.main()
