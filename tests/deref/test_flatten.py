"""
Tests for extracting name chains from expressions.
"""

from fractions import Fraction

from tplexpr.deref.flatten import flatten_deref
from tplexpr.deref.model import Apply, IntLiteral, LocalRef, QualifiedRef, RatLiteral
from tplexpr.deref.parser import parse_expression


class TestFlattenDeref:

    def test_single_name(self):
        """Test a bare name flattens to itself"""
        assert flatten_deref(LocalRef("x")) == ["x"]

    def test_outer_name_goes_last(self):
        """Test Apply(a, b) flattens to [b, a]"""
        assert flatten_deref(Apply(LocalRef("a"), LocalRef("b"))) == ["b", "a"]

    def test_right_nested_chain(self):
        """Test a chain nested in the argument position"""
        deref = Apply(LocalRef("a"), Apply(LocalRef("b"), LocalRef("c")))

        assert flatten_deref(deref) == ["c", "b", "a"]

    def test_dollar_chain_from_parser(self):
        """Test the shape produced by '$' continuations"""
        assert flatten_deref(parse_expression("route $ user $ id")) == ["id", "user", "route"]

    def test_left_nested_application_does_not_match(self):
        """Test juxtaposition of three names is not this shape"""
        assert flatten_deref(parse_expression("a b c")) is None

    def test_qualified_function_does_not_match(self):
        assert flatten_deref(Apply(QualifiedRef(("Mod",), "f"), LocalRef("x"))) is None

    def test_qualified_name_does_not_match(self):
        assert flatten_deref(QualifiedRef(("Mod",), "f")) is None

    def test_literals_do_not_match(self):
        assert flatten_deref(IntLiteral(1)) is None
        assert flatten_deref(RatLiteral(Fraction(1, 2))) is None
        assert flatten_deref(Apply(LocalRef("f"), IntLiteral(1))) is None
