"""Functor, monad and applicative laws for Toxic."""

from hypothesis import given

from elevated import apply, bind, compose, identity, map, pure

from .conftest import int_functions, ints, values


class TestFunctorLaws:
    @given(value=values)
    def test_identity(self, value):
        assert map(identity)(pure(value)) == identity(pure(value))

    @given(value=ints, f=int_functions, g=int_functions)
    def test_composition(self, value, f, g):
        x = pure(value)

        assert map(compose(g, f))(x) == compose(map(g), map(f))(x)


class TestMonadLaws:
    @given(value=values)
    def test_bind_pure_is_identity(self, value):
        assert bind(pure)(pure(value)) == pure(value)

    @given(value=ints, f=int_functions)
    def test_left_identity(self, value, f):
        def toxic_f(x: int):
            return pure(f(x))

        assert bind(toxic_f)(pure(value)) == toxic_f(value)

    @given(value=ints, f=int_functions, g=int_functions)
    def test_associativity(self, value, f, g):
        def toxic_f(x: int):
            return pure(f(x))

        def toxic_g(x: int):
            return pure(g(x))

        m = pure(value)
        chained = bind(toxic_g)(bind(toxic_f)(m))
        nested = bind(lambda x: bind(toxic_g)(toxic_f(x)))(m)

        assert chained == nested


class TestApplicativeLaws:
    @given(value=ints, f=int_functions)
    def test_homomorphism(self, value, f):
        assert apply(pure(f))(pure(value)) == pure(f(value))

    @given(value=values)
    def test_identity(self, value):
        assert apply(pure(identity))(pure(value)) == pure(value)

    @given(value=ints, f=int_functions)
    def test_agrees_with_map(self, value, f):
        assert apply(pure(f))(pure(value)) == map(f)(pure(value))


class TestUnwrapLaw:
    @given(value=values)
    def test_unwrap_of_double_pure(self, value):
        assert pure(pure(value)).unwrap() == pure(value)
