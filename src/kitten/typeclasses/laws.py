"""Functor and applicative laws as executable checks."""

# Every Applicative instance must satisfy the following laws, where ==
# compares observed results (functions and Kleislis are observed by
# running them on a sample input):
#
# 1. Functor identity: map(fa, id) == fa
#
# 2. Functor composition: map(map(fa, f), g) == map(fa, g . f)
#
# 3. Applicative identity: ap(pure(id), fa) == fa
#
# 4. Homomorphism: ap(pure(f), pure(a)) == pure(f(a))
#
# 5. Interchange: ap(ff, pure(a)) == ap(pure(lambda g: g(a)), ff)
#
# 6. Product associativity: product(product(fa, fb), fc) and
#    product(fa, product(fb, fc)) agree up to reassociating the tuples

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kitten.typeclasses.applicative import Applicative

Observe = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def functor_identity(app: Applicative, fa: Any, observe: Observe = _identity) -> bool:
    return observe(app.map(fa, _identity)) == observe(fa)


def functor_composition(
    app: Applicative,
    fa: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    observe: Observe = _identity,
) -> bool:
    lhs = app.map(app.map(fa, f), g)
    rhs = app.map(fa, lambda a: g(f(a)))
    return observe(lhs) == observe(rhs)


def applicative_identity(app: Applicative, fa: Any, observe: Observe = _identity) -> bool:
    return observe(app.ap(app.pure(_identity), fa)) == observe(fa)


def applicative_homomorphism(
    app: Applicative, f: Callable[[Any], Any], a: Any, observe: Observe = _identity
) -> bool:
    return observe(app.ap(app.pure(f), app.pure(a))) == observe(app.pure(f(a)))


def applicative_interchange(app: Applicative, ff: Any, a: Any, observe: Observe = _identity) -> bool:
    lhs = app.ap(ff, app.pure(a))
    rhs = app.ap(app.pure(lambda g: g(a)), ff)
    return observe(lhs) == observe(rhs)


def product_associativity(
    app: Applicative, fa: Any, fb: Any, fc: Any, observe: Observe = _identity
) -> bool:
    lhs = app.map(app.product(app.product(fa, fb), fc), lambda t: (t[0][0], (t[0][1], t[1])))
    rhs = app.product(fa, app.product(fb, fc))
    return observe(lhs) == observe(rhs)
