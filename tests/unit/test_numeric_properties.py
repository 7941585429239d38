from hypothesis import given, strategies as st

from typed_registry.utils import INT_MAX, INT_MIN, cast_numeric

_digits = st.text(alphabet="0123456789", min_size=1, max_size=30)
_sign = st.sampled_from(["", "+", "-"])


@given(n=st.integers(INT_MIN, INT_MAX))
def test_int_branch_is_stable_under_restringification(n):
    value = cast_numeric(str(n))
    assert type(value) is int
    assert cast_numeric(str(value)) == value == n


@given(sign=_sign, digits=_digits)
def test_whole_number_casts_to_int_or_float(sign, digits):
    value = cast_numeric(sign + digits)
    n = int(sign + digits)
    if INT_MIN <= n <= INT_MAX:
        assert type(value) is int and value == n
        again = cast_numeric(str(value))
        assert type(again) is int and again == value
    else:
        assert type(value) is float


@given(sign=_sign, whole=_digits, frac=_digits, exp=st.integers(-300, 300))
def test_decimal_or_exponent_never_yields_int(sign, whole, frac, exp):
    for raw in (f"{sign}{whole}.{frac}", f"{sign}{whole}e{exp}", f"{sign}{whole}.{frac}E{exp}"):
        assert type(cast_numeric(raw)) is float


@given(n=st.integers(min_value=INT_MAX + 1, max_value=INT_MAX * 1000))
def test_overflow_falls_back_to_float(n):
    for raw in (str(n), str(-n - 1)):
        value = cast_numeric(raw)
        assert type(value) is float
        assert value == float(raw)
