import pytest

from telemkit.value import (
    Decimal64,
    DeprecatedScalar,
    ScalarArray,
    ScalarError,
    TypedValue,
    ValueKind,
    equal,
    from_scalar,
    to_scalar,
)


def s(v):
    return TypedValue(ValueKind.STRING, v)


def leaflist(*elems):
    return TypedValue(ValueKind.LEAFLIST, ScalarArray(list(elems)))


@pytest.mark.parametrize(
    "given, want",
    [
        ("foo", s("foo")),
        ("a longer multiword string", s("a longer multiword string")),
        (500, TypedValue(ValueKind.INT, 500)),
        (50, TypedValue(ValueKind.INT, 50)),
        (2**63, TypedValue(ValueKind.UINT, 2**63)),
        (3.5, TypedValue(ValueKind.DOUBLE, 3.5)),
        (True, TypedValue(ValueKind.BOOL, True)),
        (False, TypedValue(ValueKind.BOOL, False)),
        (b"foo", TypedValue(ValueKind.BYTES, b"foo")),
        (["a", "b"], leaflist(s("a"), s("b"))),
        ([], TypedValue(ValueKind.LEAFLIST, ScalarArray())),
        (("a", "b"), leaflist(s("a"), s("b"))),
        (["a", 1], leaflist(s("a"), TypedValue(ValueKind.INT, 1))),
    ],
)
def test_from_scalar(given, want):
    assert from_scalar(given) == want


@pytest.mark.parametrize(
    "given",
    ["a non-utf-8 string \udcff", {"a": 1}, object(), ["a", {"b": 2}], 2**64, -(2**63) - 1],
)
def test_from_scalar_errors(given):
    with pytest.raises(ScalarError):
        from_scalar(given)


@pytest.mark.parametrize(
    "tv, want",
    [
        (s("foo"), "foo"),
        (s("a longer multiword string"), "a longer multiword string"),
        (TypedValue(ValueKind.INT, 500), 500),
        (TypedValue(ValueKind.UINT, 500), 500),
        (TypedValue(ValueKind.FLOAT, 3.5), 3.5),
        (TypedValue(ValueKind.DOUBLE, 4.5), 4.5),
        (TypedValue(ValueKind.BOOL, True), True),
        (TypedValue(ValueKind.BOOL, False), False),
        (leaflist(s("a"), s("b")), ["a", "b"]),
        (TypedValue(ValueKind.LEAFLIST, ScalarArray()), []),
        (TypedValue(ValueKind.LEAFLIST, None), []),
        (
            leaflist(s("a"), TypedValue(ValueKind.INT, 1), TypedValue(ValueKind.UINT, 1)),
            ["a", 1, 1],
        ),
        (TypedValue(ValueKind.BYTES, b"foo"), b"foo"),
        (
            TypedValue(
                ValueKind.JSON, b'{"a":1,"b":"foo"}'
            ),
            DeprecatedScalar("Deprecated TypedValue_JsonVal", {"a": 1.0, "b": "foo"}),
        ),
        (
            TypedValue(ValueKind.JSON_IETF, b'{"a":1,"b":"foo"}'),
            DeprecatedScalar("Deprecated TypedValue_JsonIetfVal", {"a": 1.0, "b": "foo"}),
        ),
    ],
)
def test_to_scalar(tv, want):
    assert to_scalar(tv) == want


def test_to_scalar_json_numbers_are_floats():
    got = to_scalar(TypedValue(ValueKind.JSON, b'{"a":1,"b":"foo"}'))
    assert got.message == "Deprecated TypedValue_JsonVal"
    assert repr(got.value["a"]) == "1.0"
    assert got.value["b"] == "foo"


@pytest.mark.parametrize(
    "digits, precision, want",
    [(312, 1, 31.2), (5, 0, 5.0), (5678, 18, 0.000000000000005678)],
)
def test_to_scalar_decimal(digits, precision, want):
    got = to_scalar(TypedValue(ValueKind.DECIMAL, Decimal64(digits, precision)))
    assert got == pytest.approx(want, rel=1e-6)


@pytest.mark.parametrize(
    "tv",
    [
        TypedValue(ValueKind.ANY, None),
        TypedValue(ValueKind.JSON, b""),
        TypedValue(ValueKind.JSON_IETF, b""),
        TypedValue(ValueKind.ASCII, ""),
        TypedValue(),
        None,
        leaflist(s("a"), TypedValue(ValueKind.ASCII, "x")),
    ],
)
def test_to_scalar_errors(tv):
    with pytest.raises(ScalarError):
        to_scalar(tv)


def test_round_trip():
    for v in ["x", 7, 2**63, True, 1.25, b"\x00\x01", ["a", 1, False]]:
        assert to_scalar(from_scalar(v)) == v


def dec(d, p):
    return TypedValue(ValueKind.DECIMAL, Decimal64(d, p))


def strs(*names):
    return leaflist(*(s(n) for n in names))


EQUAL_CASES = [
    ("String equal", s("foo"), s("foo"), True),
    ("Int equal", TypedValue(ValueKind.INT, 1234), TypedValue(ValueKind.INT, 1234), True),
    ("Uint equal", TypedValue(ValueKind.UINT, 1234), TypedValue(ValueKind.UINT, 1234), True),
    ("Bool equal", TypedValue(ValueKind.BOOL, True), TypedValue(ValueKind.BOOL, True), True),
    (
        "Bytes equal",
        TypedValue(ValueKind.BYTES, bytes([1, 2, 3])),
        TypedValue(ValueKind.BYTES, bytes([1, 2, 3])),
        True,
    ),
    (
        "Double equal",
        TypedValue(ValueKind.DOUBLE, 1234.56789123456),
        TypedValue(ValueKind.DOUBLE, 1234.56789123456),
        True,
    ),
    (
        "Float equal",
        TypedValue(ValueKind.FLOAT, 1234.56789),
        TypedValue(ValueKind.FLOAT, 1234.56789),
        True,
    ),
    ("Decimal equal", dec(1234, 10), dec(1234, 10), True),
    ("Leaflist equal", strs("one", "two", "three"), strs("one", "two", "three"), True),
    ("String not equal", s("foo"), s("bar"), False),
    ("Int not equal", TypedValue(ValueKind.INT, 1234), TypedValue(ValueKind.INT, 123456789), False),
    (
        "Uint not equal",
        TypedValue(ValueKind.UINT, 1234),
        TypedValue(ValueKind.UINT, 123456789),
        False,
    ),
    ("Bool not equal", TypedValue(ValueKind.BOOL, False), TypedValue(ValueKind.BOOL, True), False),
    (
        "Bytes not equal",
        TypedValue(ValueKind.BYTES, bytes([2, 3])),
        TypedValue(ValueKind.BYTES, bytes([1, 2, 3])),
        False,
    ),
    (
        "Double not equal",
        TypedValue(ValueKind.DOUBLE, 12340.56789),
        TypedValue(ValueKind.DOUBLE, 1234.56789),
        False,
    ),
    (
        "Float not equal",
        TypedValue(ValueKind.FLOAT, 12340.56789),
        TypedValue(ValueKind.FLOAT, 1234.56789),
        False,
    ),
    ("Decimal not equal", dec(1234, 11), dec(1234, 10), False),
    ("Leaflist not equal", strs("one", "two", "three"), strs("one", "two", "four"), False),
    ("Types not equal - String", s("foo"), dec(1234, 10), False),
    ("Types not equal - Int", TypedValue(ValueKind.INT, 5), dec(1234, 10), False),
    ("Types not equal - Uint", TypedValue(ValueKind.UINT, 5), dec(1234, 10), False),
    ("Types not equal - Bool", TypedValue(ValueKind.BOOL, True), dec(1234, 10), False),
    (
        "Types not equal - Double",
        TypedValue(ValueKind.FLOAT, 5.25),
        TypedValue(ValueKind.DOUBLE, 5.25),
        False,
    ),
    ("Types not equal - Float", TypedValue(ValueKind.FLOAT, 5.25), dec(1234, 10), False),
    ("Types not equal - Decimal", dec(1234, 10), TypedValue(ValueKind.INT, 5), False),
    (
        "Types not equal - Leaflist",
        strs("one", "two", "three"),
        TypedValue(ValueKind.INT, 5),
        False,
    ),
    ("Nil values not compared", None, None, False),
    ("Empty values not compared", TypedValue(), TypedValue(), False),
    (
        "Proto values not compared",
        TypedValue(ValueKind.ANY, s("any val")),
        TypedValue(ValueKind.ANY, s("any val")),
        False,
    ),
    (
        "JSON values not compared",
        TypedValue(ValueKind.JSON, b"5"),
        TypedValue(ValueKind.JSON, b"5"),
        False,
    ),
    (
        "JSON IETF values not compared",
        TypedValue(ValueKind.JSON_IETF, b"10.5"),
        TypedValue(ValueKind.JSON_IETF, b"10.5"),
        False,
    ),
    (
        "ASCII values not compared",
        TypedValue(ValueKind.ASCII, "foo"),
        TypedValue(ValueKind.ASCII, "foo"),
        False,
    ),
]


@pytest.mark.parametrize("name, a, b, want", EQUAL_CASES, ids=[c[0] for c in EQUAL_CASES])
def test_equal(name, a, b, want):
    assert equal(a, b) is want