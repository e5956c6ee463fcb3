import pytest

from pymal.reader.parser import read_str
from pymal.types.symbol import Symbol
from pymal.types.values import HashMap, List, Vector


@pytest.mark.parametrize(
    "source,expected",
    [
        ("'a", List([Symbol("quote"), Symbol("a")])),
        ("`a", List([Symbol("quasiquote"), Symbol("a")])),
        ("~a", List([Symbol("unquote"), Symbol("a")])),
        ("~@a", List([Symbol("splice-unquote"), Symbol("a")])),
        ("@a", List([Symbol("deref"), Symbol("a")])),
        ("'(1 2)", List([Symbol("quote"), List([1, 2])])),
        ("''a", List([Symbol("quote"), List([Symbol("quote"), Symbol("a")])])),
        ("`(1 ~a ~@b)", List([
            Symbol("quasiquote"),
            List([
                1,
                List([Symbol("unquote"), Symbol("a")]),
                List([Symbol("splice-unquote"), Symbol("b")]),
            ]),
        ])),
    ]
)
def test_quote_shorthands(source, expected):
    assert read_str(source) == expected


def test_with_meta_reads_metadata_before_target():
    form = read_str('^{"a" 1} [1 2 3]')
    assert form == List([Symbol("with-meta"), Vector([1, 2, 3]), HashMap(["a", 1])])
    assert type(form[1]) is Vector
    assert type(form[2]) is HashMap


def test_shorthands_print_as_plain_lists():
    from pymal.printer import pr_str

    assert pr_str(read_str("'(a ~b)")) == "(quote (a (unquote b)))"
    assert pr_str(read_str("^:m x")) == "(with-meta x :m)"
