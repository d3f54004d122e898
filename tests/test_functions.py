import pytest
from util.errors import InvalidArgument
from util.functions import check_segment, parse_token_bindings, strip_bearer


def test_strip_bearer_only_removes_leading_prefix():
    assert strip_bearer("Bearer abc") == "abc"
    assert strip_bearer("abc") == "abc"
    assert strip_bearer("bearer abc") == "bearer abc"
    assert strip_bearer("Bearer Bearer abc") == "Bearer abc"


def test_parse_token_bindings_trims_and_skips_malformed():
    raw = " t1:dev , t2 : staging,broken,a:b:c,:ns,tok:, t3:prod "
    assert parse_token_bindings(raw) == {"t1": "dev", "t2": "staging", "t3": "prod"}


def test_parse_token_bindings_empty():
    assert parse_token_bindings("") == {}
    assert parse_token_bindings(" , ,") == {}


@pytest.mark.parametrize("value", ["", ".", "..", "a/b", "a\\b", "x\x00y", "old.yamlet-tmp"])
def test_check_segment_rejects(value):
    with pytest.raises(InvalidArgument):
        check_segment(value, "name")


def test_check_segment_accepts_plain_names():
    assert check_segment("app.yaml", "name") == "app.yaml"
    assert check_segment(".hidden", "name") == ".hidden"
