"""Tests for case loading and schema validation."""

import json
import logging
import os
import sys

import pytest

from secretrecovery.cases.loader import Case, load_case, parse_case
from secretrecovery.crypto.lagrange import Point
from secretrecovery.errors import (
    InvalidDigit,
    MalformedSchema,
    SecretRecoveryError,
    SourceNotFound,
    SourceUnreadable,
)

CASES_DIR = os.path.join(os.path.dirname(__file__), os.pardir, "cases")


def _doc(**shares):
    doc = {"keys": {"n": len(shares), "k": 2}}
    doc.update(shares)
    return json.dumps(doc)


def test_load_tc1():
    case = load_case(os.path.join(CASES_DIR, "tc1.json"))
    assert isinstance(case, Case)
    assert (case.n, case.k, case.degree) == (4, 3, 2)
    assert case.points == [Point(1, 4), Point(2, 7), Point(3, 12), Point(6, 39)]


def test_load_tc2_decodes_all_bases():
    case = load_case(os.path.join(CASES_DIR, "tc2.json"))
    assert [p.x for p in case.points] == [1, 2, 3, 4, 5, 7]
    assert [p.y for p in case.points] == [1010, 1026, 1048, 1076, 1110, 1296]


def test_binary_share_decoded():
    case = parse_case(_doc(**{"1": {"base": "2", "value": "111"}, "2": {"base": "10", "value": "9"}}))
    assert case.points[0] == Point(1, 7)


def test_order_of_appearance_kept():
    text = '{"3": {"base": "10", "value": "1"}, "keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "2"}}'
    assert [p.x for p in parse_case(text).points] == [3, 1]


def test_whitespace_tolerated():
    text = '\n{ "keys" :{"n":2 ,\t"k" : 1},\n  "1":{ "base":"10","value":"5" } , "2" : {"base" : "16" , "value":"a"}}  '
    assert parse_case(text).points == [Point(1, 5), Point(2, 10)]


def test_missing_file(tmp_path):
    path = tmp_path / "nope.json"
    with pytest.raises(SourceNotFound, match="nope.json"):
        load_case(path)


def test_missing_file_is_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_case(tmp_path / "nope.json")


def test_directory_unreadable(tmp_path):
    with pytest.raises(SourceUnreadable):
        load_case(tmp_path)


def test_invalid_json():
    with pytest.raises(MalformedSchema, match="invalid JSON"):
        parse_case("{not json", "bad.json")


def test_top_level_not_object():
    with pytest.raises(MalformedSchema, match="object"):
        parse_case("[1, 2]")


def test_missing_keys():
    with pytest.raises(MalformedSchema, match="missing 'keys'"):
        parse_case('{"1": {"base": "10", "value": "1"}}')


def test_missing_k():
    with pytest.raises(MalformedSchema, match="keys: k"):
        parse_case('{"keys": {"n": 1}, "1": {"base": "10", "value": "1"}}')


def test_k_exceeds_n():
    with pytest.raises(MalformedSchema, match="exceeds"):
        parse_case('{"keys": {"n": 1, "k": 2}, "1": {"base": "10", "value": "1"}}')


def test_k_zero():
    with pytest.raises(MalformedSchema):
        parse_case('{"keys": {"n": 1, "k": 0}, "1": {"base": "10", "value": "1"}}')


def test_share_missing_value():
    with pytest.raises(MalformedSchema, match="share '2': value"):
        parse_case(_doc(**{"1": {"base": "10", "value": "1"}, "2": {"base": "10"}}))


def test_share_extra_field():
    with pytest.raises(MalformedSchema, match="share '1'"):
        parse_case(_doc(**{"1": {"base": "10", "value": "1", "x": 3}, "2": {"base": "10", "value": "1"}}))


@pytest.mark.parametrize("base", ["1", "37", "ten", 10])
def test_share_bad_base(base):
    with pytest.raises(MalformedSchema, match="base"):
        parse_case(_doc(**{"1": {"base": base, "value": "1"}, "2": {"base": "10", "value": "1"}}))


def test_non_decimal_share_key():
    with pytest.raises(MalformedSchema, match="'x1'"):
        parse_case(_doc(**{"x1": {"base": "10", "value": "1"}, "2": {"base": "10", "value": "1"}}))


def test_duplicate_json_key():
    text = '{"keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "1"}, "1": {"base": "10", "value": "2"}}'
    with pytest.raises(MalformedSchema, match="duplicate key '1'"):
        parse_case(text)


def test_same_x_different_spelling():
    with pytest.raises(MalformedSchema, match="repeats x=1"):
        parse_case(_doc(**{"1": {"base": "10", "value": "1"}, "01": {"base": "10", "value": "2"}}))


def test_invalid_digit_carries_context():
    with pytest.raises(InvalidDigit) as info:
        parse_case(_doc(**{"1": {"base": "10", "value": "1"}, "2": {"base": "2", "value": "102"}}), "tc9.json")
    err = info.value
    assert (err.char, err.position, err.base) == ("2", 2, 2)
    assert err.source == "tc9.json"
    assert err.key == "2"
    assert "tc9.json: share '2'" in str(err)


def test_too_few_shares():
    text = '{"keys": {"n": 3, "k": 3}, "1": {"base": "10", "value": "1"}}'
    with pytest.raises(MalformedSchema, match="threshold k=3"):
        parse_case(text)


def test_share_count_mismatch_warns(caplog):
    text = '{"keys": {"n": 5, "k": 1}, "1": {"base": "10", "value": "1"}, "2": {"base": "10", "value": "1"}}'
    with caplog.at_level(logging.WARNING, logger="secretrecovery.cases.loader"):
        case = parse_case(text, "short.json")
    assert len(case.points) == 2
    assert "keys.n=5 but 2 shares" in caplog.text


def test_all_errors_share_base_class(tmp_path):
    for bad in (lambda: load_case(tmp_path / "x.json"), lambda: parse_case("{")):
        with pytest.raises(SecretRecoveryError):
            bad()


def test_shares_keep_base_and_raw():
    case = load_case(os.path.join(CASES_DIR, "tc1.json"))
    share = case.shares[1]
    assert (share.x, share.base, share.raw, share.y) == (2, 2, "111", 7)
    assert [s.y for s in case.shares] == [p.y for p in case.points]


@pytest.mark.parametrize("key", ["²", "٣", "１"])
def test_non_ascii_digit_key(key):
    doc = {"keys": {"n": 1, "k": 1}, key: {"base": "10", "value": "1"}}
    with pytest.raises(MalformedSchema, match="not a decimal x-coordinate"):
        parse_case(json.dumps(doc))


@pytest.mark.parametrize("base", ["١٠", "²"])
def test_non_ascii_digit_base(base):
    with pytest.raises(MalformedSchema, match="base"):
        parse_case(_doc(**{"1": {"base": base, "value": "1"}, "2": {"base": "10", "value": "1"}}))


@pytest.mark.skipif(not getattr(sys, "get_int_max_str_digits", lambda: 0)(), reason="no int digit limit")
def test_overlong_share_key():
    doc = {"keys": {"n": 1, "k": 1}, "1" * (sys.get_int_max_str_digits() + 1): {"base": "10", "value": "1"}}
    with pytest.raises(MalformedSchema, match="too long"):
        parse_case(json.dumps(doc))
