import json

from botmodels.dialog.query_map import (
    ANY_QUERY,
    build_query_map,
    make_query_key,
    normalize_query,
    parse_query_key,
    serialize_query_key,
)
from botmodels.dialog.record import Record


def test_normalize_query_only_sentinel_is_null():
    assert normalize_query(ANY_QUERY) is None
    for raw in ["any", "{{ any }}", "{{ANY}}", "", "null", "Hello"]:
        assert normalize_query(raw) == raw


def test_key_shapes():
    assert make_query_key("Hello") == ["Hello"]
    assert make_query_key("Hello", "") == ["Hello"]
    assert make_query_key("Hello", None) == ["Hello"]
    assert make_query_key(None, "greeting") == [None, "greeting"]


def test_serialized_key_is_compact_json():
    assert serialize_query_key(["Hello"]) == '["Hello"]'
    assert serialize_query_key([None, "greeting"]) == '[null,"greeting"]'
    assert serialize_query_key(["Café"]) == '["Café"]'


def test_key_round_trip():
    for key in (["Hello"], [None], [None, "a,b"], ['say "hi"', "s1"]):
        assert parse_query_key(serialize_query_key(key)) == key


def test_plain_row():
    qm = build_query_map([Record("Hello", "Hi there", "", "")])
    assert list(qm) == ['["Hello"]']
    assert qm['["Hello"]'].to_dict() == {"Query": "Hello", "Response": "Hi there", "States": "", "NewState": ""}


def test_any_row_is_stored_with_null_query():
    qm = build_query_map([Record(ANY_QUERY, "Default reply", "greeting", "")])
    rec = qm['[null,"greeting"]']
    assert rec.Query is None
    assert rec.to_dict() == {"Query": None, "Response": "Default reply", "States": "greeting", "NewState": ""}


def test_last_write_wins():
    qm = build_query_map([
        Record("Hi", "first", "s", "a"),
        Record("Other", "x", "", ""),
        Record("Hi", "second", "s", "b"),
    ])
    assert len(qm) == 2
    assert qm['["Hi","s"]'].Response == "second"
    assert qm['["Hi","s"]'].NewState == "b"


def test_empty_and_absent_states_share_a_key():
    qm = build_query_map([Record("Hi", "first", "", ""), Record("Hi", "second")])
    assert list(qm) == ['["Hi"]']
    assert qm['["Hi"]'].to_dict() == {"Query": "Hi", "Response": "second"}


def test_every_key_decodes_to_its_record():
    records = [Record("a", "1", "s1", ""), Record(ANY_QUERY, "2", "", ""), Record("b", "3")]
    for key, rec in build_query_map(records).items():
        decoded = json.loads(key)
        assert decoded[0] == rec.Query
        assert decoded[1:] == ([rec.States] if rec.States else [])
