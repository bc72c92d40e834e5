import json
import threading

import pytest

from labelenum.errors import (
    BinaryDataTooShortError,
    BinaryDataTruncatedError,
    EnumError,
    InvalidEnumValueError,
)
from labelenum.registry import get_labels, register
from labelenum.wrapper import Wrapper, new_wrapper


class CustomInt(int):
    pass


class WrapperRegistryKind(int):
    pass


class WrapperEnsureKind(int):
    pass


class WrapperLocalKind(int):
    pass


class WrapperUnknownKind(int):
    pass


def test_new_wrapper():
    labels = ["first", "second", "third"]
    w = new_wrapper(int, *labels)
    assert w.enum.labels() == labels
    assert w.current == 0


@pytest.mark.parametrize(
    "value, expected",
    [(0, "alpha"), (1, "beta"), (2, "gamma"), (5, "Invalid(5)")],
)
def test_str(value, expected):
    w = new_wrapper(int, "alpha", "beta", "gamma")
    w.current = value
    assert str(w) == expected


def test_all():
    assert new_wrapper(int, "red", "green", "blue").all() == [0, 1, 2]


def test_labels_copy():
    w = new_wrapper(int, "monday", "tuesday", "wednesday")
    result = w.labels()
    assert result == ["monday", "tuesday", "wednesday"]
    result[0] = "modified"
    assert w.labels()[0] == "monday"


def test_current_attribute():
    w = new_wrapper(int, "one", "two", "three")
    assert w.current == 0
    w.current = 2
    assert w.current == 2
    assert str(w) == "three"


@pytest.mark.parametrize(
    "value, expected",
    [(0, '"spring"'), (2, '"autumn"'), (3, '"winter"'), (10, '"Invalid"')],
)
def test_to_json(value, expected):
    w = new_wrapper(int, "spring", "summer", "autumn", "winter")
    w.current = value
    assert w.to_json() == expected


@pytest.mark.parametrize("data, expected", [('"dog"', 0), ('"bird"', 2), ('"fish"', 3)])
def test_from_json_valid(data, expected):
    w = new_wrapper(int, "dog", "cat", "bird", "fish")
    w.current = 99
    w.from_json(data)
    assert w.current == expected


@pytest.mark.parametrize("data", ['"elephant"', "invalid json", "123"])
def test_from_json_invalid(data):
    w = new_wrapper(int, "dog", "cat", "bird", "fish")
    with pytest.raises(ValueError):
        w.from_json(data)


@pytest.mark.parametrize(
    "value, expected",
    [(0, "north"), (2, "east"), (3, "west"), (10, "Invalid")],
)
def test_to_yaml(value, expected):
    w = new_wrapper(int, "north", "south", "east", "west")
    w.current = value
    assert w.to_yaml() == expected


def _unmarshaller(node):
    def unmarshal(target):
        assert target is str
        return node

    return unmarshal


@pytest.mark.parametrize("node, expected", [("small", 0), ("medium", 1), ("large", 2)])
def test_from_yaml_valid(node, expected):
    w = new_wrapper(int, "small", "medium", "large")
    w.current = 99
    w.from_yaml(_unmarshaller(node))
    assert w.current == expected


def test_from_yaml_invalid_label():
    w = new_wrapper(int, "small", "medium", "large")
    with pytest.raises(InvalidEnumValueError):
        w.from_yaml(_unmarshaller("huge"))


def test_from_yaml_non_string():
    w = new_wrapper(int, "small", "medium", "large")
    with pytest.raises(TypeError):
        w.from_yaml(_unmarshaller(123))


def test_json_round_trip():
    labels = ["red", "green", "blue", "yellow", "orange"]
    w = new_wrapper(int, *labels)
    for i in range(5):
        w.current = i
        other = new_wrapper(int, *labels)
        other.from_json(w.to_json())
        assert other.current == i


def test_custom_kind():
    w = new_wrapper(CustomInt, "first", "second")
    w.current = CustomInt(1)
    assert str(w) == "second"
    assert w.to_json() == '"second"'
    w.from_text(b"first")
    assert w.current == 0
    assert type(w.current) is CustomInt


def test_concurrent_reads():
    w = new_wrapper(int, "concurrent1", "concurrent2", "concurrent3")
    w.current = 1
    results = []
    lock = threading.Lock()

    def read():
        outcome = (str(w), w.current, w.all(), w.labels(), w.to_json(), w.to_yaml())
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=read) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    expected = (
        "concurrent2",
        1,
        [0, 1, 2],
        ["concurrent1", "concurrent2", "concurrent3"],
        '"concurrent2"',
        "concurrent2",
    )
    assert results == [expected] * 10
    assert w.current == 1


def test_text_marshalling():
    w = new_wrapper(int, "first", "second", "third")
    w.current = 1
    assert w.to_text() == b"second"
    other = new_wrapper(int, "first", "second", "third")
    other.from_text(b"third")
    assert other.current == 2
    assert other.to_text() == b"third"


def test_binary_marshalling():
    w = new_wrapper(int, "alpha", "beta", "gamma")
    w.current = 2
    assert w.to_binary() == b"\x00\x05gamma"
    other = new_wrapper(int, "alpha", "beta", "gamma")
    test_data = bytes([0, 4]) + b"beta"
    other.from_binary(test_data)
    assert other.current == 1
    assert other.to_binary() == test_data


def test_text_unmarshal_invalid():
    w = new_wrapper(int, "valid1", "valid2")
    with pytest.raises(InvalidEnumValueError):
        w.from_text(b"invalid")


@pytest.mark.parametrize(
    "data, error",
    [
        (b"", BinaryDataTooShortError),
        (bytes([0, 10]) + b"ab", BinaryDataTruncatedError),
        (bytes([0, 7]) + b"invalid", InvalidEnumValueError),
    ],
)
def test_binary_unmarshal_invalid(data, error):
    w = new_wrapper(int, "valid1", "valid2")
    with pytest.raises(error):
        w.from_binary(data)


def test_all_encodings_single_label():
    w = new_wrapper(int, "test")
    assert w.to_text() == b"test"
    assert w.to_binary() == b"\x00\x04test"
    assert w.value() == "test"
    w.current = 5
    w.from_text(b"test")
    assert w.current == 0
    w.current = 5
    w.from_binary(b"\x00\x04test")
    assert w.current == 0
    w.current = 5
    w.scan("test")
    assert w.current == 0


@pytest.mark.parametrize("value, expected", [(0, "red"), (1, "green"), (2, "blue")])
def test_sql_value(value, expected):
    w = new_wrapper(int, "red", "green", "blue")
    w.current = value
    assert w.value() == expected


def test_sql_value_invalid():
    w = new_wrapper(int, "red", "green", "blue")
    w.current = 5
    with pytest.raises(InvalidEnumValueError):
        w.value()


@pytest.mark.parametrize(
    "src, expected",
    [("alpha", 0), ("beta", 1), ("gamma", 2), (b"alpha", 0), (None, 0)],
)
def test_scan_valid(src, expected):
    w = new_wrapper(int, "alpha", "beta", "gamma")
    w.current = 999
    w.scan(src)
    assert w.current == expected


@pytest.mark.parametrize("src", ["invalid", 123])
def test_scan_invalid(src):
    w = new_wrapper(int, "alpha", "beta", "gamma")
    with pytest.raises(InvalidEnumValueError):
        w.scan(src)


@pytest.mark.parametrize("value", [0, 1, 2])
def test_sql_round_trip(value):
    first = new_wrapper(int, "one", "two", "three")
    second = new_wrapper(int, "one", "two", "three")
    first.current = value
    second.scan(first.value())
    assert second.current == first.current


def test_error_details_from_wrapper():
    w = new_wrapper(int, "red", "green", "blue")

    with pytest.raises(InvalidEnumValueError) as info:
        w.from_json('"yellow"')
    assert info.value.value == "yellow"
    assert len(info.value.valid_values) == 3

    with pytest.raises(BinaryDataTooShortError) as short:
        w.from_binary(b"")
    assert (short.value.expected, short.value.actual) == (2, 0)

    with pytest.raises(BinaryDataTruncatedError) as truncated:
        w.from_binary(bytes([0, 10]) + b"ab")
    assert (truncated.value.expected, truncated.value.actual) == (12, 4)

    with pytest.raises(InvalidEnumValueError) as text_info:
        w.from_text(b"purple")
    assert text_info.value.value == "purple"


def test_ensure_enum_through_from_json():
    labels = ["red", "green", "blue"]
    w = Wrapper(WrapperEnsureKind, labels=labels, enum=None, current=1)
    w.from_json('"green"')
    assert w.enum is not None
    assert w.enum.labels() == labels
    assert w.current == 1


@pytest.mark.parametrize(
    "decode, expected",
    [
        (lambda w: w.from_json('"medium"'), 1),
        (lambda w: w.from_text(b"large"), 2),
        (lambda w: w.from_binary(b"\x00\x05small"), 0),
        (lambda w: w.scan("medium"), 1),
    ],
)
def test_ensure_enum_with_every_decoder(decode, expected):
    labels = ["small", "medium", "large"]
    w = Wrapper(WrapperEnsureKind, labels=labels, enum=None, current=0)
    decode(w)
    assert w.enum.labels() == labels
    assert w.current == expected


def test_new_wrapper_registers_labels():
    labels = ["alpha", "beta", "gamma"]
    w = new_wrapper(WrapperRegistryKind, *labels)
    assert get_labels(WrapperRegistryKind) == labels
    assert w.enum.labels() == labels


def test_ensure_enum_uses_registry():
    labels = ["morning", "afternoon", "evening"]
    register(WrapperRegistryKind, *labels)
    w = Wrapper(WrapperRegistryKind, current=1)
    w.ensure_enum()
    assert w.enum.labels() == labels
    assert w.labels() == labels
    assert str(w) == "afternoon"


def test_ensure_enum_prefers_local_labels():
    register(WrapperLocalKind, "global1", "global2", "global3")
    w = Wrapper(WrapperLocalKind, labels=["local1", "local2"], current=0)
    w.ensure_enum()
    assert w.enum.labels() == ["local1", "local2"]


def test_missing_labels_raise():
    w = Wrapper(WrapperUnknownKind)
    with pytest.raises(EnumError, match="no labels known"):
        w.from_json(json.dumps("anything"))