from __future__ import annotations

from io import StringIO

import pytest

from pyfconf import ConfigParser, ConfigStore, NumericParseError

TEXT = """\
[num]
int = 42
neg = -7
plus = +5
big = 9223372036854775807
small = -9223372036854775808
huge = 9223372036854775808
pi = 3.14
exp = 1e3
under = 1_000
word = abc
empty =
[mysql]
db1.Host = 127.0.0.1
"""


@pytest.fixture
def store() -> ConfigStore:
    return ConfigParser.readstream(StringIO(TEXT))


def test_get_str_malformed_paths(store: ConfigStore) -> None:
    assert store.get_str("mysql") == ""
    assert store.get_str("mysql.") == ""
    assert store.get_str("") == ""
    assert store.get_str("nosuch.key") == ""
    assert store.get_str("mysql.db1.Host") == "127.0.0.1"
    assert store.get_str("mysql.db1_Host") == "127.0.0.1"


def test_get_int(store: ConfigStore) -> None:
    assert store.get_int("num.int") == 42
    assert store.get_int("num.neg") == -7
    assert store.get_int("num.plus") == 5


@pytest.mark.parametrize("path", ["num.pi", "num.word", "num.empty",
                                  "num.under", "num.missing"])
def test_get_int_rejects(store: ConfigStore, path: str) -> None:
    with pytest.raises(NumericParseError) as e:
        store.get_int(path)
    assert isinstance(e.value, ValueError)
    assert isinstance(e.value.__cause__, ValueError)
    assert e.value.path == path


def test_get_int64_range(store: ConfigStore) -> None:
    assert store.get_int64("num.big") == 2 ** 63 - 1
    assert store.get_int64("num.small") == -(2 ** 63)
    assert store.get_int("num.huge") == 2 ** 63
    with pytest.raises(NumericParseError):
        store.get_int64("num.huge")


def test_get_float64(store: ConfigStore) -> None:
    assert store.get_float64("num.pi") == pytest.approx(3.14)
    assert store.get_float64("num.exp") == 1000.0
    assert store.get_float64("num.int") == 42.0
    for path in ("num.word", "num.empty", "num.under", "num.missing"):
        with pytest.raises(NumericParseError):
            store.get_float64(path)


def test_store_is_read_only(store: ConfigStore) -> None:
    with pytest.raises(TypeError):
        store["mysql"]["db1_Host"] = "x"  # type: ignore[index]
    with pytest.raises(TypeError):
        store["other"] = store["mysql"]  # type: ignore[index]
    copied = store.to_dict()
    copied["mysql"]["db1_Host"] = "x"
    assert store.get_str("mysql.db1.Host") == "127.0.0.1"


def test_section_view(store: ConfigStore) -> None:
    section = store["mysql"]
    assert section.name == "mysql"
    assert str(section) == "[mysql]"
    assert len(section) == 1
    assert "db1_Host" in section
    with pytest.raises(KeyError):
        store["nosuch"]
