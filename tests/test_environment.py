import pytest

from minibash.environment import (
    Environment,
    Variable,
    Visibility,
    is_valid_identifier,
)


def test_set_and_find():
    env = Environment()
    env.set("HOME", "/home/user")
    variable = env.find("HOME")
    assert variable == Variable("HOME", "/home/user", Visibility.EXPORTED)


def test_find_missing_returns_none():
    assert Environment({"A": "1"}).find("B") is None


def test_initial_strings_are_split_on_first_equals():
    env = Environment(["PATH=/bin:/usr/bin", "EQ=a=b"])
    assert env.find("PATH").value == "/bin:/usr/bin"
    assert env.find("EQ").value == "a=b"


def test_initial_mapping_round_trips_through_envp():
    env = Environment({"A": "1", "B": "2"})
    assert env.to_envp() == ["A=1", "B=2"]


def test_update_keeps_position_and_exports():
    env = Environment({"A": "1", "B": "2"})
    env.declare("C")
    env.set("A", "9")
    env.set("C", "3")
    assert [v.key for v in env] == ["A", "B", "C"]
    assert env.to_envp() == ["A=9", "B=2", "C=3"]


def test_declare_adds_valueless_variable():
    env = Environment()
    env.declare("NAME")
    assert env.find("NAME").visibility is Visibility.DECLARED
    assert env.to_envp() == []
    assert env.declarations() == ["declare -x NAME"]


def test_declare_existing_is_noop():
    env = Environment({"KEY": "value"})
    env.declare("KEY")
    assert env.find("KEY") == Variable("KEY", "value", Visibility.EXPORTED)


def test_declarations_quote_values_and_skip_hidden():
    env = Environment({"KEY": "VALUE"})
    env.set("SECRET_STATE", "x").visibility = Visibility.HIDDEN
    env.declare("EMPTY")
    assert env.declarations() == ['declare -x KEY="VALUE"', "declare -x EMPTY"]
    assert "SECRET_STATE=x" not in env.to_envp()


def test_unset_removes_variable():
    env = Environment({"A": "1", "B": "2", "C": "3"})
    assert env.unset("B") is True
    assert env.find("B") is None
    assert env.to_envp() == ["A=1", "C=3"]
    assert len(env) == 2


def test_unset_missing_reports_false():
    env = Environment({"A": "1"})
    assert env.unset("Z") is False
    assert len(env) == 1


@pytest.mark.parametrize(
    "name, allow, expected",
    [
        ("HOME", True, True),
        ("HOME", False, True),
        ("A_B2", False, True),
        ("A=1", True, True),
        ("A=1", False, False),
        ("A-B", True, False),
        ("1A", True, False),
        ("_A", False, False),
        ("1_", False, True),
        ("", True, False),
        ("1", False, False),
    ],
)
def test_is_valid_identifier(name, allow, expected):
    assert is_valid_identifier(name, allow) is expected


def test_value_with_characters_after_equals_is_not_checked():
    assert is_valid_identifier("A=!@ #", True) is True
    assert is_valid_identifier("A!=x", True) is False