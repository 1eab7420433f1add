import pytest

from philosim.config import (
    ALREADY_SATISFIED,
    NOT_NUMERIC,
    NOT_POSITIVE,
    USAGE,
    Settings,
    SettingsError,
    parse_settings,
)


def test_four_arguments():
    settings = parse_settings(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_five_arguments():
    settings = parse_settings(["4", "410", "200", "100", "7"])
    assert settings.philosophers == 4
    assert settings.time_to_die == 410
    assert settings.must_eat == 7


@pytest.mark.parametrize("argv", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(argv):
    with pytest.raises(SettingsError) as info:
        parse_settings(argv)
    assert info.value.message == USAGE
    assert info.value.message.startswith("You need to insert 4 or 5 arguments.")


def test_zero_philosophers_is_silent():
    with pytest.raises(SettingsError) as info:
        parse_settings(["0", "800", "200", "200"])
    assert info.value.message == ""


def test_non_numeric_philosopher_count_is_silent():
    with pytest.raises(SettingsError) as info:
        parse_settings(["abc", "800", "200", "200"])
    assert info.value.message == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["5", "8x0", "200", "200"],
        ["5", "800", "", "200"],
        ["5", "800", "200", " 200"],
        ["5", "800", "200", "200", "two"],
        ["5a", "800", "200", "200"],
    ],
)
def test_non_numeric_fields(argv):
    with pytest.raises(SettingsError) as info:
        parse_settings(argv)
    assert info.value.message == NOT_NUMERIC


@pytest.mark.parametrize(
    "argv",
    [
        ["-3", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "-200", "200"],
        ["5", "800", "200", "0"],
        ["5", "800", "200", "200", "-1"],
    ],
)
def test_non_positive_fields(argv):
    with pytest.raises(SettingsError) as info:
        parse_settings(argv)
    assert info.value.message == NOT_POSITIVE


def test_zero_meals_means_already_satisfied():
    with pytest.raises(SettingsError) as info:
        parse_settings(["5", "800", "200", "200", "0"])
    assert str(info.value) == "0 all philosophers have eaten the required amount."
    assert info.value.message == ALREADY_SATISFIED


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_settings(["1"])


def test_settings_are_frozen():
    settings = parse_settings(["2", "100", "50", "50"])
    with pytest.raises(AttributeError):
        settings.philosophers = 3  # type: ignore[misc]
    assert settings.philosophers == 2


def test_accepts_tuple_input():
    assert parse_settings(("1", "10", "20", "30")) == Settings(1, 10, 20, 30)