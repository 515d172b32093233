from weatherapp.domain.time_utils import split_localtime


def test_split_localtime_date_and_time():
    assert split_localtime("2024-05-01 14:30") == ("2024-05-01", "14:30")


def test_split_localtime_without_space_is_time_only():
    assert split_localtime("14:30") == ("", "14:30")


def test_split_localtime_empty_string():
    assert split_localtime("") == ("", "")


def test_split_localtime_splits_on_first_space_only():
    assert split_localtime("2024-05-01 14:30 CET") == ("2024-05-01", "14:30 CET")
