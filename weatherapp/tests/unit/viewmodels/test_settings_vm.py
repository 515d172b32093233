import pytest

from weatherapp.viewmodels.settings_vm import DEFAULT_BASE_URL, SettingsVM, default_settings_payload


def test_defaults_use_mock_without_api_key():
    vm = SettingsVM()

    assert vm.api_base_url == DEFAULT_BASE_URL
    assert vm.use_mock is True
    assert vm.is_valid()


def test_apply_dict_coerces_values():
    vm = SettingsVM()
    vm.apply_dict(
        {
            "api_key": "  abc123 ",
            "api_base_url": "http://localhost:8080/v1/",
            "request_timeout_s": "7",
            "retries": 0,
            "dark_theme": "yes",
            "debug_logging": 0,
        }
    )

    assert vm.api_key == "abc123"
    assert vm.api_base_url == "http://localhost:8080/v1"
    assert vm.request_timeout_s == 7
    assert vm.retries == 0
    assert vm.dark_theme is True
    assert vm.debug_logging is False
    assert vm.use_mock is False


def test_apply_dict_rejects_unknown_keys():
    vm = SettingsVM()
    with pytest.raises(ValueError, match="Unsupported settings keys: city"):
        vm.apply_dict({"city": "Paris"})


def test_apply_dict_rejects_negative_timeout():
    vm = SettingsVM()
    with pytest.raises(ValueError):
        vm.apply_dict({"request_timeout_s": -1})


def test_apply_env_overrides_key_and_url():
    vm = SettingsVM()
    vm.apply_dict({"api_key": "from-file"})

    vm.apply_env({"WEATHERAPP_API_KEY": "from-env", "WEATHERAPP_BASE_URL": "https://proxy.local/v1"})

    assert vm.api_key == "from-env"
    assert vm.api_base_url == "https://proxy.local/v1"


def test_apply_env_ignores_blank_values():
    vm = SettingsVM()
    vm.apply_dict({"api_key": "from-file"})

    vm.apply_env({"WEATHERAPP_API_KEY": "  "})

    assert vm.api_key == "from-file"


def test_cmd_save_emits_snapshot():
    saved = []
    vm = SettingsVM(on_save=saved.append)
    vm.api_key = "k"

    vm.cmd_save()

    assert saved == [vm.to_dict()]
    assert saved[0]["api_key"] == "k"


def test_cmd_save_refuses_invalid_settings():
    vm = SettingsVM(on_save=lambda payload: None)
    vm.request_timeout_s = 0

    with pytest.raises(ValueError):
        vm.cmd_save()


def test_default_payload_round_trips():
    payload = default_settings_payload()
    vm = SettingsVM()
    vm.apply_dict(payload)

    assert vm.to_dict() == payload
