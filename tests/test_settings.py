import pytest
from pydantic import ValidationError

from app.settings import Settings
from geo.dms_format import to_dms


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DMS_FORMAT", "DMS_DECIMAL_PLACES", "DMS_LATLON_SEPARATOR"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.dms_format == "DD MM ss X"
    options = settings.format_options()
    assert options.decimal_places == 5
    assert options.lat_lon_separator == " "


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DMS_FORMAT", "DD MM ss X")
    monkeypatch.setenv("DMS_DECIMAL_PLACES", "0")
    monkeypatch.setenv("DMS_LATLON_SEPARATOR", ", ")
    settings = Settings(_env_file=None)
    result = to_dms(
        [149.128684, -35.282], settings.dms_format, settings.format_options()
    )
    assert result == "35° 16′ 55″ S, 149° 7′ 43″ E"


def test_settings_rejects_negative_places(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DMS_DECIMAL_PLACES", "-2")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
