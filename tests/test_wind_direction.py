import pytest

from app.services.weather_service import CARDINALS, wind_direction


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0, "N"),
        (22.5, "NNE"),
        (45, "NE"),
        (90, "E"),
        (180, "S"),
        (270, "W"),
        (337.5, "NNW"),
        (360, "N"),
    ],
)
def test_compass_points(degrees, expected):
    assert wind_direction(degrees) == expected


def test_bearings_near_north_wrap_to_n():
    # 355 rounds up to index 16, which repeats N
    assert wind_direction(355) == "N"
    assert wind_direction(349) == "N"
    assert wind_direction(348) == "NNW"


def test_bearings_above_360_wrap():
    assert wind_direction(360 + 90) == "E"


def test_rose_has_sixteen_points_plus_wrap():
    assert len(CARDINALS) == 17
    assert CARDINALS[0] == CARDINALS[16] == "N"
    assert len(set(CARDINALS)) == 16
