import pytest
from pytest import approx

from usngtools import (
    GeodeticPoint, GridZoneMismatchError, InvalidCoordinateError, InvalidGridSquareError,
    LatitudeOutOfRangeError, MalformedUsngError, OddDigitCountError, UsngCoordinate,
    UsngError, UtmPoint
)
from usngtools.usng import grid_zone_letter

from tests.functions import assert_points_equal, assert_utm_equal


def test_grid_zone_letter():
    assert grid_zone_letter(0.) == 'N'
    assert grid_zone_letter(7.999) == 'N'
    assert grid_zone_letter(8.) == 'P'
    assert grid_zone_letter(-0.0001) == 'M'
    assert grid_zone_letter(-80.) == 'C'
    assert grid_zone_letter(45.) == 'T'
    assert grid_zone_letter(71.99) == 'W'
    assert grid_zone_letter(72.) == 'X'
    assert grid_zone_letter(79.99) == 'X'

    assert grid_zone_letter(80.) is None
    assert grid_zone_letter(-80.1) is None


def test_usng_init():
    usng = UsngCoordinate(15, 'T', 'VK', '91', '86', 2)
    assert usng.utm_zone == 15
    assert usng.grid_zone == 'T'
    assert usng.grid_square == 'VK'
    assert usng.easting == '91'
    assert usng.northing == '86'
    assert usng.precision == 2
    assert usng.resolution == 1000

    assert UsngCoordinate(15, 'T', '', '', '', 0).resolution == 100000
    assert UsngCoordinate(15, 'T', 'VK', '9100025', '8600050', 7).resolution == approx(0.01)

    with pytest.raises(AttributeError):
        usng.easting = '00'


def test_usng_init_validation():
    with pytest.raises(MalformedUsngError):
        # Digits don't match precision
        UsngCoordinate(15, 'T', 'VK', '91', '86', 3)

    with pytest.raises(MalformedUsngError):
        UsngCoordinate(15, 'T', 'VK', '9A', '86', 2)

    with pytest.raises(MalformedUsngError):
        UsngCoordinate(15, 'TT', 'VK', '91', '86', 2)

    with pytest.raises(MalformedUsngError):
        UsngCoordinate(15, 't', 'VK', '91', '86', 2)

    with pytest.raises(MalformedUsngError):
        UsngCoordinate(15, 'T', 'V', '91', '86', 2)

    with pytest.raises(MalformedUsngError):
        UsngCoordinate(15, 'T', 'VK', '', '', -1)

    with pytest.raises(MalformedUsngError):
        # Zones are written with one or two digits
        UsngCoordinate(100, 'T', 'VK', '91', '86', 2)

    with pytest.raises(MalformedUsngError):
        UsngCoordinate(-1, 'T', 'VK', '91', '86', 2)


def test_usng_eq():
    usng = UsngCoordinate(15, 'T', 'VK', '91', '86', 2)
    assert usng == UsngCoordinate(15, 'T', 'VK', '91', '86', 2)
    assert usng != UsngCoordinate(15, 'T', 'VK', '9100', '8600', 4)
    assert usng != '15TVK9186'
    assert len({usng, UsngCoordinate(15, 'T', 'VK', '91', '86', 2)}) == 1


def test_usng_to_str():
    usng = UsngCoordinate(15, 'T', 'VK', '91', '86', 2)
    assert usng.to_str() == '15TVK9186'
    assert str(usng) == '15TVK9186'
    assert repr(usng) == '<UsngCoordinate(15TVK9186)>'

    assert str(UsngCoordinate(4, 'Q', 'FJ', '01', '00', 2)) == '4QFJ0100'
    assert str(UsngCoordinate(15, 'T', '', '', '', 0)) == '15T'


def test_usng_parse():
    assert UsngCoordinate.parse('15TVK9186') == UsngCoordinate(15, 'T', 'VK', '91', '86', 2)
    assert UsngCoordinate.parse('15t vk 91 86') == UsngCoordinate(15, 'T', 'VK', '91', '86', 2)
    assert UsngCoordinate.parse(' 15T\tVK 9100 8600 ') == UsngCoordinate(
        15, 'T', 'VK', '9100', '8600', 4
    )
    assert UsngCoordinate.parse('4QFJ12345678') == UsngCoordinate(
        4, 'Q', 'FJ', '1234', '5678', 4
    )

    # Leading zeros are significant
    assert UsngCoordinate.parse('15TXM0012300001') == UsngCoordinate(
        15, 'T', 'XM', '00123', '00001', 5
    )

    # Grid square and digits are optional
    assert UsngCoordinate.parse('15TVK') == UsngCoordinate(15, 'T', 'VK', '', '', 0)
    assert UsngCoordinate.parse('15T') == UsngCoordinate(15, 'T', '', '', '', 0)


def test_usng_parse_errors():
    with pytest.raises(OddDigitCountError):
        UsngCoordinate.parse('15TVK981')

    with pytest.raises(MalformedUsngError):
        # Odd digit counts are malformed input
        UsngCoordinate.parse('15TVK9')

    for bad in ('', 'TVK9186', '115TVK9186', 'VK9186', '15', '15TV', '15TVKX9186'):
        with pytest.raises(MalformedUsngError):
            UsngCoordinate.parse(bad)

    assert issubclass(MalformedUsngError, UsngError)
    assert issubclass(UsngError, ValueError)


def test_usng_string_round_trip():
    for usng in (
        UsngCoordinate(15, 'T', 'VK', '91', '86', 2),
        UsngCoordinate(4, 'Q', 'FJ', '0123456', '9876543', 7),
        UsngCoordinate(18, 'S', 'UJ', '2', '0', 1),
        UsngCoordinate(15, 'T', 'VK', '', '', 0),
        UsngCoordinate(60, 'X', '', '', '', 0),
    ):
        assert UsngCoordinate.parse(usng.to_str()) == usng


def test_usng_from_utm():
    utm = UtmPoint(15, 491000, 4986000, 2)
    assert UsngCoordinate.from_utm(utm) == UsngCoordinate(15, 'T', 'VK', '91', '86', 2)
    assert str(UsngCoordinate.from_utm(utm)) == '15TVK9186'

    utm = UtmPoint(15, 654321, 5191234)
    assert str(UsngCoordinate.from_utm(utm, 5)) == '15TXM5432191234'
    assert str(UsngCoordinate.from_utm(utm, 3)) == '15TXM543912'
    assert str(UsngCoordinate.from_utm(utm, 1)) == '15TXM59'
    assert str(UsngCoordinate.from_utm(utm, 0)) == '15TXM'


def test_usng_from_utm_truncates():
    # 654999.9 would round up into the next kilometer; USNG truncates
    utm = UtmPoint(15, 654999.9, 5191999.9)
    assert str(UsngCoordinate.from_utm(utm, 2)) == '15TXM5491'
    assert str(UsngCoordinate.from_utm(utm, 5)) == '15TXM5499991999'


def test_usng_from_utm_fractional_meters():
    utm = UtmPoint(15, 491000.25, 4986000.5)
    usng = UsngCoordinate.from_utm(utm, 7)
    assert usng == UsngCoordinate(15, 'T', 'VK', '9100025', '8600050', 7)

    decoded = usng.to_utm()
    assert decoded.easting == approx(491000.25)
    assert decoded.northing == approx(4986000.5)

    usng = UsngCoordinate.from_utm(UtmPoint(15, 491000.12345678, 4986000.5), 12)
    assert usng.easting == '910001234567'
    assert usng.northing == '860005000000'


def test_usng_from_utm_fractional_meters_truncate():
    # Sub-meter digits never carry into the whole meters
    usng = UsngCoordinate.from_utm(UtmPoint(15, 491000.9999997, 4986000.9999998), 7)
    assert usng == UsngCoordinate(15, 'T', 'VK', '9100099', '8600099', 7)


def test_usng_from_utm_zone_sets():
    # The 100km letters rotate through six sets of zones
    expected = {
        1: 'EA', 2: 'NF', 3: 'WA', 4: 'EF', 5: 'NA', 6: 'WF',
    }
    for zone, square in expected.items():
        usng = UsngCoordinate.from_utm(UtmPoint(zone, 500000, 10000), 0)
        assert usng.grid_square == square
        assert usng.grid_zone == 'N'

    # Zone 0 uses the sixth set of letters
    usng = UsngCoordinate.from_utm(UtmPoint(0, 500000, 4986000, 2))
    assert usng.grid_square == 'WQ'
    assert str(usng) == '0TWQ0086'


def test_usng_from_utm_errors():
    with pytest.raises(LatitudeOutOfRangeError):
        UsngCoordinate.from_utm(UtmPoint(15, 500000, 9000000))

    with pytest.raises(InvalidCoordinateError):
        UsngCoordinate.from_utm(UtmPoint(15, 500000, -9000000))

    with pytest.raises(InvalidCoordinateError):
        UsngCoordinate.from_utm(UtmPoint(15, 50000, 4986000))

    with pytest.raises(InvalidCoordinateError):
        # Southern hemisphere northings are negative
        UsngCoordinate.from_utm(UtmPoint(15, 500000, -100))

    with pytest.raises(InvalidCoordinateError):
        UsngCoordinate.from_utm(UtmPoint(61, 500000, 4986000))

    with pytest.raises(InvalidCoordinateError):
        # Past the eighth lettered column
        UsngCoordinate.from_utm(UtmPoint(15, 950000, 4986000))

    with pytest.raises(InvalidCoordinateError):
        UsngCoordinate.from_utm(UtmPoint(15, 9000001, 4986000))

    with pytest.raises(InvalidCoordinateError):
        UsngCoordinate.from_utm(UtmPoint(15, 500000, 10000001))

    with pytest.raises(InvalidCoordinateError):
        UsngCoordinate.from_utm(UtmPoint(15, 491000, 4986000), -1)


def test_usng_to_utm():
    usng = UsngCoordinate.parse('15TVK9186')
    assert usng.to_utm() == UtmPoint(15, 491000, 4986000, 2)

    usng = UsngCoordinate.parse('15TXM5432191234')
    assert usng.to_utm() == UtmPoint(15, 654321, 5191234, 5)

    # Whole 100km square
    assert UsngCoordinate.parse('15TVK').to_utm() == UtmPoint(15, 400000, 4900000, 0)


def test_usng_to_utm_northing_correction(caplog):
    # Just north of 40 degrees, but south of the band's approximate
    # northing; the first guess lands a full 2,000km cycle too far north
    utm = UtmPoint(15, 500000, 4430000, 5)
    usng = UsngCoordinate.from_utm(utm)
    assert str(usng) == '15TWE0000030000'
    assert usng.to_utm() == utm
    assert 'lies outside of its UTM or grid zone' not in caplog.text


def test_usng_to_utm_errors():
    with pytest.raises(InvalidGridSquareError):
        # 'A' is not an easting letter for zone 15
        UsngCoordinate(15, 'T', 'AK', '91', '86', 2).to_utm()

    with pytest.raises(InvalidGridSquareError):
        # 'W' is not a northing letter
        UsngCoordinate(15, 'T', 'VW', '91', '86', 2).to_utm()

    with pytest.raises(InvalidGridSquareError):
        UsngCoordinate.parse('15T').to_utm()

    with pytest.raises(InvalidCoordinateError):
        UsngCoordinate(15, 'A', 'VK', '91', '86', 2).to_utm()


def test_usng_to_utm_mismatch(caplog):
    # VK sits at ~9 degrees north, which is grid zone P rather than N
    usng = UsngCoordinate.parse('15NVK9186')
    utm = usng.to_utm()
    assert utm.zone == 15
    assert 'Decoded USNG 15NVK9186 lies outside of its UTM or grid zone' in caplog.text

    with pytest.raises(GridZoneMismatchError):
        usng.to_utm(strict=True)


def test_usng_utm_round_trip():
    utm = UtmPoint(15, 491234.56789, 4986543.21098)
    for precision in range(0, 11):
        usng = UsngCoordinate.from_utm(utm, precision)
        assert usng.precision == precision
        assert len(usng.easting) == len(usng.northing) == precision

        decoded = usng.to_utm()
        assert decoded.zone == 15
        assert decoded.precision == precision
        assert -1e-6 <= utm.easting - decoded.easting < usng.resolution + 1e-6
        assert -1e-6 <= utm.northing - decoded.northing < usng.resolution + 1e-6


def test_usng_geodetic_round_trip():
    point = GeodeticPoint(-93., 45.)
    usng = UsngCoordinate.from_geodetic(point)
    assert usng.precision == 5
    assert str(usng).startswith('15TWK00000')
    assert_points_equal(usng.to_geodetic(), point, abs_tol=1e-4)
    usng = UsngCoordinate.from_geodetic(point, 3)
    assert usng.precision == 3
    assert str(usng).startswith('15TWK000')
    assert len(str(usng)) == 11

    for lon, lat in ((-77.0365, 38.8977), (-122.4194, 37.7749), (-157.8583, 21.3069)):
        point = GeodeticPoint(lon, lat)
        usng = UsngCoordinate.from_geodetic(point, 5)
        assert usng.precision == 5
        assert_points_equal(usng.to_geodetic(), point, abs_tol=1e-4)
        assert_utm_equal(
            UsngCoordinate.parse(str(usng)).to_utm(),
            usng.to_utm(),
        )


def test_usng_bounding_box():
    srid, ring = UsngCoordinate.parse('15TXM5491').bounding_box()
    assert srid == 26915
    assert ring == [
        (654000, 5191000),
        (654000, 5192000),
        (655000, 5192000),
        (655000, 5191000),
        (654000, 5191000),
    ]

    srid, ring = UsngCoordinate.parse('15TXM5432191234').bounding_box()
    assert ring[0] == (654321, 5191234)
    assert ring[2] == (654322, 5191235)


def test_usng_to_ewkt():
    utm = UtmPoint(15, 654321, 5191234)
    assert UsngCoordinate.from_utm(utm, 2).to_ewkt() == (
        'SRID=26915;POLYGON((654000 5191000, 654000 5192000, 655000 5192000, '
        '655000 5191000, 654000 5191000))'
    )
    assert UsngCoordinate.from_utm(utm, 5).to_ewkt() == (
        'SRID=26915;POLYGON((654321 5191234, 654321 5191235, 654322 5191235, '
        '654322 5191234, 654321 5191234))'
    )
