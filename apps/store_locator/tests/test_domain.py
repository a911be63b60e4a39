"""Domain Layer 단위 테스트."""

from __future__ import annotations

import math

import pytest

from store_locator.domain.entities import Marker, Store
from store_locator.domain.enums import SessionState, TravelMode, UnitSystem
from store_locator.domain.exceptions import (
    DomainError,
    MarkerNotFoundError,
    NoGeocodingResultError,
    PreciseDistanceUnavailableError,
)
from store_locator.domain.services import (
    EARTH_RADIUS_KM,
    KM_PER_MILE,
    convert,
    haversine_distance,
    to_kilometers,
)
from store_locator.domain.value_objects import BoundingBox, Location


class TestLocation:
    """Location Value Object 테스트."""

    def test_valid_location(self) -> None:
        """유효한 좌표 생성."""
        location = Location(lat=45.4642, lng=9.19)
        assert location.lat == 45.4642
        assert location.lng == 9.19

    def test_invalid_latitude(self) -> None:
        """위도가 범위를 벗어나면 에러."""
        with pytest.raises(ValueError, match="Invalid latitude"):
            Location(lat=90.5, lng=0)

    def test_invalid_longitude(self) -> None:
        """경도가 범위를 벗어나면 에러."""
        with pytest.raises(ValueError, match="Invalid longitude"):
            Location(lat=0, lng=-180.5)

    def test_boundary_values(self) -> None:
        """경계값은 허용."""
        Location(lat=-90, lng=180)
        Location(lat=90, lng=-180)

    def test_equality_within_precision(self) -> None:
        """소수점 9자리 이하 차이는 같은 위치."""
        assert Location(lat=45.0, lng=9.0) == Location(lat=45.0 + 1e-12, lng=9.0)
        assert hash(Location(lat=45.0, lng=9.0)) == hash(Location(lat=45.0 + 1e-12, lng=9.0))

    def test_inequality(self) -> None:
        """다른 좌표는 다른 위치."""
        assert Location(lat=45.0, lng=9.0) != Location(lat=45.0001, lng=9.0)

    def test_to_dict(self) -> None:
        assert Location(lat=1.5, lng=2.5).to_dict() == {"lat": 1.5, "lng": 2.5}


class TestBoundingBox:
    """BoundingBox Value Object 테스트."""

    def test_around_single_point(self) -> None:
        point = Location(lat=10, lng=20)
        box = BoundingBox.around(point)
        assert box.southwest == point
        assert box.northeast == point
        assert box.center == point

    def test_extend(self) -> None:
        """확장하면 모든 점을 포함."""
        box = BoundingBox.around(Location(lat=10, lng=20))
        box = box.extend(Location(lat=12, lng=18))
        box = box.extend(Location(lat=9, lng=21))

        assert box.southwest == Location(lat=9, lng=18)
        assert box.northeast == Location(lat=12, lng=21)
        assert box.contains(Location(lat=10, lng=20))
        assert not box.contains(Location(lat=13, lng=20))
        assert box.center == Location(lat=10.5, lng=19.5)


class TestGeometry:
    """거리 계산 테스트."""

    def test_identity_is_zero(self) -> None:
        """같은 좌표면 정확히 0."""
        point = Location(lat=41.9028, lng=12.4964)
        assert haversine_distance(point, point) == 0.0

    def test_nearly_identical_points_do_not_fail(self) -> None:
        """부동소수점 오차가 있어도 NaN이나 예외가 없음."""
        a = Location(lat=41.9028, lng=12.4964)
        b = Location(lat=41.9028, lng=12.4964 + 1e-8)
        distance = haversine_distance(a, b)
        assert not math.isnan(distance)
        assert distance >= 0

    def test_symmetry(self) -> None:
        a = Location(lat=41.9028, lng=12.4964)
        b = Location(lat=45.4642, lng=9.19)
        assert haversine_distance(a, b) == pytest.approx(haversine_distance(b, a))

    def test_known_distance(self) -> None:
        """로마-밀라노 대원 거리는 약 477km."""
        rome = Location(lat=41.9028, lng=12.4964)
        milan = Location(lat=45.4642, lng=9.19)
        assert haversine_distance(rome, milan) == pytest.approx(477, abs=3)

    def test_meridian_distance(self) -> None:
        """같은 경선 위 1도 차이는 R * pi / 180."""
        a = Location(lat=10, lng=0)
        b = Location(lat=11, lng=0)
        assert haversine_distance(a, b) == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)

    def test_convert_imperial(self) -> None:
        assert convert(KM_PER_MILE, UnitSystem.IMPERIAL) == pytest.approx(1.0)
        assert convert(10, UnitSystem.METRIC) == 10

    def test_to_kilometers_reverses_convert(self) -> None:
        assert to_kilometers(convert(42.0, UnitSystem.IMPERIAL), UnitSystem.IMPERIAL) == pytest.approx(42.0)


class TestEnums:
    """Enum 테스트."""

    @pytest.mark.parametrize("value", ["imperial", "IMPERIAL", " Imperial "])
    def test_unit_system_parse_imperial(self, value: str) -> None:
        """대소문자 구분 없이 파싱."""
        assert UnitSystem.parse(value) is UnitSystem.IMPERIAL

    def test_unit_system_parse_unknown_defaults_metric(self) -> None:
        assert UnitSystem.parse("parsecs") is UnitSystem.METRIC

    def test_unit_system_label(self) -> None:
        assert UnitSystem.METRIC.label == "Km"
        assert UnitSystem.IMPERIAL.label == "Mi"

    def test_travel_mode_parse(self) -> None:
        assert TravelMode.parse("walking") is TravelMode.WALKING

    def test_travel_mode_parse_invalid(self) -> None:
        with pytest.raises(ValueError):
            TravelMode.parse("teleport")

    def test_session_state_terminal(self) -> None:
        assert SessionState.COMMITTED.is_terminal
        assert SessionState.ABORTED.is_terminal
        assert not SessionState.REFINING_PRECISE.is_terminal


class TestEntities:
    """Entity 테스트."""

    def test_store_has_any_tag(self) -> None:
        store = Store(id=0, name="A", location=Location(lat=0, lng=0), tags=frozenset({"a", "b"}))
        assert store.has_any_tag(frozenset({"b", "c"}))
        assert not store.has_any_tag(frozenset({"c"}))
        assert not store.has_any_tag(frozenset())

    def test_marker_defaults(self) -> None:
        marker = Marker(store_id=3)
        assert marker.visible
        assert marker.opacity == 1.0
        assert not marker.selected
        assert not marker.info_open


class TestExceptions:
    """도메인 예외 테스트."""

    def test_all_inherit_domain_error(self) -> None:
        assert issubclass(NoGeocodingResultError, DomainError)
        assert issubclass(MarkerNotFoundError, DomainError)
        assert issubclass(PreciseDistanceUnavailableError, DomainError)

    def test_messages(self) -> None:
        assert NoGeocodingResultError("ZERO_RESULTS").status == "ZERO_RESULTS"
        assert "store 7" in MarkerNotFoundError(7).message
        assert "NOT_FOUND" in str(PreciseDistanceUnavailableError(1, "NOT_FOUND"))
