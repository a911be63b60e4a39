"""Location Input DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from store_locator.domain.value_objects import BoundingBox, Location


@dataclass(frozen=True)
class AddressInput:
    """자유 입력 주소."""

    address: str


@dataclass(frozen=True)
class CoordinatesInput:
    """원시 좌표."""

    location: Location


@dataclass(frozen=True)
class DeviceLocationInput:
    """기기 위치 요청."""


@dataclass(frozen=True)
class PlaceInput:
    """자동완성에서 선택된 장소.

    geometry(location)가 없으면 name으로 다시 지오코딩합니다.
    """

    name: str
    formatted_address: str | None = None
    location: Location | None = None
    place_types: tuple[str, ...] = ()
    viewport: BoundingBox | None = None


DEVICE = DeviceLocationInput()

LocationInput = Union[AddressInput, CoordinatesInput, DeviceLocationInput, PlaceInput]


def to_location_input(value: object) -> LocationInput:
    """이벤트 값을 LocationInput으로 정규화합니다.

    "device" 문자열은 기기 위치, 그 외 문자열은 주소, Location은 좌표입니다.
    """
    if isinstance(value, (AddressInput, CoordinatesInput, DeviceLocationInput, PlaceInput)):
        return value
    if isinstance(value, Location):
        return CoordinatesInput(location=value)
    if isinstance(value, str):
        if value == "device":
            return DEVICE
        return AddressInput(address=value)
    raise TypeError(f"Unsupported location input: {value!r}")
