"""Marker Entity."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_OPACITY = 1.0


@dataclass
class Marker:
    """지도 마커 상태.

    Store.id와 1:1로 대응하는 시각 프록시의 표시 상태만 보관합니다.
    렌더링은 바깥 계층의 책임입니다.
    """

    store_id: int
    visible: bool = True
    opacity: float = DEFAULT_OPACITY
    selected: bool = False
    info_open: bool = False
