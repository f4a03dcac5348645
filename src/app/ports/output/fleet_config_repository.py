from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.fleet import TransitRoute, VehicleConfig


class IFleetConfigRepository(ABC):
    """Port for loading the static route network and vehicle roster."""

    @abstractmethod
    def load_routes(self) -> tuple[TransitRoute, ...]:
        raise NotImplementedError

    @abstractmethod
    def load_vehicles(self) -> tuple[VehicleConfig, ...]:
        raise NotImplementedError
