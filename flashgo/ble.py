"""Bluetooth LE services and characteristics, with a simulated server."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Optional


def get_uuid_from_name(name: str) -> uuid.UUID:
    """Name-based (version 5) UUID in the X.500 namespace."""
    return uuid.uuid5(uuid.NAMESPACE_X500, name)


def get_uuid(element: Any) -> uuid.UUID:
    """UUID of anything that has a ``name``."""
    return get_uuid_from_name(element.name)


@dataclass
class SimCharacteristic:
    """A simulated characteristic: records values sent and dispatches writes."""

    name: str
    characteristic_id: str
    is_read: bool
    is_write: bool
    callback: Optional[Callable[[bytes], Any]] = None
    sent: list[bytes] = field(default_factory=list)

    def set_callback(self, callback: Callable[[bytes], Any]) -> None:
        """Call ``callback`` with the data of every write from a client."""
        self.callback = callback

    def send_value(self, value: bytes) -> None:
        """Publish a new value to clients."""
        self.sent.append(bytes(value))

    def write(self, data: bytes) -> bool:
        """Deliver a client write; True if a callback handled it without error."""
        if self.callback is None:
            return False
        try:
            self.callback(bytes(data))
        except Exception:
            return False
        return True


@dataclass
class SimService:
    """A simulated service holding characteristics keyed by UUID string."""

    name: str
    service_id: str
    characteristics: dict[str, SimCharacteristic] = field(default_factory=dict)

    def register_characteristic(
        self, name: str, is_read: bool, is_write: bool
    ) -> SimCharacteristic:
        char_uuid = str(get_uuid_from_name(name))
        characteristic = SimCharacteristic(
            name=name,
            characteristic_id=f"{self.service_id}:{char_uuid}",
            is_read=is_read,
            is_write=is_write,
        )
        self.characteristics[char_uuid] = characteristic
        return characteristic


@dataclass
class SimServer:
    """A simulated BLE server holding services keyed by UUID string."""

    services: dict[str, SimService] = field(default_factory=dict)
    advertising: bool = False
    advertised: list[uuid.UUID] = field(default_factory=list)

    def register_service(self, name: str) -> SimService:
        service_uuid = str(get_uuid_from_name(name))
        service = SimService(name=name, service_id=service_uuid)
        self.services[service_uuid] = service
        return service

    def start_advertisement(self) -> None:
        self.advertised = [get_uuid(service) for service in self.services.values()]
        self.advertising = True