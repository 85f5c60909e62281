import pytest

from flashgo.ble import SimServer, get_uuid, get_uuid_from_name


def test_uuid_is_name_based_and_deterministic():
    first = get_uuid_from_name("animation")
    assert first.version == 5
    assert first == get_uuid_from_name("animation")
    assert first != get_uuid_from_name("other")


def test_get_uuid_uses_element_name():
    server = SimServer()
    service = server.register_service("animation")
    assert get_uuid(service) == get_uuid_from_name("animation")


def test_register_service_stores_by_uuid():
    server = SimServer()
    service = server.register_service("animation")
    key = str(get_uuid_from_name("animation"))
    assert server.services[key] is service
    assert service.service_id == key


def test_register_characteristic_keeps_flags():
    service = SimServer().register_service("animation")
    char = service.register_characteristic("speed", True, False)
    assert char.is_read is True
    assert char.is_write is False
    assert service.characteristics[str(get_uuid_from_name("speed"))] is char
    assert get_uuid(char) == get_uuid_from_name("speed")


def test_write_without_callback_fails():
    char = SimServer().register_service("s").register_characteristic("c", True, True)
    assert char.write(b"\x01") is False


def test_write_dispatches_to_callback():
    char = SimServer().register_service("s").register_characteristic("c", True, True)
    received = []
    char.set_callback(received.append)
    assert char.write(b"\x01\x02") is True
    assert received == [b"\x01\x02"]


def test_write_reports_callback_failure():
    char = SimServer().register_service("s").register_characteristic("c", True, True)

    def failing(data):
        raise RuntimeError("bad data")

    char.set_callback(failing)
    assert char.write(b"\x00") is False


def test_send_value_records_values():
    char = SimServer().register_service("s").register_characteristic("c", True, True)
    char.send_value(b"a")
    char.send_value(bytearray(b"bc"))
    assert char.sent == [b"a", b"bc"]


@pytest.mark.parametrize("names", [["a"], ["a", "b", "c"]])
def test_advertisement_lists_services(names):
    server = SimServer()
    for name in names:
        server.register_service(name)
    server.start_advertisement()
    assert server.advertising is True
    assert server.advertised == [get_uuid_from_name(n) for n in names]