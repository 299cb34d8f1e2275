import pytest

from udeastay.accommodation import Accommodation
from udeastay.date import Date
from udeastay.host import Host
from udeastay.reservation import Reservation


@pytest.fixture
def host():
    return Host("9876543210", "Ana María Ospina", 12, 95)


def add_place(host, acc_id, name):
    acc = Accommodation(acc_id, name, host, "Antioquia", "Apartamento",
                        "Carrera 45", 75000, ["WiFi", "Cocina"])
    host.add_accommodation(acc)
    return acc


def book(acc, res_id):
    res = Reservation(res_id, acc, "María González", Date(1, 7, 2024), 4,
                      "Tarjeta", Date(1, 6, 2024), 300000, "Vista a la ciudad")
    acc.add_reservation(res)
    return res


def test_remove_accommodation(host, capsys):
    add_place(host, 1001, "Casa bonita")
    add_place(host, 1002, "Apartamento Central")
    assert host.remove_accommodation(1002) is True
    assert [a.id for a in host.accommodations] == [1001]
    assert "Alojamiento eliminado exitosamente" in capsys.readouterr().out


def test_remove_missing_accommodation(host, capsys):
    assert host.remove_accommodation(1002) is False
    assert "No se encontró el alojamiento con ID: 1002" in capsys.readouterr().out


def test_cancel_reservation_across_accommodations(host):
    first = add_place(host, 1001, "Casa bonita")
    second = add_place(host, 1002, "Apartamento Central")
    book(first, 1001)
    book(second, 1002)
    assert host.cancel_reservation(1002) is True
    assert second.reservations == []
    assert len(first.reservations) == 1


def test_cancel_missing_reservation(host, capsys):
    add_place(host, 1001, "Casa bonita")
    assert host.cancel_reservation(1002) is False
    assert "No se encontró la reservación con ID: 1002" in capsys.readouterr().out


def test_consult_reservations_empty(host, capsys):
    host.consult_reservations()
    assert "No hay alojamientos para mostrar." in capsys.readouterr().out


def test_consult_reservations(host, capsys):
    first = add_place(host, 1001, "Casa bonita")
    add_place(host, 1002, "Apartamento Central")
    book(first, 1001)
    host.consult_reservations()
    out = capsys.readouterr().out
    assert "Alojamiento 1" in out
    assert "Alojamiento 2" in out
    assert "---- Reservaciones ----" in out
    assert out.count("No hay reservaciones para mostrar.") == 1
    assert "300000" in out