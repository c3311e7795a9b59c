import threading
from datetime import datetime, timedelta, timezone

import pytest

from dispatchdesk.models.domain import BusinessLocation, Order, OrderItem, Point
from dispatchdesk.services.geospatial import distance_miles
from dispatchdesk.services.orders import (
    OrderBoard,
    OrderNotFoundError,
    compute_order_stats,
    generate_mock_orders,
)

NOW = datetime(2026, 10, 19, 18, 30, tzinfo=timezone.utc)
LOCATION = BusinessLocation(
    name="Square Bistro",
    address="123 Main Street, Middletown, CT 06457",
    latitude=41.5623,
    longitude=-72.6509,
)


def _order(oid: str, status: str = "pending", minutes_ago: int = 10, total: float = 18.99) -> Order:
    return Order(
        order_id=oid,
        source_order_id=f"sq_{oid}",
        customer_name=f"Customer {oid}",
        customer_phone="(555) 000-0000",
        items=[OrderItem(name="Pizza", quantity=1, price=total)],
        total_amount=total,
        status=status,
        priority="medium",
        created_at=NOW - timedelta(minutes=minutes_ago),
        delivery_address=f"{oid} Elm Street, Middletown, CT 06457",
        delivery_location=Point(41.56 + int(oid) * 0.001, -72.65),
        payment_method="Square",
        order_source="web",
    )


def test_update_status_stamps_lifecycle_times():
    board = OrderBoard([_order("1")])

    ready = board.update_status("1", "ready", now=NOW)
    assert ready.status == "ready"
    assert ready.ready_time == NOW
    assert ready.picked_up_time is None

    later = NOW + timedelta(minutes=5)
    picked = board.update_status("1", "out_for_delivery", now=later)
    assert picked.ready_time == NOW
    assert picked.picked_up_time == later

    done = board.update_status("1", "delivered", now=later + timedelta(minutes=20))
    assert done.delivered_time == later + timedelta(minutes=20)
    assert board.get("1").status == "delivered"


def test_update_status_to_preparing_keeps_existing_times():
    board = OrderBoard([_order("1")])
    board.update_status("1", "ready", now=NOW)

    back = board.update_status("1", "preparing", now=NOW + timedelta(minutes=1))

    assert back.status == "preparing"
    assert back.ready_time == NOW


def test_unknown_order_raises_not_found():
    board = OrderBoard([_order("1")])

    with pytest.raises(OrderNotFoundError):
        board.update_status("missing", "ready")
    with pytest.raises(KeyError):
        board.archive("missing")


def test_active_orders_are_ready_or_out_for_delivery_oldest_first():
    board = OrderBoard(
        [
            _order("1", "ready", minutes_ago=5),
            _order("2", "out_for_delivery", minutes_ago=30),
            _order("3", "pending", minutes_ago=40),
            _order("4", "delivered", minutes_ago=50),
            _order("5", "ready", minutes_ago=15),
        ]
    )

    assert [order.order_id for order in board.active_orders()] == ["2", "5", "1"]


def test_archived_orders_leave_the_live_view():
    board = OrderBoard([_order("1", "ready", minutes_ago=5), _order("2", "ready", minutes_ago=10)])

    board.archive("2", now=NOW)

    assert [order.order_id for order in board.active_orders()] == ["1"]
    assert [order.order_id for order in board.active_orders(show_archived=True)] == ["2"]
    assert board.get("2").archived_at == NOW

    restored = board.unarchive("2")
    assert restored.archived is False
    assert restored.archived_at is None
    assert [order.order_id for order in board.list_orders()] == ["2", "1"]


def test_archive_view_lists_most_recently_archived_first():
    board = OrderBoard([_order("1"), _order("2"), _order("3")])
    board.archive("1", now=NOW)
    board.archive("3", now=NOW + timedelta(minutes=1))

    assert [order.order_id for order in board.list_orders(show_archived=True)] == ["3", "1"]
    assert [order.order_id for order in board.list_orders()] == ["2"]


def test_replace_rejects_duplicate_ids():
    board = OrderBoard([_order("1")])

    with pytest.raises(ValueError):
        board.replace([_order("2"), _order("2")])
    assert len(board) == 1

    board.replace([_order("2"), _order("3")])
    assert len(board) == 2


def test_order_stats():
    orders = [
        _order("1", "pending", total=10.0),
        _order("2", "preparing", total=20.0),
        _order("3", "ready", total=30.0),
        _order("4", "out_for_delivery", total=40.0),
        _order("5", "delivered", total=50.0),
    ]

    stats = compute_order_stats(orders)

    assert stats == {
        "pending": 1,
        "preparing": 1,
        "ready": 1,
        "outForDelivery": 1,
        "totalOrders": 5,
        "totalRevenue": 150.0,
        "avgOrderValue": 30.0,
    }


def test_order_stats_with_no_orders():
    stats = compute_order_stats([])

    assert stats["totalOrders"] == 0
    assert stats["avgOrderValue"] == 0.0


def test_mock_orders_surround_the_business_location():
    orders = generate_mock_orders(LOCATION, radius_miles=2.0, seed=11, now=NOW)

    assert len(orders) == 8
    assert [order.order_id for order in orders] == [str(index) for index in range(1, 9)]
    assert [order.status for order in orders] == ["ready", "ready", "preparing", "preparing"] + ["pending"] * 4
    assert orders[0].created_at == NOW - timedelta(minutes=10)
    assert orders[7].created_at == NOW - timedelta(minutes=80)
    assert orders[0].delivery_address == "123 Oak Street, Middletown, CT 06457"
    assert orders[1].delivery_address == "456 Pine Avenue, Middletown, CT 06457"
    assert orders[0].customer_phone == "(555) 123-0001"
    for order in orders:
        assert distance_miles(LOCATION.point, order.delivery_location) <= 2.05
        assert order.total_amount == 18.99
        assert order.distance.endswith(" mi")


def test_mock_orders_are_reproducible_with_a_seed():
    first = generate_mock_orders(LOCATION, seed=3, now=NOW)
    second = generate_mock_orders(LOCATION, seed=3, now=NOW)

    assert [order.delivery_location for order in first] == [order.delivery_location for order in second]


def test_mock_address_without_city_uses_placeholder():
    location = BusinessLocation(name="Cart", address="Food Truck", latitude=40.0, longitude=-74.0)

    orders = generate_mock_orders(location, seed=1, now=NOW)

    assert orders[2].delivery_address == "789 Maple Drive, Local City, ST 12345"


def test_board_survives_concurrent_reads_and_writes():
    board = OrderBoard([_order(str(index), "ready", minutes_ago=index) for index in range(1, 21)])
    errors: list[BaseException] = []

    def writer(order_id: str) -> None:
        try:
            for _ in range(50):
                board.archive(order_id, now=NOW)
                board.unarchive(order_id)
                board.update_status(order_id, "out_for_delivery", now=NOW)
        except BaseException as exc:
            errors.append(exc)

    def reader() -> None:
        try:
            for _ in range(200):
                board.list_orders()
                board.active_orders(show_archived=True)
                len(board)
        except BaseException as exc:
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(str(index),)) for index in range(1, 21)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(board) == 20
    assert all(order.status == "out_for_delivery" and not order.archived for order in board.list_orders())
