import pytest

from warehouse_sim.events import Event, EventKind, EventQueue, Package


def _arrival(time, package_id, at=0):
    pkg = Package(id=package_id, origin=at, destination=at, posted_at=time)
    return Event(time=time, kind=EventKind.PACKAGE_ARRIVES, package=pkg, origin=at)


def _transport(time, origin, destination):
    return Event(
        time=time, kind=EventKind.START_TRANSPORT, origin=origin, destination=destination
    )


def test_arrival_sort_key_precedes_transport_at_same_time():
    arrival = _arrival(5, 99)
    transport = _transport(5, 0, 0)
    assert arrival.sort_key() < transport.sort_key()
    assert arrival.sort_key() == (5, 0, 99, 0)
    assert transport.sort_key() == (5, 1, 0, 0)


def test_package_defaults():
    pkg = Package(id=1, origin=0, destination=2, posted_at=5)
    assert pkg.route == []
    assert pkg.route_pos == 1


def test_pop_orders_by_time():
    queue = EventQueue(10)
    events = [_arrival(30, 0), _arrival(10, 1), _arrival(20, 2)]
    for ev in events:
        queue.push(ev)
    assert [queue.pop().time for _ in range(3)] == [10, 20, 30]


def test_same_time_arrival_before_transport():
    queue = EventQueue(10)
    transport = _transport(5, 0, 1)
    arrival = _arrival(5, 9)
    queue.push(transport)
    queue.push(arrival)
    assert queue.pop() is arrival
    assert queue.pop() is transport


def test_arrivals_tie_broken_by_package_id():
    queue = EventQueue(10)
    a, b, c = _arrival(7, 3), _arrival(7, 1), _arrival(7, 2)
    for ev in (a, b, c):
        queue.push(ev)
    assert [queue.pop().package.id for _ in range(3)] == [1, 2, 3]


def test_transports_tie_broken_by_origin_then_destination():
    queue = EventQueue(10)
    items = [_transport(4, 1, 0), _transport(4, 0, 2), _transport(4, 0, 1)]
    for ev in items:
        queue.push(ev)
    popped = [(e.origin, e.destination) for e in (queue.pop(), queue.pop(), queue.pop())]
    assert popped == [(0, 1), (0, 2), (1, 0)]


def test_len_and_bool_track_contents():
    queue = EventQueue(5)
    assert len(queue) == 0
    assert not queue
    queue.push(_arrival(1, 0))
    queue.push(_arrival(2, 1))
    assert len(queue) == 2
    assert queue
    queue.pop()
    queue.pop()
    assert not queue


def test_pop_from_empty_raises():
    queue = EventQueue(3)
    with pytest.raises(IndexError):
        queue.pop()


def test_full_queue_discards_and_warns(capsys):
    queue = EventQueue(2)
    assert queue.push(_arrival(1, 0)) is True
    assert queue.push(_arrival(2, 1)) is True
    assert queue.push(_arrival(0, 2)) is False
    assert len(queue) == 2
    assert "Capacidade = 2" in capsys.readouterr().err
    assert queue.pop().package.id == 0


def test_full_queue_warns_on_stderr(capsys):
    queue = EventQueue(0)
    assert queue.push(_arrival(1, 0)) is False
    assert "Evento descartado" in capsys.readouterr().err


def test_heap_order_is_nondecreasing_for_many_events():
    queue = EventQueue(100)
    times = [13, 2, 8, 2, 21, 5, 5, 0, 34, 1, 3, 1]
    for i, t in enumerate(times):
        queue.push(_arrival(t, i))
    popped = []
    while queue:
        popped.append(queue.pop().time)
    assert popped == sorted(times)