from __future__ import annotations

from speedrays.core.events import Event, EventType
from speedrays.core.state import Screen, ScreenFlow


def test_subscribers_receive_matching_events(bus) -> None:
    seen = []
    bus.subscribe(EventType.PARKED, seen.append)
    bus.emit(Event(type=EventType.PARKED, data={"level": 1}))
    bus.emit(Event(type=EventType.OBSTACLE_HIT))

    assert [e.type for e in seen] == [EventType.PARKED]
    assert seen[0].data == {"level": 1}


def test_unsubscribe(bus) -> None:
    seen = []
    unsubscribe = bus.subscribe(EventType.RUN_ENDED, seen.append)
    unsubscribe()
    unsubscribe()
    bus.emit(Event(type=EventType.RUN_ENDED))
    assert seen == []


def test_failing_handler_does_not_stop_the_others(bus) -> None:
    seen = []

    def broken(event: Event) -> None:
        raise ValueError("boom")

    bus.subscribe(EventType.LEVEL_COMPLETE, broken)
    bus.subscribe(EventType.LEVEL_COMPLETE, seen.append)
    bus.emit(Event(type=EventType.LEVEL_COMPLETE))
    assert len(seen) == 1


def test_handler_may_unsubscribe_while_handling(bus) -> None:
    seen = []
    unsubscribe = None

    def once(event: Event) -> None:
        seen.append(event)
        unsubscribe()

    unsubscribe = bus.subscribe(EventType.PICKUP_COLLECTED, once)
    bus.emit(Event(type=EventType.PICKUP_COLLECTED))
    bus.emit(Event(type=EventType.PICKUP_COLLECTED))
    assert len(seen) == 1


def test_screen_flow_accepts_the_run_cycle() -> None:
    flow = ScreenFlow()
    changes = []
    flow.add_listener(lambda old, new: changes.append((old, new)))

    assert flow.transition(Screen.PLAYING)
    assert flow.transition(Screen.GAME_OVER)
    assert flow.transition(Screen.PLAYING)
    assert flow.transition(Screen.HOME)

    assert changes == [
        (Screen.HOME, Screen.PLAYING),
        (Screen.PLAYING, Screen.GAME_OVER),
        (Screen.GAME_OVER, Screen.PLAYING),
        (Screen.PLAYING, Screen.HOME),
    ]


def test_screen_flow_rejects_invalid_jumps() -> None:
    flow = ScreenFlow()
    assert not flow.transition(Screen.GAME_OVER)
    assert flow.screen is Screen.HOME


def test_screen_listener_errors_are_contained() -> None:
    flow = ScreenFlow()

    def broken(old: Screen, new: Screen) -> None:
        raise RuntimeError("listener")

    flow.add_listener(broken)
    assert flow.transition(Screen.PLAYING)
    assert flow.screen is Screen.PLAYING
