import threading
from typing import Callable, Dict, List

from weatherapp.app.ui_dispatcher import UiDispatcher, run_in_thread


class _FakeScheduler:
    def __init__(self) -> None:
        self.pending: Dict[str, Callable[[], None]] = {}
        self.cancelled: List[str] = []
        self._counter = 0

    def after(self, delay_ms: int, callback: Callable[[], None]) -> str:
        self._counter += 1
        token = f"after#{self._counter}"
        self.pending[token] = callback
        return token

    def after_cancel(self, token: str) -> None:
        self.cancelled.append(token)
        self.pending.pop(token, None)

    def fire_all(self) -> None:
        for token, callback in list(self.pending.items()):
            del self.pending[token]
            callback()


def test_posted_tasks_run_on_tick_and_tick_reschedules():
    sched = _FakeScheduler()
    dispatcher = UiDispatcher(sched.after, sched.after_cancel)
    ran: List[str] = []

    dispatcher.start()
    dispatcher.post(lambda: ran.append("a"))
    dispatcher.post(lambda: ran.append("b"))
    assert ran == []

    sched.fire_all()

    assert ran == ["a", "b"]
    assert dispatcher.running
    assert len(sched.pending) == 1


def test_stop_cancels_pending_tick():
    sched = _FakeScheduler()
    dispatcher = UiDispatcher(sched.after, sched.after_cancel)

    dispatcher.start()
    dispatcher.stop()

    assert not dispatcher.running
    assert sched.pending == {}
    assert sched.cancelled == ["after#1"]


def test_failing_task_does_not_block_queue():
    sched = _FakeScheduler()
    dispatcher = UiDispatcher(sched.after, sched.after_cancel)
    ran: List[str] = []

    def _boom() -> None:
        raise RuntimeError("boom")

    dispatcher.post(_boom)
    dispatcher.post(lambda: ran.append("after-boom"))

    assert dispatcher.drain() == 2
    assert ran == ["after-boom"]


def test_post_from_worker_thread_is_drained_on_caller_thread():
    sched = _FakeScheduler()
    dispatcher = UiDispatcher(sched.after, sched.after_cancel)
    done = threading.Event()
    seen: List[str] = []

    def _work() -> None:
        dispatcher.post(lambda: seen.append(threading.current_thread().name))
        done.set()

    run_in_thread(_work)
    assert done.wait(timeout=5)
    dispatcher.drain()

    assert seen == [threading.current_thread().name]
