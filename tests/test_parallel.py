import threading

import pytest

from utils.parallel import run_all


def test_returns_all_results_by_name():
    assert run_all({"a": lambda: 1, "b": lambda: "two"}) == {"a": 1, "b": "two"}


def test_empty_task_set():
    assert run_all({}) == {}


def test_runs_tasks_concurrently():
    barrier = threading.Barrier(2, timeout=5)

    def task():
        # Deadlocks (then times out) unless both tasks run at the same time.
        barrier.wait()
        return True

    assert run_all({"a": task, "b": task}) == {"a": True, "b": True}


def test_any_failure_fails_the_join():
    def boom():
        raise RuntimeError("read failed")

    with pytest.raises(RuntimeError, match="read failed"):
        run_all({"ok": lambda: 1, "bad": boom})
