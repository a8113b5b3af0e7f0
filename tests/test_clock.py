import threading
import time

from puid.core import clock
from puid.core.clock import AtomicCounter, counter, time_millis


def test_counter_sequence_and_wrap():
    c = AtomicCounter()
    assert [c.next() for _ in range(256)] == list(range(256))
    assert c.next() == 0
    assert c.next() == 1


def test_process_counter_wraps():
    start = clock.COUNTER.value
    seen = [counter() for _ in range(256)]
    assert seen == [(start + i) % 256 for i in range(256)]
    assert counter() == start


def test_counter_concurrent_distinct():
    c = AtomicCounter()
    results = []
    lock = threading.Lock()

    def work():
        local = [c.next() for _ in range(32)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(256))
    assert c.next() == 0


def test_time_millis():
    before = int(time.time() * 1000)
    now = time_millis()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1
