import threading
import time

from core.locks import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=2)

    def reader():
        with lock.read_locked():
            # 三個讀者必須同時在鎖內才能通過 barrier
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not inside.broken


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []

    lock.acquire_write()

    def reader():
        with lock.read_locked():
            events.append("read")

    thread = threading.Thread(target=reader)
    thread.start()
    time.sleep(0.05)
    events.append("write-done")
    lock.release_write()
    thread.join()

    assert events == ["write-done", "read"]


def test_writers_do_not_lose_updates():
    lock = ReadWriteLock()
    counter = {"value": 0}

    def writer():
        for _ in range(1000):
            with lock.write_locked():
                current = counter["value"]
                counter["value"] = current + 1

    threads = [threading.Thread(target=writer) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert counter["value"] == 4000
