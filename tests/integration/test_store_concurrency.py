"""Concurrency tests for DirStore.

Readers share the store lock; put/delete/load hold it exclusively.
"""

import pickle
import random
import shutil
import tempfile
import threading
import time
from pathlib import Path

import pytest

from dirstore import DirStore, pickle_decoder, pickle_encoder


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


def test_concurrent_gets_run_in_parallel(temp_dir):
    """Test that two gets on different keys are inside the lock together."""
    both_decoding = threading.Barrier(2, timeout=5)

    def decoder(fp):
        # Deadlocks (and times out) unless both readers decode at once
        both_decoding.wait()
        return pickle_decoder(fp)

    store = DirStore.from_dir(temp_dir, decoder=decoder)
    store.put("a", 1)
    store.put("b", 2)

    results = {}
    errors = []

    def reader(key):
        try:
            results[key] = store.get(key)
        except threading.BrokenBarrierError as e:
            errors.append(e)

    threads = [threading.Thread(target=reader, args=(k,)) for k in ("a", "b")]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert not errors
    assert results == {"a": 1, "b": 2}


def test_put_waits_for_get(temp_dir):
    """Test that a put cannot start while a get is decoding."""
    events = []
    decoding = threading.Event()

    def slow_decoder(fp):
        decoding.set()
        time.sleep(0.1)
        value = pickle_decoder(fp)
        events.append("get done")
        return value

    def recording_encoder(fp, value):
        events.append("put")
        pickle_encoder(fp, value)

    store = DirStore.from_dir(temp_dir, encoder=pickle_encoder, decoder=slow_decoder)
    store.put("a", 1)
    store = DirStore.from_dir(temp_dir, encoder=recording_encoder, decoder=slow_decoder)
    store.load()

    getter = threading.Thread(target=store.get, args=("a",))
    getter.start()
    decoding.wait(timeout=5)
    store.put("b", 2)
    getter.join(timeout=5)

    assert events == ["get done", "put"]


def test_get_waits_for_put(temp_dir):
    """Test that a get cannot start while a put is encoding."""
    events = []
    encoding = threading.Event()

    def slow_encoder(fp, value):
        encoding.set()
        time.sleep(0.1)
        pickle_encoder(fp, value)
        events.append("put done")

    def recording_decoder(fp):
        events.append("get")
        return pickle_decoder(fp)

    store = DirStore.from_dir(temp_dir, encoder=slow_encoder, decoder=recording_decoder)
    store.load()
    results = []

    putter = threading.Thread(target=store.put, args=("a", 1))
    putter.start()
    encoding.wait(timeout=5)
    # "a" only becomes visible once the put finishes, so the get must see it
    results.append(store.get("a"))
    putter.join(timeout=5)

    assert events == ["put done", "get"]
    assert results == [1]


def test_mixed_workload_keeps_index_consistent(temp_dir):
    """Test many threads putting, getting and deleting at once."""
    store = DirStore.from_dir(temp_dir)
    store.load()
    errors = []

    def worker(seed):
        rng = random.Random(seed)
        try:
            for i in range(200):
                key = f"w{seed}-{rng.randrange(20)}"
                op = rng.random()
                if op < 0.5:
                    store.put(key, (seed, i))
                elif op < 0.8:
                    try:
                        value = store.get(key)
                        assert value[0] == seed
                    except KeyError:
                        pass
                elif op < 0.95:
                    store.delete(key)
                else:
                    store.list(0, -1)
        except (OSError, pickle.UnpicklingError, AssertionError) as e:
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(s,)) for s in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert not errors

    names = store.filenames()
    assert names == sorted(names)

    on_disk = sorted(p.name for p in temp_dir.iterdir())
    assert names == on_disk

    count = len(store)
    assert store.load() == count
