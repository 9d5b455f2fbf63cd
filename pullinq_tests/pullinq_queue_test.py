import random
from collections import deque
import suite
from pullinq import Queue, new_queue, GROWTH_RATE

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises
assert_yields = suite.assert_yields


# --- basic fifo behaviour ---

@test("queue yields nothing when empty")
def test_queue_empty():
    queue = new_queue()
    assert_that(not queue.advance(), "empty queue should not advance")
    assert_that(queue.current() is None, "current should be None without a value")
    assert_that(queue.size() == 0, "empty queue should have no backing slots")


@test("queue yields a single put value")
def test_queue_single():
    queue = new_queue()
    queue.put(1)
    assert_that(queue.advance(), "should advance to the put value")
    assert_that(queue.current() == 1, "current should be the put value")
    assert_that(not queue.advance(), "should be exhausted afterwards")


@test("queue current returns the same value until the next advance")
def test_queue_current_stable():
    queue = new_queue()
    queue.put('a')
    queue.advance()
    assert_that(queue.current() == 'a', "first read")
    assert_that(queue.current() == 'a', "second read should match")
    assert_that(queue.current() == 'a', "third read should match")


@test("queue current is None after an exhausted advance")
def test_queue_current_after_exhaustion():
    queue = new_queue()
    queue.put(1)
    queue.advance()
    queue.advance()
    assert_that(queue.current() is None, "no stale value after exhaustion")


@test("queue yields 100 values put up front in order")
def test_queue_hundred_up_front():
    queue = new_queue()
    for i in range(1, 101):
        queue.put(i)
    assert_yields(queue, range(1, 101), "queue should be fifo")
    assert_that(queue.size() == 100, "backing list should hold all 100 values")


@test("queue yields 100 values read as they are put")
def test_queue_hundred_read_as_put():
    queue = new_queue()
    for i in range(1, 101):
        queue.put(i)
        assert_that(queue.advance(), f"should advance to {i}")
        assert_that(queue.current() == i, f"should read {i}")
    # the value under the read cursor plus the newly put one
    assert_that(queue.size() == 2, f"size should stay small, got {queue.size()}")


@test("queue yields values read in pairs as they are put")
def test_queue_pairs():
    queue = new_queue()
    for i in range(1, 101, 2):
        queue.put(i)
        queue.put(i + 1)
        assert_that(queue.advance() and queue.current() == i, f"should read {i}")
        assert_that(queue.advance() and queue.current() == i + 1, f"should read {i + 1}")


@test("queue yields a value put after full enumeration")
def test_queue_put_after_exhaustion():
    queue = new_queue()
    queue.put(1)
    queue.put(2)
    assert_yields(queue, [1, 2])
    queue.put(3)
    assert_that(queue.advance(), "should advance to the late value")
    assert_that(queue.current() == 3, "should read the late value")
    assert_that(not queue.advance(), "should be exhausted again")


@test("queue keeps returning no value after exhaustion")
def test_queue_exhaustion_idempotent():
    queue = new_queue()
    for i in range(3):
        queue.put(i)
    queue.advance()
    queue.advance()
    queue.put(3)  # wraps to slot 0
    assert_yields(queue, [2, 3])
    for _ in range(5):
        assert_that(not queue.advance(), "repeated advance after exhaustion should stay False")
        assert_that(queue.current() is None, "current should stay None")


@test("queue wraps round the ring without growing")
def test_queue_circle():
    queue = new_queue()
    queue.put(1)
    queue.put(2)
    queue.put(3)
    # [1, 2, 3]
    assert_that(queue.advance() and queue.current() == 1, "should read 1")
    assert_that(queue.advance() and queue.current() == 2, "should read 2")
    queue.put(4)
    # [4, 2, 3], slot 1 is held as current, 4 wraps to slot 0
    assert_yields(queue, [3, 4])
    assert_that(queue.size() == 3, f"size should stay 3, got {queue.size()}")


# --- growth triggers ---

@test("queue allocates on the first put")
def test_queue_growth_empty():
    queue = new_queue()
    queue.put('x')
    assert_that(queue.size() == GROWTH_RATE, "first put allocates one increment")


@test("queue grows at the end when slot zero is unread")
def test_queue_growth_zero_slot_occupied():
    queue = new_queue()
    queue.put(1)
    queue.put(2)
    assert_that(queue.size() == 2, "cannot wrap onto unread slot 0")
    queue.advance()
    # slot 0 is still held as current, so the next put must grow as well
    queue.put(3)
    assert_that(queue.size() == 3, "cannot wrap onto the held slot 0")
    assert_yields(queue, [2, 3])


@test("queue opens a gap when the write cursor reaches the read cursor")
def test_queue_growth_read_collision():
    queue = new_queue()
    for value in ('a', 'b', 'c'):
        queue.put(value)
    queue.advance()
    queue.advance()
    queue.put('d')  # wraps to slot 0: [d, b, c]
    queue.put('e')  # slot 1 holds current 'b': [d, e, b, c]
    assert_that(queue.current() == 'b', "current should survive the shift")
    assert_that(queue.size() == 4, f"should have grown by one, got {queue.size()}")
    assert_yields(queue, ['c', 'd', 'e'])


@test("queue refills in order after stopping on slot zero of a larger ring")
def test_queue_refill_after_stop_on_slot_zero():
    queue = new_queue()
    for value in ('a', 'b', 'c'):
        queue.put(value)
    queue.advance()
    queue.advance()
    queue.put('d')  # wraps to slot 0: [d, b, c]
    assert_yields(queue, ['c', 'd'])
    # the read cursor now rests on slot 0, the refill runs 1, 2 and round to 0
    for value in ('e', 'f', 'g'):
        queue.put(value)
    assert_that(len(queue) == 3, f"three values should be pending, got {len(queue)}")
    assert_yields(queue, ['e', 'f', 'g'], "refill should come out in put order")
    assert_that(queue.size() == 3, f"ring should not have grown, got {queue.size()}")


@test("queue refilled after a full drain reuses its slots")
def test_queue_refill_after_drain():
    queue = new_queue()
    for value in ('a', 'b', 'c'):
        queue.put(value)
    assert_yields(queue, ['a', 'b', 'c'])
    for value in ('d', 'e', 'f'):
        queue.put(value)
    assert_yields(queue, ['d', 'e', 'f'])
    assert_that(queue.high_water == 3, f"high water should be 3, got {queue.high_water}")
    assert_that(queue.size() == queue.high_water,
                f"size {queue.size()} should equal high water {queue.high_water}")


@test("queue fills a ring whose read cursor rests mid-list before growing")
def test_queue_full_ring_after_drain():
    queue = new_queue()
    for value in range(4):
        queue.put(value)
    queue.advance()
    queue.advance()
    assert_yields(queue, [2, 3])
    # four free slots, the read cursor resting on slot 3
    for value in range(4, 9):
        queue.put(value)
    assert_that(queue.size() == 5, f"only the fifth value should grow the ring, got {queue.size()}")
    assert_yields(queue, range(4, 9))


@test("queue reuses slot zero of a single slot ring after exhaustion")
def test_queue_single_slot_reuse():
    queue = new_queue()
    for i in range(10):
        queue.put(i)
        assert_that(queue.advance() and queue.current() == i, f"should read {i}")
        assert_that(not queue.advance(), "should be exhausted between puts")
    assert_that(queue.size() == 1, f"ring should never grow, got {queue.size()}")


@test("queue honours a custom growth rate")
def test_queue_custom_growth():
    queue = Queue(growth_rate=4)
    for i in range(6):
        queue.put(i)
    assert_that(queue.size() == 8, f"should grow in steps of four, got {queue.size()}")
    assert_yields(queue, range(6))


@test("queue rejects a non-positive growth rate")
def test_queue_bad_growth():
    assert_raises(ValueError, lambda: Queue(growth_rate=0))


# --- observability and reset ---

@test("queue size matches the high water mark after draining")
def test_queue_high_water():
    queue = new_queue()
    for i in range(7):
        queue.put(i)
    assert_yields(queue, range(7))
    assert_that(queue.high_water == 7, f"high water should be 7, got {queue.high_water}")
    assert_that(queue.size() == queue.high_water, "size should equal the high water mark")


@test("queue stays fifo for random interleavings of put and advance")
def test_queue_random_interleaving():
    rng = random.Random(1234)
    for _ in range(50):
        queue = new_queue()
        expected = deque()
        read = []
        next_value = 0
        for _ in range(200):
            if rng.random() < 0.55:
                queue.put(next_value)
                expected.append(next_value)
                next_value += 1
            elif queue.advance():
                read.append(queue.current())
                assert_that(read[-1] == expected.popleft(), "values should come out in put order")
            else:
                assert_that(not expected, "queue reported empty while values were pending")
            assert_that(len(queue) == len(expected), "pending count should track the model")
        while queue.advance():
            read.append(queue.current())
            assert_that(read[-1] == expected.popleft(), "drained values should come out in put order")
        assert_that(not expected, "every put value should have been read")
        assert_that(queue.size() == queue.high_water,
                    f"size {queue.size()} should equal high water {queue.high_water}")


@test("queue yields nothing after reset")
def test_queue_reset():
    queue = new_queue()
    queue.reset()
    assert_that(not queue.advance(), "reset empty queue yields nothing")
    queue.put(1)
    queue.reset()
    assert_that(not queue.advance(), "reset discards put values")
    assert_that(queue.size() == 0, "reset discards the backing list")


@test("queue yields values put after reset")
def test_queue_put_after_reset():
    queue = new_queue()
    queue.put(1)
    queue.reset()
    queue.put(2)
    assert_yields(queue, [2])


if __name__ == "__main__":
    suite.run(title="pullinq queue test suite")
