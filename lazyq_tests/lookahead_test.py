import suite
from dgen import CountingSource, FailingSource, SourceFailure, Generator
from lazyq import LookaheadBuffer, ExhaustedError, P

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- peek ---

@test("peek returns upcoming elements without consuming them")
def test_peek_does_not_consume():
    buf = LookaheadBuffer([10, 20, 30], capacity=3)
    assert_that(buf.peek() == 10, "peek() should return the head")
    assert_that(buf.peek(2) == 30, "peek(2) should return the third element")
    assert_that(buf.peek(0) == 10, "the head should still be there after peeking further")
    assert_that(list(buf) == [10, 20, 30], "iterating after peeks should yield everything in order")


@test("peek pulls lazily, only as deep as requested")
def test_peek_is_lazy():
    source = CountingSource(range(100))
    buf = LookaheadBuffer(source, capacity=5)
    assert_that(source.pulls == 0, "constructing a buffer must not pull")
    buf.peek(0)
    assert_that(source.pulls == 1, "peek(0) should pull exactly one element")
    buf.peek(3)
    assert_that(source.pulls == 4, "peek(3) should pull up to the fourth element and no further")
    buf.peek(1)
    assert_that(source.pulls == 4, "peeking an already buffered position should not pull")


@test("peek past the end raises ExhaustedError with counts")
def test_peek_exhausted():
    buf = LookaheadBuffer([1, 2])
    err = assert_raises(ExhaustedError, lambda: buf.peek(4), "peek beyond the source should fail")
    assert_that(err.requested == 5 and err.available == 2, "error should report requested and available counts")
    assert_that(isinstance(err, LookupError), "ExhaustedError should be a LookupError")
    assert_that(buf.peek(1) == 2, "a failed peek should leave the buffered elements intact")


@test("peek deeper than capacity is rejected")
def test_peek_capacity():
    buf = LookaheadBuffer(range(10), capacity=2)
    assert_raises(ValueError, lambda: buf.peek(2), "depth equal to capacity should be rejected")
    assert_raises(ValueError, lambda: buf.peek(-1), "negative depth should be rejected")
    assert_raises(ValueError, lambda: LookaheadBuffer([], capacity=0), "capacity must be positive")


@test("peek_many returns a frozen prefix")
def test_peek_many():
    buf = LookaheadBuffer("abcdef", capacity=4)
    assert_that(buf.peek_many(3) == ('a', 'b', 'c'), "peek_many should return a tuple prefix")
    assert_that(buf.peek_many(0) == (), "peek_many(0) should be empty")
    assert_that(len(buf) == 3, "peek_many should buffer exactly what it returned")
    assert_raises(ExhaustedError, lambda: LookaheadBuffer("ab").peek_many(3), "short sources should raise")


# --- consume ---

@test("consume discards a prefix and advances the read position")
def test_consume_prefix():
    buf = LookaheadBuffer([1, 2, 3, 4, 5], capacity=3)
    buf.peek(2)
    assert_that(buf.consume(2) == 2, "consume should report how many it discarded")
    assert_that(buf.peek() == 3, "the element after the consumed prefix should be the new head")
    assert_that(buf.consumed == 2, "consumed counter should track discarded elements")


@test("consume past the buffer pulls and drops without storing")
def test_consume_beyond_buffer():
    source = CountingSource(range(10))
    buf = LookaheadBuffer(source, capacity=2)
    buf.peek(0)
    buf.consume(5)
    assert_that(source.pulls == 5, "consume(5) should pull exactly five elements in total")
    assert_that(len(buf) == 0, "skipped elements must not be stored")
    assert_that(buf.peek() == 5, "the read position should be after the skipped elements")


@test("consume raises ExhaustedError after discarding what remained")
def test_consume_exhausted():
    buf = LookaheadBuffer([1, 2, 3])
    err = assert_raises(ExhaustedError, lambda: buf.consume(5), "consuming beyond the end should fail")
    assert_that(err.available == 3, "error should report the three elements that were discarded")
    assert_that(not buf.has_next(), "nothing should remain afterwards")
    assert_raises(ValueError, lambda: buf.consume(-1), "negative counts should be rejected")


# --- try_pull ---

@test("try_pull signals exhaustion and respects capacity")
def test_try_pull():
    buf = LookaheadBuffer([7], capacity=1)
    assert_that(buf.try_pull() is True, "first pull should succeed")
    assert_raises(ValueError, buf.try_pull, "pulling into a full buffer should be rejected")
    next(buf)
    assert_that(buf.try_pull() is False, "pulling an exhausted source should return False")
    assert_that(buf.source_exhausted, "exhaustion should be remembered")


@test("an exhausted source is never asked again")
def test_no_pull_after_exhaustion():
    source = CountingSource([1])
    buf = LookaheadBuffer(source)
    assert_that(list(buf) == [1], "should yield the only element")
    assert_that(not buf.has_next(), "should report nothing left")
    buf.try_pull()
    assert_that(source.exhausted_signals == 1, "the source should see exactly one exhaustion query")


# --- invariants ---

@test("pulls never exceed deepest peek plus consumed count")
def test_non_speculation():
    gen = Generator(seed=7)
    source = CountingSource(gen.ints(200))
    buf = LookaheadBuffer(source, capacity=6)
    depths = gen.ints(120, 0, 5)
    max_depth_requested = 0
    for depth in depths:
        try:
            buf.peek(depth)
        except ExhaustedError:
            break
        # the buffer must hold exactly what has been pulled but not consumed
        assert_that(source.pulls == buf.consumed + len(buf), "pulled elements must be buffered or consumed")
        max_depth_requested = max(max_depth_requested, depth + 1)
        assert_that(source.pulls <= buf.consumed + max_depth_requested, "no speculative over-pull")
        if depth % 2 == 0:
            buf.consume(1)
    assert_that(buf.pulled == source.pulls, "the buffer's pull counter should match the source")


@test("source errors pass through unchanged")
def test_source_error_passthrough():
    buf = LookaheadBuffer(FailingSource([1]))
    assert_that(buf.peek() == 1, "elements before the failure should be served")
    assert_raises(SourceFailure, lambda: buf.peek(1), "the source's own exception should propagate")
    assert_that(next(buf) == 1, "the buffered element should survive the failed pull")


@test("consume keeps its counts when the source fails mid-skip")
def test_consume_source_error_bookkeeping():
    buf = LookaheadBuffer(FailingSource([0, 1, 2]), capacity=2)
    buf.peek(1)
    assert_raises(SourceFailure, lambda: buf.consume(4), "the failure during the skip should propagate")
    assert_that(buf.pulled == 3 and buf.consumed == 3 and len(buf) == 0,
                "every pulled element was discarded, so it must count as consumed")
    assert_that(buf.pulled == buf.consumed + len(buf), "pulled should equal consumed plus buffered")


@test("util.lookahead wraps a pass over an enumerable")
def test_util_lookahead():
    buf = P([3, 1, 4, 1, 5]).util.lookahead(2)
    assert_that(buf.peek(1) == 1, "lookahead should peek into the enumerable")
    assert_that(buf.capacity == 2, "capacity should be passed through")
    assert_that(list(buf) == [3, 1, 4, 1, 5], "the buffer should then yield the full pass")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="lazyq lookahead test")
