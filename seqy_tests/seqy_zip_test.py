import suite
from seqy import P, from_range, from_count, empty
from seqy.iterators import zip, zip_longest

# --- setup ---
test = suite.test
assert_that = suite.assert_that

# --- test data ---
letters = 'Hello'
numbers = [3, 2, 1]


# --- zip ---

@test("zip pairs values in lock-step and stops at the shortest source")
def test_zip_basic():
    assert_that(list(zip(letters, numbers)) == [('H', 3), ('e', 2), ('l', 1)], "should stop after three pairs")
    assert_that(list(zip([1, 2], 'ab', (True, False))) == [(1, 'a', True), (2, 'b', False)], "three sources")


@test("zip yields exactly min(len) tuples for every combination of lengths")
def test_zip_lengths():
    for lengths in [(0,), (3,), (2, 5), (5, 2), (4, 4, 4), (1, 0, 7), (6, 3, 9)]:
        sources = [list(range(n)) for n in lengths]
        result = list(zip(*sources))
        assert_that(len(result) == min(lengths), f"zip over {lengths} should yield {min(lengths)} tuples")
        assert_that(all(len(t) == len(lengths) for t in result), "every tuple should have one slot per source")


@test("zip with no sources is empty")
def test_zip_no_sources():
    assert_that(list(zip()) == [], "zip() should be empty")
    assert_that(list(zip_longest()) == [], "zip_longest() should be empty")


@test("zip drops values already pulled at the step where a source ends")
def test_zip_discards_partial():
    first = suite.Probe([1, 2, 3])
    second = suite.Probe(['a'])
    assert_that(list(zip(first, second)) == [(1, 'a')], "only one full tuple exists")
    assert_that(first.pulled == 2, "the first source was pulled once more before the second ended")
    assert_that(next(first) == 3, "the dropped value is gone; the source continues after it")


@test("zip pulls sources left to right and stops at the first exhausted one")
def test_zip_pull_order():
    short = suite.Probe([])
    long = suite.Probe([1, 2, 3])
    assert_that(list(zip(short, long)) == [], "an empty first source ends everything")
    assert_that(long.pulled == 0, "sources after the exhausted one should not be pulled")


@test("zip works with infinite sources")
def test_zip_infinite():
    assert_that(list(zip(from_count(), 'abc')) == [(0, 'a'), (1, 'b'), (2, 'c')], "finite partner should bound it")


@test("zip is lazy until the first pull")
def test_zip_lazy():
    source = suite.Probe([1, 2])
    zipped = zip(source, source)
    assert_that(source.pulled == 0, "nothing should be pulled at call time")
    assert_that(next(zipped) == (1, 2), "one source twice should alternate")


# --- zip_longest ---

@test("zip_longest pads exhausted sources with the fill value")
def test_zip_longest_basic():
    assert_that(list(zip_longest('Hat', [3])) == [('H', 3), ('a', None), ('t', None)], "None padding by default")
    assert_that(list(zip_longest('ab', 'wxyz', fill_value='-')) == [('a', 'w'), ('b', 'x'), ('-', 'y'), ('-', 'z')],
                "custom fill value")


@test("zip_longest yields exactly max(len) tuples with placeholders past each short source")
def test_zip_longest_lengths():
    missing = object()
    for lengths in [(0,), (3,), (2, 5), (5, 2), (4, 4, 4), (1, 0, 7), (0, 0)]:
        sources = [list(range(n)) for n in lengths]
        result = list(zip_longest(*sources, fill_value=missing))
        assert_that(len(result) == max(lengths), f"zip_longest over {lengths} should yield {max(lengths)} tuples")
        for position, row in enumerate(result):
            for slot, n in enumerate(lengths):
                expected = position if position < n else missing
                assert_that(row[slot] is expected or row[slot] == expected,
                            f"slot {slot} at position {position} should be {expected!r}")


@test("zip_longest keeps a None fill distinct from real None values")
def test_zip_longest_real_nones():
    result = list(zip_longest([None, None], [1], fill_value=0))
    assert_that(result == [(None, 1), (None, 0)], "source Nones should pass through, padding should use the fill")


# --- accessor ---

@test("zip accessor zips this sequence first")
def test_zip_accessor():
    zipped = P('abc').zip.zip(from_count(1))
    assert_that(zipped.to.list() == [('a', 1), ('b', 2), ('c', 3)], "sequence should be the first slot")
    padded = P('abc').zip.zip_longest([1], fill_value=0).to.list()
    assert_that(padded == [('a', 1), ('b', 0), ('c', 0)], "padding should use fill_value")


@test("zip_with and zip_longest_with apply a result selector")
def test_zip_with():
    sums = from_range(1, 4).zip.zip_with([10, 20, 30, 40], lambda a, b: a + b).to.list()
    assert_that(sums == [11, 22, 33], "zip_with should stop at the shorter input")
    labels = P(['x', 'y']).zip.zip_longest_with([1, 2, 3], lambda s, n: f"{s}{n}", default_self='?').to.list()
    assert_that(labels == ['x1', 'y2', '?3'], "missing self values should use default_self")
    labels = P(['x', 'y', 'z']).zip.zip_longest_with([1], lambda s, n: f"{s}{n}", default_other=0).to.list()
    assert_that(labels == ['x1', 'y0', 'z0'], "missing other values should use default_other")


@test("unzip splits pairs back into columns")
def test_unzip():
    letters_col, numbers_col = P([('a', 1), ('b', 2), ('c', 3)]).zip.unzip()
    assert_that(letters_col.to.list() == ['a', 'b', 'c'], "first column")
    assert_that(numbers_col.to.list() == [1, 2, 3], "second column")
    assert_that(empty().zip.unzip() == (), "unzip of empty should be an empty tuple")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="seqy zip test")
