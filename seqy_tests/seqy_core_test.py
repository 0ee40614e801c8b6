import suite
from dgen import from_schema
from seqy import (
    Sequence, P, seq, from_iterable, from_range, from_count, repeat, empty, generate
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# test data schemas
person_schema = {
    'id': {'_qen_provider': 'counter', 'start': 1},
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr', 'marketing']}
}

# helper data
numbers = from_range(1, 11)  # 1 through 10
words = P(['apple', 'banana', 'cherry', 'date', 'elderberry'])
nested_data = P([[1, 2], [3, 4, 5], [], [6]])


# --- factories ---

@test("from_iterable wraps without reading and aliases point at it")
def test_from_iterable():
    source = suite.Probe([1, 2, 3])
    wrapped = from_iterable(source)
    assert_that(isinstance(wrapped, Sequence), "should be a sequence instance")
    assert_that(source.pulled == 0, "wrapping should not pull")
    assert_that(wrapped.to.list() == [1, 2, 3], "iteration should read the source")
    assert_that(wrapped.to.list() == [], "a one-shot source is spent after one pass")
    assert_that(seq is from_iterable and P is from_iterable, "aliases")


@test("from_range mirrors range and fails fast on a zero step")
def test_from_range():
    assert_that(from_range(3).to.list() == [0, 1, 2], "from_range(3)")
    assert_that(from_range(10, 0, -3).to.list() == [10, 7, 4, 1], "negative step")
    assert_that(numbers.to.list() == numbers.to.list(), "a range sequence can be iterated again")
    assert_raises(ValueError, from_range, 0, 5, 0)


@test("from_count, repeat and generate can be infinite")
def test_infinite_factories():
    assert_that(from_count(3, 3).take(4).to.list() == [3, 6, 9, 12], "from_count should step")
    assert_that(repeat('x').take(3).to.list() == ['x', 'x', 'x'], "repeat with no count is endless")
    assert_that(repeat('x', 2).to.list() == ['x', 'x'], "repeat with a count")
    assert_that(repeat('x', -1).to.list() == [], "a negative count is empty")
    calls = []
    generated = generate(lambda: calls.append(1) or len(calls))
    assert_that(generated.take(3).to.list() == [1, 2, 3], "generate should call once per pull")
    assert_that(len(calls) == 3, "generate should not run ahead")
    assert_that(generate(lambda: 0, 2).to.list() == [0, 0], "generate with a count")
    assert_that(empty().to.list() == [], "empty is empty")


# --- projection and filtering ---

@test("where, where_not and select compose lazily")
def test_where_select():
    source = suite.Probe(range(100))
    pipeline = from_iterable(source).where(lambda x: x % 2 == 0).select(lambda x: x * x)
    assert_that(source.pulled == 0, "building a pipeline should not pull")
    assert_that(pipeline.take(3).to.list() == [0, 4, 16], "first three even squares")
    assert_that(source.pulled == 5, f"only the needed prefix should be read, pulled {source.pulled}")
    assert_that(numbers.where_not(lambda x: x > 3).to.list() == [1, 2, 3], "where_not drops matches")


@test("select_many flattens and select_with_index passes positions")
def test_select_many_with_index():
    assert_that(nested_data.select_many(lambda x: x).to.list() == [1, 2, 3, 4, 5, 6], "flatten")
    indexed = words.select_with_index(lambda w, i: f"{i}:{w[0]}").to.list()
    assert_that(indexed == ['0:a', '1:b', '2:c', '3:d', '4:e'], "index should be the position")
    assert_that(words.enumerate(1).to.first() == (1, 'apple'), "enumerate with a start")


@test("take_while and skip_while split at the first failure")
def test_take_skip_while():
    assert_that(numbers.take_while(lambda x: x < 4).to.list() == [1, 2, 3], "take_while")
    assert_that(numbers.skip_while(lambda x: x < 8).to.list() == [8, 9, 10], "skip_while")
    assert_that(from_count().take_while(lambda x: x < 3).to.list() == [0, 1, 2], "take_while on an infinite sequence")


# --- combining ---

@test("concat, append, prepend and compress combine sequences")
def test_combining():
    assert_that(P([1, 2]).concat([3], (4, 5)).to.list() == [1, 2, 3, 4, 5], "concat several")
    assert_that(P([1, 2]).append(3).prepend(0).to.list() == [0, 1, 2, 3], "append and prepend")
    assert_that(P('ABCDEF').compress([1, 0, 1, 0, 1, 1]).to.list() == list('ACEF'), "compress")
    assert_that(P([1, 2]).cycle().take(5).to.list() == [1, 2, 1, 2, 1], "cycle")
    assert_that(empty().cycle().to.list() == [], "cycle of empty stays empty")


@test("accumulate on the sequence follows the configured reducer")
def test_sequence_accumulate():
    assert_that(numbers.take(4).accumulate().to.list() == [1, 3, 6, 10], "prefix sums")
    assert_that(words.accumulate(lambda n, w: n + len(w), 0).take(3).to.list() == [0, 5, 11], "with initial")
    assert_that(from_count(1).accumulate(lambda a, b: a * b, 1).take(6).to.list() == [1, 1, 2, 6, 24, 120],
                "factorials from an infinite source")


@test("tee splits a sequence into single-pass copies")
def test_sequence_tee():
    left, right = from_count().tee()
    assert_that(left.take(3).to.list() == [0, 1, 2], "left copy")
    assert_that(right.take(2).to.list() == [0, 1], "right copy starts from the beginning too")


@test("side_effect sees exactly the elements that are pulled")
def test_side_effect():
    seen = []
    pipeline = from_count().side_effect(seen.append).take(3)
    assert_that(seen == [], "nothing should run before iteration")
    assert_that(pipeline.to.list() == [0, 1, 2] and seen == [0, 1, 2], "side effect should follow pulls")


@test("default_if_empty only adds the default to empty sequences")
def test_default_if_empty():
    assert_that(empty().default_if_empty(0).to.list() == [0], "empty gets the default")
    assert_that(P([1, 2]).default_if_empty(0).to.list() == [1, 2], "non-empty is unchanged")


# --- pipelines over generated data ---

@test("a full pipeline over an endless record stream stays bounded")
def test_record_pipeline():
    people = from_schema(person_schema, seed=7).stream()
    adults = (people
              .where(lambda p: p['age'] >= 30)
              .select(lambda p: {'id': p['id'], 'name': p['name'].upper()})
              .take(5)
              .to.list())
    assert_that(len(adults) == 5, "take should bound the endless stream")
    assert_that(all(a['name'].isupper() for a in adults), "select transformation should be applied")
    ids = [a['id'] for a in adults]
    assert_that(ids == sorted(ids) and len(set(ids)) == 5, "ids come from a counter, so they increase")


@test("the same seed gives the same stream")
def test_seeded_stream():
    first = from_schema(person_schema, seed=99).stream().take(5).to.list()
    second = from_schema(person_schema, seed=99).stream().take(5).to.list()
    assert_that(first == second, "seeded streams should repeat")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="seqy core test")
