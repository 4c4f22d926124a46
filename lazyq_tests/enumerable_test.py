import suite
import numpy as np
import pandas as pd
from dgen import CountingSource, from_schema
from lazyq import P, from_iterable, from_range, repeat, empty, generate, Enumerable

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

person_schema = {
    'name': 'first_name',
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr']},
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
}

numbers = P(range(1, 11))  # 1 through 10


# --- laziness ---

@test("building a pipeline pulls nothing until a terminal runs")
def test_pipeline_lazy():
    source = CountingSource(range(1000))
    pipeline = from_iterable(source).where(lambda x: x % 2 == 0).select(lambda x: x * x)
    assert_that(source.pulls == 0, "no element should be pulled while composing")
    assert_that(pipeline.take(3).to.list() == [0, 4, 16], "take should stop the pipeline early")
    assert_that(source.pulls == 5, "only the elements needed for three evens should be pulled")


@test("re-iterable inputs give repeatable passes")
def test_repeatable_passes():
    assert_that(numbers.to.list() == numbers.to.list(), "two passes over a list-backed enumerable agree")
    assert_that(isinstance(numbers.where(lambda x: x > 5), Enumerable), "operations return enumerables")


# --- core operations ---

@test("core operations compose")
def test_core_operations():
    assert_that(numbers.where(lambda x: x % 2 == 0).to.list() == [2, 4, 6, 8, 10], "where filters")
    assert_that(numbers.select(lambda x: x * 10).take(2).to.list() == [10, 20], "select projects")
    assert_that(P([[1, 2], [], [3]]).select_many(lambda x: x).to.list() == [1, 2, 3], "select_many flattens")
    assert_that(numbers.skip(8).to.list() == [9, 10], "skip drops a prefix")
    assert_that(numbers.take_while(lambda x: x < 4).to.list() == [1, 2, 3], "take_while stops at the first miss")
    assert_that(numbers.skip_while(lambda x: x < 9).to.list() == [9, 10], "skip_while drops the leading run")
    assert_that(P('ab').select_with_index(lambda c, i: f"{i}{c}").to.list() == ['0a', '1b'], "index is passed")
    assert_that(P([2]).prepend(1).append(3).to.list() == [1, 2, 3], "prepend and append")
    assert_that(numbers.take(-1).to.list() == [], "negative take yields nothing")


@test("factories create lazy enumerables")
def test_factories():
    assert_that(from_range(3, 3).to.list() == [3, 4, 5], "from_range counts from start")
    assert_that(repeat('x', 3).to.list() == ['x', 'x', 'x'], "repeat repeats")
    assert_that(empty().to.list() == [], "empty is empty")
    calls = []
    gen = generate(lambda: calls.append(1) or len(calls), 5)
    assert_that(calls == [], "generate should not call the function up front")
    assert_that(gen.take(2).to.list() == [1, 2] and len(calls) == 2, "generate calls only for pulled elements")


@test("intersperse places a separator between elements")
def test_intersperse():
    assert_that(P([1, 2, 3]).util.intersperse(0).to.list() == [1, 0, 2, 0, 3], "separator between each pair")
    assert_that(P([1]).util.intersperse(0).to.list() == [1], "single element has no separator")


# --- terminal ---

@test("terminal accessors materialize results")
def test_terminal():
    assert_that(numbers.to.tuple() == tuple(range(1, 11)), "tuple() materializes")
    assert_that(numbers.to.count() == 10 and numbers.to.count(lambda x: x > 7) == 3, "count with and without predicate")
    assert_that(numbers.to.first() == 1 and numbers.to.first(lambda x: x > 4) == 5, "first with and without predicate")
    assert_raises(ValueError, lambda: empty().to.first(), "first on empty should fail")
    assert_that(empty().to.first_or_default(default=-1) == -1, "first_or_default falls back")


@test("first pulls no further than the match")
def test_first_is_lazy():
    source = CountingSource(range(100))
    from_iterable(source).to.first(lambda x: x == 3)
    assert_that(source.pulls == 4, "first should stop at the match")


@test("first_or_default lets pipeline errors through")
def test_first_or_default_propagates():
    assert_raises(ValueError, lambda: P(["x", "1"]).select(int).to.first_or_default(default=-1),
                  "a failing select must not be mistaken for an empty sequence")
    assert_raises(ValueError, lambda: P([1, 2]).to.first_or_default(lambda x: int("bad"), default=-1),
                  "a failing predicate must propagate")
    assert_that(numbers.to.first_or_default(lambda x: x > 100, default=-1) == -1, "no match falls back")
    assert_that(numbers.to.first_or_default(lambda x: x > 4) == 5, "a match is returned")


@test("terminal accessors hand off to numpy and pandas")
def test_terminal_numpy_pandas():
    arr = numbers.to.array()
    assert_that(isinstance(arr, np.ndarray) and arr.sum() == 55, "array() should build a numpy array")
    series = numbers.to.series()
    assert_that(isinstance(series, pd.Series) and len(series) == 10, "series() should build a pandas series")

    people = from_schema(person_schema, seed=4).take(30)
    df = people.to.df()
    assert_that(isinstance(df, pd.DataFrame) and list(df.columns) == ['name', 'department', 'age'],
                "df() should turn records into columns")
    runs = people.group.batch_by(lambda p: p['department']).select(lambda b: (b[0]['department'], len(b)))
    run_df = runs.to.df(columns=['department', 'run_length'])
    assert_that(run_df['run_length'].sum() == 30, "run lengths should cover every record")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="lazyq enumerable test")
