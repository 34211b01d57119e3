"""Tests for when_not_null, when_all_not_null, Deferred and or_else."""

import gc

import pytest
from hypothesis import given
from strategies import optional, present

from nullsafe import ABSENT, ArityError, Deferred, or_else, when_all_not_null, when_not_null


class TestDeferred:
    """Tests for the Deferred thunk type."""

    def test_absent_returns_none(self):
        """The absent thunk yields None and reports itself absent."""
        assert ABSENT() is None
        assert Deferred()() is None
        assert ABSENT.is_present() is False

    def test_present_runs_block_with_args(self, recorder, calls):
        """Calling a present thunk runs the block with the stored values."""
        thunk = Deferred(recorder, (1, 2))
        assert thunk.is_present() is True
        assert thunk() == (1, 2)
        assert calls == [(1, 2)]

    def test_not_memoized(self, recorder, calls):
        """Each call re-runs the block."""
        thunk = Deferred(recorder, ('x',))
        thunk()
        thunk()
        assert calls == [('x',), ('x',)]

    def test_is_frozen(self):
        """Deferred instances are immutable."""
        with pytest.raises(AttributeError):
            ABSENT.block = print  # type: ignore[misc]

    def test_not_gc_tracked(self):
        """Deferred is declared gc=False, like the other value structs."""
        assert gc.is_tracked(Deferred(print, (1,))) is False

    def test_equality(self):
        """Deferred instances compare by block and values."""
        assert Deferred() == ABSENT
        assert Deferred(print, (1,)) == Deferred(print, (1,))
        assert Deferred(print, (1,)) != Deferred(print, (2,))

    def test_block_returning_none(self):
        """A present thunk may still produce None."""
        thunk = Deferred(lambda: None)
        assert thunk.is_present() is True
        assert thunk() is None


class TestOrElse:
    """Tests for or_else, as a function and as a Deferred method."""

    def test_present_result_skips_fallback(self, recorder, calls):
        """A non-None thunk result is returned without running the fallback."""
        assert or_else(Deferred(lambda: 'value'), recorder) == 'value'
        assert calls == []

    def test_absent_uses_fallback(self):
        """The absent thunk falls through to the fallback."""
        assert or_else(ABSENT, lambda: 'fallback') == 'fallback'

    def test_none_result_uses_fallback(self):
        """A block that returns None falls through to the fallback too."""
        assert Deferred(lambda: None).or_else(lambda: 'fallback') == 'fallback'

    def test_falsy_result_is_kept(self):
        """0 is a result, not absence."""
        assert Deferred(lambda: 0).or_else(lambda: 99) == 0

    def test_thunk_forced_once(self, calls):
        """or_else calls the thunk exactly once."""

        def thunk():
            calls.append('thunk')

        or_else(thunk, lambda: 'fallback')
        assert calls == ['thunk']

    def test_accepts_plain_callable(self):
        """Any zero-argument callable can stand in for a Deferred."""
        assert or_else(lambda: 5, lambda: 9) == 5


class TestWhenNotNull:
    """Tests for the fixed-arity when_not_null forms."""

    def test_single_present(self):
        """One present value is passed to the block."""
        assert when_not_null('abc', str.upper).or_else(lambda: 'none') == 'ABC'

    def test_single_absent(self, recorder, calls):
        """None returns the absent thunk and never runs the block."""
        thunk = when_not_null(None, recorder)
        assert thunk is ABSENT
        assert thunk.or_else(lambda: 'none') == 'none'
        assert calls == []

    def test_block_runs_only_when_forced(self, recorder, calls):
        """Building the thunk does not run the block."""
        thunk = when_not_null(1, 2, recorder)
        assert calls == []
        assert thunk() == (1, 2)
        assert calls == [(1, 2)]

    def test_two_values(self):
        """Two present values are passed to the block in order."""
        result = when_not_null('Ada', 'Lovelace', lambda f, last: f'{f} {last}').or_else(lambda: '?')
        assert result == 'Ada Lovelace'

    def test_three_values(self):
        """Three present values are passed to the block in order."""
        assert when_not_null(1, 2, 3, lambda a, b, c: a + b + c).or_else(lambda: 0) == 6

    @pytest.mark.parametrize('values', [(None, 2, 3), (1, None, 3), (1, 2, None)])
    def test_three_with_absent(self, values):
        """Any None among three values selects the fallback."""
        assert when_not_null(*values, lambda a, b, c: a + b + c).or_else(lambda: -1) == -1

    def test_presence_checked_at_call_time(self):
        """Mutating a captured container later does not change presence."""
        box = {'value': 1}
        thunk = when_not_null(box['value'], lambda v: v * 10)
        box['value'] = None
        assert thunk() == 10

    def test_block_may_return_none(self):
        """A block returning None selects the fallback."""
        assert when_not_null(1, lambda _: None).or_else(lambda: 'fallback') == 'fallback'

    def test_rerun_not_memoized(self, recorder, calls):
        """Calling the returned thunk twice runs the block twice."""
        thunk = when_not_null('x', recorder)
        thunk()
        thunk()
        assert len(calls) == 2

    @pytest.mark.parametrize('args', [(), (print,), (1, 2, 3, 4, print)])
    def test_wrong_value_count_raises(self, args):
        """Fewer than one or more than three values is rejected."""
        with pytest.raises(ArityError):
            when_not_null(*args)

    def test_non_callable_block_raises(self):
        """A non-callable block is rejected even when a value is None."""
        with pytest.raises(ArityError):
            when_not_null(None, 'not callable')

    @given(optional, optional, present, present)
    def test_or_else_picks_block_or_fallback(self, a, b, result, fallback_result):
        """Block result when all present, fallback result otherwise; never both."""
        fallback_calls = []

        def fallback():
            fallback_calls.append(True)
            return fallback_result

        value = when_not_null(a, b, lambda _a, _b: result).or_else(fallback)
        if a is not None and b is not None:
            assert value == result
            assert fallback_calls == []
        else:
            assert value == fallback_result
            assert fallback_calls == [True]


class TestWhenAllNotNull:
    """Tests for the variadic when_all_not_null form."""

    def test_all_present(self):
        """The block's result is returned when nothing is None."""
        a, b, c, d = 1, 'b', 3.0, [4]
        assert when_all_not_null(a, b, c, d, lambda: f'{a}{b}').or_else(lambda: '') == '1b'

    def test_any_absent(self, recorder, calls):
        """One None among the values returns the absent thunk."""
        assert when_all_not_null(1, None, 3, recorder) is ABSENT
        assert calls == []

    def test_no_values_is_present(self, recorder, calls):
        """Zero values: nothing is absent, so the block runs."""
        thunk = when_all_not_null(recorder)
        assert thunk.is_present() is True
        assert thunk() == ()
        assert calls == [()]

    def test_block_takes_no_arguments(self, recorder, calls):
        """The variadic block is called without the values."""
        when_all_not_null('a', 'b', recorder)()
        assert calls == [()]

    def test_missing_block_raises(self):
        """Calling with no arguments is rejected."""
        with pytest.raises(ArityError):
            when_all_not_null()
