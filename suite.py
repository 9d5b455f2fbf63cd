import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Iterable, Optional, Type

# registered cases and the outcome of the last run
_registry: List[Dict[str, Any]] = []
_outcomes: List[Dict[str, Any]] = []

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """raised by the assert_* helpers, kept apart from errors raised by the code under test."""
    pass


# --- registration ---

def test(description: str) -> Callable:
    """registers the decorated function as a case, the function itself is left callable."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def case(*args, **kwargs):
            return func(*args, **kwargs)

        _registry.append({'func': case, 'description': description})
        return case

    return decorator


# --- assertions ---

def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "expected an error") -> BaseException:
    """calls func and returns the error it raised, failing when it raised nothing."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(f"{message} ({error_type.__name__} not raised)")


# --- enumerator helpers ---

def drain(enumerator) -> List[Any]:
    """pulls an enumerator to exhaustion using only advance() and current()."""
    values = []
    while enumerator.advance():
        values.append(enumerator.current())
    return values


def assert_yields(enumerator, expected: Iterable[Any], message: Optional[str] = None) -> None:
    """drains the enumerator, compares with expected, then checks one more advance() is False."""
    label = message or 'enumerator'
    expected = list(expected)
    actual = drain(enumerator)
    if actual != expected:
        raise TestAssertionError(f"{label}: expected {expected}, got {actual}")
    if enumerator.advance():
        raise TestAssertionError(f"{label}: advanced again after exhaustion")


# --- runner ---

def _run_case(case: Dict[str, Any], verbose_errors: bool) -> Dict[str, Any]:
    started = time.perf_counter()
    error = None
    try:
        case['func']()
    except TestAssertionError as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
        if verbose_errors:
            traceback.print_exc()
    return {
        'description': case['description'],
        'error': error,
        'ms': (time.perf_counter() - started) * 1000,
    }


def run(title: str = "test run", only: Optional[str] = None, verbose_errors: bool = False) -> bool:
    """
    runs the registered cases (those whose description contains `only`, if given),
    prints a report and returns True when none failed. the registry is emptied
    afterwards so several suites can run from one script.
    """
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    selected = [case for case in _registry if only is None or only in case['description']]

    _outcomes.clear()
    for case in selected:
        outcome = _run_case(case, verbose_errors)
        _outcomes.append(outcome)
        if outcome['error'] is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {outcome['description']} "
                  f"{_c.grey}({outcome['ms']:.1f}ms){_c.reset}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {outcome['description']}")
            print(f"    {_c.grey}└─> {outcome['error']}{_c.reset}")

    _registry.clear()
    return _report()


def _report() -> bool:
    failures = [o for o in _outcomes if o['error'] is not None]
    total_ms = sum(o['ms'] for o in _outcomes)
    color = _c.ok if not failures else _c.fail

    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{len(_outcomes)}{_c.reset} tests in {_c.warn}{total_ms:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(_outcomes) - len(failures)}{_c.reset}, {_c.fail}failed: {len(failures)}{_c.reset}")
    for failure in failures:
        print(f"    {_c.fail}•{_c.reset} {failure['description']}")
    print(f"{color}---------------{_c.reset}\n")
    return not failures
