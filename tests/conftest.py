from io import StringIO

from pytest import Item, fixture

from rpncalc.machine import Machine


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def trace() -> StringIO:
    return StringIO()


@fixture
def verbose_machine(trace: StringIO) -> Machine:
    '''
    Machine tracing into the trace fixture rather than stdout.
    '''
    return Machine(verbose=True, trace=trace)


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion as test:line, its source, then its values.

    Enabled in setup.cfg; shown with pytest -rP.
    '''
    where = '{}:{}'.format(item.name, lineno)
    print('given', where, orig)
    # Get rid of the full-diff hint; -vv for full diff.
    print('actual', where, '\n'.join(expl.splitlines()[:-2]))
