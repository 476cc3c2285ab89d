import pytest

import schrodinger
from schrodinger.core import data as _data


def _add_repeats_if_marked(metafunc):
    """
    If the metafunc is marked with the 'repeat' mark, then add the requisite
    number of repeats via parametrisation.
    """
    marker = metafunc.definition.get_closest_marker('repeat')
    if marker:
        count = marker.args[0]
        metafunc.fixturenames.append('_repeat_count')
        metafunc.parametrize('_repeat_count',
                             range(count),
                             ids=["rep({})".format(x+1) for x in range(count)])


@pytest.hookimpl(trylast=True)
def pytest_generate_tests(metafunc):
    _add_repeats_if_marked(metafunc)


@pytest.fixture(params=[_data.SPARSE, _data.DENSE], ids=["sparse", "dense"])
def storage(request):
    return request.param


@pytest.fixture
def core_settings():
    """
    Restore ``settings.core`` after a test that modifies the global options.
    """
    backup = schrodinger.settings.core
    options = backup.options.copy()
    yield backup
    backup.options = options
    backup._set_as_global_default()


@pytest.fixture
def logging_settings():
    """
    Restore the logging policy after a test that modifies it.
    """
    debug = schrodinger.settings.debug
    handler = schrodinger.settings.log_handler
    yield schrodinger.settings
    schrodinger.settings.debug = debug
    schrodinger.settings.log_handler = handler
