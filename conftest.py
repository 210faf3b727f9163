import pytest


def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true", default=False,
                     help="leave out tests requesting the `slow` fixture")
    parser.addoption("--slow", action="store_true", default=False,
                     help="run only tests requesting the `slow` fixture")


@pytest.fixture
def slow(request):
    "Tests using this fixture start real servers or processes."
    if request.config.getoption("--quick"):
        pytest.skip("slow test left out by --quick")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--slow"):
        only_slow = pytest.mark.skip(reason="--slow runs only slow tests")
        for item in items:
            if 'slow' not in item.fixturenames:
                item.add_marker(only_slow)
