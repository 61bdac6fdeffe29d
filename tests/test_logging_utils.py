import logging

from robustgeom import configure_logging, convex_hull, get_logger


def test_get_logger_namespaces_under_package():
    assert get_logger('hull').name == 'robustgeom.hull'
    assert get_logger('robustgeom.arithmetic').name == 'robustgeom.arithmetic'
    assert get_logger('robustgeom').name == 'robustgeom'


def test_get_logger_level():
    log = get_logger('robustgeom.tests.level', level='warning')
    assert log.level == logging.WARNING
    assert get_logger('robustgeom.tests.level').level == logging.NOTSET


def test_configure_logging_leaves_root_alone():
    root = logging.getLogger()
    root_before = list(root.handlers)
    pkg = logging.getLogger('robustgeom')
    saved = (list(pkg.handlers), pkg.level, pkg.propagate)
    try:
        pkg.handlers[:] = [logging.NullHandler()]
        configure_logging('DEBUG')
        assert pkg.level == logging.DEBUG
        assert pkg.propagate is False
        assert len(pkg.handlers) == 1
        assert type(pkg.handlers[0]) is logging.StreamHandler
        assert root.handlers == root_before
    finally:
        pkg.handlers[:] = saved[0]
        pkg.setLevel(saved[1])
        pkg.propagate = saved[2]


def test_hull_emits_debug_summary(caplog):
    pkg = logging.getLogger('robustgeom')
    pkg.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.DEBUG, logger='robustgeom'):
            convex_hull([(0, 0), (1, 0), (0, 1)])
    finally:
        pkg.removeHandler(caplog.handler)
    assert any('3 hull vertices' in r.getMessage() for r in caplog.records)
