from utils.errors import ErrorCollector, ErrorSeverity, ErrorType


def test_collects_and_sorts():
    collector = ErrorCollector()
    collector.add_error(3, 0, 4, "late", ErrorType.SYNTAX)
    collector.add_warning(1, "early")

    assert [e.message for e in collector.get_all_errors()] == ["early", "late"]
    assert str(collector.get_all_errors()[0]) == "Line 1: early"


def test_warnings_are_not_errors():
    collector = ErrorCollector()
    collector.add_warning(1, "edge")
    assert not collector.has_errors()
    assert [e.message for e in collector.get_warnings()] == ["edge"]

    collector.add_error(2, 0, 0, "bad", ErrorType.SEMANTIC)
    assert collector.has_errors()


def test_severities_are_warning_and_error_only():
    assert [s.value for s in ErrorSeverity] == ["warning", "error"]
    assert not hasattr(ErrorCollector, "has_fatal_errors")


def test_clear():
    collector = ErrorCollector()
    collector.add_error(1, 0, 0, "bad", ErrorType.RUNTIME)
    assert collector.get_errors_for_line(1)[0].severity == ErrorSeverity.ERROR

    collector.clear()
    assert collector.get_all_errors() == []
    assert not collector.has_errors()
