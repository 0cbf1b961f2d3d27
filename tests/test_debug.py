from geometria.debug import print_stacktrace


def test_stacktrace_lists_callers(capsys):
    print_stacktrace()
    lines = capsys.readouterr().out.splitlines()
    assert "print_stacktrace" in lines[0]
    assert "test_stacktrace_lists_callers" in lines[1]


def test_stacktrace_depths_descend_to_zero(capsys):
    print_stacktrace()
    lines = capsys.readouterr().out.splitlines()
    depths = [int(line.split(":", 1)[0]) for line in lines]
    assert depths == list(range(len(lines) - 1, -1, -1))
    assert lines[-1].startswith("0: ")