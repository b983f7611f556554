import textwrap

import pytest

from eventdispatch import cli


@pytest.fixture()
def listener_module(tmp_path, monkeypatch):
    def write(name, body):
        (tmp_path / f"{name}.py").write_text(textwrap.dedent(body), encoding="utf-8")
        return name

    monkeypatch.syspath_prepend(str(tmp_path))
    return write


def test_inspect_prints_registered_listeners(listener_module, capsys):
    module = listener_module(
        "cli_inspect_listeners",
        """
        def on_created(event, name):
            pass

        def register(dispatcher):
            dispatcher.add_listener("order.created", on_created, priority=2)
        """,
    )
    cli.run_inspect([module])
    output = capsys.readouterr().out
    assert "order.created" in output
    assert "on_created" in output


def test_checklist_passes_for_clean_module(listener_module, capsys):
    module = listener_module(
        "cli_clean_listeners",
        """
        def on_created(event, name):
            pass

        def register(dispatcher):
            dispatcher.add_listener("order.created", on_created)
        """,
    )
    cli.run_checklist([module])
    assert "No issues found." in capsys.readouterr().out


def test_checklist_exits_on_issues(listener_module, capsys):
    module = listener_module(
        "cli_duplicate_listeners",
        """
        def on_created(event, name):
            pass

        def register(dispatcher):
            dispatcher.add_listener("order.created", on_created)
            dispatcher.add_listener("order.created", on_created)
        """,
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.run_checklist([module])
    assert excinfo.value.code == 1
    assert "[WARNING]" in capsys.readouterr().out


def test_module_without_register_is_rejected(listener_module):
    module = listener_module("cli_no_register", "VALUE = 1\n")
    with pytest.raises(RuntimeError, match="does not define register"):
        cli.run_inspect([module])
