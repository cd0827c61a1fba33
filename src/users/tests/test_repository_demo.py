import io

from src.users import demo
from src.users.domain.user import User


def test_run_demo_prints_both_lookups():
    out = io.StringIO()
    map_result, list_result = demo.run_demo(name="jack", out=out)

    assert map_result == User(1, "jack")
    assert list_result == User(1, "jack")
    assert out.getvalue().splitlines() == [
        "MAP:  User(id=1, name='jack')",
        "LIST: User(id=1, name='jack')",
    ]


def test_run_demo_uses_configured_name(monkeypatch):
    monkeypatch.setattr(demo.settings, "DEMO_USER_NAME", "jill")
    map_result, _ = demo.run_demo(out=io.StringIO())

    assert map_result == User(1, "jill")


def test_main_reports_configured_backend(monkeypatch, capsys):
    monkeypatch.setattr(demo.settings, "USER_REPOSITORY_BACKEND", "list")

    assert demo.main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "MAP:  User(id=1, name='jack')"
    assert lines[-1] == "LIST (configured): User(id=1, name='jack')"


def test_run_demo_keeps_explicit_empty_name():
    map_result, list_result = demo.run_demo(name="", out=io.StringIO())

    assert map_result == User(1, "")
    assert list_result == User(1, "")
